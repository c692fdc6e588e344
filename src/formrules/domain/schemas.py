"""Form schema registry for the admin back-office screens.

Each :class:`FormSchema` names one screen (job, internship, training,
product, announcement, user, signup) and builds the rule mapping that
screen applies. Field keys are the payload keys the screens submit;
nested objects use dotted paths (``contactInfo.email``).

Rules are built per call so the password policy from configuration can
be bound into them.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from formrules.domain.forms import fields_match, validate_form
from formrules.domain.results import FormValidationResult
from formrules.domain.rules import (
    ValidationRules,
    accepted,
    email,
    future_date,
    items,
    min_length,
    number,
    one_of,
    password,
    phone,
    required,
    salary,
    stipend,
    url,
)
from formrules.domain.types import PasswordPolicy, TrainingLevel


@dataclass(frozen=True)
class CrossFieldCheck:
    """Equality constraint between two fields, reported on *other*."""

    field: str
    other: str
    message: str


@dataclass(frozen=True)
class FormSchema:
    """A named form and the rules it applies.

    Attributes:
        name: Registry key (e.g. ``"job"``).
        description: One-line summary for listings.
        build: Factory returning the field -> rule list mapping.
        cross_checks: Field comparisons run after the per-field pass.
    """

    name: str
    description: str
    build: Callable[[PasswordPolicy], ValidationRules]
    cross_checks: tuple[CrossFieldCheck, ...] = field(default=())

    def rules(self, policy: PasswordPolicy | None = None) -> ValidationRules:
        return self.build(policy or PasswordPolicy())

    def fields(self) -> list[str]:
        return list(self.rules())

    def validate(
        self,
        data: Mapping[str, Any],
        policy: PasswordPolicy | None = None,
    ) -> FormValidationResult:
        """Run the per-field rules, then the cross-field checks.

        A cross-field mismatch is only recorded when the compared field
        has no error of its own.
        """
        result = validate_form(data, self.rules(policy))
        errors = dict(result.errors)
        for check in self.cross_checks:
            if check.other in errors:
                continue
            outcome = fields_match(data, check.field, check.other, check.message)
            if not outcome.is_valid:
                errors[check.other] = outcome.message
        return FormValidationResult(is_valid=not errors, errors=errors)


# ---------------------------------------------------------------------------
# Screen rule sets
# ---------------------------------------------------------------------------


def _job_rules(policy: PasswordPolicy) -> ValidationRules:
    return {
        "title": [required("Job title is required")],
        "company": [required("Company is required")],
        "description": [required("Description is required")],
        "category": [required("Category is required")],
        "location": [required("Location is required")],
        "salary": [salary()],
        "applicationDeadline": [future_date()],
        "requirements": [items("Requirements")],
        "responsibilities": [items("Responsibilities")],
        "contactInfo.email": [required("Contact email is required"), email()],
        "contactInfo.phone": [phone()],
        "contactInfo.website": [url()],
    }


def _internship_rules(policy: PasswordPolicy) -> ValidationRules:
    return {
        "title": [required("Internship title is required")],
        "company": [required("Company is required")],
        "description": [required("Description is required")],
        "category": [required("Category is required")],
        "location": [required("Location is required")],
        "duration": [required("Duration is required")],
        "stipend": [stipend()],
        "applicationDeadline": [future_date()],
        "requirements": [items("Requirements")],
        "contactInfo.email": [required("Contact email is required"), email()],
    }


def _training_rules(policy: PasswordPolicy) -> ValidationRules:
    return {
        "title": [required("Title is required")],
        "description": [required("Description is required")],
        "category": [required("Category is required")],
        "duration": [required("Duration is required")],
        "level": [one_of(level.value for level in TrainingLevel)],
        "price": [number(0, message="Price cannot be negative")],
        "instructor.name": [required("Instructor name is required")],
        "whatYouWillLearn": [
            required("At least one learning outcome is required"),
            items("Learning outcome"),
        ],
        "startDate": [future_date()],
    }


def _product_rules(policy: PasswordPolicy) -> ValidationRules:
    return {
        "name": [required("Product name is required")],
        "category": [required("Category is required")],
        "description": [required("Description is required")],
        "pricing.price": [number(0)],
        "pricing.salePrice": [number(0)],
    }


def _announcement_rules(policy: PasswordPolicy) -> ValidationRules:
    return {
        "title": [required("Title is required")],
        "message": [required("Message is required")],
        "actionButton.link": [url()],
    }


def _user_rules(policy: PasswordPolicy) -> ValidationRules:
    return {
        "name": [required(), min_length(2)],
        "email": [required(), email()],
        "phone": [phone()],
    }


def _signup_rules(policy: PasswordPolicy) -> ValidationRules:
    return {
        "name": [required("Full name is required")],
        "email": [required("Email is required"), email("Invalid email address")],
        "password": [
            required("Password is required"),
            password(policy.min_length, require_special=policy.require_special),
        ],
        "confirmPassword": [required("Confirm password is required")],
        "terms": [accepted()],
    }


FORM_SCHEMAS: dict[str, FormSchema] = {
    schema.name: schema
    for schema in (
        FormSchema("job", "Job posting", _job_rules),
        FormSchema("internship", "Internship posting", _internship_rules),
        FormSchema("training", "Training program", _training_rules),
        FormSchema("product", "Product catalogue entry", _product_rules),
        FormSchema("announcement", "Site announcement banner", _announcement_rules),
        FormSchema("user", "Back-office user profile", _user_rules),
        FormSchema(
            "signup",
            "Account signup",
            _signup_rules,
            cross_checks=(
                CrossFieldCheck("password", "confirmPassword", "Passwords must match"),
            ),
        ),
    )
}


def get_schema(name: str) -> FormSchema | None:
    """Look up a schema by name. Returns None for unknown names."""
    return FORM_SCHEMAS.get(name)


def list_schemas() -> list[FormSchema]:
    """All registered schemas, sorted by name."""
    return sorted(FORM_SCHEMAS.values(), key=lambda schema: schema.name)
