"""Rule builders — factories returning unary rules for form fields.

A rule maps a field value to a :class:`ValidationResult`. Rules are
composed into ordered lists per field and evaluated with first-failure
short-circuit by :func:`formrules.domain.forms.validate_form`.

Convention: every builder except :func:`required` lets an absent value
through, so ``[email()]`` means "optional, but well-formed if present"
and ``[required(), email()]`` means "mandatory and well-formed".

Builders delegate to the primitives in :mod:`formrules.domain.validators`
with ``is_required=False``. An explicit *message* replaces the
primitive's failure message; the error code is kept.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any

from formrules.domain.results import ErrorCode, ValidationResult
from formrules.domain.validators import (
    REQUIRED_MESSAGE,
    is_missing_number,
    validate_array_field,
    validate_date,
    validate_email,
    validate_integer,
    validate_number,
    validate_password,
    validate_phone,
    validate_salary,
    validate_stipend,
    validate_text,
    validate_url,
)

Rule = Callable[[Any], ValidationResult]
RuleSet = Sequence[Rule]
ValidationRules = Mapping[str, RuleSet]

ACCEPT_TERMS_MESSAGE = "You must accept the terms and conditions"


def _is_empty(value: Any) -> bool:
    if value is None or value == "":
        return True
    return isinstance(value, (list, tuple)) and len(value) == 0


def required(message: str = REQUIRED_MESSAGE) -> Rule:
    """Fail on None, empty string or empty list. ``0`` and ``False`` pass."""
    text = message or REQUIRED_MESSAGE

    def rule(value: Any) -> ValidationResult:
        if _is_empty(value):
            return ValidationResult.fail(ErrorCode.EMPTY_FIELD, text)
        return ValidationResult.ok()

    return rule


def email(message: str | None = None) -> Rule:
    def rule(value: Any) -> ValidationResult:
        if not value:
            return ValidationResult.ok()
        return validate_email(value).with_message(message)

    return rule


def phone(message: str | None = None) -> Rule:
    def rule(value: Any) -> ValidationResult:
        if not value:
            return ValidationResult.ok()
        return validate_phone(value).with_message(message)

    return rule


def min_length(min_chars: int, message: str | None = None) -> Rule:
    def rule(value: Any) -> ValidationResult:
        if not value:
            return ValidationResult.ok()
        return validate_text(value, min_chars, None, False).with_message(message)

    return rule


def max_length(max_chars: int, message: str | None = None) -> Rule:
    def rule(value: Any) -> ValidationResult:
        if not value:
            return ValidationResult.ok()
        return validate_text(value, 1, max_chars, False).with_message(message)

    return rule


def number(
    min_value: float | None = None,
    max_value: float | None = None,
    message: str | None = None,
) -> Rule:
    def rule(value: Any) -> ValidationResult:
        if is_missing_number(value):
            return ValidationResult.ok()
        return validate_number(value, min_value, max_value, False).with_message(message)

    return rule


def integer(
    min_value: float | None = None,
    max_value: float | None = None,
    message: str | None = None,
) -> Rule:
    def rule(value: Any) -> ValidationResult:
        if is_missing_number(value):
            return ValidationResult.ok()
        return validate_integer(value, min_value, max_value, False).with_message(message)

    return rule


def future_date(message: str | None = None) -> Rule:
    def rule(value: Any) -> ValidationResult:
        if not value:
            return ValidationResult.ok()
        return validate_date(value, True, False).with_message(message)

    return rule


def past_date(message: str | None = None) -> Rule:
    def rule(value: Any) -> ValidationResult:
        if not value:
            return ValidationResult.ok()
        return validate_date(value, False, True).with_message(message)

    return rule


def url(message: str | None = None) -> Rule:
    def rule(value: Any) -> ValidationResult:
        if not value:
            return ValidationResult.ok()
        return validate_url(value, False).with_message(message)

    return rule


# ---------------------------------------------------------------------------
# Back-office builders
# ---------------------------------------------------------------------------


def password(
    min_chars: int = 8,
    *,
    require_special: bool = False,
    message: str | None = None,
) -> Rule:
    def rule(value: Any) -> ValidationResult:
        if not value:
            return ValidationResult.ok()
        result = validate_password(value, min_chars, require_special=require_special)
        return result.with_message(message)

    return rule


def items(field_name: str, min_items: int = 1, message: str | None = None) -> Rule:
    """List field holding at least *min_items* non-blank strings."""

    def rule(value: Any) -> ValidationResult:
        if value is None:
            return ValidationResult.ok()
        return validate_array_field(value, field_name, min_items).with_message(message)

    return rule


def salary(message: str | None = None) -> Rule:
    def rule(value: Any) -> ValidationResult:
        if _is_empty(value):
            return ValidationResult.ok()
        return validate_salary(value).with_message(message)

    return rule


def stipend(message: str | None = None) -> Rule:
    def rule(value: Any) -> ValidationResult:
        if _is_empty(value):
            return ValidationResult.ok()
        return validate_stipend(value).with_message(message)

    return rule


def one_of(choices: Iterable[str], message: str | None = None) -> Rule:
    """Select input restricted to *choices*."""
    allowed = tuple(choices)
    default = f"Must be one of: {', '.join(allowed)}"

    def rule(value: Any) -> ValidationResult:
        if _is_empty(value):
            return ValidationResult.ok()
        if value not in allowed:
            return ValidationResult.fail(ErrorCode.INVALID_CHOICE, message or default)
        return ValidationResult.ok()

    return rule


def accepted(message: str = ACCEPT_TERMS_MESSAGE) -> Rule:
    """Checkbox that must be ticked."""
    text = message or ACCEPT_TERMS_MESSAGE

    def rule(value: Any) -> ValidationResult:
        if value is not True:
            return ValidationResult.fail(ErrorCode.MISMATCH, text)
        return ValidationResult.ok()

    return rule
