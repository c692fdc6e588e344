"""ValidationService — form and single-value checks as ServiceResults.

Three operations:
- ``list_forms``: catalogue of registered form schemas.
- ``check_form``: validate a payload against a named schema.
- ``check_value``: validate one value with a named primitive.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from formrules.config.logging import bound_context
from formrules.domain.results import ValidationResult
from formrules.domain.schemas import get_schema, list_schemas
from formrules.domain.types import PasswordPolicy
from formrules.domain.validators import (
    validate_date,
    validate_email,
    validate_integer,
    validate_number,
    validate_password,
    validate_phone,
    validate_text,
    validate_url,
)
from formrules.services.base import BaseService
from formrules.services.result import ServiceResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValueConstraints:
    """Constraints accepted by :meth:`ValidationService.check_value`."""

    min_value: float | None = None
    max_value: float | None = None
    min_length: int | None = None
    max_length: int | None = None
    is_required: bool = True


ValueCheck = Callable[[Any, ValueConstraints, PasswordPolicy], ValidationResult]


def _length_or(limit: int | None, default: int) -> int:
    # 0 is an explicit limit, not "unset".
    return default if limit is None else limit


def _optional(check: Callable[[Any], ValidationResult]) -> ValueCheck:
    """Wrap a required-only primitive so an optional empty value passes."""

    def run(value: Any, limits: ValueConstraints, policy: PasswordPolicy) -> ValidationResult:
        if not limits.is_required and value in (None, ""):
            return ValidationResult.ok()
        return check(value)

    return run


VALUE_CHECKS: dict[str, ValueCheck] = {
    "email": _optional(validate_email),
    "phone": _optional(validate_phone),
    "date": _optional(validate_date),
    "future_date": _optional(lambda v: validate_date(v, True, False)),
    "past_date": _optional(lambda v: validate_date(v, False, True)),
    "number": lambda v, c, _p: validate_number(v, c.min_value, c.max_value, c.is_required),
    "integer": lambda v, c, _p: validate_integer(v, c.min_value, c.max_value, c.is_required),
    "text": lambda v, c, _p: validate_text(
        v, _length_or(c.min_length, 1), c.max_length, c.is_required
    ),
    "url": lambda v, c, _p: validate_url(v, c.is_required),
    "password": lambda v, c, p: validate_password(
        v, _length_or(c.min_length, p.min_length), require_special=p.require_special
    ),
}


class ValidationService(BaseService):
    """Run validation against registered schemas and primitives."""

    def list_forms(self) -> ServiceResult:
        items = [
            {
                "name": schema.name,
                "description": schema.description,
                "fields": schema.fields(),
            }
            for schema in list_schemas()
        ]
        return ServiceResult.success("list_forms", {"items": items, "count": len(items)})

    def check_form(self, name: str, data: Any) -> ServiceResult:
        """Validate *data* against the schema registered as *name*."""
        op = "check_form"
        schema = get_schema(name)
        if schema is None:
            known = ", ".join(s.name for s in list_schemas())
            return ServiceResult.failure(
                op,
                "UNKNOWN_FORM",
                f"Unknown form '{name}'. Known forms: {known}",
                {"form": name},
            )
        if not isinstance(data, Mapping):
            return ServiceResult.failure(
                op,
                "INVALID_INPUT",
                f"Form payload must be an object, got {type(data).__name__}",
                {"form": name},
            )

        with bound_context(form=name):
            result = schema.validate(data, self.password_policy)
            logger.debug(
                "Checked form %s: %d field(s), %d error(s)",
                name,
                len(schema.fields()),
                len(result.errors),
            )

        if not result.is_valid:
            count = len(result.errors)
            noun = "field" if count == 1 else "fields"
            return ServiceResult.failure(
                op,
                "VALIDATION_FAILED",
                f"{count} {noun} failed validation",
                {"form": name, "errors": result.errors},
            )
        return ServiceResult.success(op, {"form": name, "valid": True, "fields": schema.fields()})

    def check_value(
        self,
        kind: str,
        value: Any,
        constraints: ValueConstraints | None = None,
    ) -> ServiceResult:
        """Validate a single *value* with the primitive registered as *kind*."""
        op = "check_value"
        check = VALUE_CHECKS.get(kind)
        if check is None:
            known = ", ".join(sorted(VALUE_CHECKS))
            return ServiceResult.failure(
                op,
                "UNKNOWN_KIND",
                f"Unknown value kind '{kind}'. Known kinds: {known}",
                {"kind": kind},
            )

        result = check(value, constraints or ValueConstraints(), self.password_policy)
        logger.debug("Checked %s value: valid=%s", kind, result.is_valid)
        if not result.is_valid:
            return ServiceResult.failure(
                op,
                "VALIDATION_FAILED",
                result.message,
                {"kind": kind, "code": str(result.code)},
            )
        return ServiceResult.success(op, {"kind": kind, "value": value, "valid": True})
