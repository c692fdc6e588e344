"""Form validation driver.

Applies a mapping of field name to ordered rule list against a payload.
Each field stops at its first failing rule; all failing fields are
collected. Pure and synchronous.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from formrules.domain.results import ErrorCode, FormValidationResult, ValidationResult
from formrules.domain.rules import RuleSet, ValidationRules


def resolve_field(data: Mapping[str, Any], field: str) -> Any:
    """Look up *field* in *data*, walking dotted paths through nested mappings.

    A literal key always wins over path resolution. Unresolvable paths
    return None.

    Examples:
        >>> resolve_field({"contactInfo": {"email": "a@b.co"}}, "contactInfo.email")
        'a@b.co'
        >>> resolve_field({"a.b": 1, "a": {"b": 2}}, "a.b")
        1
        >>> resolve_field({"a": "flat"}, "a.b") is None
        True
    """
    if field in data:
        return data[field]
    if "." not in field:
        return None

    current: Any = data
    for part in field.split("."):
        if not isinstance(current, Mapping) or part not in current:
            return None
        current = current[part]
    return current


def validate_field(value: Any, rule_set: RuleSet) -> ValidationResult:
    """Run *rule_set* against one value, returning the first failure."""
    for rule in rule_set:
        result = rule(value)
        if not result.is_valid:
            return result
    return ValidationResult.ok()


def validate_form(
    data: Mapping[str, Any],
    validation_rules: ValidationRules,
) -> FormValidationResult:
    """Validate every field named in *validation_rules* against *data*.

    Raises:
        TypeError: If *data* or *validation_rules* is not a mapping.
    """
    if not isinstance(validation_rules, Mapping):
        raise TypeError(
            f"validation_rules must be a mapping, got {type(validation_rules).__name__}"
        )
    if not isinstance(data, Mapping):
        raise TypeError(f"data must be a mapping, got {type(data).__name__}")

    errors: dict[str, str] = {}
    for field, rule_set in validation_rules.items():
        result = validate_field(resolve_field(data, field), rule_set)
        if not result.is_valid:
            errors[field] = result.message

    return FormValidationResult(is_valid=not errors, errors=errors)


def fields_match(
    data: Mapping[str, Any],
    field: str,
    other: str,
    message: str = "Passwords must match",
) -> ValidationResult:
    """Cross-field check: *other* must equal *field*."""
    if resolve_field(data, field) != resolve_field(data, other):
        return ValidationResult.fail(ErrorCode.MISMATCH, message)
    return ValidationResult.ok()
