"""Validation outcomes and the error taxonomy.

Every primitive validator and every rule returns a :class:`ValidationResult`.
Whole-form runs return a :class:`FormValidationResult`.

INVARIANT: a result is valid exactly when its message is empty and its
code is None.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class ErrorCode(StrEnum):
    """Machine-readable failure categories carried alongside the message."""

    EMPTY_FIELD = "empty_field"
    FORMAT_ERROR = "format_error"
    NOT_A_NUMBER = "not_a_number"
    NOT_AN_INTEGER = "not_an_integer"
    BELOW_MIN = "below_min"
    ABOVE_MAX = "above_max"
    INVALID_DATE = "invalid_date"
    NOT_FUTURE = "not_future"
    NOT_PAST = "not_past"
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    INVALID_URL = "invalid_url"
    WEAK_PASSWORD = "weak_password"
    NOT_AN_ARRAY = "not_an_array"
    TOO_FEW_ITEMS = "too_few_items"
    MAX_NOT_GREATER_THAN_MIN = "max_not_greater_than_min"
    INVALID_CHOICE = "invalid_choice"
    MISMATCH = "mismatch"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a single check.

    Attributes:
        is_valid: Whether the value passed.
        message: Human-readable reason, empty when valid.
        code: Failure category, None when valid.
    """

    is_valid: bool
    message: str = ""
    code: ErrorCode | None = None

    def __post_init__(self) -> None:
        if self.is_valid and (self.message or self.code is not None):
            raise ValueError("A valid result carries no message or code")
        if not self.is_valid and (not self.message or self.code is None):
            raise ValueError("An invalid result needs both a message and a code")

    @classmethod
    def ok(cls) -> ValidationResult:
        return _OK

    @classmethod
    def fail(cls, code: ErrorCode, message: str) -> ValidationResult:
        return cls(is_valid=False, message=message, code=code)

    def with_message(self, message: str | None) -> ValidationResult:
        """Return a copy with *message* replacing the failure message.

        Valid results and a None *message* are returned unchanged.
        """
        if self.is_valid or not message:
            return self
        return ValidationResult(is_valid=False, message=message, code=self.code)

    def with_prefix(self, prefix: str) -> ValidationResult:
        """Prefix the failure message, e.g. ``"Minimum salary: "``."""
        if self.is_valid:
            return self
        return ValidationResult(is_valid=False, message=f"{prefix}{self.message}", code=self.code)


_OK = ValidationResult(is_valid=True)


@dataclass(frozen=True)
class FormValidationResult:
    """Outcome of a whole-form run.

    Only failing fields appear in *errors*, keyed by the field name as it
    was written in the rule mapping.
    """

    is_valid: bool
    errors: dict[str, str] = field(default_factory=dict)
