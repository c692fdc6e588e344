"""Primitive field validators.

Each validator checks one conceptual field shape and returns a
:class:`~formrules.domain.results.ValidationResult`. Failures are data,
never exceptions. Text and password validators reject non-string input
with ``FORMAT_ERROR`` rather than raising.

Number-like fields distinguish "missing" (None or empty string) from zero:
``0`` is a present value.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any
from urllib.parse import urlsplit

from formrules.domain.results import ErrorCode, ValidationResult
from formrules.domain.types import (
    PASSWORD_SPECIAL_CHARACTERS,
    UNPAID_PERIOD,
    SalaryType,
)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_PATTERN = re.compile(r"^\+?[1-9]\d{0,15}$")
PHONE_SEPARATORS = re.compile(r"[\s\-()]")
PHONE_MIN_LENGTH = 10
URL_SCHEMES = frozenset({"http", "https"})

REQUIRED_MESSAGE = "This field is required"
TEXT_TYPE_MESSAGE = "Must be text"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def is_missing_number(value: Any) -> bool:
    """True for values a numeric field treats as absent.

    Zero is present; None, False and the empty string are not.
    """
    return value is None or value is False or (isinstance(value, str) and value == "")


def parse_number(value: Any) -> float | None:
    """Parse *value* as a finite float, or return None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        parsed = float(value)
    elif isinstance(value, str):
        try:
            parsed = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(parsed):
        return None
    return parsed


def parse_date(value: Any) -> date | None:
    """Parse a date, datetime or ISO-8601 string down to a calendar day."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def _format_bound(bound: float) -> str:
    # 10.0 reads as 10 in messages.
    return str(int(bound)) if float(bound).is_integer() else str(bound)


def _check_bounds(
    number: float, min_value: float | None, max_value: float | None
) -> ValidationResult:
    if min_value is not None and number < min_value:
        return ValidationResult.fail(
            ErrorCode.BELOW_MIN, f"Value must be at least {_format_bound(min_value)}"
        )
    if max_value is not None and number > max_value:
        return ValidationResult.fail(
            ErrorCode.ABOVE_MAX, f"Value must not exceed {_format_bound(max_value)}"
        )
    return ValidationResult.ok()


# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------


def validate_email(value: Any) -> ValidationResult:
    if not value:
        return ValidationResult.fail(ErrorCode.EMPTY_FIELD, "Email is required")
    if not isinstance(value, str) or not EMAIL_PATTERN.match(value):
        return ValidationResult.fail(ErrorCode.FORMAT_ERROR, "Please enter a valid email address")
    return ValidationResult.ok()


def validate_phone(value: Any) -> ValidationResult:
    """Validate a phone number after stripping spaces, hyphens and parentheses.

    The remainder must be an optional ``+`` followed by up to 16 digits
    with no leading zero, and be at least 10 characters long.
    """
    if not value:
        return ValidationResult.fail(ErrorCode.EMPTY_FIELD, "Phone number is required")
    cleaned = PHONE_SEPARATORS.sub("", str(value))
    if not PHONE_PATTERN.match(cleaned) or len(cleaned) < PHONE_MIN_LENGTH:
        return ValidationResult.fail(
            ErrorCode.FORMAT_ERROR,
            "Please enter a valid phone number (minimum 10 digits)",
        )
    return ValidationResult.ok()


def validate_number(
    value: Any,
    min_value: float | None = None,
    max_value: float | None = None,
    is_required: bool = True,
) -> ValidationResult:
    """Validate a numeric field against the closed interval [min, max].

    Either bound may be None for "unbounded".
    """
    if is_missing_number(value):
        if is_required:
            return ValidationResult.fail(ErrorCode.EMPTY_FIELD, REQUIRED_MESSAGE)
        return ValidationResult.ok()

    number = parse_number(value)
    if number is None:
        return ValidationResult.fail(ErrorCode.NOT_A_NUMBER, "Please enter a valid number")
    return _check_bounds(number, min_value, max_value)


def validate_integer(
    value: Any,
    min_value: float | None = None,
    max_value: float | None = None,
    is_required: bool = True,
) -> ValidationResult:
    """Like :func:`validate_number`, but fractional values are rejected."""
    if is_missing_number(value):
        if is_required:
            return ValidationResult.fail(ErrorCode.EMPTY_FIELD, REQUIRED_MESSAGE)
        return ValidationResult.ok()

    number = parse_number(value)
    if number is None:
        return ValidationResult.fail(ErrorCode.NOT_A_NUMBER, "Please enter a valid number")
    if not number.is_integer():
        return ValidationResult.fail(ErrorCode.NOT_AN_INTEGER, "Please enter a whole number")
    return _check_bounds(number, min_value, max_value)


def validate_date(
    value: Any,
    is_future: bool = False,
    is_past: bool = False,
    *,
    today: date | None = None,
) -> ValidationResult:
    """Validate a date at day granularity.

    *is_future* requires a day strictly after *today*; *is_past* a day
    strictly before it. The two flags are not checked against each other.
    *today* defaults to the local calendar day.
    """
    if not value:
        return ValidationResult.fail(ErrorCode.EMPTY_FIELD, "Date is required")

    day = parse_date(value)
    if day is None:
        return ValidationResult.fail(ErrorCode.INVALID_DATE, "Please enter a valid date")

    reference = today or date.today()
    if is_future and day <= reference:
        return ValidationResult.fail(ErrorCode.NOT_FUTURE, "Date must be in the future")
    if is_past and day >= reference:
        return ValidationResult.fail(ErrorCode.NOT_PAST, "Date must be in the past")
    return ValidationResult.ok()


def validate_text(
    value: Any,
    min_length: int = 1,
    max_length: int | None = None,
    is_required: bool = True,
) -> ValidationResult:
    """Validate text length, measured after trimming surrounding whitespace."""
    if value and not isinstance(value, str):
        return ValidationResult.fail(ErrorCode.FORMAT_ERROR, TEXT_TYPE_MESSAGE)
    if not value or not value.strip():
        if is_required:
            return ValidationResult.fail(ErrorCode.EMPTY_FIELD, REQUIRED_MESSAGE)
        return ValidationResult.ok()

    length = len(value.strip())
    if length < min_length:
        return ValidationResult.fail(
            ErrorCode.TOO_SHORT, f"Minimum {min_length} characters required"
        )
    if max_length is not None and length > max_length:
        return ValidationResult.fail(
            ErrorCode.TOO_LONG, f"Maximum {max_length} characters allowed"
        )
    return ValidationResult.ok()


def validate_url(value: Any, is_required: bool = False) -> ValidationResult:
    """Validate an absolute http(s) URL. Empty values pass unless required."""
    if not value:
        if is_required:
            return ValidationResult.fail(ErrorCode.EMPTY_FIELD, "URL is required")
        return ValidationResult.ok()

    text = str(value).strip()
    if any(char.isspace() for char in text):
        return ValidationResult.fail(ErrorCode.INVALID_URL, "Please enter a valid URL")
    try:
        parts = urlsplit(text)
        # Port is parsed lazily; out-of-range ports raise here.
        _ = parts.port
    except ValueError:
        return ValidationResult.fail(ErrorCode.INVALID_URL, "Please enter a valid URL")

    if parts.scheme and parts.scheme.lower() not in URL_SCHEMES:
        return ValidationResult.fail(
            ErrorCode.INVALID_URL, "URL must start with http:// or https://"
        )
    if not parts.scheme or not parts.hostname:
        return ValidationResult.fail(ErrorCode.INVALID_URL, "Please enter a valid URL")
    return ValidationResult.ok()


def validate_password(
    value: Any,
    min_length: int = 8,
    *,
    require_special: bool = False,
) -> ValidationResult:
    """Validate password strength.

    Requires an upper-case letter, a lower-case letter and a digit. With
    *require_special*, a character from ``@$!%*?&`` is required as well.
    """
    if not value:
        return ValidationResult.fail(ErrorCode.EMPTY_FIELD, "Password is required")
    if not isinstance(value, str):
        return ValidationResult.fail(ErrorCode.FORMAT_ERROR, TEXT_TYPE_MESSAGE)

    if len(value) < min_length:
        return ValidationResult.fail(
            ErrorCode.TOO_SHORT, f"Password must be at least {min_length} characters long"
        )

    has_upper = re.search(r"[A-Z]", value) is not None
    has_lower = re.search(r"[a-z]", value) is not None
    has_digit = re.search(r"\d", value) is not None

    if require_special:
        has_special = any(char in PASSWORD_SPECIAL_CHARACTERS for char in value)
        if not (has_upper and has_lower and has_digit and has_special):
            return ValidationResult.fail(
                ErrorCode.WEAK_PASSWORD,
                "Password must contain at least one uppercase letter, one lowercase letter, "
                "one number, and one special character",
            )
    elif not (has_upper and has_lower and has_digit):
        return ValidationResult.fail(
            ErrorCode.WEAK_PASSWORD,
            "Password must contain at least one uppercase letter, one lowercase letter, "
            "and one number",
        )
    return ValidationResult.ok()


def validate_array_field(items: Any, field_name: str, min_items: int = 1) -> ValidationResult:
    """Require at least *min_items* non-blank strings in a list field."""
    if not isinstance(items, (list, tuple)):
        return ValidationResult.fail(ErrorCode.NOT_AN_ARRAY, f"{field_name} must be an array")

    filled = [item for item in items if isinstance(item, str) and item.strip()]
    if len(filled) < min_items:
        verb = "is" if min_items == 1 else "are"
        return ValidationResult.fail(
            ErrorCode.TOO_FEW_ITEMS,
            f"At least {min_items} {field_name.lower()} {verb} required",
        )
    return ValidationResult.ok()


def validate_salary(salary: Any) -> ValidationResult:
    """Validate the salary object of a job posting.

    Shape: ``{"type": "Range"|"Fixed"|"Negotiable", "min", "max",
    "amount", "period"}``. Range needs ``max > min``; Fixed needs an
    amount; everything but Negotiable needs a period.
    """
    if not isinstance(salary, Mapping):
        return ValidationResult.fail(ErrorCode.EMPTY_FIELD, "Salary information is required")

    raw_type = salary.get("type")
    if not raw_type:
        return ValidationResult.fail(ErrorCode.EMPTY_FIELD, "Salary type is required")
    try:
        salary_type = SalaryType(str(raw_type))
    except ValueError:
        choices = ", ".join(member.value for member in SalaryType)
        return ValidationResult.fail(
            ErrorCode.INVALID_CHOICE, f"Salary type must be one of: {choices}"
        )

    match salary_type:
        case SalaryType.RANGE:
            low = salary.get("min")
            high = salary.get("max")
            check = validate_number(low, 0, None, True)
            if not check.is_valid:
                return check.with_prefix("Minimum salary: ")
            check = validate_number(high, 0, None, True)
            if not check.is_valid:
                return check.with_prefix("Maximum salary: ")
            low_number = parse_number(low)
            high_number = parse_number(high)
            if low_number is not None and high_number is not None and high_number <= low_number:
                return ValidationResult.fail(
                    ErrorCode.MAX_NOT_GREATER_THAN_MIN,
                    "Maximum salary must be greater than minimum salary",
                )
        case SalaryType.FIXED:
            check = validate_number(salary.get("amount"), 0, None, True)
            if not check.is_valid:
                return check.with_prefix("Salary amount: ")
        case SalaryType.NEGOTIABLE:
            return ValidationResult.ok()

    if not salary.get("period"):
        return ValidationResult.fail(ErrorCode.EMPTY_FIELD, "Salary period is required")
    return ValidationResult.ok()


def validate_stipend(stipend: Any) -> ValidationResult:
    """Validate the stipend object of an internship. Unpaid always passes."""
    if not isinstance(stipend, Mapping):
        return ValidationResult.fail(ErrorCode.EMPTY_FIELD, "Stipend information is required")

    period = stipend.get("period")
    if period == UNPAID_PERIOD:
        return ValidationResult.ok()

    check = validate_number(stipend.get("amount"), 0, None, True)
    if not check.is_valid:
        return check.with_prefix("Stipend amount: ")

    if not period:
        return ValidationResult.fail(ErrorCode.EMPTY_FIELD, "Stipend period is required")
    return ValidationResult.ok()
