"""formrules — field and form validation for the admin back-office."""

from formrules.domain.forms import fields_match, resolve_field, validate_field, validate_form
from formrules.domain.results import ErrorCode, FormValidationResult, ValidationResult
from formrules.domain.rules import (
    Rule,
    RuleSet,
    ValidationRules,
    email,
    future_date,
    integer,
    max_length,
    min_length,
    number,
    past_date,
    phone,
    required,
    url,
)
from formrules.domain.validators import (
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

__version__ = "0.1.0"

__all__ = [
    "ErrorCode",
    "FormValidationResult",
    "Rule",
    "RuleSet",
    "ValidationResult",
    "ValidationRules",
    "__version__",
    "email",
    "fields_match",
    "future_date",
    "integer",
    "max_length",
    "min_length",
    "number",
    "past_date",
    "phone",
    "required",
    "resolve_field",
    "url",
    "validate_array_field",
    "validate_date",
    "validate_email",
    "validate_field",
    "validate_form",
    "validate_integer",
    "validate_number",
    "validate_password",
    "validate_phone",
    "validate_salary",
    "validate_stipend",
    "validate_text",
    "validate_url",
]
