"""Tests for ValidationResult, FormValidationResult and ErrorCode."""

import pytest

from formrules.domain.results import ErrorCode, FormValidationResult, ValidationResult


class TestValidationResult:
    def test_ok_is_valid_with_empty_message(self) -> None:
        result = ValidationResult.ok()
        assert result.is_valid is True
        assert result.message == ""
        assert result.code is None

    def test_fail_carries_code_and_message(self) -> None:
        result = ValidationResult.fail(ErrorCode.EMPTY_FIELD, "Email is required")
        assert result.is_valid is False
        assert result.message == "Email is required"
        assert result.code is ErrorCode.EMPTY_FIELD

    def test_valid_with_message_rejected(self) -> None:
        with pytest.raises(ValueError):
            ValidationResult(is_valid=True, message="oops")

    def test_valid_with_code_rejected(self) -> None:
        with pytest.raises(ValueError):
            ValidationResult(is_valid=True, code=ErrorCode.TOO_LONG)

    def test_invalid_without_message_rejected(self) -> None:
        with pytest.raises(ValueError):
            ValidationResult(is_valid=False, code=ErrorCode.TOO_LONG)

    def test_invalid_without_code_rejected(self) -> None:
        with pytest.raises(ValueError):
            ValidationResult(is_valid=False, message="Too long")

    def test_frozen(self) -> None:
        result = ValidationResult.ok()
        with pytest.raises(AttributeError):
            result.is_valid = False  # type: ignore[misc]

    def test_equality_by_value(self) -> None:
        a = ValidationResult.fail(ErrorCode.BELOW_MIN, "Value must be at least 0")
        b = ValidationResult.fail(ErrorCode.BELOW_MIN, "Value must be at least 0")
        assert a == b


class TestWithMessage:
    def test_replaces_failure_message_keeps_code(self) -> None:
        result = ValidationResult.fail(ErrorCode.FORMAT_ERROR, "Bad").with_message("Custom")
        assert result.message == "Custom"
        assert result.code is ErrorCode.FORMAT_ERROR

    def test_none_leaves_result_unchanged(self) -> None:
        original = ValidationResult.fail(ErrorCode.FORMAT_ERROR, "Bad")
        assert original.with_message(None) is original

    def test_valid_result_unchanged(self) -> None:
        assert ValidationResult.ok().with_message("Custom").is_valid


class TestWithPrefix:
    def test_prefixes_failure(self) -> None:
        result = ValidationResult.fail(ErrorCode.EMPTY_FIELD, "This field is required")
        assert result.with_prefix("Minimum salary: ").message == (
            "Minimum salary: This field is required"
        )

    def test_valid_untouched(self) -> None:
        assert ValidationResult.ok().with_prefix("x: ").message == ""


class TestFormValidationResult:
    def test_defaults(self) -> None:
        result = FormValidationResult(is_valid=True)
        assert result.errors == {}


class TestErrorCode:
    def test_values_are_snake_case(self) -> None:
        for code in ErrorCode:
            assert code.value == code.name.lower()

    def test_taxonomy_members(self) -> None:
        expected = {
            "EMPTY_FIELD",
            "FORMAT_ERROR",
            "NOT_A_NUMBER",
            "NOT_AN_INTEGER",
            "BELOW_MIN",
            "ABOVE_MAX",
            "INVALID_DATE",
            "NOT_FUTURE",
            "NOT_PAST",
            "TOO_SHORT",
            "TOO_LONG",
            "INVALID_URL",
            "WEAK_PASSWORD",
            "NOT_AN_ARRAY",
            "TOO_FEW_ITEMS",
            "MAX_NOT_GREATER_THAN_MIN",
        }
        assert expected <= {code.name for code in ErrorCode}
