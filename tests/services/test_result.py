"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from formrules.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="check_form", data={"form": "job"})
        assert result.ok is True
        assert result.op == "check_form"
        assert result.data == {"form": "job"}
        assert result.warnings == []
        assert result.error is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="UNKNOWN_FORM", message="Unknown form 'x'")
        result = ServiceResult(ok=False, op="check_form", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "UNKNOWN_FORM"
        assert result.error.detail == {}

    def test_with_warnings(self) -> None:
        result = ServiceResult.success("list_forms", warnings=["No forms registered"])
        assert result.warnings == ["No forms registered"]

    def test_json_serialization(self) -> None:
        result = ServiceResult.failure(
            "check_value",
            "VALIDATION_FAILED",
            "Please enter a valid email address",
            {"kind": "email", "code": "format_error"},
        )
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is False
        assert parsed["op"] == "check_value"
        assert parsed["error"]["code"] == "VALIDATION_FAILED"
        assert parsed["error"]["detail"]["code"] == "format_error"

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]


class TestFactories:
    def test_success_defaults_data(self) -> None:
        result = ServiceResult.success("list_forms")
        assert result.ok is True
        assert result.data == {}

    def test_failure_defaults_detail(self) -> None:
        result = ServiceResult.failure("check_form", "INVALID_INPUT", "bad")
        assert result.ok is False
        assert result.data == {}
        assert result.error == ServiceError(code="INVALID_INPUT", message="bad")
