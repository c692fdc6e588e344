"""Tests for rule builders."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Any

import pytest

from formrules.domain.results import ErrorCode, ValidationResult
from formrules.domain.rules import (
    accepted,
    email,
    future_date,
    integer,
    items,
    max_length,
    min_length,
    number,
    one_of,
    password,
    past_date,
    phone,
    required,
    salary,
    stipend,
    url,
)
from formrules.domain.validators import (
    validate_date,
    validate_email,
    validate_integer,
    validate_number,
    validate_phone,
    validate_text,
    validate_url,
)


class TestRequired:
    @pytest.mark.parametrize("value", ["", None, [], ()])
    def test_empty_fails(self, value: Any) -> None:
        result = required()(value)
        assert result.code is ErrorCode.EMPTY_FIELD
        assert result.message == "This field is required"

    @pytest.mark.parametrize("value", [0, False, ["x"], "x", " ", {"a": 1}])
    def test_present_passes(self, value: Any) -> None:
        assert required()(value).is_valid

    def test_custom_message(self) -> None:
        assert required("Title is required")("").message == "Title is required"

    def test_blank_message_falls_back(self) -> None:
        result = required("")("")
        assert result.code is ErrorCode.EMPTY_FIELD
        assert result.message == "This field is required"


class TestOptionalConvention:
    """Every builder except required() lets an absent value through."""

    @pytest.mark.parametrize(
        "rule",
        [
            email(),
            phone(),
            min_length(3),
            max_length(3),
            number(0, 10),
            integer(0, 10),
            future_date(),
            past_date(),
            url(),
            password(),
            salary(),
            stipend(),
            one_of(["a"]),
        ],
    )
    @pytest.mark.parametrize("value", [None, ""])
    def test_absent_passes(self, rule: Any, value: Any) -> None:
        assert rule(value).is_valid

    def test_number_zero_is_checked(self) -> None:
        assert number(1)(0).code is ErrorCode.BELOW_MIN


class TestDelegation:
    """With no custom message a builder returns exactly its primitive's result."""

    @pytest.mark.parametrize("value", ["a@b.co", "nope", "x@y"])
    def test_email(self, value: str) -> None:
        assert email()(value) == validate_email(value)

    @pytest.mark.parametrize("value", ["5551234567", "123"])
    def test_phone(self, value: str) -> None:
        assert phone()(value) == validate_phone(value)

    @pytest.mark.parametrize("value", [0, 5, 11, -1, "abc", "7.5"])
    def test_number(self, value: Any) -> None:
        assert number(0, 10)(value) == validate_number(value, 0, 10, False)

    @pytest.mark.parametrize("value", [0, 5, 2.5, 11, "x"])
    def test_integer(self, value: Any) -> None:
        assert integer(0, 10)(value) == validate_integer(value, 0, 10, False)

    @pytest.mark.parametrize("value", ["ab", "abcd", "  a  "])
    def test_min_length(self, value: str) -> None:
        assert min_length(3)(value) == validate_text(value, 3, None, False)

    @pytest.mark.parametrize("value", ["ab", "abcd"])
    def test_max_length(self, value: str) -> None:
        assert max_length(3)(value) == validate_text(value, 1, 3, False)

    def test_text_rules_reject_non_strings(self) -> None:
        assert min_length(2)(123).code is ErrorCode.FORMAT_ERROR
        assert max_length(3)(12345).code is ErrorCode.FORMAT_ERROR
        assert password()(12345678).code is ErrorCode.FORMAT_ERROR

    def test_dates(self) -> None:
        for offset in (-1, 0, 1):
            value = (date.today() + timedelta(days=offset)).isoformat()
            assert future_date()(value) == validate_date(value, True, False)
            assert past_date()(value) == validate_date(value, False, True)

    @pytest.mark.parametrize("value", ["https://a.io", "ftp://a.io", "a.io"])
    def test_url(self, value: str) -> None:
        assert url()(value) == validate_url(value, False)


class TestCustomMessages:
    def test_replaces_message_keeps_code(self) -> None:
        result = email("Contact email looks wrong")("nope")
        assert result.message == "Contact email looks wrong"
        assert result.code is ErrorCode.FORMAT_ERROR

    def test_no_effect_on_success(self) -> None:
        assert number(0, message="Price cannot be negative")(3) == ValidationResult.ok()

    def test_number_message(self) -> None:
        result = number(0, message="Price cannot be negative")(-1)
        assert result.message == "Price cannot be negative"
        assert result.code is ErrorCode.BELOW_MIN


class TestBackOfficeBuilders:
    def test_password_default_policy(self) -> None:
        assert password()("Secret123").is_valid
        assert password()("secret123").code is ErrorCode.WEAK_PASSWORD

    def test_password_special_policy(self) -> None:
        rule = password(8, require_special=True)
        assert rule("Secret123").code is ErrorCode.WEAK_PASSWORD
        assert rule("Secret123!").is_valid

    def test_items(self) -> None:
        rule = items("Requirements")
        assert rule(["", "  "]).code is ErrorCode.TOO_FEW_ITEMS
        assert rule("not a list").code is ErrorCode.NOT_AN_ARRAY
        assert rule(["SQL"]).is_valid
        assert rule(None).is_valid

    def test_salary(self) -> None:
        rule = salary()
        assert rule({"type": "Negotiable"}).is_valid
        assert rule({"type": "Range", "min": 9, "max": 1, "period": "Year"}).code is (
            ErrorCode.MAX_NOT_GREATER_THAN_MIN
        )

    def test_stipend(self) -> None:
        assert stipend()({"period": "Unpaid"}).is_valid
        assert not stipend()({"period": "Month"}).is_valid

    def test_one_of(self) -> None:
        rule = one_of(["Beginner", "Advanced"])
        assert rule("Beginner").is_valid
        result = rule("Expert")
        assert result.code is ErrorCode.INVALID_CHOICE
        assert result.message == "Must be one of: Beginner, Advanced"

    def test_one_of_accepts_generator(self) -> None:
        rule = one_of(level for level in ("A", "B"))
        assert rule("B").is_valid
        assert rule("A").is_valid

    @pytest.mark.parametrize("value", [False, None, "true", 1])
    def test_accepted_requires_true(self, value: Any) -> None:
        result = accepted()(value)
        assert result.code is ErrorCode.MISMATCH
        assert result.message == "You must accept the terms and conditions"

    def test_accepted(self) -> None:
        assert accepted()(True).is_valid

    def test_accepted_blank_message_falls_back(self) -> None:
        assert accepted("")(False).message == "You must accept the terms and conditions"


class TestClosures:
    def test_rules_do_not_share_configuration(self) -> None:
        low = number(0, 5)
        high = number(10, 20)
        assert low(3).is_valid
        assert not high(3).is_valid
        assert low(3).is_valid

    def test_rule_reusable(self) -> None:
        rule = required()
        assert [rule(v).is_valid for v in ("", "x", "", "y")] == [False, True, False, True]
