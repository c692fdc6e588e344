"""Shared pytest fixtures and test helpers for formrules tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from datetime import date, timedelta
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test.

    The CLI reconfigures logging on every invocation and would otherwise
    leave a handler pointing at the runner's closed stderr.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app = logging.getLogger("formrules")
    app_level = app.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    app.setLevel(app_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory with no formrules env overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_config")`` on command and
    settings test classes so a developer's own config never leaks in.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("FORMRULES_CONFIG", raising=False)
    for name in ("PASSWORD__MIN_LENGTH", "PASSWORD__REQUIRE_SPECIAL", "OUTPUT__WIDTH"):
        monkeypatch.delenv(f"FORMRULES_{name}", raising=False)


@pytest.fixture
def tomorrow() -> str:
    return (date.today() + timedelta(days=1)).isoformat()


@pytest.fixture
def yesterday() -> str:
    return (date.today() - timedelta(days=1)).isoformat()


# ---------------------------------------------------------------------------
# Shared payload builders (used across domain, service and command tests)
# ---------------------------------------------------------------------------


def future_iso(days: int = 30) -> str:
    return (date.today() + timedelta(days=days)).isoformat()


def valid_job() -> dict[str, object]:
    return {
        "title": "Senior Backend Engineer",
        "company": "Acme Labs",
        "description": "Own the billing services.",
        "category": "Engineering",
        "location": "Berlin",
        "salary": {"type": "Range", "min": 60000, "max": 90000, "period": "Year"},
        "applicationDeadline": future_iso(),
        "requirements": ["5 years of Python", ""],
        "responsibilities": ["Design APIs"],
        "contactInfo": {
            "email": "jobs@acme.example",
            "phone": "+1 (555) 123-4567",
            "website": "https://acme.example/careers",
        },
    }


def valid_internship() -> dict[str, object]:
    return {
        "title": "Data Intern",
        "company": "Acme Labs",
        "description": "Help the analytics team.",
        "category": "Data Science",
        "location": "Remote",
        "duration": "3 months",
        "stipend": {"amount": 800, "period": "Month"},
        "applicationDeadline": future_iso(),
        "requirements": ["SQL"],
        "contactInfo": {"email": "interns@acme.example"},
    }


def valid_training() -> dict[str, object]:
    return {
        "title": "Intro to Machine Learning",
        "description": "Hands-on ML fundamentals.",
        "category": "AI & Machine Learning",
        "duration": "6 weeks",
        "level": "Beginner",
        "price": 0,
        "instructor": {"name": "Dr. Rao"},
        "whatYouWillLearn": ["Regression", "Classification"],
        "startDate": future_iso(10),
    }


def valid_signup() -> dict[str, object]:
    return {
        "name": "Sam Doe",
        "email": "sam@example.com",
        "password": "Secret123",
        "confirmPassword": "Secret123",
        "terms": True,
    }
