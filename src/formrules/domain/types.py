"""Classification enums and small value types shared by validators."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class SalaryType(StrEnum):
    """Discriminator of the salary object on job postings."""

    RANGE = "Range"
    FIXED = "Fixed"
    NEGOTIABLE = "Negotiable"


class TrainingLevel(StrEnum):
    """Levels offered on training programs."""

    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


UNPAID_PERIOD = "Unpaid"

PASSWORD_SPECIAL_CHARACTERS = "@$!%*?&"


@dataclass(frozen=True)
class PasswordPolicy:
    """Password strength requirements.

    Upper case, lower case and a digit are always required.
    *require_special* adds a character from ``@$!%*?&``.
    """

    min_length: int = 8
    require_special: bool = False
