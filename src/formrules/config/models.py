"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, formrules.toml only contains
overrides. An empty file is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from formrules.domain.types import PasswordPolicy

# --- formrules.toml sections ---


class PasswordConfig(BaseModel):
    """[password] section.

    ``require_special`` switches to the signup policy (a character from
    ``@$!%*?&`` on top of upper, lower and digit).
    """

    model_config = {"frozen": True}

    min_length: int = Field(default=8, ge=1)
    require_special: bool = False

    def to_policy(self) -> PasswordPolicy:
        return PasswordPolicy(min_length=self.min_length, require_special=self.require_special)


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = Field(default=120, ge=40)


class FormrulesConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    password: PasswordConfig = Field(default_factory=PasswordConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
