"""FormrulesSettings: one frozen object for CLI flags, env vars and TOML.

Resolution order, first match wins:

1. keyword arguments (the CLI flags)
2. ``FORMRULES_*`` environment variables, ``__`` between nested keys
3. the discovered ``formrules.toml`` or ``[tool.formrules]`` table
4. defaults declared on the section models

Keyword and TOML values for the same section are merged key by key, so
``--strict-password`` leaves a configured ``min_length`` in place.
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from formrules.config.discovery import find_config, read_config_data
from formrules.config.models import OutputConfig, PasswordConfig
from formrules.domain.types import PasswordPolicy

# Config file chosen by from_cli(), read while the settings sources are built.
_active_config: ContextVar[Path | None] = ContextVar("formrules_active_config", default=None)


def resolve_config_path(config_path: str | None, start: Path | None = None) -> Path | None:
    """Pick the config file for one invocation.

    An explicit *config_path* turns discovery off. If it names no file,
    no config file is used at all.
    """
    if config_path:
        candidate = Path(config_path)
        return candidate if candidate.is_file() else None
    return find_config(start)


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by a formrules TOML table."""

    def __init__(self, settings_cls: type[BaseSettings], path: Path | None) -> None:
        super().__init__(settings_cls)
        self._table: dict[str, Any] = self._load(path) if path is not None else {}

    @staticmethod
    def _load(path: Path) -> dict[str, Any]:
        try:
            return read_config_data(path)
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._table.get(field_name), field_name, field_name in self._table

    def __call__(self) -> dict[str, Any]:
        return self._table


class FormrulesSettings(BaseSettings):
    """Resolved configuration for the CLI and the service layer.

    Attributes:
        config_path: The TOML file that was read, or None.
        password: ``[password]`` section, see :class:`PasswordConfig`.
        output: ``[output]`` section, see :class:`OutputConfig`.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "FORMRULES_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    password: PasswordConfig = Field(default_factory=PasswordConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @property
    def password_policy(self) -> PasswordPolicy:
        return self.password.to_policy()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, _active_config.get()),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **overrides: Any,
    ) -> FormrulesSettings:
        """Build settings for one CLI invocation.

        *overrides* are the CLI flags, applied above every other source.
        Discovery walks up from *start* (default: cwd) unless
        *config_path* is given.
        """
        path = resolve_config_path(config_path, start)
        token = _active_config.set(path)
        try:
            return cls(config_path=path, **overrides)
        finally:
            _active_config.reset(token)
