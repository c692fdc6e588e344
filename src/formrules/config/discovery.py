"""Config file discovery and loading.

Walk-up finder locates configuration the way git finds ``.git/``:
in each directory a ``formrules.toml`` wins, otherwise a
``pyproject.toml`` carrying a ``[tool.formrules]`` table is used.
The FORMRULES_CONFIG env var and the --config flag bypass the walk.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from formrules.config.models import FormrulesConfig

CONFIG_FILENAME = "formrules.toml"
PYPROJECT_FILENAME = "pyproject.toml"
CONFIG_ENV_VAR = "FORMRULES_CONFIG"


def _pyproject_has_table(path: Path) -> bool:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError:
        return False
    return isinstance(data.get("tool", {}).get("formrules"), dict)


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for configuration.

    Returns the path to the config file, or None if not found.
    Checks FORMRULES_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        pyproject = directory / PYPROJECT_FILENAME
        if pyproject.is_file() and _pyproject_has_table(pyproject):
            return pyproject
    return None


def read_config_data(path: Path) -> dict[str, Any]:
    """Parse *path* and return the formrules settings table.

    For ``pyproject.toml`` this is ``[tool.formrules]``; any other file
    is read whole.

    Raises:
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    data: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    if path.name == PYPROJECT_FILENAME:
        table = data.get("tool", {}).get("formrules", {})
        return table if isinstance(table, dict) else {}
    return data


def load_config(path: Path | None = None, cwd: Path | None = None) -> FormrulesConfig:
    """Load and validate config from a TOML file.

    If *path* is None, uses find_config(*cwd*) to discover the file.
    Returns default FormrulesConfig if no file is found.
    """
    if path is None:
        path = find_config(cwd)

    if path is None:
        return FormrulesConfig()

    return FormrulesConfig.model_validate(read_config_data(path))
