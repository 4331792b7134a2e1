"""
Settings file describing which environment file to load and how.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

import yaml

from .bootstrap import DEFAULT_ENVIRONMENT_VARIABLE
from .dotenv import DEFAULT_FILENAME
from .errors import ConfigError


@dataclass
class LoaderSettings:
    """Options for a single load, as read from YAML."""

    path: str
    filename: str = DEFAULT_FILENAME
    overload: bool = False
    safe: bool = False
    environment_variable: str = DEFAULT_ENVIRONMENT_VARIABLE
    required: List[str] = field(default_factory=list)
    fallback: Dict[str, str] = field(default_factory=dict)


def _require(dictionary: Dict[str, Any], key: str) -> Any:
    if key not in dictionary:
        raise ConfigError(f"Missing required configuration key: {key}")
    return dictionary[key]


def _string(raw: Dict[str, Any], key: str, default: str) -> str:
    value = raw.get(key, default)
    if not isinstance(value, str) or not value:
        raise ConfigError(f"Configuration key {key} must be a non-empty string")
    return value


def _flag(raw: Dict[str, Any], key: str) -> bool:
    value = raw.get(key, False)
    if not isinstance(value, bool):
        raise ConfigError(f"Configuration key {key} must be true or false")
    return value


def _load_required(raw_required: Any) -> List[str]:
    if raw_required is None:
        return []
    if isinstance(raw_required, str):
        return [raw_required]
    if not isinstance(raw_required, list) or not all(isinstance(name, str) for name in raw_required):
        raise ConfigError(f"Invalid required variable list: {raw_required}")
    return list(raw_required)


def _load_fallback(raw_fallback: Any) -> Dict[str, str]:
    if raw_fallback is None:
        return {}
    if not isinstance(raw_fallback, dict):
        raise ConfigError(f"Invalid fallback table: {raw_fallback}")
    # YAML scalars arrive typed; environment values are always strings.
    return {str(name): "" if value is None else str(value) for name, value in raw_fallback.items()}


def load_settings(path: str | Path) -> LoaderSettings:
    """Load LoaderSettings from a YAML file."""

    settings_path = Path(path)
    if not settings_path.exists():
        raise ConfigError(f"Configuration file not found: {path}")

    try:
        with settings_path.open("r", encoding="utf-8") as handle:
            raw = yaml.safe_load(handle) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Configuration file is not valid YAML: {path}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"Configuration file must contain a mapping: {path}")

    env_dir = Path(str(_require(raw, "path")))
    if not env_dir.is_absolute():
        env_dir = settings_path.parent / env_dir

    return LoaderSettings(
        path=str(env_dir),
        filename=_string(raw, "filename", DEFAULT_FILENAME),
        overload=_flag(raw, "overload"),
        safe=_flag(raw, "safe"),
        environment_variable=_string(raw, "environment_variable", DEFAULT_ENVIRONMENT_VARIABLE),
        required=_load_required(raw.get("required")),
        fallback=_load_fallback(raw.get("fallback")),
    )


__all__ = ["LoaderSettings", "load_settings"]
