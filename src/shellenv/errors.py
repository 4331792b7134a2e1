"""
Exceptions raised while reading and applying environment files.
"""

from __future__ import annotations

from typing import Iterable, List


class EnvFileError(RuntimeError):
    """Base class for every error raised by shellenv."""


class PathError(EnvFileError):
    """Raised when the environment file is missing, not a file, or unreadable."""

    def __init__(self, path: str, reason: str | None = None):
        self.path = path
        message = f"Unable to read the environment file at {path}."
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class MalformedValueError(EnvFileError):
    """Raised when an unquoted value contains whitespace."""

    def __init__(self, name: str, line: str | None = None):
        self.name = name
        self.line = line
        super().__init__(
            f"Values containing spaces must be surrounded by quotes (variable {name!r})."
        )


class MissingVariableError(EnvFileError):
    """Raised when required variables are absent after loading."""

    def __init__(self, missing: Iterable[str]):
        self.missing: List[str] = list(missing)
        super().__init__(f"Required environment variables missing: {', '.join(self.missing)}")


class ConfigError(EnvFileError):
    """Raised when the loader settings file is invalid."""


__all__ = [
    "ConfigError",
    "EnvFileError",
    "MalformedValueError",
    "MissingVariableError",
    "PathError",
]
