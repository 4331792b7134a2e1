"""
Entry points for loading a ``.env`` file from a directory.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List

from .errors import PathError
from .loader import Loader
from .store import EnvironmentStore, VariableStore
from .validator import Validator

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = ".env"


@dataclass
class LoadResult:
    """Names declared by a file (in order, duplicates kept) and its raw lines."""

    names: List[str] = field(default_factory=list)
    lines: List[str] = field(default_factory=list)


def build_file_path(path: str | Path, filename: str | None = DEFAULT_FILENAME) -> str:
    if not isinstance(filename, str) or not filename:
        filename = DEFAULT_FILENAME
    return os.path.join(str(path).rstrip(os.sep) or os.sep, filename)


class Dotenv:
    """Loads ``filename`` from ``path`` into a variable store."""

    def __init__(
        self,
        path: str | Path,
        filename: str = DEFAULT_FILENAME,
        store: VariableStore | None = None,
    ):
        self.file_path = build_file_path(path, filename)
        self.store = store if store is not None else EnvironmentStore()
        self.variable_names: List[str] = []

    def load(self) -> LoadResult:
        """Load without overwriting variables the store already holds."""

        return self._load(immutable=True)

    def safe_load(self) -> LoadResult:
        """Like :meth:`load`, but a missing or unreadable file yields an empty result."""

        try:
            return self._load(immutable=True)
        except PathError as exc:
            logger.warning("Ignoring environment file: %s", exc)
            return LoadResult()

    def overload(self) -> LoadResult:
        """Load and replace any existing values."""

        return self._load(immutable=False)

    def required(self, variables: str | Iterable[str]) -> Validator:
        return Validator(variables, self.store)

    def _load(self, immutable: bool) -> LoadResult:
        loader = Loader(self.file_path, immutable=immutable, store=self.store)
        lines = loader.load()
        self.variable_names = list(loader.variable_names)
        return LoadResult(names=self.variable_names, lines=lines)


def load(
    path: str | Path,
    filename: str = DEFAULT_FILENAME,
    immutable: bool = True,
    store: VariableStore | None = None,
) -> LoadResult:
    dotenv = Dotenv(path, filename, store=store)
    return dotenv.load() if immutable else dotenv.overload()


def safe_load(
    path: str | Path,
    filename: str = DEFAULT_FILENAME,
    store: VariableStore | None = None,
) -> LoadResult:
    return Dotenv(path, filename, store=store).safe_load()


def overload(
    path: str | Path,
    filename: str = DEFAULT_FILENAME,
    store: VariableStore | None = None,
) -> LoadResult:
    return Dotenv(path, filename, store=store).overload()


__all__ = [
    "DEFAULT_FILENAME",
    "Dotenv",
    "LoadResult",
    "build_file_path",
    "load",
    "overload",
    "safe_load",
]
