"""
Reads an environment file and publishes its assignments into a store.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from .lines import RawLine, read_lines
from .normalizer import ResolvedVariable, normalize
from .store import EnvironmentStore, VariableStore

logger = logging.getLogger(__name__)


class Loader:
    """Parses one file and writes its variables into ``store``.

    In immutable mode a name that the store already knows keeps its value;
    otherwise every assignment replaces the existing entry. Writes are
    applied line by line, so a malformed line leaves earlier lines applied.
    The store is not locked.
    """

    def __init__(
        self,
        file_path: str | Path,
        immutable: bool = False,
        store: VariableStore | None = None,
    ):
        self.file_path = str(file_path)
        self.immutable = immutable
        self.store = store if store is not None else EnvironmentStore()
        self.variable_names: List[str] = []

    def load(self) -> List[str]:
        """Apply every assignment in the file and return its raw lines."""

        lines = read_lines(self.file_path)
        for line in lines:
            if RawLine(line).is_assignment:
                self.set_variable(line)
        logger.debug(
            "Loaded %s (%s mode, %d names declared)",
            self.file_path,
            "immutable" if self.immutable else "overload",
            len(self.variable_names),
        )
        return lines

    def normalize(self, name: str, value: str | None = None) -> ResolvedVariable:
        return normalize(name, self.get_variable, value)

    def get_variable(self, name: str) -> Optional[str]:
        return self.store.get(name)

    def set_variable(self, name: str, value: str | None = None) -> None:
        """Normalise and write one variable.

        ``name`` may hold a whole ``NAME=value`` line, in which case ``value``
        is ignored.
        """

        variable = self.normalize(name, value)
        if not variable.name:
            logger.warning("Skipping assignment with an empty name in %s", self.file_path)
            return

        self.variable_names.append(variable.name)

        if self.immutable and self.get_variable(variable.name) is not None:
            logger.debug("Keeping existing value for %s", variable.name)
            return

        self.store.set(variable.name, variable.value)
        logger.debug("Set %s", variable.name)

    def clear_variable(self, name: str) -> None:
        if self.immutable:
            return
        self.store.clear(name)


__all__ = ["Loader"]
