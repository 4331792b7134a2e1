"""
Checks that required variables are present after loading.
"""

from __future__ import annotations

from typing import Iterable, List

from .errors import MissingVariableError
from .store import VariableStore


class Validator:
    """Raises ``MissingVariableError`` on construction if any name is absent."""

    def __init__(self, variables: str | Iterable[str], store: VariableStore):
        self.variables: List[str] = [variables] if isinstance(variables, str) else list(variables)
        self.store = store
        missing = [name for name in self.variables if store.get(name) is None]
        if missing:
            raise MissingVariableError(missing)


__all__ = ["Validator"]
