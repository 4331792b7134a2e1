"""
Variable stores that loaded values are published into.
"""

from __future__ import annotations

import os
from typing import Dict, Mapping, MutableMapping, Optional, Protocol


class VariableStore(Protocol):
    def get(self, name: str) -> Optional[str]:
        ...

    def set(self, name: str, value: str) -> None:
        ...

    def clear(self, name: str) -> None:
        ...


class EnvironmentStore:
    """Store backed by the process environment.

    Lookups check ``overrides`` first, then ``environ`` (``os.environ`` unless
    another mapping is injected) and finally the read-only ``fallback``
    table. Writes go to ``overrides`` and ``environ``; assigning into
    ``os.environ`` also updates the C-level environment seen by child
    processes.
    """

    def __init__(
        self,
        environ: MutableMapping[str, str] | None = None,
        overrides: MutableMapping[str, str] | None = None,
        fallback: Mapping[str, str] | None = None,
    ):
        self.environ = os.environ if environ is None else environ
        self.overrides = overrides
        self.fallback = fallback or {}

    def get(self, name: str) -> Optional[str]:
        if self.overrides is not None and name in self.overrides:
            return self.overrides[name]
        if name in self.environ:
            return self.environ[name]
        return self.fallback.get(name)

    def set(self, name: str, value: str) -> None:
        if self.overrides is not None:
            self.overrides[name] = value
        self.environ[name] = value

    def clear(self, name: str) -> None:
        if self.overrides is not None:
            self.overrides.pop(name, None)
        self.environ.pop(name, None)


class MemoryStore:
    """Dict-backed store that never touches the real environment."""

    def __init__(self, values: Mapping[str, str] | None = None):
        self.values: Dict[str, str] = dict(values or {})

    def get(self, name: str) -> Optional[str]:
        return self.values.get(name)

    def set(self, name: str, value: str) -> None:
        self.values[name] = value

    def clear(self, name: str) -> None:
        self.values.pop(name, None)


__all__ = ["EnvironmentStore", "MemoryStore", "VariableStore"]
