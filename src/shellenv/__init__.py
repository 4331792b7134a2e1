"""
Shell-style ``.env`` file loader.
"""

from .bootstrap import bootstrap
from .dotenv import Dotenv, LoadResult, load, overload, safe_load
from .errors import ConfigError, EnvFileError, MalformedValueError, MissingVariableError, PathError
from .loader import Loader
from .store import EnvironmentStore, MemoryStore, VariableStore

__all__ = [
    "ConfigError",
    "Dotenv",
    "EnvFileError",
    "EnvironmentStore",
    "LoadResult",
    "Loader",
    "MalformedValueError",
    "MemoryStore",
    "MissingVariableError",
    "PathError",
    "VariableStore",
    "bootstrap",
    "load",
    "overload",
    "safe_load",
]
