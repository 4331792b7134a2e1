"""
Startup helper that picks an environment-specific file before loading.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from .dotenv import DEFAULT_FILENAME, Dotenv
from .errors import PathError
from .normalizer import Lookup
from .store import VariableStore

logger = logging.getLogger(__name__)

DEFAULT_ENVIRONMENT_VARIABLE = "APP_ENV"


def _env_option(argv: Sequence[str]) -> Optional[str]:
    for index, arg in enumerate(argv):
        if arg == "--env" and index + 1 < len(argv):
            return argv[index + 1]
        if arg.startswith("--env="):
            return arg.split("=", 1)[1]
    return None


def _existing(path: str | Path, filename: str, suffix: str | None) -> Optional[str]:
    if not suffix:
        return None
    candidate = f"{filename}.{suffix}"
    if os.path.exists(os.path.join(str(path), candidate)):
        return candidate
    return None


def environment_file(
    path: str | Path,
    filename: str = DEFAULT_FILENAME,
    argv: Sequence[str] | None = None,
    lookup: Lookup | None = None,
    environment_variable: str = DEFAULT_ENVIRONMENT_VARIABLE,
) -> str:
    """Return the file to load from ``path``.

    ``--env NAME`` on the command line selects ``<filename>.NAME`` when that
    file exists; otherwise the value of ``environment_variable`` does the same.
    Falls back to ``filename``.
    """

    argv = sys.argv[1:] if argv is None else argv
    lookup = lookup or os.environ.get

    selected = _existing(path, filename, _env_option(argv))
    if selected is None:
        selected = _existing(path, filename, lookup(environment_variable))
    if selected is None:
        return filename

    logger.info("Using environment file %s", selected)
    return selected


def bootstrap(
    path: str | Path,
    filename: str = DEFAULT_FILENAME,
    argv: Sequence[str] | None = None,
    store: VariableStore | None = None,
    environment_variable: str = DEFAULT_ENVIRONMENT_VARIABLE,
) -> Dotenv:
    """Load the environment file for this process if there is one.

    A missing file is not an error. ``MalformedValueError`` propagates so the
    caller can abort startup.
    """

    dotenv = Dotenv(path, filename, store=store)
    selected = environment_file(
        path,
        filename,
        argv=argv,
        lookup=dotenv.store.get,
        environment_variable=environment_variable,
    )
    if selected != filename:
        dotenv = Dotenv(path, selected, store=dotenv.store)

    try:
        dotenv.load()
    except PathError:
        logger.debug("No environment file at %s", dotenv.file_path)
    return dotenv


__all__ = ["DEFAULT_ENVIRONMENT_VARIABLE", "bootstrap", "environment_file"]
