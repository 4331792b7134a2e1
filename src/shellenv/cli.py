"""
Command line interface for loading environment files.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional, Sequence

from .bootstrap import environment_file
from .config import LoaderSettings, load_settings
from .dotenv import Dotenv, LoadResult
from .errors import EnvFileError, MalformedValueError, PathError
from .store import EnvironmentStore

logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Load a .env file and print the variables it declares")
    parser.add_argument("--config", help="Optional YAML settings file")
    parser.add_argument("--path", help="Directory containing the environment file (default: .)")
    parser.add_argument("--file", help="Environment file name (default: .env)")
    parser.add_argument("--env", help="Prefer <file>.<env> when it exists")
    parser.add_argument("--overload", action="store_true", help="Replace variables that are already set")
    parser.add_argument("--safe", action="store_true", help="Treat a missing file as empty")
    parser.add_argument(
        "--required",
        action="append",
        default=[],
        metavar="NAME",
        help="Fail unless NAME is set after loading (repeatable)",
    )
    parser.add_argument("--verbose", action="store_true", help="Log each variable as it is applied")
    return parser.parse_args(argv)


def _configure_logging(verbose: bool) -> None:
    if verbose:
        level = logging.DEBUG
    else:
        level = getattr(logging, os.getenv("SHELLENV_LOG_LEVEL", "WARNING").upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def _settings(args: argparse.Namespace) -> LoaderSettings:
    settings = load_settings(args.config) if args.config else LoaderSettings(path=".")
    if args.path:
        settings.path = args.path
    if args.file:
        settings.filename = args.file
    settings.overload = settings.overload or args.overload
    settings.safe = settings.safe or args.safe
    settings.required = settings.required + args.required
    return settings


def _run(dotenv: Dotenv, settings: LoaderSettings) -> LoadResult:
    try:
        result = dotenv.overload() if settings.overload else dotenv.load()
    except PathError as exc:
        if not settings.safe:
            raise
        logger.warning("Ignoring environment file: %s", exc)
        result = LoadResult()
    if settings.required:
        dotenv.required(settings.required)
    return result


def _unique(names: List[str]) -> List[str]:
    return list(dict.fromkeys(names))


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    _configure_logging(args.verbose)

    try:
        settings = _settings(args)
        store = EnvironmentStore(fallback=settings.fallback)
        filename = environment_file(
            settings.path,
            settings.filename,
            argv=["--env", args.env] if args.env else [],
            lookup=store.get,
            environment_variable=settings.environment_variable,
        )
        dotenv = Dotenv(settings.path, filename, store=store)
        result = _run(dotenv, settings)
    except MalformedValueError as exc:
        print(f"The environment file is invalid: {exc}", file=sys.stderr)
        return 1
    except EnvFileError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    for name in _unique(result.names):
        print(f"{name}={store.get(name) or ''}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
