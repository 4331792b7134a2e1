"""
Normalisation of ``name=value`` assignments.

Each stage is a pure function: the compound line is split into a name and a
raw value, the name is cleaned of ``export`` and quote characters, the value
is unquoted (or stripped of its trailing comment) and finally ``${NAME}``
references are substituted using a lookup callable.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from .errors import MalformedValueError
from .lines import BLANKS

Lookup = Callable[[str], Optional[str]]

QUOTES = ("'", '"')
NESTED_REFERENCE = re.compile(r"\$\{([A-Za-z0-9_.]+)\}")
_WHITESPACE = re.compile(r"\s", re.ASCII)


@dataclass(frozen=True)
class VariableAssignment:
    """A name and its unprocessed right-hand side."""

    name: str
    raw_value: str


@dataclass(frozen=True)
class ResolvedVariable:
    name: str
    value: str


def split_compound(name: str, value: str | None = None) -> Tuple[str, str]:
    """Split ``name`` on its first ``=`` when it still holds the whole assignment.

    The ``value`` passed in is discarded in that case.
    """

    if "=" in name:
        name, value = name.split("=", 1)
        return name.strip(BLANKS), value.strip(BLANKS)
    return name, value or ""


def sanitize_name(name: str) -> str:
    """Strip ``export `` and all quote characters from a variable name."""

    for token in ("export ", "'", '"'):
        name = name.replace(token, "")
    return name.strip(BLANKS)


def begins_with_quote(value: str) -> bool:
    return value[:1] in QUOTES


def extract_quoted(value: str) -> Tuple[str, bool]:
    """Scan a quoted value up to its matching closing quote.

    Returns the text between the quotes (escapes untouched) and whether a
    closing quote was found. ``\\\\`` and an escaped quote of the opening
    kind never terminate the scan. Anything after the closing quote is
    dropped.
    """

    quote = value[0]
    captured = []
    after_escape = False
    for char in value[1:]:
        if after_escape:
            captured.append(char)
            after_escape = False
        elif char == "\\":
            captured.append(char)
            after_escape = True
        elif char == quote:
            return "".join(captured), True
        else:
            captured.append(char)
    return value, False


def unescape(value: str, quote: str) -> str:
    return value.replace("\\" + quote, quote).replace("\\\\", "\\")


def sanitize_value(value: str, name: str = "") -> str:
    """Remove quotes or trailing comments from a raw value.

    Raises:
        MalformedValueError: an unquoted value contains whitespace and is
            not itself a comment.
    """

    value = value.strip(BLANKS)
    if not value:
        return value

    if begins_with_quote(value):
        quote = value[0]
        inner = extract_quoted(value)[0]
        value = unescape(inner, quote)
    else:
        value = value.split(" #", 1)[0].strip(BLANKS)
        if _WHITESPACE.search(value):
            if value.startswith("#"):
                value = ""
            else:
                raise MalformedValueError(name)

    return value.strip(BLANKS)


def resolve_nested(value: str, lookup: Lookup) -> str:
    """Replace ``${NAME}`` references with values known to ``lookup``.

    Unknown references are left untouched and substituted text is not
    scanned again.
    """

    if "$" not in value:
        return value

    def _substitute(match: re.Match) -> str:
        resolved = lookup(match.group(1))
        return match.group(0) if resolved is None else resolved

    return NESTED_REFERENCE.sub(_substitute, value)


def parse_assignment(line: str, value: str | None = None) -> VariableAssignment:
    name, raw_value = split_compound(line, value)
    return VariableAssignment(name=sanitize_name(name), raw_value=raw_value)


def normalize(line: str, lookup: Lookup, value: str | None = None) -> ResolvedVariable:
    """Run the full pipeline on an assignment line (or a name/value pair)."""

    assignment = parse_assignment(line, value)
    try:
        cleaned = sanitize_value(assignment.raw_value, assignment.name)
    except MalformedValueError as exc:
        exc.line = line
        raise
    return ResolvedVariable(name=assignment.name, value=resolve_nested(cleaned, lookup))


__all__ = [
    "Lookup",
    "NESTED_REFERENCE",
    "ResolvedVariable",
    "VariableAssignment",
    "begins_with_quote",
    "extract_quoted",
    "normalize",
    "parse_assignment",
    "resolve_nested",
    "sanitize_name",
    "sanitize_value",
    "split_compound",
    "unescape",
]
