"""Quote strings for use in shell scripts."""

from __future__ import annotations

import re
from collections.abc import Iterable

_TO_ESCAPE = re.compile(r"[^\w!%+,\-./:=@^]", re.ASCII)
_REPEATED_QUOTES = re.compile(r"(?:'\\''){2,}")


class NullByteError(ValueError):
    """A string contained a NUL byte, which no shell quoting can express."""

    def __init__(self) -> None:
        super().__init__("No way to quote string containing null bytes")


def _collapse_quotes(match: re.Match[str]) -> str:
    return "'\"" + "'" * (len(match.group(0)) // 4) + "\"'"


def _single_quote(word: str) -> str:
    quoted = _REPEATED_QUOTES.sub(_collapse_quotes, word.replace("'", "'\\''"))
    quoted = "'" + quoted + "'"
    return quoted.removesuffix("''").removeprefix("''")


def quote(args: Iterable[str]) -> str:
    """Return ``args`` quoted and joined into one shell command line.

    Leading ``NAME=value`` words are quoted so they are not taken as
    variable assignments.  Raises NullByteError for strings holding NUL.
    """
    words = []
    saw_non_assignment = False
    for arg in args:
        if arg == "":
            words.append("''")
            continue
        if "\x00" in arg:
            raise NullByteError()

        escape = False
        if "=" in arg:
            escape = not saw_non_assignment
        else:
            saw_non_assignment = True

        if escape or _TO_ESCAPE.search(arg):
            words.append(_single_quote(arg))
        else:
            words.append(arg)
    return " ".join(words)