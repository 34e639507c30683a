"""A permissive parser for netrc files."""

from __future__ import annotations

import os
import re
from collections.abc import Iterator
from dataclasses import dataclass, field

_COMMENT = re.compile(rb"[\t\n\f\r ]*#")
_SPACE_BYTES = frozenset(b"\t\n\v\f\r \x85\xa0")
_FIELDS = ("login", "password", "account", "macdef")


@dataclass
class Login:
    """One machine (or default) entry of a netrc file."""

    is_default: bool = False
    name: str = ""
    login: str = ""
    password: str = ""
    account: str = ""
    macdef: str = ""


@dataclass
class Netrc:
    """The entries of a netrc file, in file order."""

    logins: list[Login] = field(default_factory=list)

    def __iter__(self) -> Iterator[Login]:
        return iter(self.logins)

    def __len__(self) -> int:
        return len(self.logins)

    def machine(self, name: str) -> Login | None:
        """Return the first entry for machine ``name``, or None."""
        return next((entry for entry in self.logins if entry.name == name), None)

    def machine_and_login(self, name: str, login: str) -> Login | None:
        """Return the first entry for machine ``name`` with login ``login``, or None."""
        return next(
            (
                entry
                for entry in self.logins
                if entry.name == name and entry.login == login
            ),
            None,
        )


def _is_space(byte: int) -> bool:
    return byte in _SPACE_BYTES


def _token_length(data: bytes) -> int:
    """Length of the token at the start of ``data``.

    Tokens are runs of whitespace, runs of non-whitespace, and comments
    (which swallow the whitespace that follows them).
    """
    in_whitespace = _is_space(data[0])
    for index, byte in enumerate(data):
        if byte == ord("#"):
            end = _COMMENT.search(data).start()
            if end == 0:
                newline = data.find(b"\n")
                end = len(data) if newline == -1 else newline
                while end < len(data) and _is_space(data[end]):
                    end += 1
            return end
        if _is_space(byte) != in_whitespace:
            return index
    return len(data)


def _lex(data: bytes) -> Iterator[str]:
    pos = 0
    while pos < len(data):
        length = _token_length(data[pos:])
        yield data[pos : pos + length].decode("utf-8", "replace")
        pos += length


def _value_after(tokens: list[str], index: int) -> str:
    try:
        return tokens[index + 2]
    except IndexError:
        raise ValueError(f"invalid netrc: missing value for {tokens[index]!r}") from None


def _parse(tokens: list[str]) -> Netrc:
    logins: list[Login] = []
    current = Login()
    for index, token in enumerate(tokens):
        if token == "default":
            logins.append(current)
            current = Login(is_default=True, name="default")
        elif token == "machine":
            logins.append(current)
            current = Login(name=_value_after(tokens, index))
        elif token in _FIELDS:
            setattr(current, token, _value_after(tokens, index))
    logins.append(current)
    return Netrc(logins)


def loads(text: str | bytes) -> Netrc:
    """Parse netrc content."""
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    return _parse(list(_lex(data)))


def load(path: str | os.PathLike[str]) -> Netrc:
    """Parse the netrc file at ``path``."""
    with open(path, "rb") as handle:
        return loads(handle.read())