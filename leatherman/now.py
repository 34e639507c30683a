"""Edit the dated checklist sections of a "now" note."""

from __future__ import annotations

import datetime
import hashlib

_ITEM = " * "
_DONE = " * ~~"


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def _header(when: datetime.date) -> str:
    return f"## {when.year:04d}-{when.month:02d}-{when.day:02d} ##"


def item_digest(line: str) -> str:
    """Return the hex MD5 digest that identifies a list line."""
    return hashlib.md5(line.encode("utf-8")).hexdigest()


def add_item(text: str, when: datetime.date, item: str) -> str:
    """Append ``item`` to the list for ``when``, creating that day's section if needed.

    An item already present in the day's list is not added again.
    """
    desired = _header(when)
    out: list[str] = []
    in_today = in_list = added = False

    for line in _lines(text):
        if (
            not added
            and not in_today
            and line.startswith("## ")
            and line.endswith(" ##")
            and line < desired
        ):
            # Reached an older day: the wanted day is missing, so create it here.
            out.append(f"{desired}\n\n{_ITEM}{item}\n\n")
            added = True
        elif not in_today and line == desired:
            in_today = True
        elif in_today and not in_list and line.startswith(_ITEM):
            in_list = True
        elif in_today and line.startswith("## "):
            in_today = False
        elif in_today and line.startswith(_ITEM) and not added:
            if line.removeprefix(_ITEM) == item:
                added = True
        elif in_today and not added and in_list and line == "":
            out.append(f"{_ITEM}{item}\n")
            added = True

        out.append(line + "\n")

    return "".join(out)


def toggle_now(text: str, when: datetime.date, digest: str) -> str:
    """Strike through, or un-strike, the item of ``when`` whose digest is ``digest``."""
    desired = _header(when)
    out: list[str] = []
    in_today = False

    for line in _lines(text):
        if not in_today and line == desired:
            in_today = True
        elif in_today and line.startswith("## "):
            in_today = False
        elif in_today and line.startswith(_ITEM) and item_digest(line) == digest:
            if line.startswith(_DONE) and line.endswith("~~"):
                line = _ITEM + line[len(_DONE) : -2]
            else:
                line = _DONE + line[len(_ITEM) :] + "~~"

        out.append(line + "\n")

    return "".join(out)