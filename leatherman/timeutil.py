"""Small date helpers."""

from __future__ import annotations

import datetime
from typing import TypeVar

_D = TypeVar("_D", datetime.date, datetime.datetime)


def jump_to(start: _D, dest: int) -> _D:
    """Return the first moment on or after ``start`` that falls on weekday ``dest``.

    ``dest`` uses :meth:`datetime.date.weekday` numbering (Monday is 0), so the
    constants in :mod:`calendar` can be passed.
    """
    offset = (dest - start.weekday()) % 7
    return start + datetime.timedelta(days=offset)