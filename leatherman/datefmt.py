"""Translate common strftime(3) directives into reference-time layouts."""

from __future__ import annotations

# Reference time: Mon Jan 2 15:04:05 -0700 MST 2006
_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("%a", "Mon"),
    ("%A", "Monday"),
    ("%b", "Jan"),
    ("%B", "January"),
    ("%C", "06"),
    ("%d", "02"),
    ("%D", "01/02/06"),
    ("%F", "2006-01-02"),
    ("%h", "Jan"),
    ("%H", "15"),
    ("%I", "03"),
    ("%m", "01"),
    ("%M", "04"),
    ("%n", "\n"),
    ("%p", "PM"),
    ("%P", "pm"),
    ("%r", "03:04:05 p.m."),
    ("%R", "15:03"),
    ("%S", "05"),
    ("%t", "\t"),
    ("%T", "15:04:05"),
    ("%u", "1"),
    ("%y", "06"),
    ("%Y", "2006"),
    ("%z", "-7000"),
    ("%Z", "MST"),
)


def translate_format(fmt: str) -> str:
    """Replace the supported strftime directives in ``fmt``, in table order."""
    result = fmt
    for directive, layout in _REPLACEMENTS:
        result = result.replace(directive, layout)
    return result