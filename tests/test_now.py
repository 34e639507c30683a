import datetime

import pytest

from leatherman.now import add_item, item_digest, toggle_now

_FRONT_MATTER = [
    "{",
    '"title": "Now",',
    '"tags": [ "private", "reference", "project" ],',
    '"reviewed_on": "2020-07-15",',
    "}",
]


def _document(*sections):
    """Build a now-file from (heading, items) pairs."""
    lines = list(_FRONT_MATTER)
    for heading, items in sections:
        lines.extend(["", heading, ""])
        lines.extend(f" * {item}" for item in items)
    return "\n".join(lines) + "\n\n\n"


STASH = ("## Stash", ["foo", "bar", "baz"])
DAY_19 = ("## 2020-07-19 ##", ["bong", "biff", "barp"])
DAY_18 = ("## 2020-07-18 ##", ["~~herp~~", "~~dong~~"])

EG = _document(STASH, DAY_19, DAY_18)

EXPECT_XYZZY = _document(STASH, (DAY_19[0], DAY_19[1] + ["xyzzy"]), DAY_18)

EXPECT_CREATE_SECTION = _document(
    STASH, ("## 2020-07-20 ##", ["create-section"]), DAY_19, DAY_18
)


@pytest.mark.parametrize(
    ("item", "when", "expected"),
    [
        ("xyzzy", datetime.datetime(2020, 7, 19, tzinfo=datetime.timezone.utc), EXPECT_XYZZY),
        (
            "create-section",
            datetime.datetime(2020, 7, 20, tzinfo=datetime.timezone.utc),
            EXPECT_CREATE_SECTION,
        ),
    ],
)
def test_add_item(item, when, expected):
    assert add_item(EG, when, item) == expected


def test_add_item_accepts_date():
    assert add_item(EG, datetime.date(2020, 7, 19), "xyzzy") == EXPECT_XYZZY


def test_add_item_existing_item_not_duplicated():
    assert add_item(EG, datetime.date(2020, 7, 19), "biff") == EG


def test_add_item_empty_text():
    assert add_item("", datetime.date(2020, 7, 19), "xyzzy") == ""


def test_add_item_strips_carriage_returns():
    crlf = EG.replace("\n", "\r\n")
    assert add_item(crlf, datetime.date(2020, 7, 19), "xyzzy") == EXPECT_XYZZY


@pytest.mark.parametrize(
    ("line", "digest"),
    [
        (" * bong", "acf51c06e604dc806b4ec4d9f68371f5"),
        (" * biff", "42d0788e089bcabc1b7fe94397f5de34"),
        (" * barp", "d83809da49df6c78073909ee01a0a3dc"),
        (" * ~~herp~~", "3ac3845115fb4ee703f3c170eb9ba368"),
        (" * ~~dong~~", "e23b23e871f27237c8d5a28960121cb7"),
    ],
)
def test_item_digest(line, digest):
    assert item_digest(line) == digest


def test_toggle_marks_done():
    result = toggle_now(EG, datetime.date(2020, 7, 19), "acf51c06e604dc806b4ec4d9f68371f5")
    assert " * ~~bong~~\n" in result
    assert " * bong\n" not in result
    assert result.replace(" * ~~bong~~\n", " * bong\n") == EG


def test_toggle_marks_undone():
    result = toggle_now(EG, datetime.date(2020, 7, 18), "3ac3845115fb4ee703f3c170eb9ba368")
    assert " * herp\n" in result
    assert " * ~~herp~~\n" not in result


def test_toggle_only_in_given_day():
    assert toggle_now(EG, datetime.date(2020, 7, 18), "acf51c06e604dc806b4ec4d9f68371f5") == EG


def test_toggle_round_trip():
    when = datetime.date(2020, 7, 19)
    once = toggle_now(EG, when, item_digest(" * biff"))
    assert once != EG
    assert toggle_now(once, when, item_digest(" * ~~biff~~")) == EG