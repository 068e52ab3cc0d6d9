import re

import pytest

from hahen.constants import CLOSE_TAG, OPEN_TAG, TEXT
from hahen.cursor import Cursor, line_col, match_at


@pytest.mark.ci
def test_match_at_is_anchored():
    assert match_at("ab<c>", 0, TEXT) == (("ab",), 2)
    assert match_at("ab<c>", 2, OPEN_TAG) == (("c",), 4)
    # never searches ahead for a later match
    assert match_at("ab<c>", 0, OPEN_TAG) is None


@pytest.mark.ci
def test_try_consume_advances_on_success():
    cursor = Cursor("<p>hi</p>")
    assert cursor.try_consume(OPEN_TAG) == ("p",)
    assert cursor.pos == 2
    assert cursor.remaining == ">hi</p>"


@pytest.mark.ci
def test_try_consume_keeps_position_on_failure():
    cursor = Cursor("text</p>")
    assert cursor.try_consume(CLOSE_TAG) is None
    assert cursor.pos == 0
    assert cursor.try_consume(TEXT) == ("text",)
    assert cursor.try_consume(CLOSE_TAG) == ("p",)
    assert cursor.at_end
    assert cursor.remaining == ""


@pytest.mark.ci
def test_try_consume_without_groups():
    cursor = Cursor("  >")
    assert cursor.try_consume(re.compile(r"\s*>")) == ()
    assert cursor.at_end


@pytest.mark.ci
@pytest.mark.parametrize("offset,expected", [
    (0, (1, 1)),
    (1, (1, 2)),
    (2, (1, 3)),
    (3, (2, 1)),
    (4, (2, 2)),
    (6, (3, 1)),
])
def test_line_col(offset, expected):
    assert line_col("ab\ncd\nef", offset) == expected
