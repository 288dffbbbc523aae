import pytest  # noqa
from rdeval import Cursor


def test_peek_advance():
    cursor = Cursor("1+2")

    assert cursor.peek() == '1'
    assert cursor.peek() == '1'
    cursor.advance()
    assert cursor.position == 1
    assert cursor.peek() == '+'
    cursor.advance()
    cursor.advance()
    assert cursor.peek() is None
    assert cursor.at_end()


def test_empty_input():
    cursor = Cursor("")

    assert cursor.at_end()
    assert cursor.peek() is None


def test_input_is_read_only():
    cursor = Cursor("1+2")

    with pytest.raises(AttributeError):
        cursor.input_str = "3"


def test_skip_ws():
    cursor = Cursor("  1  ", ws=' ')

    cursor.skip_ws()
    assert cursor.position == 2
    cursor.skip_ws()
    assert cursor.position == 2
    cursor.advance()
    cursor.skip_ws()
    assert cursor.at_end()


def test_skip_ws_disabled():
    cursor = Cursor("  1")

    cursor.skip_ws()
    assert cursor.position == 0


def test_location():
    cursor = Cursor("1+\n(2", file_name="expr.txt")
    for _ in range(3):
        cursor.advance()

    location = cursor.location()
    assert location.start_position == 3
    assert location.line == 2
    assert location.column == 0
    assert location.file_name == "expr.txt"
    assert not location.is_eof()

    location = cursor.location(start_position=1)
    assert location.start_position == 1
    assert location.end_position == 3
    assert location.line == 1
    assert location.column == 1
