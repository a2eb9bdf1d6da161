import pytest

from helpwrap import InvalidArgumentError, _strings

QUICK_FOX = "The quick brown fox jumps over the lazy dog"


def test_break_chars():
    for c in "\t\n\x0b\x0c\r\u2028\u2029\x1c\x1d\x1e\x1f":
        assert _strings.is_break_char(c)
    for c in " a-\u00a0":
        assert not _strings.is_break_char(c)


def test_whitespace():
    assert _strings.is_whitespace(" ")
    assert _strings.is_whitespace("\t")
    assert _strings.is_whitespace("\x1f")
    assert not _strings.is_whitespace("a")
    assert not _strings.is_whitespace("\u00a0")
    assert not _strings.is_whitespace("\u202f")


def test_find_wrap_pos():
    text = "The quick brown fox jumps over\tthe lazy dog"
    assert _strings.find_wrap_pos(text, 10, 0) == 9
    assert _strings.find_wrap_pos(text, 14, 0) == 9
    assert _strings.find_wrap_pos(text, 15, 0) == 15
    assert _strings.find_wrap_pos(text, 16, 0) == 15
    # Break characters win over the width.
    assert _strings.find_wrap_pos(text, 15, 20) == 30
    assert _strings.find_wrap_pos(text, 150, 0) == 30


def test_find_wrap_pos_end_of_text():
    assert _strings.find_wrap_pos(QUICK_FOX, 100, 0) == len(QUICK_FOX)
    assert _strings.find_wrap_pos(QUICK_FOX, 10, 40) == len(QUICK_FOX)
    assert _strings.find_wrap_pos("", 5, 0) == 0


def test_find_wrap_pos_first_break_char_wins():
    # The space at index 2 would also fit, but the tab is a forced break.
    assert _strings.find_wrap_pos("ab cd\tef gh ij", 8, 0) == 5
    assert _strings.find_wrap_pos("ab\ncd\nef gh ij", 12, 0) == 2
    assert _strings.find_wrap_pos("ab\u2028cd ef gh", 12, 0) == 2


def test_find_wrap_pos_hard_chop():
    assert _strings.find_wrap_pos("abcdefghij", 4, 0) == 3
    assert _strings.find_wrap_pos("abcdefghij", 4, 3) == 6

    # Always make progress on unbreakable text.
    text = "x" * 20
    for width in range(1, 25):
        for start in range(0, len(text) - 1):
            pos = _strings.find_wrap_pos(text, width, start)
            assert start < pos <= min(start + width, len(text))
            assert pos >= min(start + width, len(text)) - 1


def test_find_wrap_pos_non_breaking_space():
    # Non-breaking spaces are not wrap points.
    assert _strings.find_wrap_pos("ab cd\u00a0ef", 6, 0) == 2


def test_find_wrap_pos_invalid_width():
    with pytest.raises(InvalidArgumentError):
        _strings.find_wrap_pos(QUICK_FOX, 0, 0)
    with pytest.raises(InvalidArgumentError):
        _strings.find_wrap_pos(QUICK_FOX, -3, 0)


def test_find_first_non_whitespace():
    assert _strings.find_first_non_whitespace("   ab", 0) == 3
    assert _strings.find_first_non_whitespace("ab cd", 2) == 3
    assert _strings.find_first_non_whitespace("ab cd", 0) == 0
    assert _strings.find_first_non_whitespace("ab   ", 2) is None
    assert _strings.find_first_non_whitespace("", 0) is None
    assert _strings.find_first_non_whitespace("ab", 5) is None


def test_rtrim():
    assert _strings.rtrim("abc  \t\n") == "abc"
    assert _strings.rtrim("  abc") == "  abc"
    assert _strings.rtrim("   ") == ""
    assert _strings.rtrim("") == ""
    assert _strings.rtrim("abc\u00a0") == "abc\u00a0"
