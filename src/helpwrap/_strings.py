"""Utilities and constants for working with strings: break rules and wrap points."""

from __future__ import annotations

BREAK_CHARS: frozenset[str] = frozenset(
    (
        "\t",
        "\n",
        "\x0b",  # Vertical tab.
        "\x0c",  # Form feed.
        "\r",
        "\u2028",  # Line separator.
        "\u2029",  # Paragraph separator.
        "\x1c",  # File separator.
        "\x1d",  # Group separator.
        "\x1e",  # Record separator.
        "\x1f",  # Unit separator.
    )
)

# `str.isspace()` is true for these, but a line should never be broken on them.
_NON_BREAKING_SPACES: frozenset[str] = frozenset(("\u00a0", "\u2007", "\u202f"))


class InvalidArgumentError(ValueError):
    """Raised when a width, level, or style makes rendering impossible. Raised before
    anything is written for the failing call."""


def is_break_char(c: str) -> bool:
    """Returns True if `c` forces a line break, regardless of the available width."""
    return c in BREAK_CHARS


def is_whitespace(c: str) -> bool:
    """Returns True if `c` is a preferred (but optional) wrap point."""
    return c.isspace() and c not in _NON_BREAKING_SPACES


def find_wrap_pos(text: str, width: int, start_pos: int) -> int:
    """Find the position where the line starting at `start_pos` should be wrapped.

    Break characters inside the window always win. If the rest of the text fits, the
    length of the text is returned. Otherwise we back up to the last whitespace
    character, and if there is none the line is chopped near the width limit.

    Args:
        text: Text being wrapped.
        width: Maximum number of characters on the line. Must be at least 1.
        start_pos: Index of the first character of the line.

    Returns:
        Index at which the line ends (exclusive), or `len(text)` if no further
        wrapping is needed.
    """
    if width < 1:
        raise InvalidArgumentError(f"Wrap width must be greater than 0, got {width}.")

    limit = min(start_pos + width, len(text) - 1)
    for idx in range(start_pos, limit):
        if is_break_char(text[idx]):
            return idx

    if start_pos + width >= len(text):
        return len(text)

    pos = limit
    while pos >= start_pos and not is_whitespace(text[pos]):
        pos -= 1
    if pos > start_pos:
        return pos

    # Unbreakable token: chop it, but always make progress.
    return max(limit - 1, start_pos + 1)


def find_first_non_whitespace(text: str, start_pos: int) -> int | None:
    """Returns the index of the first non-whitespace character at or after
    `start_pos`, or None if the rest of `text` is blank."""
    for idx in range(max(start_pos, 0), len(text)):
        if not is_whitespace(text[idx]):
            return idx
    return None


def rtrim(text: str) -> str:
    """Remove trailing whitespace."""
    end = len(text)
    while end > 0 and is_whitespace(text[end - 1]):
        end -= 1
    return text[:end]
