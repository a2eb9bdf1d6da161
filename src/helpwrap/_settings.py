"""Process-wide defaults for new writers and option tables.

Writers read these values once, when they are constructed. Changing them does not
affect writers that already exist. Not thread-safe.
"""

from __future__ import annotations

from typing import Optional

from typing_extensions import TypedDict

from ._strings import InvalidArgumentError

DEFAULT_WIDTH = 74
DEFAULT_LEFT_PAD = 1
DEFAULT_INDENT = 3
DEFAULT_COLUMN_SPACING = 5


class DefaultsDict(TypedDict):
    """Defaults for page layout.

    Attributes:
        width: Page wrap width of a new writer.
        left_pad: Left margin of a new writer.
        indent: Hanging indent for wrapped blocks of a new writer.
        column_spacing: Spacing between columns of the default options table.
    """

    width: int
    left_pad: int
    indent: int
    column_spacing: int


_defaults: DefaultsDict = {
    "width": DEFAULT_WIDTH,
    "left_pad": DEFAULT_LEFT_PAD,
    "indent": DEFAULT_INDENT,
    "column_spacing": DEFAULT_COLUMN_SPACING,
}


def set_defaults(
    width: Optional[int] = None,
    left_pad: Optional[int] = None,
    indent: Optional[int] = None,
    column_spacing: Optional[int] = None,
) -> None:
    """Override layout defaults. Arguments left as None are unchanged."""
    if width is not None and width < 1:
        raise InvalidArgumentError(f"width must be >= 1, got {width}.")
    for name, value in (
        ("left_pad", left_pad),
        ("indent", indent),
        ("column_spacing", column_spacing),
    ):
        if value is not None and value < 0:
            raise InvalidArgumentError(f"{name} must be >= 0, got {value}.")
    new_width = _defaults["width"] if width is None else width
    new_indent = _defaults["indent"] if indent is None else indent
    if new_width <= new_indent:
        raise InvalidArgumentError(
            f"width ({new_width}) must be greater than the indent ({new_indent})."
        )

    if width is not None:
        _defaults["width"] = width
    if left_pad is not None:
        _defaults["left_pad"] = left_pad
    if indent is not None:
        _defaults["indent"] = indent
    if column_spacing is not None:
        _defaults["column_spacing"] = column_spacing


def get_defaults() -> DefaultsDict:
    """Returns a copy of the current defaults."""
    return {
        "width": _defaults["width"],
        "left_pad": _defaults["left_pad"],
        "indent": _defaults["indent"],
        "column_spacing": _defaults["column_spacing"],
    }
