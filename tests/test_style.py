import dataclasses

import pytest

from helpwrap import (
    UNSET_MAX_WIDTH,
    Alignment,
    InvalidArgumentError,
    Scaling,
    TableDefinition,
    TextStyle,
)


def test_defaults():
    style = TextStyle()
    assert style.alignment is Alignment.LEFT
    assert style.left_pad == 0
    assert style.indent == 0
    assert style.min_width == 0
    assert style.max_width == UNSET_MAX_WIDTH
    assert style.scaling is Scaling.SCALED
    assert style.is_scalable


def test_builder():
    builder = (
        TextStyle.builder()
        .set_alignment(Alignment.RIGHT)
        .set_left_pad(5)
        .set_indent(2)
        .set_min_width(3)
        .set_max_width(10)
        .set_scaling(Scaling.FIXED)
    )
    assert builder.get_alignment() is Alignment.RIGHT
    assert builder.get_left_pad() == 5
    assert builder.get_indent() == 2
    assert builder.get_min_width() == 3
    assert builder.get_max_width() == 10
    assert builder.get_scaling() is Scaling.FIXED

    style = builder.get()
    assert style == TextStyle(
        alignment=Alignment.RIGHT,
        left_pad=5,
        indent=2,
        min_width=3,
        max_width=10,
        scaling=Scaling.FIXED,
    )
    assert not style.is_scalable

    # Styles built earlier are not affected by later builder changes.
    builder.set_indent(0)
    assert style.indent == 2
    assert builder.get().indent == 0


def test_builder_from_style():
    original = TextStyle(alignment=Alignment.CENTER, indent=4, max_width=20)
    copied = TextStyle.builder().set_text_style(original).set_left_pad(1).get()
    assert copied == dataclasses.replace(original, left_pad=1)
    assert original.left_pad == 0


def test_immutable():
    style = TextStyle()
    with pytest.raises(dataclasses.FrozenInstanceError):
        style.indent = 3  # type: ignore


def test_invalid_style():
    with pytest.raises(InvalidArgumentError):
        TextStyle(indent=-1)
    with pytest.raises(InvalidArgumentError):
        TextStyle(left_pad=-1)
    with pytest.raises(InvalidArgumentError):
        TextStyle(min_width=-1)
    with pytest.raises(InvalidArgumentError):
        TextStyle(min_width=10, max_width=5)
    with pytest.raises(InvalidArgumentError):
        TextStyle.builder().set_max_width(2).set_min_width(3).get()


def test_pad():
    left = TextStyle(max_width=10, indent=2)
    assert left.pad("abc", add_indent=False) == "abc       "
    assert left.pad("abc", add_indent=True) == "  abc     "

    right = dataclasses.replace(left, alignment=Alignment.RIGHT)
    assert right.pad("abc", add_indent=False) == "       abc"
    assert right.pad("abc", add_indent=True) == "       abc"

    center = dataclasses.replace(left, alignment=Alignment.CENTER)
    assert center.pad("abc", add_indent=False) == "   abc    "
    assert center.pad("abc", add_indent=True) == "   abc    "
    assert center.pad("abcd", add_indent=False) == "   abcd   "

    # Lines that fill the width are untouched.
    assert left.pad("abcdefghij", add_indent=True) == "abcdefghij"
    assert left.pad("abcdefghijkl", add_indent=False) == "abcdefghijkl"

    # An exact fit for a wrapped line still gets its indent.
    assert left.pad("abcdefgh", add_indent=True) == "  abcdefgh"


def test_pad_unset_width():
    style = TextStyle(indent=3)
    assert style.pad("abc", add_indent=False) == "abc"
    assert style.pad("abc", add_indent=True) == "   abc"


def test_table_definition():
    styles = [TextStyle(), TextStyle(left_pad=5)]
    table = TableDefinition.from_data(
        "Caption", styles, ["a", "b"], [["1", "2"], ["3", None]]
    )
    assert table.caption == "Caption"
    assert table.column_styles == tuple(styles)
    assert table.headers == ("a", "b")
    assert table.rows == (("1", "2"), ("3", ""))
    assert table.num_columns == 2


def test_table_definition_mismatch():
    with pytest.raises(InvalidArgumentError):
        TableDefinition.from_data(None, [TextStyle()], ["a", "b"], [])
    with pytest.raises(InvalidArgumentError):
        TableDefinition.from_data(
            None, [TextStyle(), TextStyle()], ["a", "b"], [["1", "2"], ["3"]]
        )
