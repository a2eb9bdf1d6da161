"""Immutable layout specifications for text blocks and tables."""

from __future__ import annotations

import dataclasses
import enum
import sys
from typing import Optional, Sequence, Tuple

from typing_extensions import Self

from ._strings import InvalidArgumentError

UNSET_MAX_WIDTH = sys.maxsize
"""Sentinel `max_width` for styles that should be sized to their content."""


class Alignment(enum.Enum):
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


class Scaling(enum.Enum):
    FIXED = "fixed"
    """Never shrink below the configured `max_width`."""
    SCALED = "scaled"
    """Shrink proportionally when a table does not fit the page."""


@dataclasses.dataclass(frozen=True)
class TextStyle:
    """Layout specification for one column or block of text.

    `indent` is a hanging indent: the first line of a block starts at the column
    edge, and every following line is indented. `left_pad` is prepended to every
    line.
    """

    alignment: Alignment = Alignment.LEFT
    left_pad: int = 0
    indent: int = 0
    min_width: int = 0
    max_width: int = UNSET_MAX_WIDTH
    scaling: Scaling = Scaling.SCALED

    def __post_init__(self) -> None:
        if self.left_pad < 0:
            raise InvalidArgumentError(f"left_pad must be >= 0, got {self.left_pad}.")
        if self.indent < 0:
            raise InvalidArgumentError(f"indent must be >= 0, got {self.indent}.")
        if self.min_width < 0:
            raise InvalidArgumentError(
                f"min_width must be >= 0, got {self.min_width}."
            )
        if self.max_width < self.min_width:
            raise InvalidArgumentError(
                f"max_width ({self.max_width}) must be >= min_width ({self.min_width})."
            )

    @staticmethod
    def builder() -> TextStyleBuilder:
        return TextStyleBuilder()

    @property
    def is_scalable(self) -> bool:
        return self.scaling is Scaling.SCALED

    def pad(self, text: str, add_indent: bool) -> str:
        """Pad a single line of text to exactly `max_width` characters.

        Text that is already at least `max_width` long is returned as-is. When
        `add_indent` is set and there is room, LEFT and RIGHT aligned lines are
        prefixed by the indent; CENTER alignment ignores the indent and puts any odd
        remainder on the right.
        """
        if len(text) >= self.max_width:
            return text

        if self.max_width == UNSET_MAX_WIDTH:
            return " " * self.indent + text if add_indent else text

        rest_len = self.max_width - len(text)
        if self.alignment is Alignment.CENTER:
            left = rest_len // 2
            return " " * left + text + " " * (rest_len - left)

        indent_pad = ""
        if add_indent and rest_len >= self.indent:
            indent_pad = " " * self.indent
            rest_len -= self.indent
        if self.alignment is Alignment.LEFT:
            return indent_pad + text + " " * rest_len
        else:
            return indent_pad + " " * rest_len + text


class TextStyleBuilder:
    """Fluent builder for `TextStyle`. Every `set_*` method returns the builder.

    Example::

        style = (
            TextStyle.builder()
            .set_max_width(40)
            .set_indent(2)
            .set_alignment(Alignment.RIGHT)
            .get()
        )
    """

    def __init__(self) -> None:
        self._values = dataclasses.asdict(TextStyle())

    def set_text_style(self, style: TextStyle) -> Self:
        """Copy every value from an existing style."""
        self._values = {
            field.name: getattr(style, field.name)
            for field in dataclasses.fields(style)
        }
        return self

    def set_alignment(self, alignment: Alignment) -> Self:
        self._values["alignment"] = alignment
        return self

    def set_left_pad(self, left_pad: int) -> Self:
        self._values["left_pad"] = left_pad
        return self

    def set_indent(self, indent: int) -> Self:
        self._values["indent"] = indent
        return self

    def set_min_width(self, min_width: int) -> Self:
        self._values["min_width"] = min_width
        return self

    def set_max_width(self, max_width: int) -> Self:
        self._values["max_width"] = max_width
        return self

    def set_scaling(self, scaling: Scaling) -> Self:
        self._values["scaling"] = scaling
        return self

    def get_alignment(self) -> Alignment:
        return self._values["alignment"]

    def get_left_pad(self) -> int:
        return self._values["left_pad"]

    def get_indent(self) -> int:
        return self._values["indent"]

    def get_min_width(self) -> int:
        return self._values["min_width"]

    def get_max_width(self) -> int:
        return self._values["max_width"]

    def get_scaling(self) -> Scaling:
        return self._values["scaling"]

    def get(self) -> TextStyle:
        """Build an immutable style from the current values."""
        return TextStyle(**self._values)


@dataclasses.dataclass(frozen=True)
class TableDefinition:
    """A table to render: optional caption, one style and header per column, and rows
    of cell text."""

    caption: Optional[str]
    column_styles: Tuple[TextStyle, ...]
    headers: Tuple[str, ...]
    rows: Tuple[Tuple[str, ...], ...]

    def __post_init__(self) -> None:
        if len(self.headers) != len(self.column_styles):
            raise InvalidArgumentError(
                f"Got {len(self.headers)} headers for"
                f" {len(self.column_styles)} columns."
            )
        for i, row in enumerate(self.rows):
            if len(row) != len(self.headers):
                raise InvalidArgumentError(
                    f"Row {i} has {len(row)} cells, but the table has"
                    f" {len(self.headers)} columns."
                )

    @staticmethod
    def from_data(
        caption: Optional[str],
        column_styles: Sequence[TextStyle],
        headers: Sequence[str],
        rows: Sequence[Sequence[Optional[str]]],
    ) -> TableDefinition:
        """Create a table definition from arbitrary sequences. `None` cells are
        treated as empty strings."""
        return TableDefinition(
            caption=caption,
            column_styles=tuple(column_styles),
            headers=tuple(headers),
            rows=tuple(
                tuple("" if cell is None else cell for cell in row) for row in rows
            ),
        )

    @property
    def num_columns(self) -> int:
        return len(self.column_styles)
