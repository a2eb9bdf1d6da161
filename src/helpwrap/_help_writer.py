from __future__ import annotations

import sys
from typing import Iterable, Optional, TextIO

from . import _fmtlib as fmt
from . import _settings
from ._strings import InvalidArgumentError, rtrim
from ._style import TableDefinition, TextStyle, TextStyleBuilder

_HEADER_UNDERLINES = ("=", "%", "+", "_", "_")


class HelpWriter:
    """Writes titles, headers, paragraphs, lists, and tables to a text sink.

    Output is wrapped with the writer's page style: `max_width` columns, a `left_pad`
    margin, and a hanging `indent` for continuation lines. Changing the page style
    only affects output written afterwards.

    The sink is never closed by the writer. If a call fails part-way (for example,
    the sink raises), output that was already written stays written.

    Example::

        writer = HelpWriter(io.StringIO())
        writer.write_title("mytool")
        writer.write_para("Does something useful with an input file.")
        writer.write_list(ordered=False, items=["fast", "small"])
    """

    def __init__(self, sink: Optional[TextIO] = None) -> None:
        self._sink = sink if sink is not None else sys.stdout
        defaults = _settings.get_defaults()
        self._max_width = defaults["width"]
        self._left_pad = defaults["left_pad"]
        self._indent = defaults["indent"]

    # Page style.

    @property
    def max_width(self) -> int:
        return self._max_width

    @max_width.setter
    def max_width(self, max_width: int) -> None:
        if max_width < 1:
            raise InvalidArgumentError(f"max_width must be >= 1, got {max_width}.")
        if max_width <= self._indent:
            raise InvalidArgumentError(
                f"max_width ({max_width}) must be greater than the indent"
                f" ({self._indent})."
            )
        self._max_width = max_width

    @property
    def left_pad(self) -> int:
        return self._left_pad

    @left_pad.setter
    def left_pad(self, left_pad: int) -> None:
        if left_pad < 0:
            raise InvalidArgumentError(f"left_pad must be >= 0, got {left_pad}.")
        self._left_pad = left_pad

    @property
    def indent(self) -> int:
        return self._indent

    @indent.setter
    def indent(self, indent: int) -> None:
        if indent < 0:
            raise InvalidArgumentError(f"indent must be >= 0, got {indent}.")
        if indent >= self._max_width:
            raise InvalidArgumentError(
                f"indent ({indent}) must be less than max_width ({self._max_width})."
            )
        self._indent = indent

    def get_style_builder(self) -> TextStyleBuilder:
        """Returns a builder seeded with the current page style."""
        return (
            TextStyle.builder()
            .set_max_width(self._max_width)
            .set_left_pad(self._left_pad)
            .set_indent(self._indent)
        )

    @property
    def page_style(self) -> TextStyle:
        return self.get_style_builder().get()

    # Output.

    def append(self, text: str) -> None:
        """Write `text` to the sink unchanged."""
        self._sink.write(text)

    def _write_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            self._sink.write(line + "\n")

    def print_wrapped(
        self, text: Optional[str], style: Optional[TextStyle] = None
    ) -> None:
        """Wrap `text` with `style` (or the page style) and write it. Trailing
        whitespace is removed from every line."""
        queue = fmt.render_column(text, self.page_style if style is None else style)
        self._write_lines(rtrim(line) for line in queue)

    def _write_underlined(self, text: str, underline_char: str) -> None:
        style = self.page_style
        queue = fmt.render_column(text, style)
        queue.append(
            " " * style.left_pad + underline_char * min(len(text), style.max_width)
        )
        queue.append("")
        self._write_lines(rtrim(line) for line in queue)

    def write_title(self, text: Optional[str]) -> None:
        """Write a title underlined with `#`. Empty titles are ignored."""
        if text:
            self._write_underlined(text, "#")

    def write_header(self, level: int, text: Optional[str]) -> None:
        """Write a header underlined with a character that depends on `level`, which
        must be between 1 and 5. Empty headers are ignored."""
        if not 1 <= level <= len(_HEADER_UNDERLINES):
            raise InvalidArgumentError(
                f"Header level must be between 1 and {len(_HEADER_UNDERLINES)},"
                f" got {level}."
            )
        if text:
            self._write_underlined(text, _HEADER_UNDERLINES[level - 1])

    def write_para(self, text: Optional[str]) -> None:
        """Write a wrapped paragraph followed by a blank line."""
        if text:
            self.print_wrapped(text)
            self._sink.write("\n")

    def write_list(
        self, ordered: bool, items: Optional[Iterable[Optional[str]]]
    ) -> None:
        """Write a numbered (`ordered`) or bulleted list. Wrapped lines of an item are
        aligned under the item text. A blank line follows non-empty lists."""
        if items is None:
            return
        written = False
        for i, item in enumerate(items, start=1):
            prefix = f" {i}. " if ordered else " * "
            style = (
                self.get_style_builder()
                .set_indent(min(len(prefix), self._max_width - 1))
                .get()
            )
            self.print_wrapped(prefix + ("" if item is None else item), style)
            written = True
        if written:
            self._sink.write("\n")

    def write_table(self, table: TableDefinition) -> None:
        """Fit `table` to the page width and write it."""
        page_style = self.page_style
        adjusted = fmt.adjust_table_format(
            table, page_style.max_width, page_style.left_pad
        )
        self._write_lines(fmt.render_table(adjusted, page_style))
