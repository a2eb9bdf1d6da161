"""_fmtlib is helpwrap's internal API for laying out wrapped text.

Text blocks are wrapped into column queues, one fixed-width string per line. Tables
are rendered by wrapping every cell independently and then zipping the queues of a
row together line by line.
"""

from __future__ import annotations

import dataclasses
import itertools
import warnings
from collections import deque
from typing import Sequence

from ._strings import (
    InvalidArgumentError,
    find_first_non_whitespace,
    find_wrap_pos,
    rtrim,
)
from ._style import UNSET_MAX_WIDTH, Alignment, TableDefinition, TextStyle
from ._warnings import TableOverflowWarning


def render_column(text: str | None, style: TextStyle) -> deque[str]:
    """Wrap `text` into lines of exactly `style.left_pad + style.max_width`
    characters. Empty text produces an empty queue."""
    queue: deque[str] = deque()
    if not text:
        return queue
    if style.max_width <= style.indent:
        raise InvalidArgumentError(
            f"Column width ({style.max_width}) must be greater than the indent"
            f" ({style.indent})."
        )

    left_pad = " " * style.left_pad
    wrapped_width = style.max_width - style.indent
    pos: int | None = 0
    while pos is not None and pos < len(text):
        # The first line may use the full width; later lines are indented.
        width = style.max_width if pos == 0 else wrapped_width
        wrap_pos = find_wrap_pos(text, width, pos)
        line = rtrim(text[pos:wrap_pos])
        queue.append(left_pad + style.pad(line, add_indent=pos > 0))
        pos = find_first_non_whitespace(text, wrap_pos)
    return queue


def _blank_width(queue: Sequence[str], style: TextStyle) -> int:
    if style.max_width == UNSET_MAX_WIDTH:
        return max(map(len, queue), default=style.left_pad)
    return style.left_pad + style.max_width


def interleave(
    queues: Sequence[Sequence[str]], styles: Sequence[TextStyle], left_pad: int = 0
) -> list[str]:
    """Zip column queues into output lines.

    Line `i` is the concatenation of line `i` of every queue. Queues that are shorter
    than the tallest one are padded with blanks of their column's full width, so
    columns stay aligned.
    """
    if len(queues) == 0:
        return []
    blanks = [" " * _blank_width(q, s) for q, s in zip(queues, styles)]
    out: list[str] = []
    for parts in itertools.zip_longest(*queues):
        out.append(
            " " * left_pad
            + "".join(
                blanks[i] if part is None else part for i, part in enumerate(parts)
            )
        )
    return out


def _resize(style: TextStyle, width: int) -> TextStyle:
    # The hanging indent can take at most half of a shrunk column.
    return dataclasses.replace(
        style, max_width=width, indent=min(style.indent, width // 2)
    )


def _shrink_widths(
    widths: dict[int, int], min_widths: dict[int, int], available: int
) -> dict[int, int]:
    """Proportionally shrink columns so that their widths sum to `available`.

    Integer arithmetic only. Columns that would drop below their minimum are pinned to
    it and the remaining room is shared again among the others. The rounding remainder
    goes to the widest unpinned column (first one on ties).
    """
    out: dict[int, int] = {}
    pool = list(widths.keys())
    room = available
    while len(pool) > 0:
        total = sum(widths[i] for i in pool)
        if total == 0:
            break
        pinned = [
            i for i in pool if room <= 0 or widths[i] * room // total < min_widths[i]
        ]
        if len(pinned) == 0:
            break
        for i in pinned:
            out[i] = min_widths[i]
            room -= min_widths[i]
            pool.remove(i)

    if len(pool) > 0:
        total = sum(widths[i] for i in pool)
        for i in pool:
            out[i] = widths[i] * room // total if total > 0 else min_widths[i]
        leftover = available - sum(out.values())
        if leftover > 0:
            widest = max(pool, key=lambda i: out[i])
            out[widest] += leftover
    return out


def adjust_table_format(
    table: TableDefinition, page_width: int, page_left_pad: int = 0
) -> TableDefinition:
    """Resolve column widths for a table rendered on a page `page_width` wide.

    Column widths first grow to fit the header and the longest unwrapped cell. If the
    table is then wider than the page, SCALED columns are shrunk proportionally; FIXED
    columns keep their width. A new table definition is returned.
    """
    styles: list[TextStyle] = []
    for i, style in enumerate(table.column_styles):
        header_len = len(table.headers[i])
        max_width = style.max_width
        if max_width == UNSET_MAX_WIDTH or max_width < header_len:
            max_width = header_len
        max_width = max(
            [max_width, style.min_width, *(len(row[i]) for row in table.rows)]
        )
        styles.append(
            dataclasses.replace(
                style,
                min_width=max(style.min_width, header_len),
                max_width=max_width,
            )
        )

    available = page_width - page_left_pad
    scaled_widths: dict[int, int] = {}
    for i, style in enumerate(styles):
        available -= style.left_pad
        if style.is_scalable:
            scaled_widths[i] = style.max_width
        else:
            available -= style.max_width

    if sum(scaled_widths.values()) > available:
        new_widths = _shrink_widths(
            scaled_widths,
            {i: max(styles[i].min_width, 1) for i in scaled_widths},
            available,
        )
        for i, width in new_widths.items():
            styles[i] = _resize(styles[i], width)

    # Columns sized to short content may be narrower than their configured indent.
    for i, style in enumerate(styles):
        if style.max_width <= style.indent:
            styles[i] = _resize(style, style.max_width)

    total_width = page_left_pad + sum(s.left_pad + s.max_width for s in styles)
    if total_width > page_width:
        warnings.warn(
            f"Table needs {total_width} characters but the page is only"
            f" {page_width} wide; fixed columns and minimum widths were kept.",
            category=TableOverflowWarning,
        )

    return dataclasses.replace(table, column_styles=tuple(styles))


def render_row(
    cells: Sequence[str], styles: Sequence[TextStyle], left_pad: int = 0
) -> list[str]:
    """Wrap every cell independently, then zip the column queues together."""
    queues = [render_column(cell, style) for cell, style in zip(cells, styles)]
    return interleave(queues, styles, left_pad)


def render_table(table: TableDefinition, page_style: TextStyle) -> list[str]:
    """Render a table whose widths were resolved by `adjust_table_format()`.

    The caption is wrapped with the page style and followed by a blank line. Headers
    are centered. A blank line always follows the last row.
    """
    out: list[str] = []
    if table.caption:
        out.extend(rtrim(line) for line in render_column(table.caption, page_style))
        out.append("")

    header_styles = [
        dataclasses.replace(style, alignment=Alignment.CENTER)
        for style in table.column_styles
    ]
    out.extend(render_row(table.headers, header_styles, page_style.left_pad))
    for row in table.rows:
        out.extend(render_row(row, table.column_styles, page_style.left_pad))
    out.append("")
    return out
