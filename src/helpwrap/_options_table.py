"""Standard table layout for listing command-line options."""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

from . import _settings
from ._style import Alignment, Scaling, TableDefinition, TextStyle

OptionRow = Tuple[str, Optional[str], Optional[str]]
"""Display strings for one option: `(option_text, since, description)`."""


def options_table(
    rows: Iterable[OptionRow], show_since: bool = True
) -> TableDefinition:
    """Build the table used to list options in a help message.

    The "Options" column keeps its width; the optional "Since" column (centered) and
    the "Description" column shrink when the page is narrow.

    Args:
        rows: Display strings for each option. The option text is usually something
            like `-f,--file <FILE>`.
        show_since: Include the "Since" column.

    Returns:
        A table definition with an empty caption.
    """
    defaults = _settings.get_defaults()
    builder = (
        TextStyle.builder()
        .set_alignment(Alignment.LEFT)
        .set_indent(defaults["left_pad"])
        .set_scaling(Scaling.FIXED)
    )
    styles = [builder.get()]
    builder.set_scaling(Scaling.SCALED).set_left_pad(defaults["column_spacing"])
    if show_since:
        styles.append(builder.set_alignment(Alignment.CENTER).get())
    styles.append(builder.set_alignment(Alignment.LEFT).get())

    table_rows = []
    for option_text, since, description in rows:
        row = [option_text]
        if show_since:
            row.append("" if since is None else since)
        row.append("" if description is None else description)
        table_rows.append(row)

    headers = ["Options", "Since", "Description"]
    if not show_since:
        headers.remove("Since")
    return TableDefinition.from_data("", styles, headers, table_rows)
