"""Wrap and lay out help text for command-line programs."""

__version__ = "0.1.0"


from ._fmtlib import adjust_table_format as adjust_table_format
from ._fmtlib import render_column as render_column
from ._fmtlib import render_table as render_table
from ._help_writer import HelpWriter as HelpWriter
from ._options_table import options_table as options_table
from ._settings import set_defaults as set_defaults
from ._strings import InvalidArgumentError as InvalidArgumentError
from ._strings import find_first_non_whitespace as find_first_non_whitespace
from ._strings import find_wrap_pos as find_wrap_pos
from ._strings import is_break_char as is_break_char
from ._style import UNSET_MAX_WIDTH as UNSET_MAX_WIDTH
from ._style import Alignment as Alignment
from ._style import Scaling as Scaling
from ._style import TableDefinition as TableDefinition
from ._style import TextStyle as TextStyle
from ._style import TextStyleBuilder as TextStyleBuilder
from ._warnings import HelpWrapWarning as HelpWrapWarning
from ._warnings import TableOverflowWarning as TableOverflowWarning
