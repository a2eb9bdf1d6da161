"""Warnings issued while laying out help text.

Layout problems that still produce usable output are reported as warnings rather
than errors. Filter them by category:

>>> import warnings
>>> warnings.filterwarnings("ignore", category=HelpWrapWarning)
"""


class HelpWrapWarning(UserWarning):
    """Base category for every warning issued by helpwrap."""


class TableOverflowWarning(HelpWrapWarning):
    """A table is wider than the page after shrinking its SCALED columns. FIXED
    columns and minimum widths are kept, so the rendered lines overflow."""
