"""Datewise: every reading of an ambiguous date string, and the way back.

:func:`parse_date_string` enumerates each grammatically valid interpretation
of a human-written date such as ``"01/05/2023"`` together with a compact
format string (``"M2/D2/Y"``, ``"D2/M2/Y"``, ...).  The ``format_*`` functions
render a date, day count or month count back through such a format string.
The command line interface lives in :mod:`datewise.cli`.
"""

from .engine import (
    SEPARATORS,
    Component,
    ComponentKind,
    FormatTag,
    Interpretation,
    format_date_string,
    format_day_string,
    format_month_string,
    parse_date_string,
)
from .julian import from_julian_day, to_julian_day
from .names import CalendarNames, EnglishCalendarNames, get_calendar_names, register_calendar_names
from .utils.errors import (
    DateOutOfRangeError,
    DateStringError,
    InvalidFormatError,
    UnparseableDateError,
    UnsupportedLocaleError,
)

__version__ = "0.1.0"

__all__ = [
    "SEPARATORS",
    "CalendarNames",
    "Component",
    "ComponentKind",
    "DateOutOfRangeError",
    "DateStringError",
    "EnglishCalendarNames",
    "FormatTag",
    "Interpretation",
    "InvalidFormatError",
    "UnparseableDateError",
    "UnsupportedLocaleError",
    "__version__",
    "format_date_string",
    "format_day_string",
    "format_month_string",
    "from_julian_day",
    "get_calendar_names",
    "parse_date_string",
    "register_calendar_names",
    "to_julian_day",
]
