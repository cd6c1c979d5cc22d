"""Rendering dates back into text from a format string.

This is the inverse of :func:`~datewise.engine.parser.parse_date_string`::

    format_date_string(date(2023, 12, 25), "Ms D1, Y")   # 'Dec 25, 2023'
    format_day_string(0, "D2/M2/Y")                      # '01/01/1970'
    format_month_string(647, "Y-M2")                     # '2023-12'

Tags that are absent from the format are simply not rendered, so
``"Y-M1"`` writes a year-month and ``"M1-D1"`` a month-day.
"""

from __future__ import annotations

import datetime as dt

from ..names import ENGLISH, CalendarNames
from ..utils.errors import DateOutOfRangeError, InvalidFormatError
from .models import EPOCH, ComponentKind
from .tags import decompose_format, is_compound, join_parts, resolve_tag

__all__ = ["TemporalValue", "format_date_string", "format_day_string", "format_month_string"]

TemporalValue = dt.datetime | dt.date | int | float


def _to_date(value: TemporalValue) -> dt.date:
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    # Milliseconds since the epoch, read in local time.
    try:
        return dt.datetime.fromtimestamp(value / 1000).date()
    except (OverflowError, OSError, ValueError) as exc:
        raise DateOutOfRangeError(f"timestamp {value!r} is outside the supported range") from exc


def format_date_string(
    timestamp: TemporalValue, format: str, *, names: CalendarNames = ENGLISH
) -> str:
    """Render ``timestamp`` according to ``format``.

    ``timestamp`` may be a :class:`~datetime.datetime`, a
    :class:`~datetime.date` or a number of milliseconds since the Unix epoch.

    Raises
    ------
    InvalidFormatError
        If ``format`` has no recognized separator or an unknown tag.
    """

    when = _to_date(timestamp)
    separator, parts = decompose_format(format)
    values = {
        ComponentKind.YEAR: when.year,
        ComponentKind.MONTH: when.month,
        ComponentKind.DAY: when.day,
    }
    rendered = []
    for part in parts:
        tag = resolve_tag(part, format)
        rendered.append(tag.render(values[tag.kind], names))
    return join_parts(rendered, separator, compound=is_compound(format))


def format_day_string(days: int, format: str, *, names: CalendarNames = ENGLISH) -> str:
    """Render the date ``days`` after 1970-01-01 according to ``format``.

    ``format`` must contain a day tag (``D1`` or ``D2``).
    """

    _, parts = decompose_format(format)
    if not any(part.startswith("D") for part in parts):
        raise InvalidFormatError(
            f'Invalid format for day string: format "{format}" must contain day component (D1 or D2)',
            format=format,
        )
    try:
        when = EPOCH + dt.timedelta(days=days)
    except OverflowError as exc:
        raise DateOutOfRangeError(f"day count {days} is outside the supported range") from exc
    return format_date_string(when, format, names=names)


def format_month_string(months: int, format: str, *, names: CalendarNames = ENGLISH) -> str:
    """Render the month ``months`` after 1970-01 according to ``format``.

    Only ``Y`` and month tags are allowed; no day is ever invented.
    """

    separator, parts = decompose_format(format)
    for part in parts:
        if part.startswith("D"):
            raise InvalidFormatError(
                f'Invalid format for month string: day component "{part}" not allowed',
                format=format,
            )
    tags = [resolve_tag(part, format) for part in parts]

    year = EPOCH.year + months // 12
    month = 1 + months % 12
    if not dt.MINYEAR <= year <= dt.MAXYEAR:
        raise DateOutOfRangeError(f"month count {months} is outside the supported range")
    rendered = [tag.render(year if tag.kind is ComponentKind.YEAR else month, names) for tag in tags]
    return join_parts(rendered, separator, compound=is_compound(format))
