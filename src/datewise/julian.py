"""Julian Day Number conversion for proleptic Gregorian dates."""

from __future__ import annotations

from datetime import date

from .utils.errors import DateOutOfRangeError

__all__ = ["to_julian_day", "from_julian_day"]

# JDN of 0001-01-01, whose proleptic ordinal is 1.
_ORDINAL_OFFSET = 1721425


def to_julian_day(value: date) -> int:
    """Return the Julian Day Number of ``value`` (2000-01-01 is 2451545)."""

    return value.toordinal() + _ORDINAL_OFFSET


def from_julian_day(julian_day: int) -> date:
    """Return the calendar date for ``julian_day``."""

    try:
        return date.fromordinal(julian_day - _ORDINAL_OFFSET)
    except (ValueError, OverflowError) as exc:
        raise DateOutOfRangeError(f"Julian day {julian_day} is outside the supported range") from exc
