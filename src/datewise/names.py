"""Calendar name service.

The date engine never reads month or weekday names from module globals.  It
asks a :class:`CalendarNames` implementation instead, which keeps parsing and
formatting testable with fake locales.  Months are numbered ``1``–``12`` and
weekdays ``0``–``6`` with ``0`` being Sunday.

Only English tables ship with the package.  Other locales can be plugged in
with :func:`register_calendar_names`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Protocol, runtime_checkable

from .utils.errors import UnsupportedLocaleError

__all__ = [
    "NameForm",
    "CalendarNames",
    "EnglishCalendarNames",
    "ENGLISH",
    "register_calendar_names",
    "get_calendar_names",
]

NameForm = Literal["long", "short"]


@runtime_checkable
class CalendarNames(Protocol):
    """Read-only lookup of month and weekday names."""

    def month_name(self, month: int, form: NameForm = "long") -> str:
        """Return the name of ``month`` (``1``–``12``)."""

        ...

    def month_number(self, name: str) -> int | None:
        """Return the month number for ``name`` or ``None``."""

        ...

    def weekday_name(self, index: int, form: NameForm = "long") -> str:
        """Return the name of weekday ``index`` (``0`` = Sunday)."""

        ...

    def weekday_number(self, name: str) -> int | None:
        """Return the weekday index for ``name`` or ``None``."""

        ...


def _lookup(name: str, long_names: tuple[str, ...], short_names: tuple[str, ...]) -> int | None:
    needle = name.strip().lower()
    if not needle:
        return None
    for idx, candidate in enumerate(long_names):
        if candidate.lower() == needle:
            return idx
    needle = needle.rstrip(".")
    for idx, candidate in enumerate(short_names):
        if candidate.lower().rstrip(".") == needle:
            return idx
    return None


@dataclass(slots=True, frozen=True)
class EnglishCalendarNames:
    """Fixed English month and weekday tables."""

    months_long: tuple[str, ...] = (
        "January",
        "February",
        "March",
        "April",
        "May",
        "June",
        "July",
        "August",
        "September",
        "October",
        "November",
        "December",
    )
    months_short: tuple[str, ...] = (
        "Jan",
        "Feb",
        "Mar",
        "Apr",
        "May",
        "Jun",
        "Jul",
        "Aug",
        "Sep",
        "Oct",
        "Nov",
        "Dec",
    )
    weekdays_long: tuple[str, ...] = (
        "Sunday",
        "Monday",
        "Tuesday",
        "Wednesday",
        "Thursday",
        "Friday",
        "Saturday",
    )
    weekdays_short: tuple[str, ...] = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

    def month_name(self, month: int, form: NameForm = "long") -> str:
        if not isinstance(month, int) or not 1 <= month <= 12:
            raise ValueError("Month number must be an integer between 1 and 12")
        table = self.months_long if form == "long" else self.months_short
        return table[month - 1]

    def month_number(self, name: str) -> int | None:
        idx = _lookup(name, self.months_long, self.months_short)
        return None if idx is None else idx + 1

    def weekday_name(self, index: int, form: NameForm = "long") -> str:
        if not isinstance(index, int) or not 0 <= index <= 6:
            raise ValueError("Day number must be an integer between 0 and 6")
        table = self.weekdays_long if form == "long" else self.weekdays_short
        return table[index]

    def weekday_number(self, name: str) -> int | None:
        return _lookup(name, self.weekdays_long, self.weekdays_short)


ENGLISH = EnglishCalendarNames()

_REGISTRY: dict[str, CalendarNames] = {"en": ENGLISH}


def _normalize_locale(locale: str) -> str:
    return locale.strip().replace("_", "-").lower()


def register_calendar_names(locale: str, names: CalendarNames) -> None:
    """Register ``names`` for ``locale``.

    Matching is case-insensitive and treats ``_`` and ``-`` alike.  A bare
    language code (``"fr"``) also serves regional variants (``"fr-CA"``)
    unless a more specific entry exists.
    """

    _REGISTRY[_normalize_locale(locale)] = names


def get_calendar_names(locale: str = "en") -> CalendarNames:
    """Return the calendar name service registered for ``locale``.

    Raises
    ------
    UnsupportedLocaleError
        If neither ``locale`` nor its language code is registered.
    """

    key = _normalize_locale(locale)
    names = _REGISTRY.get(key) or _REGISTRY.get(key.split("-", 1)[0])
    if names is None:
        raise UnsupportedLocaleError(f"No calendar names registered for locale '{locale}'")
    return names
