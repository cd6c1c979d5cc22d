"""Format tags and the format-string grammar.

A format string is a sequence of tags joined by one separator::

    Y-M2-D2      2023-01-05
    D1.M1.Y      5.1.2023
    Ms D1, Y     Jan 5, 2023

Tags (in classifier priority order)::

    Y                    four digit year
    M2 / M1              numeric month, zero-padded / flexible
    Mf / Mfl / Mfu       full month name, Title / lower / UPPER
    Ms / Msl / Msu       short month name, Title / lower / UPPER
    D2 / D1              numeric day, zero-padded / flexible

Every :class:`FormatTag` owns both its parse predicate and its renderer so the
classifier and the formatter cannot drift apart.  Separators are tried in the
order of :data:`SEPARATORS`; ``", "`` is the compound separator of the
``"<month> <day>, <year>"`` shape.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Literal

from ..names import ENGLISH, CalendarNames, NameForm
from ..utils.errors import InvalidFormatError
from .models import ComponentKind

__all__ = [
    "SEPARATORS",
    "COMMA_SPACE",
    "FormatTag",
    "is_compound",
    "split_on",
    "join_parts",
    "decompose_format",
    "resolve_tag",
]

SEPARATORS: tuple[str, ...] = ("-", ".", "/", ",", ", ", " ")
COMMA_SPACE = ", "

Casing = Literal["title", "lower", "upper"]


class FormatTag(Enum):
    """Closed set of component tags."""

    Y = "Y"
    M2 = "M2"
    M1 = "M1"
    MF = "Mf"
    MFL = "Mfl"
    MFU = "Mfu"
    MS = "Ms"
    MSL = "Msl"
    MSU = "Msu"
    D2 = "D2"
    D1 = "D1"

    @property
    def kind(self) -> ComponentKind:
        return ComponentKind(self.value[0])

    @property
    def zero_padded(self) -> bool:
        """``True`` for ``M2``/``D2``."""

        return self in (FormatTag.M2, FormatTag.D2)

    @property
    def flexible(self) -> bool:
        """``True`` for ``M1``/``D1``."""

        return self in (FormatTag.M1, FormatTag.D1)

    def parse(self, token: str, names: CalendarNames = ENGLISH) -> int | None:
        """Return the value ``token`` denotes under this tag, or ``None``."""

        return _SPECS[self].parse(token, names)

    def render(self, value: int, names: CalendarNames = ENGLISH) -> str:
        """Return ``value`` written the way this tag describes."""

        return _SPECS[self].render(value, names)


# ---------------------------------------------------------------------------
# Tag specifications
# ---------------------------------------------------------------------------


@dataclass(slots=True, frozen=True)
class _NumericSpec:
    pattern: re.Pattern[str]
    width: int
    low: int
    high: int

    def parse(self, token: str, names: CalendarNames) -> int | None:
        if not self.pattern.fullmatch(token):
            return None
        value = int(token)
        if not self.low <= value <= self.high:
            return None
        return value

    def render(self, value: int, names: CalendarNames) -> str:
        return f"{value:0{self.width}d}"


_CASE_CHECKS = {
    "title": lambda s: s[:1].isupper() and s[1:].islower(),
    "lower": str.islower,
    "upper": str.isupper,
}

_CASE_APPLY = {
    "title": lambda s: s[:1].upper() + s[1:].lower(),
    "lower": str.lower,
    "upper": str.upper,
}


@dataclass(slots=True, frozen=True)
class _NamedSpec:
    form: NameForm
    casing: Casing

    def _shape_ok(self, token: str) -> bool:
        if not token.isalpha():
            return False
        if self.form == "short" and len(token) != 3:
            return False
        if self.form == "long" and len(token) < 4:
            return False
        return bool(_CASE_CHECKS[self.casing](token))

    def parse(self, token: str, names: CalendarNames) -> int | None:
        if not self._shape_ok(token):
            return None
        return names.month_number(token)

    def render(self, value: int, names: CalendarNames) -> str:
        return str(_CASE_APPLY[self.casing](names.month_name(value, self.form)))


_SPECS: dict[FormatTag, _NumericSpec | _NamedSpec] = {
    FormatTag.Y: _NumericSpec(re.compile(r"[0-9]{4}"), 4, 0, 9999),
    FormatTag.M2: _NumericSpec(re.compile(r"0[1-9]|1[0-2]"), 2, 1, 12),
    FormatTag.M1: _NumericSpec(re.compile(r"0?[1-9]|1[0-2]"), 1, 1, 12),
    FormatTag.MF: _NamedSpec("long", "title"),
    FormatTag.MFL: _NamedSpec("long", "lower"),
    FormatTag.MFU: _NamedSpec("long", "upper"),
    FormatTag.MS: _NamedSpec("short", "title"),
    FormatTag.MSL: _NamedSpec("short", "lower"),
    FormatTag.MSU: _NamedSpec("short", "upper"),
    FormatTag.D2: _NumericSpec(re.compile(r"0[1-9]|[12][0-9]|3[01]"), 2, 1, 31),
    FormatTag.D1: _NumericSpec(re.compile(r"0?[1-9]|[12][0-9]|3[01]"), 1, 1, 31),
}


# ---------------------------------------------------------------------------
# Format-string grammar
# ---------------------------------------------------------------------------


def is_compound(text: str) -> bool:
    """Return ``True`` when ``text`` has the ``"<a> <b>, <c>"`` shape.

    That is one ``", "`` whose head holds exactly one space.  Text with
    several ``", "`` (``"2023, 12, 25"``) is a plain comma-space split.
    """

    parts = text.split(COMMA_SPACE)
    return len(parts) == 2 and len(parts[0].split(" ")) == 2


def split_on(text: str, separator: str) -> list[str]:
    """Split ``text`` on ``separator``.

    For ``", "`` a compound text (see :func:`is_compound`) is expanded to
    three parts, turning ``"Dec 25, 2023"`` into ``["Dec", "25", "2023"]``.
    """

    if separator != COMMA_SPACE:
        return text.split(separator)
    if is_compound(text):
        head, tail = text.split(COMMA_SPACE)
        return [*head.split(" "), tail]
    return text.split(COMMA_SPACE)


def join_parts(parts: list[str], separator: str, *, compound: bool = False) -> str:
    """Inverse of :func:`split_on`.

    ``compound`` rebuilds the ``"<a> <b>, <c>"`` shape from three parts.
    """

    if compound and separator == COMMA_SPACE and len(parts) == 3:
        return f"{parts[0]} {parts[1]}, {parts[2]}"
    return separator.join(parts)


def decompose_format(fmt: str) -> tuple[str, list[str]]:
    """Return the separator of ``fmt`` and its trimmed raw parts.

    ``", "`` wins when present; otherwise the first separator of
    :data:`SEPARATORS` found in ``fmt`` is used.
    """

    if COMMA_SPACE in fmt:
        separator = COMMA_SPACE
    else:
        separator = next((s for s in SEPARATORS if s != COMMA_SPACE and s in fmt), "")
        if not separator:
            raise InvalidFormatError(
                f'Invalid format: no recognized separator found in "{fmt}"', format=fmt
            )
    return separator, [part.strip() for part in split_on(fmt, separator)]


def resolve_tag(part: str, fmt: str) -> FormatTag:
    """Return the :class:`FormatTag` spelled ``part`` inside ``fmt``."""

    try:
        return FormatTag(part)
    except ValueError:
        raise InvalidFormatError(f'Invalid format component: "{part}"', format=fmt) from None
