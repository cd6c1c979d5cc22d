"""Value records produced by the date engine.

A :class:`Component` is one role (year, month or day) that a single token of
the input can play.  An :class:`Interpretation` is one fully validated parse
result: the resolved calendar date plus the format string reproducing how the
input was written.  Both are immutable and created fresh per call.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .tags import FormatTag

__all__ = ["ComponentKind", "Component", "Interpretation", "EPOCH"]

EPOCH = dt.date(1970, 1, 1)


class ComponentKind(Enum):
    """Role a token plays inside a date string."""

    YEAR = "Y"
    MONTH = "M"
    DAY = "D"


@dataclass(slots=True, frozen=True)
class Component:
    """One classified token.

    ``format`` is the tag describing how the token was written, e.g.
    ``FormatTag.M2`` for a zero-padded numeric month.
    """

    kind: ComponentKind
    value: int
    format: FormatTag


@dataclass(slots=True, frozen=True)
class Interpretation:
    """One reading of a date string.

    ``timestamp`` is local midnight of the resolved date.  Exactly one of
    ``months`` (months since 1970-01, present when the input had no day) and
    ``days`` (days since 1970-01-01) is set.
    """

    timestamp: dt.datetime
    format: str
    months: int | None = None
    days: int | None = None

    def __post_init__(self) -> None:  # noqa: D401 - simple validation
        if (self.months is None) == (self.days is None):
            raise ValueError("exactly one of 'months' and 'days' must be set")

    @property
    def date(self) -> dt.date:
        """Return the calendar date of the interpretation."""

        return self.timestamp.date()

    @property
    def epoch_ms(self) -> int:
        """Return the local-time Unix timestamp in milliseconds."""

        return round(self.timestamp.timestamp() * 1000)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping of the interpretation."""

        data: dict[str, Any] = {
            "format": self.format,
            "timestamp": self.timestamp.isoformat(),
            "date": self.date.isoformat(),
        }
        if self.months is not None:
            data["months"] = self.months
        else:
            data["days"] = self.days
        return data
