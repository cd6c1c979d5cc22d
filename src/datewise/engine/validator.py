"""Arrangement validation and calendar resolution.

A combination (one :class:`Component` per token, in token order) survives
when:

1. it holds at most one year, exactly one month and at most one day;
2. its order is plausible.  With three tokens a leading year only allows
   ``Y-M-D``; a trailing year allows ``D-M-Y`` and ``M-D-Y``; a year in the
   middle is rejected.  Two tokens with a year are always plausible.  For
   the numeric month/day pair a value above 12 cannot be a month and forces
   the roles, while two values of at most 12 keep both readings;
3. the defaulted date (year 1970, day 1) exists in the calendar.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Sequence

from .models import EPOCH, Component, ComponentKind, Interpretation
from .tags import join_parts

__all__ = [
    "DEFAULT_YEAR",
    "DEFAULT_DAY",
    "has_valid_cardinality",
    "is_plausible_arrangement",
    "resolve_interpretation",
    "validate_combination",
]

DEFAULT_YEAR = 1970
DEFAULT_DAY = 1

_YEAR = ComponentKind.YEAR
_MONTH = ComponentKind.MONTH
_DAY = ComponentKind.DAY


def _single(components: Sequence[Component], kind: ComponentKind) -> Component | None:
    return next((c for c in components if c.kind is kind), None)


def has_valid_cardinality(components: Sequence[Component]) -> bool:
    """Return ``True`` for at most one year/day and exactly one month."""

    counts = {kind: 0 for kind in ComponentKind}
    for component in components:
        counts[component.kind] += 1
    return counts[_MONTH] == 1 and counts[_YEAR] <= 1 and counts[_DAY] <= 1


def _roles_fit_magnitudes(first: Component, second: Component) -> bool:
    # Values above 12 cannot be a month.
    roles = (first.kind, second.kind)
    if first.value > 12 and second.value <= 12:
        return roles == (_DAY, _MONTH)
    if first.value <= 12 and second.value > 12:
        return roles == (_MONTH, _DAY)
    return True


def is_plausible_arrangement(components: Sequence[Component]) -> bool:
    """Return ``True`` when the order of ``components`` can be a date."""

    kinds = tuple(c.kind for c in components)
    if len(components) == 3:
        if kinds[0] is _YEAR:
            return kinds == (_YEAR, _MONTH, _DAY)
        if kinds[2] is _YEAR:
            if kinds[:2] not in ((_DAY, _MONTH), (_MONTH, _DAY)):
                return False
            return _roles_fit_magnitudes(components[0], components[1])
        return False
    if len(components) == 2:
        if _YEAR in kinds:
            return True
        return _roles_fit_magnitudes(components[0], components[1])
    return False


def resolve_interpretation(
    components: Sequence[Component], separator: str, *, compound: bool = False
) -> Interpretation | None:
    """Build the :class:`Interpretation` for ``components`` or ``None``.

    ``compound`` marks tokens that came from the ``"<a> <b>, <c>"`` shape.

    ``None`` is returned when the defaulted year/month/day is not a real
    calendar date (February 30th, February 29th outside leap years, year 0).
    """

    year_comp = _single(components, _YEAR)
    month_comp = _single(components, _MONTH)
    day_comp = _single(components, _DAY)
    if month_comp is None:
        return None

    year = year_comp.value if year_comp is not None else DEFAULT_YEAR
    month = month_comp.value
    day = day_comp.value if day_comp is not None else DEFAULT_DAY
    try:
        resolved = dt.date(year, month, day)
    except ValueError:
        return None

    fmt = join_parts([c.format.value for c in components], separator, compound=compound)
    timestamp = dt.datetime.combine(resolved, dt.time())
    if day_comp is None:
        return Interpretation(timestamp, fmt, months=(year - EPOCH.year) * 12 + (month - 1))
    return Interpretation(timestamp, fmt, days=(resolved - EPOCH).days)


def validate_combination(
    components: Sequence[Component], separator: str, *, compound: bool = False
) -> Interpretation | None:
    """Run every check on one combination and return its interpretation."""

    if not has_valid_cardinality(components):
        return None
    if not is_plausible_arrangement(components):
        return None
    return resolve_interpretation(components, separator, compound=compound)
