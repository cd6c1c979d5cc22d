"""Ambiguous date string parsing.

:func:`parse_date_string` returns *every* plausible reading of its input
rather than guessing one::

    >>> [i.format for i in parse_date_string("05/01")][:2]
    ['M2/D2', 'M2/D1']

The input is split once per separator trial.  Splits with two or three parts
are classified token by token, expanded into the Cartesian product of
candidates, validated, then deduplicated and ordered.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..names import ENGLISH, CalendarNames
from ..utils.errors import UnparseableDateError
from ..utils.logging import get_logger
from .classifier import classify_token
from .combinations import generate_combinations
from .models import Interpretation
from .ordering import order_interpretations
from .tags import COMMA_SPACE, SEPARATORS, is_compound, split_on
from .validator import validate_combination

__all__ = ["parse_date_string", "interpret_split"]

log = get_logger(__name__)

MIN_PARTS = 2
MAX_PARTS = 3


def interpret_split(
    parts: Sequence[str],
    separator: str,
    names: CalendarNames = ENGLISH,
    *,
    compound: bool = False,
) -> list[Interpretation]:
    """Return the valid interpretations of one separator trial.

    An empty list is returned when the split has the wrong number of parts
    or when any part matches no component at all.
    """

    if not MIN_PARTS <= len(parts) <= MAX_PARTS:
        return []
    candidates = [classify_token(part, names) for part in parts]
    if not all(candidates):
        return []
    found: list[Interpretation] = []
    for combination in generate_combinations(candidates):
        interp = validate_combination(combination, separator, compound=compound)
        if interp is not None:
            found.append(interp)
    return found


def parse_date_string(
    text: str,
    *,
    names: CalendarNames = ENGLISH,
    separators: Sequence[str] = SEPARATORS,
) -> list[Interpretation]:
    """Return every interpretation of ``text``, best ranked first.

    Parameters
    ----------
    text:
        Date string such as ``"2023-01-05"`` or ``"Dec 25, 2023"``.  Leading
        and trailing whitespace is ignored.
    names:
        Calendar name service used for named months.
    separators:
        Separators to try, in order.  Defaults to :data:`SEPARATORS`.

    Raises
    ------
    UnparseableDateError
        If no separator trial yields a calendar-valid interpretation.
    """

    unknown = [s for s in separators if s not in SEPARATORS]
    if unknown:
        raise ValueError(f"unsupported separator(s): {unknown!r}")

    trimmed = text.strip()
    found: list[Interpretation] = []
    for separator in separators:
        parts = split_on(trimmed, separator)
        compound = separator == COMMA_SPACE and is_compound(trimmed)
        trial = interpret_split(parts, separator, names, compound=compound)
        if trial:
            log.debug("separator %r split %r into %d interpretation(s)", separator, parts, len(trial))
        found.extend(trial)

    result = order_interpretations(found)
    if not result:
        raise UnparseableDateError(text)
    log.debug("parsed %r into %d interpretation(s)", text, len(result))
    return result
