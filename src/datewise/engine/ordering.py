"""Deduplication and deterministic ordering of interpretations.

Interpretations are ranked by a ``(family, separator, specificity)`` key:

* family – the format collapsed to ``Y``/``M``/``D`` with separators kept.
  ``Y-M-D`` (1) < ``D-M-Y`` (2) < ``M-D-Y`` (3) < ``Y-M`` (4) < ``M-Y`` (5)
  < ``M-D`` (6) < ``D-M`` (7) for the separators ``-``, ``.``, ``/`` and
  ``,``; then ``M Y`` (8) and ``M D, Y`` (11); anything else is 999.
* separator – ``-`` < ``.`` < ``/`` < ``,`` < space < comma-space.
* specificity – zero-padded tags (``M2``/``D2``) before flexible ones.

Sorting is stable, so equal keys keep discovery order.
"""

from __future__ import annotations

from collections.abc import Iterable

from .models import Interpretation
from .tags import COMMA_SPACE, decompose_format, is_compound, join_parts, resolve_tag

__all__ = [
    "FAMILY_PRIORITIES",
    "SEPARATOR_PRIORITIES",
    "UNRANKED",
    "family_pattern",
    "format_sort_key",
    "deduplicate",
    "order_interpretations",
]

UNRANKED = 999

_FAMILIES: tuple[tuple[str, ...], ...] = (
    ("Y", "M", "D"),
    ("D", "M", "Y"),
    ("M", "D", "Y"),
    ("Y", "M"),
    ("M", "Y"),
    ("M", "D"),
    ("D", "M"),
)

FAMILY_PRIORITIES: dict[str, int] = {
    sep.join(family): rank
    for rank, family in enumerate(_FAMILIES, start=1)
    for sep in ("-", ".", "/", ",")
}
FAMILY_PRIORITIES.update({"M Y": 8, "M D, Y": 11})

SEPARATOR_PRIORITIES: dict[str, int] = {"-": 0, ".": 1, "/": 2, ",": 3, " ": 4, COMMA_SPACE: 5}


def family_pattern(fmt: str) -> str:
    """Return ``fmt`` with every tag collapsed to its kind letter."""

    separator, parts = decompose_format(fmt)
    kinds = [resolve_tag(part, fmt).kind.value for part in parts]
    return join_parts(kinds, separator, compound=is_compound(fmt))


def format_sort_key(fmt: str) -> tuple[int, int, int]:
    """Return the ordering key of format string ``fmt``."""

    separator, parts = decompose_format(fmt)
    tags = [resolve_tag(part, fmt) for part in parts]
    family = FAMILY_PRIORITIES.get(family_pattern(fmt), UNRANKED)
    specificity = sum(t.flexible for t in tags) - sum(t.zero_padded for t in tags)
    return family, SEPARATOR_PRIORITIES[separator], specificity


def deduplicate(interpretations: Iterable[Interpretation]) -> list[Interpretation]:
    """Drop repeated ``(format, timestamp)`` pairs, keeping first occurrences."""

    seen: set[tuple[str, object]] = set()
    unique: list[Interpretation] = []
    for interp in interpretations:
        key = (interp.format, interp.timestamp)
        if key not in seen:
            seen.add(key)
            unique.append(interp)
    return unique


def order_interpretations(interpretations: Iterable[Interpretation]) -> list[Interpretation]:
    """Return deduplicated ``interpretations`` in ranking order."""

    return sorted(deduplicate(interpretations), key=lambda i: format_sort_key(i.format))
