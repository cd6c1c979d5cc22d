"""Per-token classification.

Each token is judged on its literal form only.  A token may satisfy several
tags at once (``"05"`` is ``M2``, ``M1``, ``D2`` and ``D1``); all of them are
returned so that every format string able to produce the literal is
considered.  Cross-token consistency is left to :mod:`.validator`.
"""

from __future__ import annotations

from ..names import ENGLISH, CalendarNames
from .models import Component
from .tags import FormatTag

__all__ = ["classify_token"]


def classify_token(token: str, names: CalendarNames = ENGLISH) -> list[Component]:
    """Return every :class:`Component` ``token`` can stand for.

    ``token`` is stripped first.  The result follows :class:`FormatTag`
    order: year, numeric months, named months, then days.  An empty list
    means the token cannot be part of a date.
    """

    token = token.strip()
    components: list[Component] = []
    for tag in FormatTag:
        value = tag.parse(token, names)
        if value is not None:
            components.append(Component(tag.kind, value, tag))
    return components
