"""Cartesian product of per-token candidates."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import product

from .models import Component

__all__ = ["generate_combinations"]


def generate_combinations(candidates: Sequence[Sequence[Component]]) -> list[tuple[Component, ...]]:
    """Return every way of picking one component per token.

    Order is lexicographic over the inputs: the first token varies slowest.
    No tokens yields no combinations.
    """

    if not candidates:
        return []
    return list(product(*candidates))
