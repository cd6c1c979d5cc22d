"""Ambiguous date string parsing and the matching formatter.

Data flows one way for parsing: raw string, separator trial, per-token
classification, Cartesian product, arrangement and calendar validation,
deduplication and ordering.  Formatting reverses it: a date plus a format
string is rendered tag by tag and reassembled.
"""

from .classifier import classify_token
from .combinations import generate_combinations
from .formatter import format_date_string, format_day_string, format_month_string
from .models import Component, ComponentKind, Interpretation
from .ordering import order_interpretations
from .parser import parse_date_string
from .tags import SEPARATORS, FormatTag
from .validator import validate_combination

__all__ = [
    "SEPARATORS",
    "Component",
    "ComponentKind",
    "FormatTag",
    "Interpretation",
    "classify_token",
    "format_date_string",
    "format_day_string",
    "format_month_string",
    "generate_combinations",
    "order_interpretations",
    "parse_date_string",
    "validate_combination",
]
