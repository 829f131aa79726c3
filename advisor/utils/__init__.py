"""Shared helpers for line quantities and prices."""

from .lines import parse_line_quantity
from .money import format_brl

__all__ = [
    "parse_line_quantity",
    "format_brl",
]
