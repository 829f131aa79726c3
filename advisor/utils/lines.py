"""
Line-quantity helpers — turn the storefront's bucket strings into a line count.
"""

import math
import re

_LEADING_INT = re.compile(r"^\s*(\d+)")


def _leading_int(text: str) -> int:
    """Leading integer of a string, 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_line_quantity(quantity: str) -> int:
    """
    Representative line count for a quantity bucket.

    "1" -> 1, "3-5" -> 4 (floor of the midpoint), "6+" -> 7 and "20+" -> 26 (base plus 30%),
    anything unparseable -> 1.
    """
    quantity = (quantity or "").strip()
    if "-" in quantity:
        low, _, high = quantity.partition("-")
        try:
            return math.floor((int(low) + int(high)) / 2)
        except ValueError:
            return 1
    if "+" in quantity:
        base = _leading_int(quantity)
        return base + math.floor(base * 0.3)
    return _leading_int(quantity) or 1
