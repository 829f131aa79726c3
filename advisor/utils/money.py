"""
Price helpers — catalog prices are integer cents in BRL.
"""


def format_brl(cents: int) -> str:
    """Format cents as Brazilian reais, e.g. 12990 -> "R$ 129,90"."""
    sign = "-" if cents < 0 else ""
    text = f"{abs(cents) / 100:,.2f}"
    text = text.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}R$ {text}"
