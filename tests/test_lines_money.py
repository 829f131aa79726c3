"""
Line Quantity and Price Formatting Tests

Run:
----
    pytest tests/test_lines_money.py -v
"""

import pytest

from advisor.utils import format_brl, parse_line_quantity


class TestParseLineQuantity:
    @pytest.mark.parametrize(
        "quantity, expected",
        [
            ("1", 1),
            ("2", 2),
            ("3-5", 4),
            ("2-3", 2),
            ("6+", 7),
            ("20+", 26),
            ("10 linhas", 10),
            ("", 1),
            ("muitas", 1),
            (None, 1),
        ],
    )
    def test_buckets(self, quantity, expected):
        assert parse_line_quantity(quantity) == expected


class TestFormatBrl:
    @pytest.mark.parametrize(
        "cents, expected",
        [
            (0, "R$ 0,00"),
            (12990, "R$ 129,90"),
            (123456, "R$ 1.234,56"),
            (100000000, "R$ 1.000.000,00"),
            (-550, "-R$ 5,50"),
        ],
    )
    def test_format(self, cents, expected):
        assert format_brl(cents) == expected
