# tests/test_formatting.py
from datetime import date

from ct_utils.formatting import format_currency, format_date, format_preview
from parser.smart_input import parse_transaction_input

NBSP = "\u00a0"


def test_currency_groups_thousands_with_dots():
    assert format_currency(50000) == f"50.000{NBSP}₫"
    assert format_currency(2_000_000) == f"2.000.000{NBSP}₫"
    assert format_currency(0) == f"0{NBSP}₫"


def test_currency_uses_no_break_space():
    out = format_currency(50000)
    assert " " not in out
    assert out.endswith(NBSP + "₫")


def test_currency_rounds_to_whole_dong():
    assert format_currency(12499.6) == f"12.500{NBSP}₫"


def test_currency_overflowing_amount():
    assert format_currency(float("inf")) == f"∞{NBSP}₫"


def test_date_day_first():
    assert format_date(date(2025, 9, 1)) == "01/09/2025"


def test_preview_line():
    res = parse_transaction_input("50k ăn sáng")
    assert format_preview(res) == f"Ăn uống · 50.000{NBSP}₫ · Ăn sáng"
