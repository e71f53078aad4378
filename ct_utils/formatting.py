# ct_utils/formatting.py
# Display helpers for the live preview (vi-VN conventions, VND only).
from __future__ import annotations
import math
from datetime import date

from ct_core.models import CATEGORY_LABELS, ParseResult

CURRENCY_SYMBOL = "₫"
# vi-VN puts a no-break space between the number and the symbol
CURRENCY_SEP = "\u00a0"


def format_currency(amount: float) -> str:
    """50000 -> '50.000 ₫' (whole đồng, '.' groups thousands)."""
    if math.isinf(amount):
        return f"∞{CURRENCY_SEP}{CURRENCY_SYMBOL}"
    grouped = f"{round(amount):,d}".replace(",", ".")
    return f"{grouped}{CURRENCY_SEP}{CURRENCY_SYMBOL}"


def format_date(d: date) -> str:
    return d.strftime("%d/%m/%Y")


def format_preview(result: ParseResult) -> str:
    label = CATEGORY_LABELS[result.category]
    return f"{label} · {format_currency(result.amount)} · {result.note}"
