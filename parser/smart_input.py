# parser/smart_input.py
"""
Smart-input parser: free text such as "50k ăn sáng" -> amount, category, note.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Optional

from categorizer.rules import classify
from ct_core.models import ParseResult
from ct_utils.categories import KEYWORD_TABLE, KeywordTable
from parser.normalizer import capitalize_first, normalize_text

log = logging.getLogger(__name__)

# First number anywhere in the text, "." or "," as decimal separator,
# optionally followed (whitespace allowed) by a unit suffix.
AMOUNT_RX = re.compile(r"([0-9]+(?:[.,][0-9]+)?)\s*(k|tr|đ|d|vnđ)?", re.IGNORECASE)

UNIT_MULTIPLIERS = {
    "k": 1_000,
    "tr": 1_000_000,
    # đ / d / vnđ: already in đồng
}

DEFAULT_NOTE = "Chi tiêu không tên"


def parse_amount(num: str, unit: Optional[str]) -> float:
    value = float(num.replace(",", "."))
    return value * UNIT_MULTIPLIERS.get((unit or "").lower(), 1)


def parse_transaction_input(
    text: str, keywords: KeywordTable = KEYWORD_TABLE
) -> Optional[ParseResult]:
    """
    Parse one line of smart input.
    Returns None when the text holds no amount yet (e.g. "ăn sáng").
    """
    normalized = normalize_text(text)

    m = AMOUNT_RX.search(normalized)
    if not m:
        return None

    amount = parse_amount(m.group(1), m.group(2))
    if math.isinf(amount):
        # digit run too long for a float; still a match, amount is +inf
        log.debug("Amount overflows float in %r", text)

    # Drop exactly the matched span; nothing else is cleaned up.
    note = (normalized[: m.start()] + normalized[m.end() :]).strip()
    category = classify(note, keywords)

    note = capitalize_first(note) if note else DEFAULT_NOTE
    return ParseResult(amount=amount, category=category, note=note)
