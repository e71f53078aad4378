# categorizer/rules.py
"""
Keyword rules for smart-input categorization.

Two passes over the note, in this order:
- token pass: the first whitespace token (in note order) that is exactly a
  keyword decides
- substring pass: otherwise the first keyword (in table order) contained
  anywhere in the note decides

Nothing matched -> OTHER. The token pass must run first: short keys such as
"xe" are substrings of unrelated words ("xem") and would otherwise win.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ct_core.models import CategoryType
from ct_utils.categories import (
    DEFAULT_CATEGORY,
    KEYWORD_TABLE,
    KEYWORD_TO_CATEGORY,
    KeywordTable,
)

log = logging.getLogger(__name__)


@lru_cache(maxsize=32)
def _token_lookup(keywords: KeywordTable) -> Mapping[str, CategoryType]:
    """Exact-match index; earlier declarations win on duplicate keys."""
    index: Dict[str, CategoryType] = {}
    for key, cat in keywords:
        index.setdefault(key, cat)
    return index


def classify_with_match(
    note: str, keywords: KeywordTable = KEYWORD_TABLE
) -> Tuple[CategoryType, Optional[str]]:
    """
    Return (category, keyword that decided it).
    The keyword is None when nothing matched and OTHER was assigned.
    """
    index = KEYWORD_TO_CATEGORY if keywords is KEYWORD_TABLE else _token_lookup(keywords)
    for token in note.split():
        cat = index.get(token)
        if cat is not None:
            return cat, token

    for key, cat in keywords:
        if key in note:
            return cat, key

    return DEFAULT_CATEGORY, None


def classify(note: str, keywords: KeywordTable = KEYWORD_TABLE) -> CategoryType:
    return classify_with_match(note, keywords)[0]


def parse_keyword(entry: Dict[str, Any]) -> Tuple[str, CategoryType]:
    """Parse one {key, category} entry from a YAML keyword file."""
    if not isinstance(entry, dict):
        raise ValueError(f"Keyword entry must be a mapping, got {entry!r}")
    key = str(entry.get("key") or "").strip().lower()
    if not key:
        raise ValueError(f"Keyword entry without a key: {entry!r}")

    raw_cat = str(entry.get("category") or "").strip().upper()
    try:
        cat = CategoryType(raw_cat)
    except ValueError:
        raise ValueError(f"Unknown category {raw_cat!r} for keyword {key!r}") from None
    return key, cat


def compile_keywords(cfg: Dict[str, Any]) -> KeywordTable:
    """
    Build an ordered keyword table from config.

    With `extend: true` the entries are appended after the built-in table,
    otherwise they replace it. Duplicate keys keep their first declaration.
    """
    if not isinstance(cfg, dict):
        raise ValueError(f"Keyword config must be a mapping, got {cfg!r}")
    entries = cfg.get("keywords") or []
    if not isinstance(entries, list):
        raise ValueError(f"'keywords' must be a list, got {entries!r}")

    pairs: List[Tuple[str, CategoryType]] = []
    if cfg.get("extend"):
        pairs.extend(KEYWORD_TABLE)

    seen = {key for key, _ in pairs}
    for entry in entries:
        key, cat = parse_keyword(entry)
        if key in seen:
            log.debug("Duplicate keyword %r ignored", key)
            continue
        seen.add(key)
        pairs.append((key, cat))

    return tuple(pairs)
