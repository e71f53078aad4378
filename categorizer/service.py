# categorizer/service.py
"""
Categorizer service holding the keyword table used by the smart-input parser.
"""
from __future__ import annotations

import logging
import yaml
from pathlib import Path
from typing import Optional, Tuple

from categorizer.rules import classify_with_match, compile_keywords
from ct_core.models import CategoryType, ParseResult
from ct_utils.categories import KEYWORD_TABLE, KeywordTable
from parser.smart_input import parse_transaction_input

log = logging.getLogger(__name__)


class CategorizerService:
    """Parse and classify smart input against a fixed keyword table."""

    def __init__(self, keywords_path: Optional[str] = None):
        self.keywords: KeywordTable = KEYWORD_TABLE
        if keywords_path:
            p = Path(keywords_path)
            if p.exists():
                with open(p, "r", encoding="utf-8") as f:
                    try:
                        cfg = yaml.safe_load(f) or {}
                    except yaml.YAMLError as exc:
                        raise ValueError(f"Invalid keyword file {p}: {exc}") from exc
                self.keywords = compile_keywords(cfg)
                log.debug("Loaded %d keywords from %s", len(self.keywords), p)
            else:
                log.info("Keyword file not found at %s; using built-in table.", p)

    def parse(self, text: str) -> Optional[ParseResult]:
        return parse_transaction_input(text, self.keywords)

    def classify(self, note: str) -> CategoryType:
        return classify_with_match(note.lower(), self.keywords)[0]

    def classify_with_match(self, note: str) -> Tuple[CategoryType, Optional[str]]:
        """(category, deciding keyword); keyword is None for the OTHER fallback."""
        return classify_with_match(note.lower(), self.keywords)

    def get_keyword_count(self) -> int:
        return len(self.keywords)
