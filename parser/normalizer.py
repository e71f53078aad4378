# parser/normalizer.py
"""
Text cleanup shared by the smart-input parser.
"""

from __future__ import annotations


def normalize_text(text: str) -> str:
    """Trim and lower-case raw input.

    str.lower() maps precomposed Vietnamese capitals (Ă, Đ, Ơ, ...) to their
    lowercase forms; characters without a case mapping pass through unchanged.
    """
    return (text or "").strip().lower()


def capitalize_first(text: str) -> str:
    """Uppercase only the first character; the rest is left as-is.

    Unlike str.capitalize() the tail is never re-cased.
    Best effort for a leading letter with combining diacritics.
    """
    return text[:1].upper() + text[1:]
