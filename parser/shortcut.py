# parser/shortcut.py
from __future__ import annotations
from typing import Optional
from urllib.parse import parse_qs, urlsplit

SHORTCUT_PARAMS = ("input", "q")


def extract_shortcut_input(url_or_query: str) -> Optional[str]:
    """
    Pull the smart-input text out of a shortcut link.

    Accepts a full URL ("https://host/?input=50k%20c%C6%A1m") or a bare query
    string ("q=50k+cơm"). "input" wins over "q". Blank values count as absent.
    """
    if not url_or_query:
        return None

    s = url_or_query.strip()
    parts = urlsplit(s)
    if parts.scheme or parts.netloc:
        query = parts.query
    elif s.startswith("?"):
        query = s[1:]
    elif s.startswith("/"):
        # relative link such as "/add?input=..."
        query = parts.query
    else:
        query = s
    params = parse_qs(query, keep_blank_values=False)

    for name in SHORTCUT_PARAMS:
        for value in params.get(name, []):
            value = value.strip()
            if value:
                return value
    return None
