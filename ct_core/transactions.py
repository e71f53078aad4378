# ct_core/transactions.py
"""
Submit/edit flow: turn a parse result plus the user's choices into a
Transaction ready for the store.
"""
from __future__ import annotations

import secrets
import string
from dataclasses import replace
from datetime import date
from typing import Optional

from ct_core.models import CategoryType, ParseResult, Scope, Transaction

ID_ALPHABET = string.digits + string.ascii_lowercase
ID_LENGTH = 7


def generate_id() -> str:
    """Short random base-36 id, e.g. 'k3x9a0b'."""
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(ID_LENGTH))


def _resolve_trip(scope: Scope, trip_id: Optional[str]) -> Optional[str]:
    scope = Scope(scope)
    if scope is Scope.TRIP:
        if not trip_id:
            raise ValueError("TRIP scope requires a trip id")
        return trip_id
    return None


def build_transaction(
    parsed: Optional[ParseResult],
    *,
    category_override: Optional[CategoryType] = None,
    scope: Scope = Scope.PERSONAL,
    trip_id: Optional[str] = None,
    on: Optional[date] = None,
    txn_id: Optional[str] = None,
) -> Transaction:
    """
    Merge a parse result with the user's selections.

    A manual category override beats the parsed category. The parse result
    itself is left untouched.
    """
    if parsed is None:
        raise ValueError("Nothing to submit: input has no amount")

    return Transaction(
        id=txn_id or generate_id(),
        amount=parsed.amount,
        category=CategoryType(category_override) if category_override else parsed.category,
        note=parsed.note,
        date=on or date.today(),
        trip_id=_resolve_trip(scope, trip_id),
    )


def update_transaction(
    existing: Transaction,
    parsed: Optional[ParseResult],
    *,
    category_override: Optional[CategoryType] = None,
    scope: Scope = Scope.PERSONAL,
    trip_id: Optional[str] = None,
    on: Optional[date] = None,
) -> Transaction:
    """Edit flow: same merge as build_transaction, keeping the existing id."""
    if parsed is None:
        raise ValueError("Nothing to submit: input has no amount")

    return replace(
        existing,
        amount=parsed.amount,
        category=CategoryType(category_override) if category_override else parsed.category,
        note=parsed.note,
        date=on or existing.date,
        trip_id=_resolve_trip(scope, trip_id),
    )
