# ct_core/models.py
from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Dict, Optional


class CategoryType(str, Enum):
    FOOD = "FOOD"
    TRANSPORT = "TRANSPORT"
    SHOPPING = "SHOPPING"
    LODGING = "LODGING"
    UTILITIES = "UTILITIES"
    ENTERTAINMENT = "ENTERTAINMENT"
    OTHER = "OTHER"
    INCOME = "INCOME"


class Scope(str, Enum):
    """Where a submitted transaction is booked."""

    PERSONAL = "PERSONAL"
    TRIP = "TRIP"


CATEGORY_LABELS: Dict[CategoryType, str] = {
    CategoryType.FOOD: "Ăn uống",
    CategoryType.TRANSPORT: "Di chuyển",
    CategoryType.SHOPPING: "Mua sắm",
    CategoryType.LODGING: "Lưu trú",
    CategoryType.UTILITIES: "Dịch vụ",
    CategoryType.ENTERTAINMENT: "Giải trí",
    CategoryType.OTHER: "Khác",
    CategoryType.INCOME: "Thu nhập",
}


@dataclass(frozen=True)
class ParseResult:
    amount: float
    category: CategoryType
    note: str


@dataclass
class Transaction:
    id: str
    amount: float
    category: CategoryType
    note: str
    date: date
    trip_id: Optional[str] = None  # set only for TRIP scope
