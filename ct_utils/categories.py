# ct_utils/categories.py
# Lowercase Vietnamese word/phrase -> category.
# Order matters: the substring fallback walks this table top to bottom and the
# first hit wins, so keep new entries below the ones they could shadow.
from __future__ import annotations
from types import MappingProxyType
from typing import Mapping, Tuple

from ct_core.models import CategoryType

KeywordTable = Tuple[Tuple[str, CategoryType], ...]

KEYWORD_TABLE: KeywordTable = (
    # food & drink
    ("ăn", CategoryType.FOOD),
    ("uống", CategoryType.FOOD),
    ("cơm", CategoryType.FOOD),
    ("phở", CategoryType.FOOD),
    ("bún", CategoryType.FOOD),
    ("cafe", CategoryType.FOOD),
    ("cf", CategoryType.FOOD),
    ("nước", CategoryType.FOOD),
    # transport
    ("xăng", CategoryType.TRANSPORT),
    ("xe", CategoryType.TRANSPORT),
    ("grab", CategoryType.TRANSPORT),
    ("taxi", CategoryType.TRANSPORT),
    ("vé", CategoryType.TRANSPORT),
    # shopping
    ("mua", CategoryType.SHOPPING),
    ("sắm", CategoryType.SHOPPING),
    ("áo", CategoryType.SHOPPING),
    ("quần", CategoryType.SHOPPING),
    ("đồ", CategoryType.SHOPPING),
    # lodging
    ("ks", CategoryType.LODGING),
    ("khách sạn", CategoryType.LODGING),
    ("phòng", CategoryType.LODGING),
    # bills
    ("điện", CategoryType.UTILITIES),
    ("nước sinh hoạt", CategoryType.UTILITIES),
    ("net", CategoryType.UTILITIES),
    # income
    ("lương", CategoryType.INCOME),
    ("thưởng", CategoryType.INCOME),
)

# Exact-token lookups; read-only view over the same pairs.
KEYWORD_TO_CATEGORY: Mapping[str, CategoryType] = MappingProxyType(dict(KEYWORD_TABLE))

DEFAULT_CATEGORY = CategoryType.OTHER
