from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class FoodCategory(str, Enum):
    PIZZA = "Pizza"
    BURGERS = "Burgers"
    PASTA = "Pasta"
    SUSHI = "Sushi"
    SALADS = "Salads"


CATEGORY_NAMES = frozenset(c.value for c in FoodCategory)


def parse_category(value: Any) -> Optional[FoodCategory]:
    """
    Exact, case-sensitive lookup against the closed category set.
    Returns None for anything that is not a recognized category name.
    """
    if isinstance(value, FoodCategory):
        return value
    if not isinstance(value, str) or value not in CATEGORY_NAMES:
        return None
    return FoodCategory(value)
