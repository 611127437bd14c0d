from __future__ import annotations

import math
import uuid
from typing import Any, Callable, Mapping, Optional

from foodspend.app.domain.categories import parse_category
from foodspend.app.domain.errors import InvalidOrder
from foodspend.app.domain.orders import Order, parse_datetime


IdFactory = Callable[[], str]

# signed 64-bit, the widest integer column the SQL store can hold
MAX_QUANTITY = 2**63 - 1


def uuid_str() -> str:
    return str(uuid.uuid4())


def _as_number(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def _as_quantity(value: Any) -> Optional[int]:
    # ints stay exact; integral floats and numeric strings are accepted
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    number = _as_number(value)
    if number is None or not number.is_integer():
        return None
    return int(number)


def validate_order(candidate: Mapping[str, Any], *, id_factory: IdFactory = uuid_str) -> Order:
    """
    Accept or reject a submitted order.

    Rejections always surface as InvalidOrder("Invalid order data"); the
    failing field is kept on the exception for logging only.
    """
    category = parse_category(candidate.get("category"))
    if category is None:
        raise InvalidOrder("category", "missing or unrecognized category")

    amount = _as_number(candidate.get("amount"))
    if amount is None or amount <= 0:
        raise InvalidOrder("amount", "amount must be a positive number")

    quantity = _as_quantity(candidate.get("quantity"))
    if quantity is None or quantity <= 0:
        raise InvalidOrder("quantity", "quantity must be a positive whole number")
    if quantity > MAX_QUANTITY:
        raise InvalidOrder("quantity", "quantity exceeds the storable range")

    occurred_at = parse_datetime(candidate.get("date"))
    if occurred_at is None:
        raise InvalidOrder("date", "date is missing or unparseable")

    return Order(
        id=id_factory(),
        category=category,
        amount=amount,
        quantity=quantity,
        date=occurred_at,
    )
