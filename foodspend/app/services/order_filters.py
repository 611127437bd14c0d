from __future__ import annotations

from typing import Any, Iterable, List, Optional

from foodspend.app.domain.categories import parse_category
from foodspend.app.domain.errors import InvalidDateRange
from foodspend.app.domain.orders import Order, parse_datetime


def filter_orders(
    orders: Iterable[Order],
    *,
    category: Optional[Any] = None,
    start_date: Optional[Any] = None,
    end_date: Optional[Any] = None,
) -> List[Order]:
    """
    Category and inclusive date-range filter over a sequence of orders.

    - an unrecognized category is ignored, not rejected
    - the date range applies only when both ends are supplied; a single end
      is ignored
    - start after end is not an error, it just matches nothing
    """
    filtered = list(orders)

    wanted = parse_category(category) if category else None
    if wanted is not None:
        filtered = [o for o in filtered if o.category == wanted]

    if start_date and end_date:
        start = parse_datetime(start_date)
        end = parse_datetime(end_date)
        if start is None or end is None:
            raise InvalidDateRange(f"unparseable range: {start_date!r}..{end_date!r}")
        filtered = [o for o in filtered if start <= o.date <= end]

    return filtered
