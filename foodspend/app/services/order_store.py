from __future__ import annotations

import threading
from typing import List, Protocol

from sqlalchemy import select
from sqlalchemy.orm import sessionmaker

from foodspend.app.domain.categories import FoodCategory
from foodspend.app.domain.orders import Order, as_utc
from foodspend.app.models import FoodOrderRow


class OrderStore(Protocol):
    kind: str

    def append(self, order: Order) -> None: ...

    def all_orders(self) -> List[Order]: ...


class MemoryOrderStore:
    """Volatile, process-local store. Appends are serialised; reads get a copy."""

    kind = "memory"

    def __init__(self) -> None:
        self._orders: List[Order] = []
        self._lock = threading.Lock()

    def append(self, order: Order) -> None:
        with self._lock:
            self._orders.append(order)

    def all_orders(self) -> List[Order]:
        with self._lock:
            return list(self._orders)

    def __len__(self) -> int:
        with self._lock:
            return len(self._orders)


def _row_to_order(row: FoodOrderRow) -> Order:
    return Order(
        id=row.id,
        category=FoodCategory(row.category),
        amount=float(row.amount),
        quantity=int(row.quantity),
        date=as_utc(row.occurred_at),
    )


class SqlOrderStore:
    kind = "sql"

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    def append(self, order: Order) -> None:
        with self._session_factory() as db:
            db.add(
                FoodOrderRow(
                    id=order.id,
                    category=order.category.value,
                    amount=order.amount,
                    quantity=order.quantity,
                    occurred_at=order.date,
                )
            )
            db.commit()

    def all_orders(self) -> List[Order]:
        with self._session_factory() as db:
            rows = db.execute(select(FoodOrderRow).order_by(FoodOrderRow.seq.asc())).scalars().all()
            return [_row_to_order(row) for row in rows]
