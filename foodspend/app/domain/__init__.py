"""Domain contracts and shared types."""

from foodspend.app.domain.categories import CATEGORY_NAMES, FoodCategory  # noqa: F401
from foodspend.app.domain.errors import InvalidDateRange, InvalidOrder, OrderError  # noqa: F401
from foodspend.app.domain.orders import Order  # noqa: F401
