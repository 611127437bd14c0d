from __future__ import annotations

from typing import Optional


class OrderError(ValueError):
    """Per-request rejection raised by order validation and filtering."""

    public_message = "Invalid request"

    def __init__(self, reason: Optional[str] = None) -> None:
        super().__init__(self.public_message)
        self.reason = reason


class InvalidOrder(OrderError):
    public_message = "Invalid order data"

    def __init__(self, field: str, reason: Optional[str] = None) -> None:
        super().__init__(reason)
        self.field = field


class InvalidDateRange(OrderError):
    public_message = "Invalid date range"
