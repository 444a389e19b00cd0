"""Eat-in order value object."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from decimal import Decimal

from .order_status import OrderStatus


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class OrderLineItem:
    """One menu ordered ``quantity`` times at the menu's current ``price``."""

    menu_id: uuid.UUID
    price: Decimal
    quantity: int


@dataclass(frozen=True)
class Order:
    """Snapshot of an order placed at an order table."""

    order_table_id: uuid.UUID
    order_line_items: tuple[OrderLineItem, ...] = ()
    status: OrderStatus = OrderStatus.WAITING
    order_date_time: datetime = field(default_factory=_utcnow)
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def moved_to(self, status: OrderStatus) -> "Order":
        return replace(self, status=status)
