"""SQLAlchemy implementation of the order repository."""

from __future__ import annotations

import uuid
from datetime import timezone
from decimal import Decimal

from sqlalchemy import exists, select
from sqlalchemy.orm import Session

from .. import models
from ..domain import Order, OrderLineItem, OrderStatus, OrderTable
from ..repos.orders_repo import OrdersRepo


def _to_domain(row: models.Order) -> Order:
    placed = row.order_date_time
    if placed.tzinfo is None:
        # SQLite drops the offset; values are always written in UTC.
        placed = placed.replace(tzinfo=timezone.utc)
    return Order(
        id=row.id,
        order_table_id=row.order_table_id,
        order_line_items=tuple(
            OrderLineItem(
                menu_id=item.menu_id, price=Decimal(item.price), quantity=item.quantity
            )
            for item in row.order_line_items
        ),
        status=OrderStatus(row.status),
        order_date_time=placed,
    )


class OrdersRepoSQL(OrdersRepo):
    """Concrete OrdersRepo using a SQLAlchemy ``Session``."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_by_id(self, order_id: uuid.UUID) -> Order | None:
        row = self.session.get(models.Order, order_id)
        return _to_domain(row) if row is not None else None

    def save(self, order: Order) -> Order:
        """Upsert ``order``; line items are only written on insert."""
        row = self.session.get(models.Order, order.id)
        if row is None:
            row = models.Order(id=order.id)
            row.order_line_items = [
                models.OrderLineItem(
                    menu_id=item.menu_id, price=item.price, quantity=item.quantity
                )
                for item in order.order_line_items
            ]
            self.session.add(row)
        row.order_table_id = order.order_table_id
        row.status = order.status.value
        row.order_date_time = order.order_date_time
        self.session.commit()
        return order

    def find_all(self) -> list[Order]:
        result = self.session.execute(
            select(models.Order).order_by(models.Order.created_at, models.Order.id)
        )
        return [_to_domain(row) for row in result.scalars()]

    def exists_by_order_table_and_status_not(
        self, order_table: OrderTable, status: OrderStatus
    ) -> bool:
        stmt = select(
            exists().where(
                models.Order.order_table_id == order_table.id,
                models.Order.status != status.value,
            )
        )
        return bool(self.session.execute(stmt).scalar())
