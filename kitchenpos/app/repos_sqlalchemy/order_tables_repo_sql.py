"""SQLAlchemy implementation of the order table repository."""

from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.orm import Session

from .. import models
from ..domain import OrderTable
from ..repos.order_tables_repo import OrderTablesRepo


def _to_domain(row: models.OrderTable) -> OrderTable:
    return OrderTable(
        id=row.id,
        name=row.name,
        occupied=row.occupied,
        number_of_guests=row.number_of_guests,
    )


class OrderTablesRepoSQL(OrderTablesRepo):
    """Concrete OrderTablesRepo using a SQLAlchemy ``Session``."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_by_id(self, table_id: uuid.UUID) -> OrderTable | None:
        row = self.session.get(models.OrderTable, table_id)
        return _to_domain(row) if row is not None else None

    def save(self, table: OrderTable) -> OrderTable:
        """Upsert ``table`` and commit."""
        row = self.session.get(models.OrderTable, table.id)
        if row is None:
            row = models.OrderTable(id=table.id)
            self.session.add(row)
        row.name = table.name
        row.occupied = table.occupied
        row.number_of_guests = table.number_of_guests
        self.session.commit()
        return table

    def find_all(self) -> list[OrderTable]:
        result = self.session.execute(
            select(models.OrderTable).order_by(
                models.OrderTable.created_at, models.OrderTable.id
            )
        )
        return [_to_domain(row) for row in result.scalars()]
