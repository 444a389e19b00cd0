"""Order table lifecycle: create, sit, change guest count, clear.

State machine::

    Empty --sit--> Occupied --clear--> Empty

The guest count may only change while a table is occupied, and a table can
only be cleared when every order placed at it is ``COMPLETED``. All
operations return a :data:`~kitchenpos.app.domain.Result` instead of raising.
"""

from __future__ import annotations

import logging
import uuid

from ..domain import OrderStatus, OrderTable, Result
from ..domain.order_table import MAX_NUMBER_OF_GUESTS
from ..domain.result import Err, Ok, conflict, invalid_argument, not_found
from ..repos import OrdersRepo, OrderTablesRepo
from ..schemas import NumberOfGuestsRequest, OrderTableCreateRequest

logger = logging.getLogger("kitchenpos.order_tables")


class OrderTableLifecycle:
    """Application service owning the order table state transitions."""

    def __init__(self, order_tables: OrderTablesRepo, orders: OrdersRepo) -> None:
        self.order_tables = order_tables
        self.orders = orders

    def create(self, request: OrderTableCreateRequest) -> Result[OrderTable]:
        """Register a new, empty table named ``request.name``."""
        name = request.name
        if name is None or not name.strip():
            logger.debug("rejected order table with blank name")
            return invalid_argument("order table name must not be blank")
        table = self.order_tables.save(OrderTable.new(name))
        logger.info("order table created id=%s name=%s", table.id, table.name)
        return Ok(table)

    def sit(self, table_id: uuid.UUID) -> Result[OrderTable]:
        found = self.find(table_id)
        if isinstance(found, Err):
            return found
        table = self.order_tables.save(found.value.sit())
        logger.info("order table occupied id=%s", table.id)
        return Ok(table)

    def change_number_of_guests(
        self, table_id: uuid.UUID, request: NumberOfGuestsRequest
    ) -> Result[OrderTable]:
        """Set the guest count of an occupied table.

        Checks run in a fixed order: the count itself, then existence, then
        occupancy. A negative count is therefore reported as an invalid
        argument even for an unknown table.
        """
        number_of_guests = request.number_of_guests
        if number_of_guests is None or not (
            0 <= number_of_guests <= MAX_NUMBER_OF_GUESTS
        ):
            logger.debug("rejected guest count %r", number_of_guests)
            return invalid_argument(
                f"number of guests must be between 0 and {MAX_NUMBER_OF_GUESTS}"
            )

        found = self.find(table_id)
        if isinstance(found, Err):
            return found
        table = found.value
        if not table.occupied:
            logger.debug("guest change on empty table id=%s", table.id)
            return conflict("cannot change guests of a table that is not occupied")

        table = self.order_tables.save(table.with_guests(number_of_guests))
        logger.info(
            "order table guests changed id=%s guests=%d", table.id, number_of_guests
        )
        return Ok(table)

    def clear(self, table_id: uuid.UUID) -> Result[OrderTable]:
        found = self.find(table_id)
        if isinstance(found, Err):
            return found
        table = found.value
        if self.orders.exists_by_order_table_and_status_not(
            table, OrderStatus.COMPLETED
        ):
            logger.debug("clear refused id=%s: unfinished orders", table.id)
            return conflict("table has unfinished orders")

        table = self.order_tables.save(table.clear())
        logger.info("order table cleared id=%s", table.id)
        return Ok(table)

    def find(self, table_id: uuid.UUID) -> Result[OrderTable]:
        table = self.order_tables.find_by_id(table_id)
        if table is None:
            logger.debug("order table %s not found", table_id)
            return not_found(f"order table {table_id} not found")
        return Ok(table)

    def find_all(self) -> list[OrderTable]:
        return self.order_tables.find_all()
