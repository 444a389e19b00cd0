"""Eat-in order workflow.

Orders move along ``WAITING -> ACCEPTED -> SERVED -> COMPLETED`` as listed in
:data:`~kitchenpos.app.domain.TRANSITIONS`. Completing the last unfinished
order of a table clears that table.

Every order carries at least one line item, each naming a displayed menu at
that menu's current price. Eat-in line items may have a negative quantity,
which is how a cancelled dish is recorded against the table.
"""

from __future__ import annotations

import logging
import uuid

from ..domain import Order, OrderLineItem, OrderStatus, Result, can_transition
from ..domain.menu import MAX_QUANTITY
from ..domain.result import Err, Ok, conflict, invalid_argument, not_found
from ..repos import MenusRepo, OrdersRepo
from ..schemas import OrderCreateRequest, OrderLineItemRequest
from .order_tables import OrderTableLifecycle

logger = logging.getLogger("kitchenpos.orders")


class EatInOrders:
    """Place eat-in orders and advance their status."""

    def __init__(
        self,
        orders: OrdersRepo,
        menus: MenusRepo,
        order_tables: OrderTableLifecycle,
    ) -> None:
        self.orders = orders
        self.menus = menus
        self.order_tables = order_tables

    def create(self, request: OrderCreateRequest) -> Result[Order]:
        if not request.order_line_items:
            logger.debug("rejected order without line items")
            return invalid_argument("an order needs at least one line item")
        line_items = []
        for line in request.order_line_items:
            item = self._line_item(line)
            if isinstance(item, Err):
                return item
            line_items.append(item.value)

        if request.order_table_id is None:
            logger.debug("rejected order without table")
            return invalid_argument("order table id is required")
        found = self.order_tables.find(request.order_table_id)
        if isinstance(found, Err):
            return found
        if not found.value.occupied:
            logger.debug("order refused on empty table id=%s", found.value.id)
            return conflict("orders can only be placed at an occupied table")

        order = self.orders.save(
            Order(order_table_id=found.value.id, order_line_items=tuple(line_items))
        )
        logger.info(
            "order placed id=%s table=%s items=%d",
            order.id,
            order.order_table_id,
            len(order.order_line_items),
        )
        return Ok(order)

    def accept(self, order_id: uuid.UUID) -> Result[Order]:
        return self._advance(order_id, OrderStatus.ACCEPTED)

    def serve(self, order_id: uuid.UUID) -> Result[Order]:
        return self._advance(order_id, OrderStatus.SERVED)

    def complete(self, order_id: uuid.UUID) -> Result[Order]:
        result = self._advance(order_id, OrderStatus.COMPLETED)
        if isinstance(result, Ok):
            cleared = self.order_tables.clear(result.value.order_table_id)
            if isinstance(cleared, Err):
                logger.debug(
                    "table %s left occupied: %s",
                    result.value.order_table_id,
                    cleared.message,
                )
        return result

    def find_all(self) -> list[Order]:
        return self.orders.find_all()

    def _line_item(self, line: OrderLineItemRequest) -> Result[OrderLineItem]:
        if line.quantity is None or abs(line.quantity) > MAX_QUANTITY:
            logger.debug("rejected line item quantity %r", line.quantity)
            return invalid_argument(
                f"line item quantity must be between -{MAX_QUANTITY} and {MAX_QUANTITY}"
            )
        menu = self.menus.find_by_id(line.menu_id) if line.menu_id is not None else None
        if menu is None:
            logger.debug("menu %s not found", line.menu_id)
            return not_found(f"menu {line.menu_id} not found")
        if not menu.displayed:
            logger.debug("order refused: menu %s is hidden", menu.id)
            return conflict(f"menu {menu.id} is not displayed")
        if line.price is None or line.price != menu.price:
            logger.debug(
                "rejected line item price %r for menu %s at %s",
                line.price,
                menu.id,
                menu.price,
            )
            return invalid_argument("line item price must match the menu price")
        return Ok(OrderLineItem(menu_id=menu.id, price=menu.price, quantity=line.quantity))

    def _advance(self, order_id: uuid.UUID, status: OrderStatus) -> Result[Order]:
        order = self.orders.find_by_id(order_id)
        if order is None:
            logger.debug("order %s not found", order_id)
            return not_found(f"order {order_id} not found")
        if not can_transition(order.status, status):
            logger.debug(
                "order %s refused %s -> %s", order.id, order.status.value, status.value
            )
            return conflict(
                f"order cannot move from {order.status.value} to {status.value}"
            )
        order = self.orders.save(order.moved_to(status))
        logger.info("order %s -> %s", order.id, status.value)
        return Ok(order)
