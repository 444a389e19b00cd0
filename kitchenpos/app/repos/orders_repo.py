"""Repository interface for order operations."""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod

from ..domain import Order, OrderStatus, OrderTable


class OrdersRepo(ABC):
    """Contract for order persistence and lookups."""

    @abstractmethod
    def find_by_id(self, order_id: uuid.UUID) -> Order | None:
        """Return the order with ``order_id`` or ``None``."""
        raise NotImplementedError

    @abstractmethod
    def save(self, order: Order) -> Order:
        """Insert or overwrite ``order``."""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Order]:
        """List all orders."""
        raise NotImplementedError

    @abstractmethod
    def exists_by_order_table_and_status_not(
        self, order_table: OrderTable, status: OrderStatus
    ) -> bool:
        """Return ``True`` if any order for ``order_table`` is not in ``status``."""
        raise NotImplementedError
