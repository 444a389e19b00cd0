"""Repository interface for order tables."""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod

from ..domain import OrderTable


class OrderTablesRepo(ABC):
    """Contract for order table persistence."""

    @abstractmethod
    def find_by_id(self, table_id: uuid.UUID) -> OrderTable | None:
        """Return the table with ``table_id`` or ``None``."""
        raise NotImplementedError

    @abstractmethod
    def save(self, table: OrderTable) -> OrderTable:
        """Insert or overwrite ``table`` and return the stored snapshot."""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[OrderTable]:
        """List every stored table in insertion order."""
        raise NotImplementedError
