"""Repository interface for menus."""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod

from ..domain import Menu


class MenusRepo(ABC):
    """Contract for menu persistence and lookups."""

    @abstractmethod
    def find_by_id(self, menu_id: uuid.UUID) -> Menu | None:
        """Return the menu with ``menu_id`` or ``None``."""
        raise NotImplementedError

    @abstractmethod
    def save(self, menu: Menu) -> Menu:
        """Insert or overwrite ``menu``.

        The menu products of an existing menu are never rewritten.
        """
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Menu]:
        raise NotImplementedError

    @abstractmethod
    def find_all_by_product_id(self, product_id: uuid.UUID) -> list[Menu]:
        """List the menus that bundle ``product_id``."""
        raise NotImplementedError
