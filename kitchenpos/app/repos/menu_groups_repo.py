"""Repository interface for menu groups."""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod

from ..domain import MenuGroup


class MenuGroupsRepo(ABC):
    """Contract for menu group persistence."""

    @abstractmethod
    def find_by_id(self, menu_group_id: uuid.UUID) -> MenuGroup | None:
        raise NotImplementedError

    @abstractmethod
    def save(self, menu_group: MenuGroup) -> MenuGroup:
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[MenuGroup]:
        raise NotImplementedError
