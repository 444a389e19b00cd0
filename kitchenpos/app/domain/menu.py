"""Menu group and menu value objects."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from decimal import Decimal

# Quantities are stored as 32-bit INTEGER columns.
MAX_QUANTITY = 2**31 - 1


@dataclass(frozen=True)
class MenuGroup:
    name: str
    id: uuid.UUID = field(default_factory=uuid.uuid4)


@dataclass(frozen=True)
class MenuProduct:
    """``quantity`` units of a product bundled into a menu."""

    product_id: uuid.UUID
    quantity: int


@dataclass(frozen=True)
class Menu:
    """A priced bundle of products shown to guests when ``displayed``."""

    name: str
    price: Decimal
    menu_group_id: uuid.UUID
    menu_products: tuple[MenuProduct, ...]
    displayed: bool = False
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def display(self) -> "Menu":
        return replace(self, displayed=True)

    def hide(self) -> "Menu":
        return replace(self, displayed=False)

    def with_price(self, price: Decimal) -> "Menu":
        return replace(self, price=price)
