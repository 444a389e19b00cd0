"""Product value object."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from decimal import Decimal


@dataclass(frozen=True)
class Product:
    """A named, priced catalogue entry."""

    name: str
    price: Decimal
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def with_price(self, price: Decimal) -> "Product":
        return replace(self, price=price)
