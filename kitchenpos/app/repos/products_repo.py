"""Repository interface for products."""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod

from ..domain import Product


class ProductsRepo(ABC):
    """Contract for product persistence."""

    @abstractmethod
    def find_by_id(self, product_id: uuid.UUID) -> Product | None:
        raise NotImplementedError

    @abstractmethod
    def save(self, product: Product) -> Product:
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Product]:
        raise NotImplementedError
