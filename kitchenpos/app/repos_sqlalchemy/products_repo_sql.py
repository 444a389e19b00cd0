"""SQLAlchemy implementation of the product repository."""

from __future__ import annotations

import uuid
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.orm import Session

from .. import models
from ..domain import Product
from ..repos.products_repo import ProductsRepo


def _to_domain(row: models.Product) -> Product:
    return Product(id=row.id, name=row.name, price=Decimal(row.price))


class ProductsRepoSQL(ProductsRepo):
    """Concrete ProductsRepo using a SQLAlchemy ``Session``."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_by_id(self, product_id: uuid.UUID) -> Product | None:
        row = self.session.get(models.Product, product_id)
        return _to_domain(row) if row is not None else None

    def save(self, product: Product) -> Product:
        row = self.session.get(models.Product, product.id)
        if row is None:
            row = models.Product(id=product.id)
            self.session.add(row)
        row.name = product.name
        row.price = product.price
        self.session.commit()
        return product

    def find_all(self) -> list[Product]:
        result = self.session.execute(
            select(models.Product).order_by(
                models.Product.created_at, models.Product.id
            )
        )
        return [_to_domain(row) for row in result.scalars()]
