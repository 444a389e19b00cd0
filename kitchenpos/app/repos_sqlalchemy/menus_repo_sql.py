"""SQLAlchemy implementation of the menu repository."""

from __future__ import annotations

import uuid
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.orm import Session

from .. import models
from ..domain import Menu, MenuProduct
from ..repos.menus_repo import MenusRepo


def _to_domain(row: models.Menu) -> Menu:
    return Menu(
        id=row.id,
        name=row.name,
        price=Decimal(row.price),
        menu_group_id=row.menu_group_id,
        displayed=row.displayed,
        menu_products=tuple(
            MenuProduct(product_id=mp.product_id, quantity=mp.quantity)
            for mp in row.menu_products
        ),
    )


class MenusRepoSQL(MenusRepo):
    """Concrete MenusRepo using a SQLAlchemy ``Session``."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_by_id(self, menu_id: uuid.UUID) -> Menu | None:
        row = self.session.get(models.Menu, menu_id)
        return _to_domain(row) if row is not None else None

    def save(self, menu: Menu) -> Menu:
        """Upsert ``menu``; menu products are only written on insert."""
        row = self.session.get(models.Menu, menu.id)
        if row is None:
            row = models.Menu(id=menu.id)
            row.menu_products = [
                models.MenuProduct(product_id=mp.product_id, quantity=mp.quantity)
                for mp in menu.menu_products
            ]
            self.session.add(row)
        row.name = menu.name
        row.price = menu.price
        row.menu_group_id = menu.menu_group_id
        row.displayed = menu.displayed
        self.session.commit()
        return menu

    def find_all(self) -> list[Menu]:
        result = self.session.execute(
            select(models.Menu).order_by(models.Menu.created_at, models.Menu.id)
        )
        return [_to_domain(row) for row in result.scalars()]

    def find_all_by_product_id(self, product_id: uuid.UUID) -> list[Menu]:
        result = self.session.execute(
            select(models.Menu)
            .where(
                models.Menu.id.in_(
                    select(models.MenuProduct.menu_id).where(
                        models.MenuProduct.product_id == product_id
                    )
                )
            )
            .order_by(models.Menu.created_at, models.Menu.id)
        )
        return [_to_domain(row) for row in result.scalars()]
