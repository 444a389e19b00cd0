"""Menu operations.

A menu bundles products at a price that may never exceed the sum of its
products' prices times their quantities. Creating or repricing a menu above
that sum is an invalid argument; displaying such a menu is a conflict.
"""

from __future__ import annotations

import logging
import uuid
from decimal import Decimal

from ..domain import Menu, MenuProduct, Result, is_valid_price, normalize_price
from ..domain.menu import MAX_QUANTITY
from ..domain.result import Err, Ok, conflict, invalid_argument, not_found
from ..repos import MenuGroupsRepo, MenusRepo, ProductsRepo
from ..schemas import MenuCreateRequest, MenuPriceRequest

logger = logging.getLogger("kitchenpos.menus")

PRICE_RULE = "menu price must be a non-negative amount in whole cents"


def menu_products_total(menu: Menu, products: ProductsRepo) -> Decimal:
    """Return the summed price of the products bundled in ``menu``."""
    total = Decimal(0)
    for menu_product in menu.menu_products:
        product = products.find_by_id(menu_product.product_id)
        if product is not None:
            total += product.price * menu_product.quantity
    return total


class MenuCatalog:
    """Create, reprice, display and hide menus."""

    def __init__(
        self, menus: MenusRepo, menu_groups: MenuGroupsRepo, products: ProductsRepo
    ) -> None:
        self.menus = menus
        self.menu_groups = menu_groups
        self.products = products

    def create(self, request: MenuCreateRequest) -> Result[Menu]:
        if not is_valid_price(request.price):
            logger.debug("rejected menu price %r", request.price)
            return invalid_argument(PRICE_RULE)
        price = normalize_price(request.price)
        if request.menu_group_id is None:
            logger.debug("rejected menu without menu group")
            return invalid_argument("menu group id is required")
        if self.menu_groups.find_by_id(request.menu_group_id) is None:
            logger.debug("menu group %s not found", request.menu_group_id)
            return not_found(f"menu group {request.menu_group_id} not found")
        if not request.menu_products:
            logger.debug("rejected menu without products")
            return invalid_argument("a menu needs at least one product")

        menu_products = []
        total = Decimal(0)
        for line in request.menu_products:
            if line.quantity is None or not 0 <= line.quantity <= MAX_QUANTITY:
                logger.debug("rejected menu product quantity %r", line.quantity)
                return invalid_argument(
                    f"menu product quantity must be between 0 and {MAX_QUANTITY}"
                )
            product = (
                self.products.find_by_id(line.product_id)
                if line.product_id is not None
                else None
            )
            if product is None:
                logger.debug("product %s not found", line.product_id)
                return not_found(f"product {line.product_id} not found")
            menu_products.append(
                MenuProduct(product_id=product.id, quantity=line.quantity)
            )
            total += product.price * line.quantity

        if price > total:
            logger.debug("rejected menu price %s above products %s", price, total)
            return invalid_argument("menu price must not exceed its products' total")
        name = request.name
        if name is None or not name.strip():
            logger.debug("rejected menu with blank name")
            return invalid_argument("menu name must not be blank")

        menu = self.menus.save(
            Menu(
                name=name,
                price=price,
                menu_group_id=request.menu_group_id,
                menu_products=tuple(menu_products),
                displayed=request.displayed,
            )
        )
        logger.info("menu created id=%s price=%s", menu.id, menu.price)
        return Ok(menu)

    def change_price(self, menu_id: uuid.UUID, request: MenuPriceRequest) -> Result[Menu]:
        if not is_valid_price(request.price):
            logger.debug("rejected menu price %r", request.price)
            return invalid_argument(PRICE_RULE)
        found = self.find(menu_id)
        if isinstance(found, Err):
            return found
        price = normalize_price(request.price)
        if price > menu_products_total(found.value, self.products):
            logger.debug("rejected menu price %s for id=%s", price, menu_id)
            return invalid_argument("menu price must not exceed its products' total")
        menu = self.menus.save(found.value.with_price(price))
        logger.info("menu price changed id=%s price=%s", menu.id, menu.price)
        return Ok(menu)

    def display(self, menu_id: uuid.UUID) -> Result[Menu]:
        found = self.find(menu_id)
        if isinstance(found, Err):
            return found
        menu = found.value
        if menu.price > menu_products_total(menu, self.products):
            logger.debug("display refused id=%s: price above products", menu.id)
            return conflict("menu price exceeds its products' total")
        menu = self.menus.save(menu.display())
        logger.info("menu displayed id=%s", menu.id)
        return Ok(menu)

    def hide(self, menu_id: uuid.UUID) -> Result[Menu]:
        found = self.find(menu_id)
        if isinstance(found, Err):
            return found
        menu = self.menus.save(found.value.hide())
        logger.info("menu hidden id=%s", menu.id)
        return Ok(menu)

    def find(self, menu_id: uuid.UUID) -> Result[Menu]:
        menu = self.menus.find_by_id(menu_id)
        if menu is None:
            logger.debug("menu %s not found", menu_id)
            return not_found(f"menu {menu_id} not found")
        return Ok(menu)

    def find_all(self) -> list[Menu]:
        return self.menus.find_all()
