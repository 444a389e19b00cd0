"""Product catalogue operations.

Changing a product's price hides every menu that would then cost more than
the products it bundles.
"""

from __future__ import annotations

import logging
import uuid

from ..domain import Product, Result, is_valid_price, normalize_price
from ..domain.result import Ok, invalid_argument, not_found
from ..repos import MenusRepo, ProductsRepo
from ..schemas import ProductCreateRequest, ProductPriceRequest
from .menus import menu_products_total

logger = logging.getLogger("kitchenpos.products")

PRICE_RULE = "product price must be a non-negative amount in whole cents"


class ProductCatalog:
    """Create products, change their price and list them."""

    def __init__(self, products: ProductsRepo, menus: MenusRepo) -> None:
        self.products = products
        self.menus = menus

    def create(self, request: ProductCreateRequest) -> Result[Product]:
        if not is_valid_price(request.price):
            logger.debug("rejected product price %r", request.price)
            return invalid_argument(PRICE_RULE)
        name = request.name
        if name is None or not name.strip():
            logger.debug("rejected product with blank name")
            return invalid_argument("product name must not be blank")
        product = self.products.save(
            Product(name=name, price=normalize_price(request.price))
        )
        logger.info("product created id=%s price=%s", product.id, product.price)
        return Ok(product)

    def change_price(
        self, product_id: uuid.UUID, request: ProductPriceRequest
    ) -> Result[Product]:
        if not is_valid_price(request.price):
            logger.debug("rejected product price %r", request.price)
            return invalid_argument(PRICE_RULE)
        product = self.products.find_by_id(product_id)
        if product is None:
            logger.debug("product %s not found", product_id)
            return not_found(f"product {product_id} not found")
        product = self.products.save(product.with_price(normalize_price(request.price)))
        logger.info("product price changed id=%s price=%s", product.id, product.price)

        for menu in self.menus.find_all_by_product_id(product.id):
            if menu.displayed and menu.price > menu_products_total(menu, self.products):
                self.menus.save(menu.hide())
                logger.info("menu hidden id=%s: price above its products", menu.id)
        return Ok(product)

    def find_all(self) -> list[Product]:
        return self.products.find_all()
