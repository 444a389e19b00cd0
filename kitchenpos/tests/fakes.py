"""In-memory repositories used in place of the SQLAlchemy ones."""

from __future__ import annotations

import uuid

from kitchenpos.app.domain import (
    Menu,
    MenuGroup,
    Order,
    OrderStatus,
    OrderTable,
    Product,
)
from kitchenpos.app.repos import (
    MenuGroupsRepo,
    MenusRepo,
    OrdersRepo,
    OrderTablesRepo,
    ProductsRepo,
)


class InMemoryOrderTablesRepo(OrderTablesRepo):
    def __init__(self, *tables: OrderTable) -> None:
        self.rows: dict[uuid.UUID, OrderTable] = {t.id: t for t in tables}
        self.saves = 0

    def find_by_id(self, table_id):
        return self.rows.get(table_id)

    def save(self, table):
        self.rows[table.id] = table
        self.saves += 1
        return table

    def find_all(self):
        return list(self.rows.values())


class InMemoryOrdersRepo(OrdersRepo):
    def __init__(self, *orders: Order) -> None:
        self.rows: dict[uuid.UUID, Order] = {o.id: o for o in orders}

    def find_by_id(self, order_id):
        return self.rows.get(order_id)

    def save(self, order):
        self.rows[order.id] = order
        return order

    def find_all(self):
        return list(self.rows.values())

    def exists_by_order_table_and_status_not(self, order_table, status):
        return any(
            o.order_table_id == order_table.id and o.status != status
            for o in self.rows.values()
        )


class InMemoryProductsRepo(ProductsRepo):
    def __init__(self, *products: Product) -> None:
        self.rows: dict[uuid.UUID, Product] = {p.id: p for p in products}

    def find_by_id(self, product_id):
        return self.rows.get(product_id)

    def save(self, product):
        self.rows[product.id] = product
        return product

    def find_all(self):
        return list(self.rows.values())


class InMemoryMenuGroupsRepo(MenuGroupsRepo):
    def __init__(self, *menu_groups: MenuGroup) -> None:
        self.rows: dict[uuid.UUID, MenuGroup] = {g.id: g for g in menu_groups}

    def find_by_id(self, menu_group_id):
        return self.rows.get(menu_group_id)

    def save(self, menu_group):
        self.rows[menu_group.id] = menu_group
        return menu_group

    def find_all(self):
        return list(self.rows.values())


class InMemoryMenusRepo(MenusRepo):
    def __init__(self, *menus: Menu) -> None:
        self.rows: dict[uuid.UUID, Menu] = {m.id: m for m in menus}

    def find_by_id(self, menu_id):
        return self.rows.get(menu_id)

    def save(self, menu):
        self.rows[menu.id] = menu
        return menu

    def find_all(self):
        return list(self.rows.values())

    def find_all_by_product_id(self, product_id):
        return [
            m
            for m in self.rows.values()
            if any(mp.product_id == product_id for mp in m.menu_products)
        ]


def order_at(table: OrderTable, status: OrderStatus = OrderStatus.SERVED) -> Order:
    return Order(order_table_id=table.id, status=status)
