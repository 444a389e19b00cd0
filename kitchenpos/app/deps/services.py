"""Dependency helpers wiring services to a request-scoped session."""

from fastapi import Depends
from sqlalchemy.orm import Session

from ..db import get_session
from ..repos_sqlalchemy import (
    MenuGroupsRepoSQL,
    MenusRepoSQL,
    OrdersRepoSQL,
    OrderTablesRepoSQL,
    ProductsRepoSQL,
)
from ..services import (
    EatInOrders,
    MenuCatalog,
    MenuGroupCatalog,
    OrderTableLifecycle,
    ProductCatalog,
)


def get_order_table_lifecycle(
    session: Session = Depends(get_session),
) -> OrderTableLifecycle:
    return OrderTableLifecycle(OrderTablesRepoSQL(session), OrdersRepoSQL(session))


def get_eat_in_orders(
    session: Session = Depends(get_session),
    lifecycle: OrderTableLifecycle = Depends(get_order_table_lifecycle),
) -> EatInOrders:
    return EatInOrders(lifecycle.orders, MenusRepoSQL(session), lifecycle)


def get_product_catalog(session: Session = Depends(get_session)) -> ProductCatalog:
    return ProductCatalog(ProductsRepoSQL(session), MenusRepoSQL(session))


def get_menu_group_catalog(
    session: Session = Depends(get_session),
) -> MenuGroupCatalog:
    return MenuGroupCatalog(MenuGroupsRepoSQL(session))


def get_menu_catalog(session: Session = Depends(get_session)) -> MenuCatalog:
    return MenuCatalog(
        MenusRepoSQL(session), MenuGroupsRepoSQL(session), ProductsRepoSQL(session)
    )
