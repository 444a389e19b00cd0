"""Repository interfaces consumed by the application services."""

from .menu_groups_repo import MenuGroupsRepo
from .menus_repo import MenusRepo
from .order_tables_repo import OrderTablesRepo
from .orders_repo import OrdersRepo
from .products_repo import ProductsRepo

__all__ = [
    "MenuGroupsRepo",
    "MenusRepo",
    "OrderTablesRepo",
    "OrdersRepo",
    "ProductsRepo",
]
