"""Application services."""

from .menu_groups import MenuGroupCatalog
from .menus import MenuCatalog
from .order_tables import OrderTableLifecycle
from .orders import EatInOrders
from .products import ProductCatalog

__all__ = [
    "EatInOrders",
    "MenuCatalog",
    "MenuGroupCatalog",
    "OrderTableLifecycle",
    "ProductCatalog",
]
