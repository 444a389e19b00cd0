"""SQLAlchemy-backed repository implementations.

Each repository wraps a synchronous :class:`~sqlalchemy.orm.Session` and
translates between database rows and the immutable domain snapshots. Every
``save`` commits, so one service call maps onto one transaction per write.
"""

from .menu_groups_repo_sql import MenuGroupsRepoSQL
from .menus_repo_sql import MenusRepoSQL
from .order_tables_repo_sql import OrderTablesRepoSQL
from .orders_repo_sql import OrdersRepoSQL
from .products_repo_sql import ProductsRepoSQL

__all__ = [
    "MenuGroupsRepoSQL",
    "MenusRepoSQL",
    "OrderTablesRepoSQL",
    "OrdersRepoSQL",
    "ProductsRepoSQL",
]
