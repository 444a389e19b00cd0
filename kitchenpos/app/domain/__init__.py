"""Domain models and helpers."""

from .menu import Menu, MenuGroup, MenuProduct
from .order import Order, OrderLineItem
from .order_status import OrderStatus, TRANSITIONS, can_transition
from .order_table import OrderTable
from .price import is_valid_price, normalize_price
from .product import Product
from .result import Err, ErrorKind, Ok, Result

__all__ = [
    "Err",
    "ErrorKind",
    "Menu",
    "MenuGroup",
    "MenuProduct",
    "Ok",
    "Order",
    "OrderLineItem",
    "OrderStatus",
    "OrderTable",
    "Product",
    "Result",
    "TRANSITIONS",
    "can_transition",
    "is_valid_price",
    "normalize_price",
]
