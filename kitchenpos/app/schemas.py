"""Request and response bodies for the HTTP API.

Field names are snake_case in Python and camelCase on the wire.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal
from typing import List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .domain import OrderStatus


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


# Request fields are optional; missing or out-of-range values reach
# the services, which answer with an explicit error result.


class OrderTableCreateRequest(CamelModel):
    name: str | None = None


class NumberOfGuestsRequest(CamelModel):
    number_of_guests: int | None = None


class ProductCreateRequest(CamelModel):
    name: str | None = None
    price: Decimal | None = None


class ProductPriceRequest(CamelModel):
    price: Decimal | None = None


class MenuGroupCreateRequest(CamelModel):
    name: str | None = None


class MenuProductRequest(CamelModel):
    product_id: uuid.UUID | None = None
    quantity: int | None = None


class MenuCreateRequest(CamelModel):
    name: str | None = None
    price: Decimal | None = None
    menu_group_id: uuid.UUID | None = None
    displayed: bool = False
    menu_products: List[MenuProductRequest] | None = None


class MenuPriceRequest(CamelModel):
    price: Decimal | None = None


class OrderLineItemRequest(CamelModel):
    menu_id: uuid.UUID | None = None
    price: Decimal | None = None
    quantity: int | None = None


class OrderCreateRequest(CamelModel):
    order_table_id: uuid.UUID | None = None
    order_line_items: List[OrderLineItemRequest] | None = None


class OrderTableResponse(CamelModel):
    id: uuid.UUID
    name: str
    occupied: bool
    number_of_guests: int


class ProductResponse(CamelModel):
    id: uuid.UUID
    name: str
    price: Decimal


class MenuGroupResponse(CamelModel):
    id: uuid.UUID
    name: str


class MenuProductResponse(CamelModel):
    product_id: uuid.UUID
    quantity: int


class MenuResponse(CamelModel):
    id: uuid.UUID
    name: str
    price: Decimal
    menu_group_id: uuid.UUID
    displayed: bool
    menu_products: List[MenuProductResponse]


class OrderLineItemResponse(CamelModel):
    menu_id: uuid.UUID
    price: Decimal
    quantity: int


class OrderResponse(CamelModel):
    id: uuid.UUID
    order_table_id: uuid.UUID
    status: OrderStatus
    order_date_time: datetime
    order_line_items: List[OrderLineItemResponse]
