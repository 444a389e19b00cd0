"""Order table endpoints: register, sit, change guests, clear, list."""

from __future__ import annotations

import uuid
from typing import List

from fastapi import APIRouter, Depends, status

from .deps.services import get_order_table_lifecycle
from .schemas import NumberOfGuestsRequest, OrderTableCreateRequest, OrderTableResponse
from .services import OrderTableLifecycle
from .utils.responses import unwrap

router = APIRouter(prefix="/api/order-tables", tags=["order-tables"])


@router.post(
    "", status_code=status.HTTP_201_CREATED, response_model=OrderTableResponse
)
def create_order_table(
    payload: OrderTableCreateRequest,
    lifecycle: OrderTableLifecycle = Depends(get_order_table_lifecycle),
):
    return unwrap(lifecycle.create(payload))


@router.put("/{table_id}/sit", response_model=OrderTableResponse)
def sit(
    table_id: uuid.UUID,
    lifecycle: OrderTableLifecycle = Depends(get_order_table_lifecycle),
):
    return unwrap(lifecycle.sit(table_id))


@router.put("/{table_id}/number-of-guests", response_model=OrderTableResponse)
def change_number_of_guests(
    table_id: uuid.UUID,
    payload: NumberOfGuestsRequest,
    lifecycle: OrderTableLifecycle = Depends(get_order_table_lifecycle),
):
    return unwrap(lifecycle.change_number_of_guests(table_id, payload))


@router.put("/{table_id}/clear", response_model=OrderTableResponse)
def clear(
    table_id: uuid.UUID,
    lifecycle: OrderTableLifecycle = Depends(get_order_table_lifecycle),
):
    return unwrap(lifecycle.clear(table_id))


@router.get("", response_model=List[OrderTableResponse])
def list_order_tables(
    lifecycle: OrderTableLifecycle = Depends(get_order_table_lifecycle),
):
    return lifecycle.find_all()
