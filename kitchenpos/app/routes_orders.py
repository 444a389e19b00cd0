"""Eat-in order endpoints."""

from __future__ import annotations

import uuid
from typing import List

from fastapi import APIRouter, Depends, status

from .deps.services import get_eat_in_orders
from .schemas import OrderCreateRequest, OrderResponse
from .services import EatInOrders
from .utils.responses import unwrap

router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=OrderResponse)
def create_order(
    payload: OrderCreateRequest,
    orders: EatInOrders = Depends(get_eat_in_orders),
):
    return unwrap(orders.create(payload))


@router.put("/{order_id}/accept", response_model=OrderResponse)
def accept(order_id: uuid.UUID, orders: EatInOrders = Depends(get_eat_in_orders)):
    return unwrap(orders.accept(order_id))


@router.put("/{order_id}/serve", response_model=OrderResponse)
def serve(order_id: uuid.UUID, orders: EatInOrders = Depends(get_eat_in_orders)):
    return unwrap(orders.serve(order_id))


@router.put("/{order_id}/complete", response_model=OrderResponse)
def complete(order_id: uuid.UUID, orders: EatInOrders = Depends(get_eat_in_orders)):
    return unwrap(orders.complete(order_id))


@router.get("", response_model=List[OrderResponse])
def list_orders(orders: EatInOrders = Depends(get_eat_in_orders)):
    return orders.find_all()
