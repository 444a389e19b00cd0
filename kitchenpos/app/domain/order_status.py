"""Order status enumeration and allowed transitions."""

from __future__ import annotations

from enum import Enum


class OrderStatus(str, Enum):
    """Enumerate the lifecycle states for an eat-in order."""

    WAITING = "WAITING"
    ACCEPTED = "ACCEPTED"
    SERVED = "SERVED"
    COMPLETED = "COMPLETED"


TRANSITIONS: dict[OrderStatus, list[OrderStatus]] = {
    OrderStatus.WAITING: [OrderStatus.ACCEPTED],
    OrderStatus.ACCEPTED: [OrderStatus.SERVED],
    OrderStatus.SERVED: [OrderStatus.COMPLETED],
    OrderStatus.COMPLETED: [],
}


def can_transition(src: OrderStatus, dst: OrderStatus) -> bool:
    """Return ``True`` if an order can move from ``src`` to ``dst``."""

    return dst in TRANSITIONS.get(src, [])
