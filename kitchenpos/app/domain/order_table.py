"""Order table value object and its state transitions."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace

# Counts are stored as 32-bit INTEGER columns.
MAX_NUMBER_OF_GUESTS = 2**31 - 1


@dataclass(frozen=True)
class OrderTable:
    """Immutable snapshot of a dine-in table.

    A table starts empty (``occupied=False``, ``number_of_guests=0``). Each
    transition returns a new snapshot; persisting it is up to the caller.
    """

    name: str
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    occupied: bool = False
    number_of_guests: int = 0

    @classmethod
    def new(cls, name: str) -> "OrderTable":
        """Return an empty table labelled ``name`` with a fresh identifier."""
        return cls(name=name)

    def sit(self) -> "OrderTable":
        return replace(self, occupied=True)

    def with_guests(self, number_of_guests: int) -> "OrderTable":
        return replace(self, number_of_guests=number_of_guests)

    def clear(self) -> "OrderTable":
        return replace(self, occupied=False, number_of_guests=0)
