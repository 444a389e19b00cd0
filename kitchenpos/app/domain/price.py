"""Price rules shared by products and menus."""

from __future__ import annotations

from decimal import Decimal

# Prices are stored as NUMERIC(19, 2).
CENT = Decimal("0.01")
MAX_PRICE = Decimal(10) ** 17 - CENT


def is_valid_price(price: Decimal | None) -> bool:
    """Return ``True`` for a finite amount in ``[0, MAX_PRICE]`` with whole cents."""
    if price is None or not price.is_finite():
        return False
    if not Decimal(0) <= price <= MAX_PRICE:
        return False
    return price == price.quantize(CENT)


def normalize_price(price: Decimal) -> Decimal:
    """Return ``price`` with exactly two decimal places, as it is stored."""
    return price.quantize(CENT)
