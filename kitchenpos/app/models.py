"""Database models.

These models describe the relational schema used by the application. They are
kept isolated from any application wiring so that they can be used in tests
independently."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Uuid,
    func,
)
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OrderTable(Base):
    """Dine-in tables."""

    __tablename__ = "order_table"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String, nullable=False)
    occupied = Column(Boolean, nullable=False, default=False)
    number_of_guests = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )


class Product(Base):
    """Catalogue products."""

    __tablename__ = "product"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String, nullable=False)
    price = Column(Numeric(19, 2), nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)


class MenuGroup(Base):
    """Sections of the menu board, e.g. "Set menus"."""

    __tablename__ = "menu_group"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String, nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)


class Menu(Base):
    """Priced bundles of products."""

    __tablename__ = "menu"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String, nullable=False)
    price = Column(Numeric(19, 2), nullable=False)
    menu_group_id = Column(
        Uuid, ForeignKey("menu_group.id"), nullable=False, index=True
    )
    displayed = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    menu_products = relationship(
        "MenuProduct",
        cascade="all, delete-orphan",
        order_by="MenuProduct.seq",
    )


class MenuProduct(Base):
    __tablename__ = "menu_product"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    menu_id = Column(Uuid, ForeignKey("menu.id"), nullable=False, index=True)
    product_id = Column(Uuid, ForeignKey("product.id"), nullable=False, index=True)
    quantity = Column(Integer, nullable=False)


class Order(Base):
    """Eat-in orders placed at an order table."""

    __tablename__ = "orders"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    order_table_id = Column(
        Uuid, ForeignKey("order_table.id"), nullable=False, index=True
    )
    status = Column(String, nullable=False, default="WAITING", index=True)
    order_date_time = Column(DateTime(timezone=True), nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    order_line_items = relationship(
        "OrderLineItem",
        cascade="all, delete-orphan",
        order_by="OrderLineItem.seq",
    )


class OrderLineItem(Base):
    __tablename__ = "order_line_item"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(Uuid, ForeignKey("orders.id"), nullable=False, index=True)
    menu_id = Column(Uuid, ForeignKey("menu.id"), nullable=False)
    price = Column(Numeric(19, 2), nullable=False)
    quantity = Column(Integer, nullable=False)
