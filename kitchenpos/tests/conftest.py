"""Test configuration for API tests."""

import pytest
from fastapi.testclient import TestClient

from kitchenpos.app import db as app_db
from kitchenpos.app.main import app

from .fakes import (
    InMemoryMenuGroupsRepo,
    InMemoryMenusRepo,
    InMemoryOrdersRepo,
    InMemoryOrderTablesRepo,
    InMemoryProductsRepo,
)


@pytest.fixture
def order_tables_repo() -> InMemoryOrderTablesRepo:
    return InMemoryOrderTablesRepo()


@pytest.fixture
def orders_repo() -> InMemoryOrdersRepo:
    return InMemoryOrdersRepo()


@pytest.fixture
def products_repo() -> InMemoryProductsRepo:
    return InMemoryProductsRepo()


@pytest.fixture
def menu_groups_repo() -> InMemoryMenuGroupsRepo:
    return InMemoryMenuGroupsRepo()


@pytest.fixture
def menus_repo() -> InMemoryMenusRepo:
    return InMemoryMenusRepo()


@pytest.fixture
def client():
    """``TestClient`` backed by a fresh in-memory database per test."""
    session_factory, engine = app_db.create_test_session()

    def _session():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[app_db.get_session] = _session
    yield TestClient(app)
    app.dependency_overrides.clear()
    engine.dispose()
