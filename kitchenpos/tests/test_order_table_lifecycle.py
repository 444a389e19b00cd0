import uuid

import pytest

from kitchenpos.app.domain import Err, ErrorKind, Ok, OrderStatus, OrderTable
from kitchenpos.app.domain.order_table import MAX_NUMBER_OF_GUESTS
from kitchenpos.app.schemas import NumberOfGuestsRequest, OrderTableCreateRequest
from kitchenpos.app.services import OrderTableLifecycle

from .fakes import InMemoryOrdersRepo, InMemoryOrderTablesRepo, order_at

NAME = "T1"


@pytest.fixture
def lifecycle(order_tables_repo, orders_repo) -> OrderTableLifecycle:
    return OrderTableLifecycle(order_tables_repo, orders_repo)


def _stored(repo: InMemoryOrderTablesRepo, **kwargs) -> OrderTable:
    return repo.save(OrderTable(name=NAME, **kwargs))


@pytest.mark.parametrize("name", ["T1", "window seat", " 9 "])
def test_create_starts_empty(lifecycle, order_tables_repo, name):
    result = lifecycle.create(OrderTableCreateRequest(name=name))

    assert isinstance(result, Ok)
    table = result.value
    assert table.name == name
    assert table.occupied is False
    assert table.number_of_guests == 0
    assert order_tables_repo.find_by_id(table.id) == table
    assert order_tables_repo.saves == 1


@pytest.mark.parametrize("name", [None, "", "   "])
def test_create_rejects_blank_name(lifecycle, order_tables_repo, name):
    result = lifecycle.create(OrderTableCreateRequest(name=name))

    assert isinstance(result, Err)
    assert result.kind is ErrorKind.INVALID_ARGUMENT
    assert order_tables_repo.saves == 0


def test_create_assigns_distinct_ids(lifecycle):
    first = lifecycle.create(OrderTableCreateRequest(name=NAME)).value
    second = lifecycle.create(OrderTableCreateRequest(name=NAME)).value
    assert first.id != second.id


def test_sit_occupies_and_keeps_guest_count(lifecycle, order_tables_repo):
    table = _stored(order_tables_repo, number_of_guests=1)

    result = lifecycle.sit(table.id)

    assert result.ok
    assert result.value.occupied is True
    assert result.value.number_of_guests == 1
    assert order_tables_repo.find_by_id(table.id).occupied is True


def test_sit_unknown_table(lifecycle):
    result = lifecycle.sit(uuid.uuid4())
    assert isinstance(result, Err)
    assert result.kind is ErrorKind.NOT_FOUND


@pytest.mark.parametrize("guests", [0, 1, 5, 100, MAX_NUMBER_OF_GUESTS])
def test_change_number_of_guests(lifecycle, order_tables_repo, guests):
    table = _stored(order_tables_repo, occupied=True, number_of_guests=1)

    result = lifecycle.change_number_of_guests(
        table.id, NumberOfGuestsRequest(number_of_guests=guests)
    )

    assert isinstance(result, Ok)
    assert result.value.number_of_guests == guests
    assert order_tables_repo.find_by_id(table.id).number_of_guests == guests


@pytest.mark.parametrize(
    "guests", [-1, -100, None, MAX_NUMBER_OF_GUESTS + 1, 10**20]
)
def test_change_number_of_guests_rejects_out_of_range(lifecycle, order_tables_repo, guests):
    table = _stored(order_tables_repo, occupied=True, number_of_guests=1)

    result = lifecycle.change_number_of_guests(
        table.id, NumberOfGuestsRequest(number_of_guests=guests)
    )

    assert isinstance(result, Err)
    assert result.kind is ErrorKind.INVALID_ARGUMENT
    assert order_tables_repo.find_by_id(table.id).number_of_guests == 1


def test_negative_guests_reported_before_missing_table(lifecycle):
    result = lifecycle.change_number_of_guests(
        uuid.uuid4(), NumberOfGuestsRequest(number_of_guests=-1)
    )
    assert result.kind is ErrorKind.INVALID_ARGUMENT


def test_change_number_of_guests_unknown_table(lifecycle):
    result = lifecycle.change_number_of_guests(
        uuid.uuid4(), NumberOfGuestsRequest(number_of_guests=5)
    )
    assert result.kind is ErrorKind.NOT_FOUND


def test_change_number_of_guests_requires_occupied_table(lifecycle, order_tables_repo):
    table = _stored(order_tables_repo, occupied=False, number_of_guests=0)

    result = lifecycle.change_number_of_guests(
        table.id, NumberOfGuestsRequest(number_of_guests=5)
    )

    assert result.kind is ErrorKind.CONFLICT
    assert order_tables_repo.find_by_id(table.id).number_of_guests == 0


def test_clear_resets_table(lifecycle, order_tables_repo, orders_repo):
    table = _stored(order_tables_repo, occupied=True, number_of_guests=4)
    orders_repo.save(order_at(table, OrderStatus.COMPLETED))

    result = lifecycle.clear(table.id)

    assert isinstance(result, Ok)
    assert result.value.occupied is False
    assert result.value.number_of_guests == 0
    assert order_tables_repo.find_by_id(table.id) == result.value


@pytest.mark.parametrize(
    "status", [OrderStatus.WAITING, OrderStatus.ACCEPTED, OrderStatus.SERVED]
)
def test_clear_refused_with_unfinished_order(
    lifecycle, order_tables_repo, orders_repo, status
):
    table = _stored(order_tables_repo, occupied=True, number_of_guests=4)
    orders_repo.save(order_at(table, status))

    result = lifecycle.clear(table.id)

    assert result.kind is ErrorKind.CONFLICT
    assert order_tables_repo.find_by_id(table.id).occupied is True


def test_clear_ignores_orders_of_other_tables(lifecycle, order_tables_repo, orders_repo):
    table = _stored(order_tables_repo, occupied=True)
    other = _stored(order_tables_repo, occupied=True)
    orders_repo.save(order_at(other))

    assert lifecycle.clear(table.id).ok


def test_clear_unknown_table(lifecycle):
    assert lifecycle.clear(uuid.uuid4()).kind is ErrorKind.NOT_FOUND


def test_find_all_returns_every_table(lifecycle, order_tables_repo):
    empty = _stored(order_tables_repo)
    busy = _stored(order_tables_repo, occupied=True, number_of_guests=3)

    assert lifecycle.find_all() == [empty, busy]


def test_transitions_do_not_mutate_previous_snapshot(lifecycle, order_tables_repo):
    table = _stored(order_tables_repo)

    seated = lifecycle.sit(table.id).value

    assert table.occupied is False
    assert seated is not table


def test_full_lifecycle_with_completed_order():
    tables = InMemoryOrderTablesRepo()
    orders = InMemoryOrdersRepo()
    lifecycle = OrderTableLifecycle(tables, orders)

    table = lifecycle.create(OrderTableCreateRequest(name=NAME)).value
    lifecycle.sit(table.id)
    lifecycle.change_number_of_guests(table.id, NumberOfGuestsRequest(number_of_guests=5))
    orders.save(order_at(table, OrderStatus.COMPLETED))

    cleared = lifecycle.clear(table.id).value
    assert cleared.occupied is False
    assert cleared.number_of_guests == 0
