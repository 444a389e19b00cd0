import dataclasses

import pytest

from kitchenpos.app.domain import (
    Err,
    ErrorKind,
    Ok,
    OrderStatus,
    OrderTable,
    TRANSITIONS,
    can_transition,
)


def test_new_table_is_empty():
    table = OrderTable.new("T1")
    assert table.occupied is False
    assert table.number_of_guests == 0


def test_table_snapshot_is_frozen():
    table = OrderTable.new("T1")
    with pytest.raises(dataclasses.FrozenInstanceError):
        table.occupied = True


def test_clear_resets_guests_and_occupancy():
    table = OrderTable.new("T1").sit().with_guests(4)
    cleared = table.clear()
    assert (cleared.occupied, cleared.number_of_guests) == (False, 0)
    assert cleared.id == table.id
    assert cleared.name == "T1"


def test_completed_is_terminal():
    assert TRANSITIONS[OrderStatus.COMPLETED] == []
    assert not any(can_transition(OrderStatus.COMPLETED, s) for s in OrderStatus)


@pytest.mark.parametrize(
    "src,dst",
    [
        (OrderStatus.WAITING, OrderStatus.ACCEPTED),
        (OrderStatus.ACCEPTED, OrderStatus.SERVED),
        (OrderStatus.SERVED, OrderStatus.COMPLETED),
    ],
)
def test_forward_transitions(src, dst):
    assert can_transition(src, dst)
    assert not can_transition(dst, src)


def test_result_flags():
    assert Ok(1).ok is True
    assert Err(ErrorKind.CONFLICT, "busy").ok is False
