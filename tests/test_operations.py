import pytest

from pushswap.operations import Machine
from pushswap.stack import Stack


def make(values, b_values=()):
    return Machine(Stack.from_values(values), Stack.from_values(b_values))


def test_default_machine_has_empty_stacks():
    machine = Machine()
    assert len(machine.a) == 0
    assert len(machine.b) == 0
    assert machine.operations == []


def test_sa_exchanges_top_values():
    values = [5, 9, 4]
    machine = make(values)
    machine.sa()
    assert machine.a.contents() == [values[1], values[0], values[2]]
    assert machine.operations == ["sa"]


def test_sa_keeps_indices_in_place():
    machine = make([5, 9, 4])
    machine.sa()
    assert [node.index for node in machine.a] == [0, 1, 2]


def test_sa_twice_restores():
    values = [5, 9, 4]
    machine = make(values)
    machine.sa()
    machine.sa()
    assert machine.a.contents() == values
    assert machine.operations == ["sa", "sa"]


def test_sa_needs_two_elements():
    machine = make([7])
    with pytest.raises(IndexError):
        machine.sa()


def test_sb_acts_on_b():
    machine = make([1, 2], [8, 6])
    machine.sb()
    assert machine.b.contents() == [6, 8]
    assert machine.a.contents() == [1, 2]
    assert machine.operations == ["sb"]


def test_ss_logs_both_swaps_then_itself():
    machine = make([1, 2], [3, 4])
    machine.ss()
    assert machine.a.contents() == [2, 1]
    assert machine.b.contents() == [4, 3]
    assert machine.operations == ["sa", "sb", "ss"]


def test_pb_onto_empty_b():
    values = [3, 1, 2]
    machine = make(values)
    machine.pb()
    assert machine.a.contents() == values[1:]
    assert machine.b.contents() == values[:1]
    assert machine.operations == ["pb"]


def test_pb_then_pa_round_trip():
    values = [3, 1, 2, 6]
    machine = make(values)
    machine.pb()
    machine.pb()
    machine.pa()
    machine.pa()
    assert machine.a.contents() == values
    assert not machine.b
    assert machine.operations == ["pb", "pb", "pa", "pa"]


def test_pb_stacks_on_top_of_b():
    values = [3, 1, 2]
    machine = make(values)
    machine.pb()
    machine.pb()
    assert machine.b.contents() == [values[1], values[0]]


def test_pa_from_empty_b_raises():
    machine = make([1, 2])
    with pytest.raises(IndexError):
        machine.pa()


def test_ra_moves_top_to_bottom():
    values = [4, 8, 15, 16]
    machine = make(values)
    machine.ra()
    assert machine.a.contents() == values[1:] + values[:1]
    assert machine.operations == ["ra"]


def test_rra_moves_bottom_to_top():
    values = [4, 8, 15, 16]
    machine = make(values)
    machine.rra()
    assert machine.a.contents() == values[-1:] + values[:-1]
    assert machine.operations == ["rra"]


def test_ra_then_rra_round_trip():
    values = [4, 8, 15, 16, 23]
    machine = make(values)
    machine.ra()
    machine.rra()
    assert machine.a.contents() == values


def test_rotate_on_empty_raises():
    machine = Machine()
    with pytest.raises(IndexError):
        machine.ra()
    with pytest.raises(IndexError):
        machine.rra()