import pytest

from qcircsim.gates import Gate, GateTable
from qcircsim.operations import apply_circuit


@pytest.fixture
def table():
    gates = GateTable()
    gates.insert(Gate("X", [[0j, 1 + 0j], [1 + 0j, 0j]]))
    gates.insert(Gate("Z", [[1 + 0j, 0j], [0j, -1 + 0j]]))
    gates.insert(Gate("Y", [[0j, -1j], [1j, 0j]]))
    return gates


def test_x_flips_basis_state(table):
    assert apply_circuit("X", [1, 0], table) == [0j, 1 + 0j]


def test_rightmost_gate_applied_first(table):
    assert apply_circuit("XZ", [1, 0], table) == [0j, 1 + 0j]
    assert apply_circuit("ZX", [1, 0], table) == [0j, -1 + 0j]


def test_sequence_equals_nested_application(table):
    start = [0.6, 0.8j]
    nested = apply_circuit("Y", apply_circuit("Z", apply_circuit("X", start, table), table), table)
    assert apply_circuit("YZX", start, table) == nested


def test_y_twice_is_identity(table):
    start = [0.6 + 0j, 0.8j]
    assert apply_circuit("YY", start, table) == start


def test_unknown_letters_are_skipped(table):
    start = [0.6 + 0j, 0.8j]
    assert apply_circuit("QW", start, table) == apply_circuit("", start, table)
    assert apply_circuit("QXW", start, table) == apply_circuit("X", start, table)


def test_empty_order_returns_copy(table):
    start = [1 + 0j, 0j]
    result = apply_circuit("", start, table)
    assert result == start
    assert result is not start


def test_input_not_mutated(table):
    start = [1 + 0j, 0j]
    apply_circuit("X", start, table)
    assert start == [1 + 0j, 0j]


def test_norm_is_preserved(table):
    start = [0.6 + 0j, 0.8j]
    result = apply_circuit("XYZXY", start, table)
    assert sum(abs(v) ** 2 for v in result) == pytest.approx(1.0)


def test_matrix_size_mismatch_raises(table):
    with pytest.raises(ValueError):
        apply_circuit("X", [1, 0, 0, 0], table)