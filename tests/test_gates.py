import string

import pytest

from qcircsim.gates import TABLE_SIZE, Gate, GateTable, hash_letter


def _gate(letter):
    return Gate(letter, [[0j, 1 + 0j], [1 + 0j, 0j]])


def test_hash_stays_in_table():
    assert all(0 <= hash_letter(c) < TABLE_SIZE for c in string.printable)


def test_hash_pinned_value():
    assert hash_letter("X") == 39


def test_hash_wraps_every_table_size():
    assert hash_letter("A") == hash_letter(chr(ord("A") + TABLE_SIZE))


def test_insert_then_lookup_returns_same_gate():
    table = GateTable()
    gate = _gate("X")
    table.insert(gate)
    assert table.lookup("X") is gate


def test_lookup_missing_letter_is_none():
    table = GateTable()
    table.insert(_gate("X"))
    assert table.lookup("Y") is None


def test_colliding_letters_are_both_found():
    table = GateTable()
    first = _gate("A")
    second = _gate(chr(ord("A") + TABLE_SIZE))
    table.insert(first)
    table.insert(second)
    assert table.lookup("A") is first
    assert table.lookup(second.letter) is second


def test_newer_gate_shadows_older_with_same_letter():
    table = GateTable()
    old = _gate("H")
    new = _gate("H")
    table.insert(old)
    table.insert(new)
    assert table.lookup("H") is new


def test_insert_none_raises():
    with pytest.raises(TypeError):
        GateTable().insert(None)


def test_dump_empty_table():
    lines = GateTable().dump().splitlines()
    assert lines[0] == "--START--"
    assert lines[-1] == "--END---"
    assert len(lines) == TABLE_SIZE + 2
    assert all(line.endswith("\t--") for line in lines[1:-1])


def test_dump_shows_chain_newest_first():
    table = GateTable()
    other = chr(ord("A") + TABLE_SIZE)
    table.insert(_gate("A"))
    table.insert(_gate(other))
    index = hash_letter("A")
    lines = table.dump().splitlines()
    assert lines[index + 1] == f"\t{index}\t {other} - A - "