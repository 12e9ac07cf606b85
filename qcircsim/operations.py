"""Application of a gate sequence to a state vector."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from qcircsim.gates import GateTable


def apply_circuit(order: str, vector: Sequence[complex], table: GateTable) -> List[complex]:
    """Apply the gates named in ``order`` to ``vector``, rightmost first.

    Letters without a gate in ``table`` are skipped. The input is left untouched
    and the resulting vector is returned.
    """
    state = [complex(value) for value in vector]
    size = len(state)
    for letter in reversed(order):
        gate = table.lookup(letter)
        if gate is None:
            continue
        matrix = gate.matrix
        if len(matrix) != size or any(len(row) != size for row in matrix):
            raise ValueError(
                f"gate {letter!r} is not a {size}x{size} matrix"
            )
        state = [_dot(row, state) for row in matrix]
    return state


def _dot(row: Iterable[complex], state: Sequence[complex]) -> complex:
    return sum((entry * value for entry, value in zip(row, state)), 0j)