"""Quantum gate records and the chained hash table that stores them by letter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

TABLE_SIZE = 50

Matrix = List[List[complex]]


def hash_letter(letter: str) -> int:
    """Return the bucket index of a gate letter: its code point plus one, modulo the table size."""
    return (ord(letter) + 1) % TABLE_SIZE


@dataclass
class Gate:
    """A named square matrix acting on a state vector."""

    letter: str
    matrix: Matrix


class GateTable:
    """Fixed-size hash table of gates with chaining; newer entries shadow older ones."""

    def __init__(self) -> None:
        self._buckets: List[List[Gate]] = [[] for _ in range(TABLE_SIZE)]

    def insert(self, gate: Gate) -> None:
        """Put a gate at the front of its bucket's chain."""
        if gate is None:
            raise TypeError("cannot insert None into the gate table")
        self._buckets[hash_letter(gate.letter)].insert(0, gate)

    def lookup(self, letter: str) -> Optional[Gate]:
        """Return the first gate in the chain with this letter, or None."""
        bucket = self._buckets[hash_letter(letter)]
        return next((gate for gate in bucket if gate.letter == letter), None)

    def dump(self) -> str:
        """Render every bucket and its chain as text, one line per bucket."""
        lines = ["--START--"]
        for index, bucket in enumerate(self._buckets):
            if bucket:
                chain = "".join(f"{gate.letter} - " for gate in bucket)
                lines.append(f"\t{index}\t {chain}")
            else:
                lines.append(f"\t{index}\t--")
        lines.append("--END---")
        return "\n".join(lines) + "\n"