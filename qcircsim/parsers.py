"""Readers for the initial-state file and the circuit file."""

from __future__ import annotations

import logging
import os
import re
import string
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Union

from qcircsim.gates import Gate, GateTable, Matrix

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT = re.compile(r"\s*([+-]?\d+)")
_DIGITS_DOTS = re.compile(r"[0-9.]*")
_FIRST_INIT_ITEM = re.compile(r"[^ ,]+")
_NEXT_INIT_ITEM = re.compile(r"[^ ,\]]+")
_ROW_SPLIT = re.compile(r"[()\]]")
_ENTRY_SPLIT = re.compile(r"[ ,]+")
_UPPER = frozenset(string.ascii_uppercase)
_DIGITS = frozenset(string.digits)


@dataclass
class InitState:
    """Contents of an initialisation file."""

    qubits: int
    size: int
    vector: List[complex]


@dataclass
class Circuit:
    """Contents of a circuit file: the gate order and the defined gates."""

    order: str = ""
    gates: GateTable = field(default_factory=GateTable)


def is_qubit_line(line: str) -> bool:
    """True if the line carries the qubit count."""
    return "#qubits" in line


def is_init_line(line: str) -> bool:
    """True if the line carries the initial vector."""
    return "#init" in line


def parse_qubits(line: str) -> int:
    """Return the integer following the first word, or 0 if there is none."""
    parts = line.split(None, 1)
    if len(parts) < 2:
        return 0
    match = _INT.match(parts[1])
    return int(match.group(1)) if match else 0


def _init_items(text: str) -> Iterator[str]:
    pattern = _FIRST_INIT_ITEM
    pos = 0
    while (match := pattern.search(text, pos)) is not None:
        yield match.group()
        pos = match.end()
        pattern = _NEXT_INIT_ITEM


def _move_imaginary_digits(item: str) -> str:
    """Rewrite ``a+ib`` as ``a+bi`` so both parts read as plain numbers."""
    pos = item.find("i")
    if pos < 0:
        return item
    run = _DIGITS_DOTS.match(item, pos + 1).group()
    return item[:pos] + run + "i" + item[pos + 1 + len(run):]


def _parse_complex_item(item: str) -> complex:
    text = _move_imaginary_digits(item)
    real_match = _FLOAT.match(text)
    if real_match is None:
        raise ValueError(f"malformed complex number {item!r}")
    imag_match = _FLOAT.match(text, real_match.end())
    imag = float(imag_match.group(1)) if imag_match else 0.0
    return complex(float(real_match.group(1)), imag)


def parse_init(line: str, size: int) -> List[complex]:
    """Parse the bracketed list of complex numbers on an ``#init`` line."""
    start = line.find("[")
    if start < 0:
        raise ValueError("character '[' not found in line")
    values: List[complex] = []
    for item in _init_items(line[start + 1:]):
        if item[0] not in _DIGITS:
            break
        values.append(_parse_complex_item(item))
    if len(values) != size:
        raise ValueError(f"expected {size} vector elements, found {len(values)}")
    return values


def _parse_entry(entry: str) -> complex:
    if "i" in entry:
        if entry == "i":
            return 1j
        if entry == "-i":
            return -1j
        raise ValueError(f"unsupported matrix entry {entry!r}")
    match = _INT.match(entry)
    return complex(int(match.group(1)) if match else 0)


def parse_matrix(rows: Iterable[str], size: int) -> Matrix:
    """Parse ``size`` rows of comma or space separated entries into a matrix."""
    rows = list(rows)
    if len(rows) != size:
        raise ValueError(f"expected {size} matrix rows, found {len(rows)}")
    matrix: Matrix = []
    for row in rows:
        entries = [_parse_entry(entry) for entry in _ENTRY_SPLIT.split(row) if entry]
        if len(entries) != size:
            raise ValueError(f"expected {size} entries in row {row!r}, found {len(entries)}")
        matrix.append(entries)
    return matrix


def read_init_file(path: PathLike) -> InitState:
    """Read the qubit count and initial state vector from a file."""
    qubits: Optional[int] = None
    size: Optional[int] = None
    vector: Optional[List[complex]] = None
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            if is_qubit_line(line):
                qubits = parse_qubits(line)
                if qubits < 0:
                    raise ValueError(f"negative qubit count {qubits}")
                size = 2 ** qubits
            elif is_init_line(line):
                if size is None:
                    raise ValueError("#init line appears before #qubits")
                vector = parse_init(line, size)
    if qubits is None or size is None:
        raise ValueError("no #qubits line in initialisation file")
    if vector is None:
        raise ValueError("no #init line in initialisation file")
    if len(vector) != size:
        raise ValueError(f"initial vector has {len(vector)} elements, expected {size}")
    return InitState(qubits, size, vector)


def _parse_define(line: str, size: int) -> Optional[Gate]:
    start = line.index("#define") + len("#define")
    letter = next((c for c in line[start:] if c in _UPPER), None)
    if letter is None:
        raise ValueError(f"gate definition without an upper-case letter: {line!r}")
    paren = line.find("(")
    if paren < 0:
        logger.warning("gate definition %r has no matrix", letter)
        return None
    rows = [part for part in _ROW_SPLIT.split(line[paren:]) if part and not part[0].isspace()]
    return Gate(letter, parse_matrix(rows, size))


def read_circuit_file(path: PathLike, size: int) -> Circuit:
    """Read gate definitions and the gate order from a circuit file."""
    circuit = Circuit()
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            if "#define" in line:
                gate = _parse_define(line, size)
                if gate is not None:
                    circuit.gates.insert(gate)
            elif "#circ" in line:
                rest = line[line.index("#circ"):].split("\n", 1)[0]
                circuit.order = "".join(c for c in rest if c in _UPPER)
    return circuit