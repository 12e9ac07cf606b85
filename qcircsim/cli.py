"""Command-line entry point: load a state and a circuit, run it, print the result."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, List, Optional, Sequence

from qcircsim.operations import apply_circuit
from qcircsim.parsers import read_circuit_file, read_init_file


class _UsageError(Exception):
    """Raised instead of exiting when the command line is malformed."""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise _UsageError(message)


def format_complex(value: complex) -> str:
    """Render a complex number as ``a+ib`` or ``a-ib`` using ``%g`` for each part."""
    value = complex(value)
    if value.imag < 0:
        return "%g-i%g" % (value.real, -value.imag)
    return "%g+i%g" % (value.real, value.imag)


def format_state(vector: Iterable[complex]) -> List[str]:
    """Render every element of a state vector."""
    return [format_complex(value) for value in vector]


def _build_parser() -> _Parser:
    parser = _Parser(prog="qcircsim", description="Apply a quantum circuit to a state vector.")
    parser.add_argument("-i", dest="init_file", metavar="INIT", help="initialisation file")
    parser.add_argument("-c", dest="circ_file", metavar="CIRC", help="circuit file")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the simulator; return the process exit status."""
    parser = _build_parser()
    args_list = list(sys.argv[1:] if argv is None else argv)
    try:
        args, extras = parser.parse_known_args(args_list)
        unknown = [item for item in extras if item.startswith("-")]
        if unknown:
            raise _UsageError(f"unknown option {unknown[0]}")
    except _UsageError as exc:
        print(f"{parser.prog}: {exc}", file=sys.stderr)
        return 1

    if args.init_file is None:
        print("Option -i requires an argument <Init Filename>", file=sys.stderr)
        return 1
    if args.circ_file is None:
        print("Option -c requires an argument <Circ Filename>", file=sys.stderr)
        return 1

    try:
        state = read_init_file(args.init_file)
        circuit = read_circuit_file(args.circ_file, state.size)
        result = apply_circuit(circuit.order, state.vector, circuit.gates)
    except OSError as exc:
        print(f"Error apertura file: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"{parser.prog}: {exc}", file=sys.stderr)
        return 1

    print("\nVout OUTPUT: ")
    for text in format_state(result):
        print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())