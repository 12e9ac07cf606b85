# qcircsim

A small quantum circuit simulator. It reads a qubit count and an initial state
vector from one file, gate definitions and a circuit from another, applies the
circuit to the state and prints the resulting vector.

## Installation

```
pip install .
```

## Usage

```
qcircsim -i init.txt -c circ.txt
```

* `-i` names the initialisation file.
* `-c` names the circuit file.

Both options are required. A missing option, an unknown option, a file that
cannot be opened or malformed file contents print a message on standard error
and the command exits with status 1.

### Initialisation file

```
#qubits 1
#init [1+i0, 0+i0]
```

`#qubits n` sets the number of qubits; the state vector then has `2**n`
entries, and `#qubits` must come before `#init`. `#init` lists the entries
inside `[`, separated by commas or spaces, as complex numbers of the form
`a+ib` or `a-ib`. Each entry must begin with a digit, and the number of
entries must equal `2**n`.

### Circuit file

```
#define X [(0, 1) (1, 0)]
#define Y [(0, -i) (i, 0)]
#circ X Y
```

Each `#define` line names a gate by its first upper-case letter and gives its
matrix row by row, each row in parentheses. Entries may be integers, `i` or
`-i`; the matrix must be `2**n` by `2**n`. A later definition of the same
letter replaces an earlier one. The `#circ` line lists the gates of the
circuit in operator notation: the rightmost gate is applied to the state
first. Letters with no definition are skipped.

### Output

For the two files above:

```

Vout OUTPUT: 
0+i1
0+i0
```

Each entry of the final state is printed on its own line as `real+iimag` or
`real-iimag`, each part formatted like `%g`.

## Library use

* `qcircsim.parsers` — `read_init_file(path)` returns an `InitState`
  (`qubits`, `size`, `vector`); `read_circuit_file(path, size)` returns a
  `Circuit` (`order`, `gates`). The line helpers `is_qubit_line`,
  `is_init_line`, `parse_qubits`, `parse_init(line, size)` and
  `parse_matrix(rows, size)` are available too. Malformed input raises
  `ValueError`.
* `qcircsim.gates` — `Gate(letter, matrix)` and `GateTable`, with `insert`,
  `lookup` (returns `None` for an unknown letter) and `dump`, which renders
  the table's buckets as text; `hash_letter` gives a letter's bucket.
* `qcircsim.operations` — `apply_circuit(order, vector, table)` returns the
  state after the circuit is applied and leaves the input unchanged; a gate
  of the wrong size raises `ValueError`.
* `qcircsim.cli` — `format_complex`, `format_state` and the `main(argv=None)`
  entry point, which returns the exit status.

## Limitations

Matrix entries are limited to integers, `i` and `-i`; fractional or general
complex entries are not accepted. An initial-state entry with a negative real
part cannot be written, since every entry must begin with a digit.