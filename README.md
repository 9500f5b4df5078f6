# adderbench

A test bench for small binary adder circuits: half adder, full adder,
2-bit and 3-bit adders, 2- and 3-bit two's-complement adders, and a 2-bit
adder/subtractor.

For the chosen circuit, adderbench works through every combination of input
bits in order. For each combination it writes the input levels to a simulated
pin board. It then prints the input bits and the result the circuit should
show, so you can check a build against it. It waits between steps: one second
at start-up, then the circuit's own delay after each step (2 to 7 seconds).

## Installation

```
pip install .
```

## Command line

```
adderbench --list
adderbench 2-bit-2s-complement
adderbench --no-delay 3-bit-adder
```

- `--list` prints the circuit names: `half-adder`, `full-adder`,
  `2-bit-adder`, `2-bit-2s-complement`, `2-bit-adder-subtractor`,
  `3-bit-adder`, `3-bit-2s-complement`.
- A circuit name runs that circuit. Without a name, and without `--list`,
  the command stops with a usage error.
- `--no-delay` skips the pauses.

A run starts with `Starting ... `, prints one block per step and ends with
`Done. `. This block comes from the 2-bit two's-complement adder:

```
A value = 11
B value = 01
-1 + 1 = 0
```

## Library use

```python
import sys
from adderbench.circuits import get_circuit, circuit_names, to_signed
from adderbench.bench import PinBoard, run

print(circuit_names())
print(to_signed(3, 2))  # -1

circuit = get_circuit("2-bit-2s-complement")
board = run(circuit, sys.stdout, PinBoard(), lambda seconds: None)
print(board.read(13))
```

- `adderbench.circuits`
  - `Circuit`: a frozen dataclass that holds `name`, `description`, `pins`
    (in setup order), `delay_ms` and the tuple of `steps`.
  - `Step`: holds the `(pin, value)` writes for one combination and the
    text to print.
  - One function builds each circuit: `half_adder`, `full_adder`,
    `two_bit_adder`, `two_bit_twos_complement`, `two_bit_adder_subtractor`,
    `three_bit_adder` and `three_bit_twos_complement`.
  - `get_circuit(name)` builds a circuit by its name. An unknown name raises
    `KeyError`.
  - `to_signed(value, bits)` reads an unsigned value as two's complement. A
    value that does not fit in the width, or a width below 1, raises
    `ValueError`.
- `adderbench.bench`
  - `PinBoard` records which pins are outputs (`set_output`), the level each
    pin has (`write`, `read`) and every write in order (`history`). A write to
    a pin that is not an output raises `ValueError`.
  - `run(circuit, out, board, sleep)` sets up the pins, steps through the
    circuit, writes the report to `out` and returns the board. By default it
    uses standard output, a new board and `time.sleep`.

## What it does not do

The pin board is a simulation only. adderbench does not drive real GPIO pins
or a serial line, and it does not read a circuit's outputs back. It prints
the expected results, and you compare them with the circuit yourself.

## Development

```
pip install .[test]
pytest
```