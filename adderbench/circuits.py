"""Adder circuits as sequences of input steps and the report printed for each."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import product
from typing import Callable, Iterator, Sequence

_BIT = (0, 1)

Level = tuple[int, Sequence[int]]


@dataclass(frozen=True)
class Step:
    """One input combination: the pin writes that set it up and the text reported."""

    writes: tuple[tuple[int, int], ...]
    text: str


@dataclass(frozen=True)
class Circuit:
    """A circuit under test: its pins in setup order, pause per step, and steps."""

    name: str
    description: str
    pins: tuple[int, ...]
    delay_ms: int
    steps: tuple[Step, ...]


def to_signed(value: int, bits: int) -> int:
    """Interpret an unsigned ``bits``-wide value as two's complement."""
    if bits < 1:
        raise ValueError(f"bit width must be positive, got {bits}")
    if not 0 <= value < 1 << bits:
        raise ValueError(f"{value} does not fit in {bits} bit(s)")
    return value - (1 << bits) if value >= 1 << (bits - 1) else value


def _sweep(levels: Sequence[Level]) -> Iterator[tuple[tuple[int, ...], tuple[tuple[int, int], ...]]]:
    """Walk nested loops over pin values, yielding each combination and its writes.

    As with nested loops, a pin is written when its own loop advances, and
    every inner pin is rewritten when an outer one changes.
    """
    pins = [pin for pin, _ in levels]
    previous: tuple[int, ...] | None = None
    for combo in product(*(values for _, values in levels)):
        if previous is None:
            start = 0
        else:
            start = next(
                position
                for position, (old, new) in enumerate(zip(previous, combo))
                if old != new
            )
        previous = combo
        yield combo, tuple(zip(pins[start:], combo[start:]))


def _digits(bits: Sequence[int]) -> str:
    return "".join(map(str, bits))


def _equation_text(a_bits: Sequence[int], b_bits: Sequence[int], *, signed: bool, subtract: bool) -> str:
    a = int(_digits(a_bits), 2)
    b = int(_digits(b_bits), 2)
    if signed:
        a = to_signed(a, len(a_bits))
        b = to_signed(b, len(b_bits))
    sign, result = ("-", a - b) if subtract else ("+", a + b)
    return (
        f"A value = {_digits(a_bits)}\n"
        f"B value = {_digits(b_bits)}\n"
        f"{a} {sign} {b} = {result}\n\n"
    )


def _word_steps(a_pins: Sequence[int], b_pins: Sequence[int], *, signed: bool) -> tuple[Step, ...]:
    """Steps over every pair of words, pins given most significant first."""
    levels = [(pin, _BIT) for pin in (*a_pins, *b_pins)]
    width = len(a_pins)
    return tuple(
        Step(writes, _equation_text(combo[:width], combo[width:], signed=signed, subtract=False))
        for combo, writes in _sweep(levels)
    )


def half_adder() -> Circuit:
    """Two single-bit inputs."""
    digit_a1, digit_b1 = 13, 12
    steps = tuple(
        Step(writes, f"A1 = {a}\nB1 = {b}\n{a} + {b} = {a + b}\n\n")
        for (a, b), writes in _sweep([(digit_a1, _BIT), (digit_b1, _BIT)])
    )
    return Circuit("half-adder", "half adder", (digit_a1, digit_b1), 2000, steps)


def full_adder() -> Circuit:
    """Carry in plus two single-bit inputs."""
    cin, digit_a1, digit_b1 = 13, 12, 11
    steps = tuple(
        Step(
            writes,
            f"Cin = {c}\nA1 = {a}\nB1 = {b}\n{c} + {a} + {b} = {c + a + b}\n\n",
        )
        for (c, a, b), writes in _sweep([(cin, _BIT), (digit_a1, _BIT), (digit_b1, _BIT)])
    )
    return Circuit("full-adder", "full adder", (cin, digit_a1, digit_b1), 3500, steps)


def two_bit_adder() -> Circuit:
    """Two unsigned 2-bit inputs; the twos digits are reported by place value."""
    digit_a1, digit_a2, digit_b1, digit_b2, cin = 13, 12, 11, 10, 9
    levels = [(digit_a2, (0, 2)), (digit_a1, _BIT), (digit_b2, (0, 2)), (digit_b1, _BIT)]
    steps = tuple(
        Step(
            writes,
            f"A2 = {a2}\nA1 = {a1}\nB2 = {b2}\nB1 = {b1}\n"
            f"{a2 + a1} + {b2 + b1} = {a2 + a1 + b2 + b1}\n\n",
        )
        for (a2, a1, b2, b1), writes in _sweep(levels)
    )
    pins = (digit_a1, digit_a2, digit_b1, digit_b2, cin)
    return Circuit("2-bit-adder", "2-bit adder", pins, 4000, steps)


def two_bit_twos_complement() -> Circuit:
    """Two signed 2-bit inputs in two's complement."""
    digit_a1, digit_a2, digit_b1, digit_b2 = 13, 12, 11, 10
    steps = _word_steps((digit_a2, digit_a1), (digit_b2, digit_b1), signed=True)
    pins = (digit_a1, digit_a2, digit_b1, digit_b2)
    return Circuit("2-bit-2s-complement", "2-bit two's complement adder", pins, 4000, steps)


def two_bit_adder_subtractor() -> Circuit:
    """Signed 2-bit inputs, first added and then, with the subtract line high, subtracted."""
    digit_a1, digit_a2, digit_b1, digit_b2, subtraction = 13, 11, 12, 10, 9
    levels = [
        (subtraction, _BIT),
        (digit_a2, _BIT),
        (digit_a1, _BIT),
        (digit_b2, _BIT),
        (digit_b1, _BIT),
    ]
    steps = tuple(
        Step(writes, _equation_text(combo[1:3], combo[3:], signed=True, subtract=bool(combo[0])))
        for combo, writes in _sweep(levels)
    )
    pins = (digit_a1, digit_a2, digit_b1, digit_b2, subtraction)
    return Circuit("2-bit-adder-subtractor", "2-bit adder/subtractor", pins, 7000, steps)


_THREE_BIT_PINS = {"a1": 13, "a2": 12, "b1": 11, "b2": 10, "a3": 9, "b3": 8}


def _three_bit(name: str, description: str, *, signed: bool) -> Circuit:
    p = _THREE_BIT_PINS
    steps = _word_steps((p["a3"], p["a2"], p["a1"]), (p["b3"], p["b2"], p["b1"]), signed=signed)
    pins = (p["a1"], p["a2"], p["a3"], p["b1"], p["b2"], p["b3"])
    return Circuit(name, description, pins, 7000, steps)


def three_bit_adder() -> Circuit:
    """Two unsigned 3-bit inputs."""
    return _three_bit("3-bit-adder", "3-bit adder", signed=False)


def three_bit_twos_complement() -> Circuit:
    """Two signed 3-bit inputs in two's complement."""
    return _three_bit("3-bit-2s-complement", "3-bit two's complement adder", signed=True)


_FACTORIES: dict[str, Callable[[], Circuit]] = {
    "half-adder": half_adder,
    "full-adder": full_adder,
    "2-bit-adder": two_bit_adder,
    "2-bit-2s-complement": two_bit_twos_complement,
    "2-bit-adder-subtractor": two_bit_adder_subtractor,
    "3-bit-adder": three_bit_adder,
    "3-bit-2s-complement": three_bit_twos_complement,
}


def get_circuit(name: str) -> Circuit:
    """Build the circuit registered under ``name``."""
    try:
        factory = _FACTORIES[name]
    except KeyError:
        raise KeyError(f"unknown circuit {name!r}") from None
    return factory()


def circuit_names() -> list[str]:
    """Names of every known circuit."""
    return list(_FACTORIES)