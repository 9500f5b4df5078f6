"""Drive a circuit's inputs through every combination and report each sum."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Callable, Sequence, TextIO

from adderbench.circuits import Circuit, circuit_names, get_circuit

LOW = 0
HIGH = 1
STARTUP_DELAY_MS = 1000


class PinBoard:
    """A set of digital output pins and the levels written to them."""

    def __init__(self) -> None:
        self.outputs: set[int] = set()
        self.levels: dict[int, int] = {}
        self.history: list[tuple[int, int]] = []

    def set_output(self, pin: int) -> None:
        """Configure ``pin`` as an output."""
        self.outputs.add(pin)

    def write(self, pin: int, value: int) -> None:
        """Drive ``pin`` high for any non-zero value, low otherwise."""
        if pin not in self.outputs:
            raise ValueError(f"pin {pin} is not configured as an output")
        level = HIGH if value else LOW
        self.levels[pin] = level
        self.history.append((pin, level))

    def read(self, pin: int) -> int:
        """Current level of ``pin``; pins never written read low."""
        return self.levels.get(pin, LOW)


def run(
    circuit: Circuit,
    out: TextIO | None = None,
    board: PinBoard | None = None,
    sleep: Callable[[float], object] | None = None,
) -> PinBoard:
    """Set up the pins, step through every input combination and report it."""
    out = sys.stdout if out is None else out
    board = PinBoard() if board is None else board
    sleep = time.sleep if sleep is None else sleep

    for pin in circuit.pins:
        board.set_output(pin)
    for pin in circuit.pins:
        board.write(pin, LOW)

    out.write("Starting ... \n\n")
    sleep(STARTUP_DELAY_MS / 1000)

    for step in circuit.steps:
        for pin, value in step.writes:
            board.write(pin, value)
        out.write(step.text)
        sleep(circuit.delay_ms / 1000)

    out.write("\nDone. \n")
    return board


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="adderbench",
        description="Step an adder circuit through all of its inputs.",
    )
    parser.add_argument("circuit", nargs="?", choices=circuit_names())
    parser.add_argument("--list", action="store_true", help="list the known circuits")
    parser.add_argument("--no-delay", action="store_true", help="do not pause between steps")
    args = parser.parse_args(argv)

    if args.list:
        for name in circuit_names():
            print(name)
        return 0
    if args.circuit is None:
        parser.error("a circuit name is required")

    sleep = (lambda _seconds: None) if args.no_delay else time.sleep
    run(get_circuit(args.circuit), sys.stdout, PinBoard(), sleep)
    return 0


if __name__ == "__main__":
    sys.exit(main())