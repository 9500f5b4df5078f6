import io

import pytest

from adderbench.bench import HIGH, LOW, PinBoard, main, run
from adderbench.circuits import circuit_names, get_circuit, half_adder, two_bit_adder


def _run(circuit):
    out = io.StringIO()
    pauses = []
    board = run(circuit, out, PinBoard(), pauses.append)
    return out.getvalue(), pauses, board


def test_write_requires_output_pin():
    board = PinBoard()
    with pytest.raises(ValueError):
        board.write(13, HIGH)


def test_write_normalises_levels():
    board = PinBoard()
    board.set_output(12)
    board.write(12, 2)
    assert board.read(12) == HIGH
    board.write(12, 0)
    assert board.read(12) == LOW
    assert board.history == [(12, HIGH), (12, LOW)]


def test_unwritten_pin_reads_low():
    assert PinBoard().read(7) == LOW


@pytest.mark.parametrize("name", circuit_names())
def test_run_output_framing(name):
    circuit = get_circuit(name)
    text, pauses, _ = _run(circuit)
    assert text.startswith("Starting ... \n\n")
    assert text.endswith("\nDone. \n")
    body = text.removeprefix("Starting ... \n\n").removesuffix("\nDone. \n")
    assert body == "".join(step.text for step in circuit.steps)
    assert pauses == [1.0] + [circuit.delay_ms / 1000] * len(circuit.steps)


@pytest.mark.parametrize("name", circuit_names())
def test_run_sets_up_pins_low_first(name):
    circuit = get_circuit(name)
    _, _, board = _run(circuit)
    assert board.outputs == set(circuit.pins)
    setup = board.history[: len(circuit.pins)]
    assert setup == [(pin, LOW) for pin in circuit.pins]


def test_half_adder_final_levels():
    _, _, board = _run(half_adder())
    assert board.read(13) == HIGH
    assert board.read(12) == HIGH


def test_two_bit_adder_leaves_carry_low():
    _, _, board = _run(two_bit_adder())
    assert board.read(9) == LOW
    assert board.read(12) == HIGH


def test_main_lists_circuits(capsys):
    assert main(["--list"]) == 0
    assert capsys.readouterr().out.split() == circuit_names()


def test_main_runs_circuit(capsys):
    assert main(["half-adder", "--no-delay"]) == 0
    out = capsys.readouterr().out
    for step in half_adder().steps:
        assert step.text in out
    assert out.endswith("\nDone. \n")


def test_main_rejects_unknown_circuit():
    with pytest.raises(SystemExit) as excinfo:
        main(["no-such-circuit"])
    assert excinfo.value.code == 2


def test_main_requires_circuit():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2