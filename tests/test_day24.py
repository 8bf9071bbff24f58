from itertools import product

import pytest

from advent2024.day24 import Gate, Wire, part_one, part_two

SMALL_EXAMPLE = """\
x00: 1
x01: 1
x02: 1
y00: 0
y01: 1
y02: 0

x00 AND y00 -> z00
x01 XOR y01 -> z01
x02 OR y02 -> z02
"""


def _adder(bits, x, y, swap=None):
    """A ripple-carry adder over the given number of bits, outputs renamed by swap."""
    swap = swap or {}
    lines = [f"x{i:02}: {(x >> i) & 1}" for i in range(bits)]
    lines += [f"y{i:02}: {(y >> i) & 1}" for i in range(bits)]
    gates = ["x00 XOR y00 -> z00", "x00 AND y00 -> c00"]
    for i in range(1, bits):
        carry_in = f"c{i - 1:02}"
        carry_out = f"z{bits:02}" if i == bits - 1 else f"c{i:02}"
        gates += [
            f"x{i:02} XOR y{i:02} -> s{i:02}",
            f"x{i:02} AND y{i:02} -> a{i:02}",
            f"s{i:02} XOR {carry_in} -> z{i:02}",
            f"s{i:02} AND {carry_in} -> b{i:02}",
            f"a{i:02} OR b{i:02} -> {carry_out}",
        ]
    renamed = []
    for gate in gates:
        lhs, out = gate.rsplit(" -> ", 1)
        renamed.append(f"{lhs} -> {swap.get(out, out)}")
    return "\n".join(lines) + "\n\n" + "\n".join(renamed) + "\n"


def test_small_example():
    assert part_one(SMALL_EXAMPLE) == 4


@pytest.mark.parametrize("x, y", [(0, 0), (5, 9), (15, 15), (7, 1), (12, 3)])
def test_adder_adds(x, y):
    assert part_one(_adder(4, x, y)) == x + y


def test_constant_takes_precedence_over_gate():
    text = "a: 1\nb: 1\nz00: 0\n\na OR b -> z00\n"
    assert part_one(text) == 0


def test_loop_is_rejected():
    with pytest.raises(ValueError):
        part_one("x00: 1\n\nz00 AND x00 -> z00\n")


def test_missing_blank_line():
    with pytest.raises(ValueError):
        part_one("x00: 1\nx00 AND x00 -> z00\n")


def test_unknown_gate():
    with pytest.raises(ValueError):
        part_one("x00: 1\ny00: 1\n\nx00 NAND y00 -> z00\n")


def test_xor_truth_table():
    results = [Gate.XOR.apply(a, b) for a, b in product((False, True), repeat=2)]
    assert results == [False, True, True, False]


def test_and_or_agree_on_equal_inputs():
    for value in (False, True):
        assert Gate.AND.apply(value, value) == value
        assert Gate.OR.apply(value, value) == value


def test_wire_takes_either_order():
    wire = Wire("z00", Gate.AND, ("a", "b"))
    assert wire.takes("b", "a")
    assert wire.takes("a", "b")
    assert not wire.takes("a", "c")


def test_correct_adder_has_no_swaps():
    assert part_two(_adder(4, 3, 5)) == ""


@pytest.mark.parametrize(
    "swap, expected",
    [
        ({"s02": "a02", "a02": "s02"}, "a02,s02"),
        ({"z03": "b03", "b03": "z03"}, "b03,z03"),
    ],
)
def test_swapped_outputs_are_found(swap, expected):
    assert part_two(_adder(4, 3, 5, swap)) == expected


def test_repair_without_inputs():
    with pytest.raises(ValueError):
        part_two("a: 1\n\na AND a -> z00\n")