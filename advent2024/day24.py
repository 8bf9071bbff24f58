"""Day 24: simulate a circuit of logic gates and repair its crossed wires."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from enum import Enum
from itertools import count
from pathlib import Path


class Gate(Enum):
    """The kinds of logic gate in the circuit."""

    AND = "AND"
    OR = "OR"
    XOR = "XOR"

    def apply(self, a: bool, b: bool) -> bool:
        """Output of the gate for the two input values."""
        if self is Gate.AND:
            return a and b
        if self is Gate.OR:
            return a or b
        return a != b


@dataclass
class Wire:
    """A wire driven by a gate over two named input wires."""

    name: str
    gate: Gate
    inputs: tuple[str, str]

    def takes(self, a: str, b: str) -> bool:
        """True if the gate's inputs are exactly a and b, in either order."""
        return self.inputs in ((a, b), (b, a))


def _parse(text: str) -> tuple[list[tuple[str, bool]], list[Wire]]:
    inputs_text, sep, gates_text = text.partition("\n\n")
    if not sep:
        raise ValueError("input has no blank line between wire values and gates")
    inputs = []
    for line in inputs_text.splitlines():
        name, sep, value = line.partition(": ")
        if not sep:
            raise ValueError(f"unrecognised wire value: {line!r}")
        inputs.append((name, value.strip() == "1"))
    wires = []
    for line in gates_text.splitlines():
        if not line.strip():
            continue
        parts = line.split(" ")
        if len(parts) != 5 or parts[3] != "->":
            raise ValueError(f"unrecognised gate: {line!r}")
        try:
            gate = Gate(parts[1])
        except ValueError:
            raise ValueError(f"unknown gate {parts[1]!r}") from None
        wires.append(Wire(parts[4], gate, (parts[0], parts[2])))
    return inputs, wires


def part_one(text: str) -> int:
    """The number formed by the z wires, z00 being the lowest bit."""
    inputs, wires = _parse(text)
    values = dict(inputs)
    gates: dict[str, Wire] = {}
    for wire in wires:
        if wire.name not in values:
            gates.setdefault(wire.name, wire)
    pending: set[str] = set()

    def evaluate(name: str) -> bool | None:
        if name in values:
            return values[name]
        wire = gates.get(name)
        if wire is None:
            return None
        if name in pending:
            raise ValueError(f"circuit has a loop through {name!r}")
        pending.add(name)
        try:
            a = evaluate(wire.inputs[0])
            if a is None:
                return None
            b = evaluate(wire.inputs[1])
            if b is None:
                return None
        finally:
            pending.discard(name)
        values[name] = wire.gate.apply(a, b)
        return values[name]

    result = 0
    for bit in count():
        value = evaluate(f"z{bit:02}")
        if value is None:
            break
        result |= int(value) << bit
    return result


def _other(inputs: tuple[str, str], excluded: str) -> str:
    for name in inputs:
        if name != excluded:
            return name
    raise ValueError(f"gate has no input besides {excluded!r}")


class _Repair:
    """Walks a ripple-carry adder bit by bit, swapping outputs that do not fit."""

    def __init__(self, wires: list[Wire]) -> None:
        self.wires = wires
        self.swapped: set[str] = set()

    def swap(self, a: str, b: str) -> None:
        self.swapped.update((a, b))
        for wire in self.wires:
            if wire.name == a:
                wire.name = b
            elif wire.name == b:
                wire.name = a

    def find(self, gate: Gate, a: str, b: str) -> str | None:
        for wire in self.wires:
            if wire.gate is gate and wire.takes(a, b):
                return wire.name
        return None

    def half_adder(self, a: str, b: str, output: str) -> str:
        direct = self.find(Gate.XOR, a, b)
        if direct is None:
            raise ValueError(f"no XOR gate over {a!r} and {b!r}")
        if direct != output:
            self.swap(direct, output)
        carry = self.find(Gate.AND, a, b)
        if carry is None:
            raise ValueError(f"Carry not found for {a!r} and {b!r}")
        return carry

    def full_adder(self, a: str, b: str, carry_in: str, output: str) -> str:
        from_inputs = self.find(Gate.XOR, a, b)
        if from_inputs is None:
            raise ValueError(f"no XOR gate over {a!r} and {b!r}")

        intermediate, carry = from_inputs, carry_in
        for wire in self.wires:
            if wire.gate is not Gate.XOR:
                continue
            has_intermediate = from_inputs in wire.inputs
            has_carry = carry_in in wire.inputs
            has_output = wire.name == output
            if has_intermediate + has_carry + has_output < 2:
                continue
            if not has_intermediate:
                intermediate = _other(wire.inputs, carry_in)
                self.swap(from_inputs, intermediate)
            elif not has_carry:
                carry = _other(wire.inputs, from_inputs)
                self.swap(carry_in, carry)
            elif not has_output:
                self.swap(output, wire.name)
            break

        carry1 = self.find(Gate.AND, a, b)
        if carry1 is None:
            raise ValueError(f"no AND gate over {a!r} and {b!r}")
        carry2 = self.find(Gate.AND, intermediate, carry)
        if carry2 is None:
            raise ValueError(f"no AND gate over {intermediate!r} and {carry!r}")

        for wire in self.wires:
            if wire.gate is not Gate.OR:
                continue
            has_carry1 = carry1 in wire.inputs
            has_carry2 = carry2 in wire.inputs
            if not (has_carry1 or has_carry2):
                continue
            if not has_carry1:
                self.swap(carry1, _other(wire.inputs, carry2))
            elif not has_carry2:
                self.swap(carry2, _other(wire.inputs, carry1))
            return wire.name
        raise ValueError(f"Carry not found for {carry1!r} and {carry2!r}")


def part_two(text: str) -> str:
    """Names of the swapped output wires, sorted and comma separated."""
    inputs, wires = _parse(text)
    a_inputs = [name for name, _ in inputs if name.startswith("x")]
    b_inputs = [name for name, _ in inputs if name.startswith("y")]
    if not a_inputs or len(b_inputs) < len(a_inputs):
        raise ValueError("circuit needs matching x and y inputs")
    repair = _Repair(wires)
    carry = repair.half_adder(a_inputs[0], b_inputs[0], "z00")
    for bit, (a, b) in enumerate(zip(a_inputs[1:], b_inputs[1:]), start=1):
        carry = repair.full_adder(a, b, carry, f"z{bit:02}")
    return ",".join(sorted(repair.swapped))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Day 24: Crossed Wires")
    parser.add_argument("input", nargs="?", default="inputs/day24.txt", type=Path)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(part_one(text))
    print(part_two(text))