"""Day 17: a three-bit computer and the search for its quine."""

from __future__ import annotations

import argparse
import re
from collections import defaultdict
from enum import IntEnum
from pathlib import Path
from typing import Iterator, Sequence

_PATTERN = re.compile(
    r"Register A: (\d+)\nRegister B: (\d+)\nRegister C: (\d+)\n\nProgram: ([\d,]+)"
)

# One iteration of the program only looks at this many low bits of register A.
_WINDOW_BITS = 10
_SUFFIX_BITS = 7


class Opcode(IntEnum):
    ADV = 0
    BXL = 1
    BST = 2
    JNZ = 3
    BXC = 4
    OUT = 5
    BDV = 6
    CDV = 7


def parse(text: str) -> tuple[int, int, int, list[int]]:
    """Return registers A, B, C and the program."""
    match = _PATTERN.fullmatch(text.strip())
    if match is None:
        raise ValueError("unrecognised computer description")
    a, b, c, program = match.groups()
    return int(a), int(b), int(c), [int(p) for p in program.split(",")]


def _combo(operand: int, a: int, b: int, c: int) -> int:
    if operand < 4:
        return operand
    if operand == 4:
        return a
    if operand == 5:
        return b
    if operand == 6:
        return c
    raise ValueError(f"invalid combo operand {operand}")


def _execute(program: Sequence[int], a: int, b: int, c: int) -> Iterator[int]:
    ip = 0
    while ip < len(program) - 1:
        try:
            opcode = Opcode(program[ip])
        except ValueError:
            raise ValueError(f"unknown opcode {program[ip]}") from None
        operand = program[ip + 1]
        if opcode is Opcode.ADV:
            a >>= _combo(operand, a, b, c)
        elif opcode is Opcode.BXL:
            b ^= operand
        elif opcode is Opcode.BST:
            b = _combo(operand, a, b, c) % 8
        elif opcode is Opcode.JNZ:
            if a != 0:
                ip = operand
                continue
        elif opcode is Opcode.BXC:
            b ^= c
        elif opcode is Opcode.OUT:
            yield _combo(operand, a, b, c) % 8
        elif opcode is Opcode.BDV:
            b = a >> _combo(operand, a, b, c)
        else:
            c = a >> _combo(operand, a, b, c)
        ip += 2


def run_program(program: Sequence[int], a: int, b: int, c: int) -> list[int]:
    """Run the program from the given registers and return everything it outputs."""
    return list(_execute(program, a, b, c))


def part_one(text: str) -> str:
    """The program's output, comma separated."""
    a, b, c, program = parse(text)
    return ",".join(str(value) for value in run_program(program, a, b, c))


def part_two(text: str) -> list[int]:
    """Every value of register A, smallest first, that makes the program print itself."""
    _, b, c, program = parse(text)

    first_outputs: dict[int, list[int]] = defaultdict(list)
    for a in range(1 << _WINDOW_BITS):
        output = next(_execute(program, a, b, c), None)
        if output is not None:
            first_outputs[output].append(a)

    mask = (1 << _SUFFIX_BITS) - 1

    def search(target: tuple[int, ...], suffix: int) -> Iterator[int]:
        if not target:
            yield suffix
            return
        head, tail = target[0], target[1:]
        for value in first_outputs.get(head, ()):
            if value & mask == suffix:
                for result in search(tail, value >> 3):
                    yield (result << 3) | suffix

    limit = len(program) * 3
    target = tuple(program)
    return sorted(
        result
        for suffix in range(1 << _SUFFIX_BITS)
        for result in search(target, suffix)
        if result >> limit == 0
    )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Day 17: Chronospatial Computer")
    parser.add_argument("input", nargs="?", default="inputs/day17.txt", type=Path)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(part_one(text))
    for result in part_two(text):
        print(result)