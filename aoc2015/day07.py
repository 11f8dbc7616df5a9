"""Day 7: Some Assembly Required - evaluate a circuit of 16-bit logic gates."""

from __future__ import annotations

import enum
import re
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass

_MASK = 0xFFFF
_WIDTH = 16
_UNSIGNED = re.compile(r"\+?[0-9]+")


class Gate(enum.Enum):
    """The kind of operation that drives a wire."""

    AND = "AND"
    OR = "OR"
    NOT = "NOT"
    LSHIFT = "LSHIFT"
    RSHIFT = "RSHIFT"
    ASSIGN = "ASSIGN"


def _binary_operands(expr: str, gate: Gate, line: str) -> tuple[str, str]:
    tokens = expr.split(f" {gate.value} ")
    if len(tokens) < 2:
        raise ValueError(f"Invalid {gate.value} expression: {line}")
    return tokens[0], tokens[1]


def _shift_amount(token: str, line: str) -> int:
    if not _UNSIGNED.fullmatch(token):
        raise ValueError(f"Invalid shift amount {token!r} in: {line}")
    amount = int(token)
    if amount >= 2**32:
        raise ValueError(f"Invalid shift amount {token!r} in: {line}")
    return amount


def _parse_signal(token: str) -> int | None:
    """A literal 16-bit signal, or None when the token names a wire."""
    if _UNSIGNED.fullmatch(token):
        value = int(token)
        if value <= _MASK:
            return value
    return None


@dataclass(frozen=True)
class Instruction:
    """One gate: its kind, input wires or signals, shift amount and output wire."""

    gate: Gate
    inputs: tuple[str, ...]
    out: str
    amount: int | None = None

    @classmethod
    def from_line(cls, line: str) -> Instruction:
        """Parse a line such as ``x AND y -> d`` or ``123 -> x``."""
        parts = line.split(" -> ")
        if len(parts) != 2:
            raise ValueError(f"Invalid instruction format: {line}")
        expr, out = parts

        if "AND" in expr:
            return cls(Gate.AND, _binary_operands(expr, Gate.AND, line), out)
        if "OR" in expr:
            return cls(Gate.OR, _binary_operands(expr, Gate.OR, line), out)
        if "NOT" in expr:
            operand = expr
            while operand.startswith("NOT "):
                operand = operand[len("NOT "):]
            return cls(Gate.NOT, (operand,), out)
        for gate in (Gate.LSHIFT, Gate.RSHIFT):
            if gate.value in expr:
                source, amount = _binary_operands(expr, gate, line)
                return cls(gate, (source,), out, _shift_amount(amount, line))
        return cls(Gate.ASSIGN, (expr,), out)


def parse_instructions(text: str) -> dict[str, Instruction]:
    """Map each output wire to the instruction that drives it; later lines win."""
    instructions: dict[str, Instruction] = {}
    for line in text.splitlines():
        instruction = Instruction.from_line(line)
        instructions[instruction.out] = instruction
    return instructions


def _shift(value: int, amount: int, left: bool) -> int:
    if amount >= _WIDTH:
        raise OverflowError(f"shift by {amount} overflows a 16-bit signal")
    return ((value << amount) & _MASK) if left else value >> amount


def evaluate(
    wire: str,
    instructions: Mapping[str, Instruction],
    cache: MutableMapping[str, int],
) -> int:
    """Signal on ``wire`` (or the literal it spells), memoising results in ``cache``."""
    literal = _parse_signal(wire)
    if literal is not None:
        return literal
    if wire in cache:
        return cache[wire]
    try:
        instruction = instructions[wire]
    except KeyError:
        raise KeyError(f"No instruction for wire {wire!r}") from None

    values = [evaluate(name, instructions, cache) for name in instruction.inputs]
    gate = instruction.gate
    if gate is Gate.ASSIGN:
        value = values[0]
    elif gate is Gate.AND:
        value = values[0] & values[1]
    elif gate is Gate.OR:
        value = values[0] | values[1]
    elif gate is Gate.NOT:
        value = ~values[0] & _MASK
    else:
        value = _shift(values[0], instruction.amount, gate is Gate.LSHIFT)

    cache[wire] = value
    return value


def signal_a(text: str) -> int:
    """Signal on wire ``a`` for the circuit described by ``text``."""
    return evaluate("a", parse_instructions(text), {})


def signal_a_with_override(text: str) -> int:
    """Signal on ``a`` after feeding its first value into wire ``b`` and rebuilding."""
    instructions = parse_instructions(text)
    first = evaluate("a", instructions, {})
    override = Instruction.from_line(f"{first} -> b")
    instructions[override.out] = override
    return evaluate("a", instructions, {})