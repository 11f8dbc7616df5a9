"""Day 6: Probably a Fire Hazard - follow instructions on a grid of lights."""

from __future__ import annotations

import enum
from dataclasses import dataclass

GRID_SIZE = 1000

_TOGGLE_TABLE = bytes.maketrans(b"\x00\x01", b"\x01\x00")


class Action(enum.Enum):
    """What an instruction does to the lights in its rectangle."""

    ON = "turn on"
    OFF = "turn off"
    TOGGLE = "toggle"


@dataclass(frozen=True)
class Instruction:
    """One instruction: an action over an inclusive rectangle of lights."""

    action: Action
    start: tuple[int, int]
    end: tuple[int, int]

    @classmethod
    def parse(cls, line: str) -> Instruction:
        """Parse a line such as ``turn on 0,0 through 999,999``."""
        for action in Action:
            if action.value in line:
                break
        else:
            raise ValueError(f"could not decipher the command: {line!r}")

        coordinates = [
            int(piece)
            for token in line.split()
            if "," in token
            for piece in token.replace(",", " ").split()
            if piece.isascii() and piece.isdigit()
        ]
        if len(coordinates) < 4:
            raise ValueError(f"expected two coordinate pairs in {line!r}")
        x0, y0, x1, y1 = coordinates[:4]
        if max(x0, y0, x1, y1) >= GRID_SIZE:
            raise ValueError(f"coordinates outside the {GRID_SIZE}x{GRID_SIZE} grid: {line!r}")
        return cls(action, (x0, y0), (x1, y1))

    def rows(self) -> range:
        """The row indices this instruction covers."""
        return range(self.start[1], self.end[1] + 1)

    def columns(self) -> slice:
        """The column slice this instruction covers."""
        return slice(self.start[0], self.end[0] + 1)


def _instructions(text: str):
    for line in text.splitlines():
        yield Instruction.parse(line)


def count_lit(text: str) -> int:
    """Number of lights lit after on/off/toggle instructions."""
    grid = [bytearray(GRID_SIZE) for _ in range(GRID_SIZE)]
    for instruction in _instructions(text):
        cols = instruction.columns()
        for y in instruction.rows():
            row = grid[y]
            width = len(row[cols])
            if instruction.action is Action.ON:
                row[cols] = b"\x01" * width
            elif instruction.action is Action.OFF:
                row[cols] = bytes(width)
            else:
                row[cols] = row[cols].translate(_TOGGLE_TABLE)
    return sum(sum(row) for row in grid)


def total_brightness(text: str) -> int:
    """Total brightness when on adds 1, off removes 1 (not below 0), toggle adds 2."""
    grid = [[0] * GRID_SIZE for _ in range(GRID_SIZE)]
    for instruction in _instructions(text):
        cols = instruction.columns()
        for y in instruction.rows():
            row = grid[y]
            if instruction.action is Action.ON:
                row[cols] = [value + 1 for value in row[cols]]
            elif instruction.action is Action.OFF:
                row[cols] = [max(value - 1, 0) for value in row[cols]]
            else:
                row[cols] = [value + 2 for value in row[cols]]
    return sum(sum(row) for row in grid)