"""Command line entry point that solves a day's puzzle from an input file."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from functools import partial

from aoc2015 import day01, day02, day03, day04, day05, day06, day07, day08, day09, day10, day11, day12

_SOLVERS: dict[tuple[int, int], Callable[[str], object]] = {
    (1, 1): day01.final_floor,
    (1, 2): day01.basement_entry,
    (2, 1): day02.wrapping_paper,
    (2, 2): day02.ribbon,
    (3, 1): day03.houses_visited,
    (3, 2): day03.houses_visited_with_robot,
    (4, 1): partial(day04.mine, zeros=5),
    (4, 2): partial(day04.mine, zeros=6),
    (5, 1): day05.count_nice,
    (5, 2): day05.count_nice_v2,
    (6, 1): day06.count_lit,
    (6, 2): day06.total_brightness,
    (7, 1): day07.signal_a,
    (7, 2): day07.signal_a_with_override,
    (8, 1): day08.decode_overhead,
    (8, 2): day08.encode_overhead,
    (9, 1): day09.shortest_distance,
    (9, 2): day09.longest_distance,
    (10, 1): partial(day10.length_after, rounds=40),
    (10, 2): partial(day10.length_after, rounds=50),
    (11, 1): day11.next_valid,
    (11, 2): day11.second_valid,
    (12, 1): day12.sum_numbers,
}

# Puzzles whose input is a single line; a trailing newline is not part of it.
_SINGLE_LINE_DAYS = frozenset({1, 3, 4, 10, 11})


def solve(day: int, part: int, text: str) -> object:
    """Answer for the given day and part on the puzzle input ``text``."""
    try:
        solver = _SOLVERS[(day, part)]
    except KeyError:
        raise ValueError(f"no solution for day {day} part {part}") from None
    if day in _SINGLE_LINE_DAYS:
        text = text.rstrip("\r\n")
    return solver(text)


def main(argv: list[str] | None = None) -> int:
    """Read a puzzle input and print the answer."""
    parser = argparse.ArgumentParser(prog="aoc2015", description="Solve a puzzle of the 2015 calendar.")
    parser.add_argument("day", type=int)
    parser.add_argument("part", type=int, choices=(1, 2))
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default=sys.stdin)
    args = parser.parse_args(argv)

    with args.input as handle:
        text = handle.read()
    try:
        answer = solve(args.day, args.part, text)
    except (ValueError, KeyError, OverflowError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print(answer)
    return 0