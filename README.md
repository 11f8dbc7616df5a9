# aoc2015

Solvers for the first twelve days of the 2015 Advent of Code puzzles. Each
day is a module (`aoc2015.day01` to `aoc2015.day12`), and the `aoc2015`
command runs any day and part against your puzzle input. The package uses
only the standard library.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Command line

Pass the day and the part (1 or 2), then the input file. If you leave out
the file, the input is read from standard input:

```
aoc2015 1 1 input.txt
aoc2015 7 2 < input.txt
```

The answer is printed on standard output. If the input cannot be solved, or
there is no solver for the day and part asked for, the command prints
`error: ...` on standard error and exits with status 1.

For the single-line puzzles (days 1, 3, 4, 10 and 11) a trailing newline in
the input is ignored.

## Library use

Every solver takes the puzzle text and returns the answer:

```python
from aoc2015 import day01, day02, day10, day11
from aoc2015.cli import solve

day01.final_floor("(()(()(")          # 3
day01.basement_entry("()())")         # 5
day02.wrapping_paper("2x3x4")         # 58
day02.ribbon("2x3x4")                 # 34
day10.look_and_say("1211")            # "111221"
day11.next_valid("abcdefgh")          # "abcdffaa"

solve(1, 1, "(((")                    # 3
```

The solvers by day:

| Day | Part 1 | Part 2 |
| --- | --- | --- |
| 1 | `day01.final_floor` | `day01.basement_entry` |
| 2 | `day02.wrapping_paper` | `day02.ribbon` |
| 3 | `day03.houses_visited` | `day03.houses_visited_with_robot` |
| 4 | `day04.mine(secret, zeros=5)` | `day04.mine(secret, zeros=6)` |
| 5 | `day05.count_nice` | `day05.count_nice_v2` |
| 6 | `day06.count_lit` | `day06.total_brightness` |
| 7 | `day07.signal_a` | `day07.signal_a_with_override` |
| 8 | `day08.decode_overhead` | `day08.encode_overhead` |
| 9 | `day09.shortest_distance` | `day09.longest_distance` |
| 10 | `day10.length_after(digits, 40)` | `day10.length_after(digits, 50)` |
| 11 | `day11.next_valid` | `day11.second_valid` |
| 12 | `day12.sum_numbers` | none |

Day 7 lets you evaluate single wires:

```python
from aoc2015.day07 import parse_instructions, evaluate

circuit = parse_instructions("123 -> x\nNOT x -> h")
evaluate("h", circuit, {})            # 65412
```

Day 9 builds a `WeightedGraph` from the route list:

```python
from aoc2015.day09 import parse_routes, shortest_route, longest_route

graph = parse_routes(
    "London to Dublin = 464\n"
    "London to Belfast = 518\n"
    "Dublin to Belfast = 141"
)
shortest_route(graph)                 # 605
longest_route(graph)                  # 982
print(graph.describe())               # one "A -> B [weight: w]" line per edge
```

## What is not included

Day 12 has only its first part: there is no solver for day 12 part 2, and
`solve(12, 2, text)` raises `ValueError`. Days 13 to 25 are not covered.

## Input errors

When the input breaks the puzzle's format (an unknown character, a badly
formed line, a route list with no complete route), the solver raises
`ValueError` rather than return a wrong answer. A circuit wire in day 7 with
no instruction driving it raises `KeyError`; a shift of 16 bits or more
raises `OverflowError`, as does day 4 when no counter below 2**32 matches.