"""Day 3: Perfectly Spherical Houses in a Vacuum - count houses delivered to."""

from __future__ import annotations

_DIRECTIONS = {"^": (0, 1), "v": (0, -1), ">": (1, 0), "<": (-1, 0)}


def _step(position: tuple[int, int], char: str) -> tuple[int, int]:
    try:
        dx, dy = _DIRECTIONS[char]
    except KeyError:
        raise ValueError(f"unknown direction character: {char!r}") from None
    return position[0] + dx, position[1] + dy


def houses_visited(directions: str) -> int:
    """Number of distinct houses Santa visits, the starting house included."""
    position = (0, 0)
    visited = {position}
    for char in directions:
        position = _step(position, char)
        visited.add(position)
    return len(visited)


def houses_visited_with_robot(directions: str) -> int:
    """Number of distinct houses visited when Santa and a robot alternate moves."""
    positions = [(0, 0), (0, 0)]
    visited = {(0, 0)}
    for turn, char in enumerate(directions):
        mover = turn % 2
        positions[mover] = _step(positions[mover], char)
        visited.add(positions[mover])
    return len(visited)