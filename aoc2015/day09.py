"""Day 9: All in a Single Night - shortest and longest routes through every city."""

from __future__ import annotations

import re
from collections.abc import Iterator
from itertools import pairwise, permutations

_INTEGER = re.compile(r"[+-]?[0-9]+")
_I32_MIN, _I32_MAX = -(2**31), 2**31 - 1


class WeightedGraph:
    """Directed graph whose nodes map to lists of ``(neighbour, weight)`` edges."""

    def __init__(self) -> None:
        self.adjacency: dict[str, list[tuple[str, int]]] = {}

    def add_edge(self, source: str, target: str, weight: int) -> None:
        """Add an edge from ``source`` to ``target``."""
        self.adjacency.setdefault(source, []).append((target, weight))

    def neighbors(self, node: str) -> list[tuple[str, int]] | None:
        """Edges leaving ``node``, or None when the node is unknown."""
        return self.adjacency.get(node)

    def describe(self) -> str:
        """One line per edge, ``node -> neighbour [weight: w]``."""
        return "\n".join(
            f"{node} -> {neighbor} [weight: {weight}]"
            for node, edges in self.adjacency.items()
            for neighbor, weight in edges
        )

    def _weight(self, source: str, target: str) -> int | None:
        edges = self.neighbors(source) or ()
        return next((weight for name, weight in edges if name == target), None)


def parse_routes(text: str) -> WeightedGraph:
    """Build an undirected graph from lines of the form ``A to B = distance``."""
    graph = WeightedGraph()
    for number, line in enumerate(text.splitlines(), start=1):
        parts = line.split()
        if len(parts) != 5 or parts[1] != "to" or parts[3] != "=":
            raise ValueError(f"Line {number}: expected format 'A to B = x', got {parts!r}")
        token = parts[4]
        if not _INTEGER.fullmatch(token) or not _I32_MIN <= int(token) <= _I32_MAX:
            raise ValueError(f"Line {number}: {token!r} is not a valid number")
        distance = int(token)
        graph.add_edge(parts[0], parts[2], distance)
        graph.add_edge(parts[2], parts[0], distance)
    return graph


def _route_lengths(graph: WeightedGraph) -> Iterator[int]:
    """Total length of every ordering of all cities that follows existing edges."""
    cities = list(graph.adjacency)
    for path in permutations(cities):
        total = 0
        for source, target in pairwise(path):
            weight = graph._weight(source, target)
            if weight is None:
                break
            total += weight
        else:
            yield total


def shortest_route(graph: WeightedGraph) -> int | None:
    """Length of the shortest route visiting every city once, or None if none exists."""
    return min(_route_lengths(graph), default=None)


def longest_route(graph: WeightedGraph) -> int | None:
    """Length of the longest route visiting every city once, or None if none exists."""
    return max(_route_lengths(graph), default=None)


def shortest_distance(text: str) -> int:
    """Shortest route through every city described by ``text``."""
    result = shortest_route(parse_routes(text))
    if result is None:
        raise ValueError("could not find a distance")
    return result


def longest_distance(text: str) -> int:
    """Longest route through every city described by ``text``."""
    result = longest_route(parse_routes(text))
    if result is None:
        raise ValueError("could not find a distance")
    return result