import pytest

from aoc2015.day09 import (
    WeightedGraph,
    longest_distance,
    longest_route,
    parse_routes,
    shortest_distance,
    shortest_route,
)

EXAMPLE = """London to Dublin = 464
London to Belfast = 518
Dublin to Belfast = 141"""


def test_min_distance():
    assert shortest_distance(EXAMPLE) == 605


def test_max_distance():
    assert longest_distance(EXAMPLE) == 982


def test_parse_routes_adds_both_directions():
    graph = parse_routes(EXAMPLE)
    assert ("Dublin", 464) in graph.neighbors("London")
    assert ("London", 464) in graph.neighbors("Dublin")
    assert len(graph.neighbors("Belfast")) == 2


def test_neighbors_of_unknown_node():
    graph = parse_routes(EXAMPLE)
    assert graph.neighbors("Paris") is None


def test_describe_lists_each_edge():
    graph = parse_routes(EXAMPLE)
    lines = graph.describe().splitlines()
    assert len(lines) == 6
    assert "London -> Dublin [weight: 464]" in lines
    assert "Belfast -> Dublin [weight: 141]" in lines


def test_routes_on_graph_built_by_hand():
    graph = WeightedGraph()
    graph.add_edge("A", "B", 3)
    graph.add_edge("B", "A", 3)
    assert shortest_route(graph) == 3
    assert longest_route(graph) == 3


def test_disconnected_graph_has_no_route():
    graph = parse_routes("A to B = 1\nC to D = 2")
    assert shortest_route(graph) is None
    assert longest_route(graph) is None
    with pytest.raises(ValueError):
        shortest_distance("A to B = 1\nC to D = 2")
    with pytest.raises(ValueError):
        longest_distance("A to B = 1\nC to D = 2")


def test_shortest_never_exceeds_longest():
    text = EXAMPLE + "\nLondon to Paris = 10\nDublin to Paris = 20\nBelfast to Paris = 30"
    assert shortest_distance(text) <= longest_distance(text)


@pytest.mark.parametrize(
    "line",
    ["London Dublin = 464", "London to Dublin 464", "London to Dublin = far", "London to Dublin = 1_0"],
)
def test_malformed_lines_raise(line):
    with pytest.raises(ValueError):
        parse_routes(line)