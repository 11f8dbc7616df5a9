import pytest

from aoc2015.day08 import (
    decode_overhead,
    encode_overhead,
    encoded_length,
    literal_length,
    memory_length,
)

SAMPLE = '"abc"\n        "abc"\n        "aaa\\"aaa"\n        "\\x27"'


@pytest.mark.parametrize(
    "literal, expected",
    [('""', 2), ('"abc"', 5), ('"aaa\\"aaa"', 10), ('"\\x27"', 6)],
)
def test_literal_length(literal, expected):
    assert literal_length(literal) == expected


@pytest.mark.parametrize(
    "literal, expected",
    [('""', 0), ('"abc"', 3), ('"aaa\\"aaa"', 7), ('"\\x27"', 1)],
)
def test_memory_length(literal, expected):
    assert memory_length(literal) == expected


def test_decode_overhead():
    assert decode_overhead(SAMPLE) == 12


def test_problem_child():
    assert memory_length('"\\\\x27"') == 4


def test_invalid_hex():
    assert memory_length('"\\xZZ"') == 4


def test_backslash_at_end():
    assert memory_length('"abc\\\\"') == 4


def test_memory_length_empty_raises():
    with pytest.raises(ValueError):
        memory_length("")


@pytest.mark.parametrize(
    "literal, expected",
    [('""', 6), ('"abc"', 9), ('"aaa\\"aaa"', 16), ('"\\x27"', 11)],
)
def test_encoded_length(literal, expected):
    assert encoded_length(literal) == expected


def test_encode_overhead():
    assert encode_overhead(SAMPLE) == 19


def test_encoded_length_escapes_newline_and_tab():
    assert encoded_length("a\tb") == 6