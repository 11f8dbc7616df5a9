import pytest

from aoc2015.day11 import (
    has_no_confusing_letters,
    has_straight,
    has_two_pairs,
    increment,
    is_valid,
    next_valid,
    second_valid,
)


def test_rule_1_case():
    assert has_straight("hijklmmn") is True
    assert has_no_confusing_letters("hijklmmn") is False
    assert has_two_pairs("hijklmmn") is False


def test_rule_2_case():
    assert has_straight("abbceffg") is False
    assert has_no_confusing_letters("abbceffg") is True
    assert has_two_pairs("abbceffg") is True


def test_rule_3_case():
    assert has_straight("abbcegjk") is False
    assert has_no_confusing_letters("abbcegjk") is True
    assert has_two_pairs("abbcegjk") is False


def test_next_password():
    assert next_valid("abcdefgh") == "abcdffaa"
    assert next_valid("ghijklmn") == "ghjaabcc"


def test_valid_password_is_returned_unchanged():
    assert next_valid("abcdffaa") == "abcdffaa"
    assert is_valid("abcdffaa")


def test_second_valid_is_later_valid_password():
    result = second_valid("abcdefgh")
    assert is_valid(result)
    assert len(result) == 8
    assert result > "abcdffaa"


@pytest.mark.parametrize(
    ("password", "expected"),
    [("aaaaa", "aaaab"), ("aaaaz", "aaaba"), ("azzz", "baaa"), ("zzz", "aaa")],
)
def test_increment(password, expected):
    assert increment(password) == expected


def test_comment_examples_for_pairs():
    assert has_two_pairs("aacdeff") is True
    assert has_two_pairs("aabcder") is False
    assert has_two_pairs("aaabcde") is False


def test_empty_password_rejected():
    with pytest.raises(ValueError):
        has_two_pairs("")
    with pytest.raises(ValueError):
        next_valid("")