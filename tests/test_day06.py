import pytest

from aoc2015.day06 import Action, Instruction, count_lit, total_brightness


def test_all_lights_on():
    assert count_lit("turn on 0,0 through 999,999") == 1000000


def test_toggle_lights_on():
    assert count_lit("toggle 0,0 through 999,0") == 1000


def test_turn_lights_off():
    assert count_lit("turn off 499,499 through 500,500") == 0


def test_toggle_twice_turns_back_off():
    text = "toggle 0,0 through 9,9\ntoggle 0,0 through 4,9"
    assert count_lit(text) == 50


def test_on_then_partial_off():
    text = "turn on 0,0 through 9,9\nturn off 0,0 through 0,9"
    assert count_lit(text) == 90


def test_light_on_brightness():
    assert total_brightness("turn on 0,0 through 0,0") == 1


def test_light_on_bright():
    assert total_brightness("toggle 0,0 through 999,999") == 2000000


def test_brightness_does_not_go_negative():
    text = "turn off 0,0 through 0,0\nturn off 0,0 through 0,0\nturn on 0,0 through 0,0"
    assert total_brightness(text) == 1


def test_parse_instruction():
    instruction = Instruction.parse("turn off 499,499 through 500,501")
    assert instruction == Instruction(Action.OFF, (499, 499), (500, 501))


def test_parse_toggle():
    assert Instruction.parse("toggle 1,2 through 3,4").action is Action.TOGGLE


def test_parse_unknown_command():
    with pytest.raises(ValueError):
        Instruction.parse("flip 0,0 through 1,1")


def test_parse_missing_coordinates():
    with pytest.raises(ValueError):
        Instruction.parse("turn on 0,0 through")


def test_parse_outside_grid():
    with pytest.raises(ValueError):
        count_lit("turn on 0,0 through 1000,0")