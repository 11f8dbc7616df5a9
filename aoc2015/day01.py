"""Day 1: Not Quite Lisp - follow parenthesis instructions between floors."""

_STEPS = {"(": 1, ")": -1}


def _moves(instructions: str):
    """Yield the floor change for each instruction character."""
    for char in instructions:
        try:
            yield _STEPS[char]
        except KeyError:
            raise ValueError(f"unknown instruction character: {char!r}") from None


def final_floor(instructions: str) -> int:
    """Return the floor reached after following every instruction from floor 0."""
    return sum(_moves(instructions))


def basement_entry(instructions: str) -> int:
    """Return the 1-based position of the instruction that first enters the basement."""
    floor = 0
    for position, step in enumerate(_moves(instructions), start=1):
        floor += step
        if floor < 0:
            return position
    raise ValueError("the instructions never reach the basement")