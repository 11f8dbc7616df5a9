"""Day 10: Elves Look, Elves Say - the look-and-say sequence."""

from itertools import groupby


def look_and_say(digits: str) -> str:
    """One look-and-say step: each run becomes its length followed by the character."""
    if not digits:
        raise ValueError("look-and-say needs at least one character")
    return "".join(f"{len(list(run))}{char}" for char, run in groupby(digits))


def length_after(digits: str, rounds: int) -> int:
    """Length of the sequence after applying ``rounds`` look-and-say steps."""
    for _ in range(rounds):
        digits = look_and_say(digits)
    return len(digits)