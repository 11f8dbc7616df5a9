"""Day 11: Corporate Policy - find the next password that meets the rules."""

from itertools import pairwise

_CONFUSING = "iol"
_SHORTEST_VALID = 5


def increment(password: str) -> str:
    """Increment like a base-26 number of letters, wrapping ``z`` round to ``a``."""
    chars = list(password)
    for index in reversed(range(len(chars))):
        if chars[index] == "z":
            chars[index] = "a"
        else:
            chars[index] = chr(ord(chars[index]) + 1)
            break
    return "".join(chars)


def has_straight(password: str) -> bool:
    """Whether three consecutive letters increase by one, such as ``abc``."""
    return any(
        ord(b) == ord(a) + 1 and ord(c) == ord(b) + 1
        for a, b, c in zip(password, password[1:], password[2:])
    )


def has_no_confusing_letters(password: str) -> bool:
    """Whether the password avoids ``i``, ``o`` and ``l``."""
    return not any(letter in password for letter in _CONFUSING)


def has_two_pairs(password: str) -> bool:
    """Whether two non-overlapping doubled letters appear."""
    if not password:
        raise ValueError("an empty password has no pairs to check")
    pairs = 0
    index = 0
    while index < len(password) - 1:
        if password[index] == password[index + 1]:
            pairs += 1
            if pairs == 2:
                return True
            index += 2
        else:
            index += 1
    return False


def is_valid(password: str) -> bool:
    """Whether the password satisfies all three rules."""
    return has_straight(password) and has_no_confusing_letters(password) and has_two_pairs(password)


def _skip_confusing(password: str) -> str:
    """Jump past every password that keeps the first confusing letter in place."""
    index = min(password.index(letter) for letter in _CONFUSING if letter in password)
    bumped = chr(ord(password[index]) + 1)
    return password[:index] + bumped + "a" * (len(password) - index - 1)


def next_valid(password: str) -> str:
    """The password itself if valid, else the next valid one by incrementing."""
    if len(password) < _SHORTEST_VALID:
        raise ValueError(f"no valid password has fewer than {_SHORTEST_VALID} letters")
    while not is_valid(password):
        if has_no_confusing_letters(password):
            password = increment(password)
        else:
            password = _skip_confusing(password)
    return password


def second_valid(password: str) -> str:
    """The valid password that follows the one ``next_valid`` finds."""
    return next_valid(increment(next_valid(password)))