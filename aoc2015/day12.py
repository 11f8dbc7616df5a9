"""Day 12: JSAbacusFramework.io - sum every number in a JSON document."""

import re

_SEPARATORS = str.maketrans({char: " " for char in '[]{}:,"'})
_INTEGER = re.compile(r"[+-]?[0-9]+")
_I32_MIN, _I32_MAX = -(2**31), 2**31 - 1


def sum_numbers(text: str) -> int:
    """Sum of all whole tokens that are 32-bit integers once JSON punctuation is removed."""
    total = 0
    for token in text.translate(_SEPARATORS).split():
        if _INTEGER.fullmatch(token):
            value = int(token)
            if _I32_MIN <= value <= _I32_MAX:
                total += value
    return total