"""Day 8: Matchsticks - compare code length, memory length and re-encoded length."""

from __future__ import annotations

import string

_HEX_DIGITS = frozenset(string.hexdigits)

_DEBUG_ESCAPES = {
    "\0": "\\0",
    "\t": "\\t",
    "\r": "\\r",
    "\n": "\\n",
    "\\": "\\\\",
    '"': '\\"',
}


def literal_length(s: str) -> int:
    """Length of the string as written, in bytes."""
    return len(s.encode())


def memory_length(s: str) -> int:
    """Characters the quoted literal ``s`` stands for, escapes decoded."""
    if not s:
        raise ValueError("a string literal needs at least its quotes")
    chars = list(s)
    end = len(chars) - 1
    index = 1
    length = 0
    while index < end:
        length += 1
        if chars[index] != "\\" or index + 1 >= end:
            index += 1
            continue
        escaped = chars[index + 1]
        if escaped in ('\\', '"'):
            index += 2
        elif (
            escaped == "x"
            and index + 3 < len(chars)
            and chars[index + 2] in _HEX_DIGITS
            and chars[index + 3] in _HEX_DIGITS
        ):
            index += 4
        else:
            index += 1
    return length


def _escape_char(char: str) -> str:
    if char in _DEBUG_ESCAPES:
        return _DEBUG_ESCAPES[char]
    if char.isprintable():
        return char
    return f"\\u{{{ord(char):x}}}"


def encoded_length(s: str) -> int:
    """Length in bytes of ``s`` quoted again, with quotes and backslashes escaped."""
    encoded = '"' + "".join(_escape_char(char) for char in s) + '"'
    return len(encoded.encode())


def decode_overhead(text: str) -> int:
    """Literal length minus memory length, summed over every line."""
    lines = text.splitlines()
    return sum(literal_length(line) for line in lines) - sum(memory_length(line) for line in lines)


def encode_overhead(text: str) -> int:
    """Encoded length minus literal length, summed over every line."""
    lines = text.splitlines()
    return sum(encoded_length(line) for line in lines) - sum(literal_length(line) for line in lines)