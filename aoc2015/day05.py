"""Day 5: Doesn't He Have Intern-Elves For This? - naughty or nice strings."""

_FORBIDDEN = ("ab", "cd", "pq", "xy")
_VOWELS = "aeiou"


def is_nice(line: str) -> bool:
    """Nice: no forbidden pair, at least three vowels and a doubled letter."""
    if any(pair in line for pair in _FORBIDDEN):
        return False
    vowels = sum(1 for ch in line if any(low in _VOWELS for low in ch.lower()))
    if vowels < 3:
        return False
    return any(a == b for a, b in zip(line, line[1:]))


def has_repeated_pair(line: str) -> bool:
    """Whether some two-letter pair appears twice without overlapping."""
    data = line.encode()
    first_seen: dict[bytes, int] = {}
    for index in range(len(data) - 1):
        pair = data[index:index + 2]
        previous = first_seen.setdefault(pair, index)
        if index > previous + 1:
            return True
    return False


def is_nice_v2(line: str) -> bool:
    """Nice: a non-overlapping repeated pair and a letter repeated one apart."""
    return has_repeated_pair(line) and any(a == b for a, b in zip(line, line[2:]))


def count_nice(text: str) -> int:
    """Number of lines that are nice under the first rules."""
    return sum(1 for line in text.splitlines() if is_nice(line))


def count_nice_v2(text: str) -> int:
    """Number of lines that are nice under the second rules."""
    return sum(1 for line in text.splitlines() if is_nice_v2(line))