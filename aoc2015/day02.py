"""Day 2: I Was Told There Would Be No Math - wrapping paper and ribbon."""

from __future__ import annotations


def parse_boxes(text: str) -> list[tuple[int, int, int]]:
    """Parse lines of the form ``LxWxH`` into dimension triples."""
    boxes = []
    for line in text.splitlines():
        parts = line.split("x")
        if len(parts) != 3:
            raise ValueError(f"expected three dimensions, got {line!r}")
        length, width, height = (int(part) for part in parts)
        if min(length, width, height) < 0:
            raise ValueError(f"dimensions must not be negative: {line!r}")
        boxes.append((length, width, height))
    return boxes


def _paper(box: tuple[int, int, int]) -> int:
    small, middle, large = sorted(box)
    surface = 2 * (small * middle + middle * large + small * large)
    return surface + small * middle


def _ribbon(box: tuple[int, int, int]) -> int:
    small, middle, large = sorted(box)
    return 2 * (small + middle) + small * middle * large


def wrapping_paper(text: str) -> int:
    """Total square feet of paper: surface area plus the smallest side, per box."""
    return sum(_paper(box) for box in parse_boxes(text))


def ribbon(text: str) -> int:
    """Total feet of ribbon: smallest perimeter plus volume, per box."""
    return sum(_ribbon(box) for box in parse_boxes(text))