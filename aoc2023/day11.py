"""Cosmic expansion: distances between galaxies once empty rows and columns grow."""

from bisect import bisect_left
from itertools import combinations

_GALAXY = "#"
_EMPTY = "."
_PART2_FACTOR = 1_000_000


def _survey(text):
    """Return the galaxies and the sorted empty rows and columns of the image."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty image")
    width = len(lines[0])
    if any(len(line) > width for line in lines):
        raise ValueError("a row is longer than the first row")

    empty_rows = [y for y, line in enumerate(lines) if set(line) <= {_EMPTY}]
    occupied = {x for line in lines for x, ch in enumerate(line) if ch != _EMPTY}
    empty_cols = [x for x in range(width) if x not in occupied]
    galaxies = [
        (x, y)
        for y, line in enumerate(lines)
        for x, ch in enumerate(line)
        if ch == _GALAXY
    ]
    return galaxies, empty_rows, empty_cols


def _distance_sum(text, factor):
    """Sum the distances between all galaxy pairs, each empty line counting `factor` times."""
    galaxies, empty_rows, empty_cols = _survey(text)
    grow = factor - 1
    placed = [
        (x + grow * bisect_left(empty_cols, x), y + grow * bisect_left(empty_rows, y))
        for x, y in galaxies
    ]
    return sum(
        abs(ax - bx) + abs(ay - by) for (ax, ay), (bx, by) in combinations(placed, 2)
    )


def part1(text):
    """Sum the pairwise galaxy distances with every empty row and column doubled."""
    return _distance_sum(text, 2)


def part2(text):
    """Sum the pairwise galaxy distances with every empty row and column a million wide."""
    return _distance_sum(text, _PART2_FACTOR)