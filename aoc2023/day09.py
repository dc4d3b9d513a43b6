"""Mirage maintenance: extrapolate sequences through their differences."""

from functools import reduce
from itertools import pairwise


def _sequences(text):
    for line in text.splitlines():
        values = [int(word) for word in line.split()]
        if not values:
            raise ValueError("empty sequence")
        yield values


def _difference_levels(values):
    """Return the successive difference rows, stopping before an all-zero row."""
    levels = []
    current = values
    while True:
        diffs = [b - a for a, b in pairwise(current)]
        if all(d == 0 for d in diffs):
            return levels
        levels.append(diffs)
        current = diffs


def _next_value(values):
    return values[-1] + sum(level[-1] for level in _difference_levels(values))


def _previous_value(values):
    firsts = (level[0] for level in reversed(_difference_levels(values)))
    return values[0] - reduce(lambda acc, x: x - acc, firsts, 0)


def part1(text):
    """Sum the next value of every sequence."""
    return sum(_next_value(values) for values in _sequences(text))


def part2(text):
    """Sum the value before the first of every sequence."""
    return sum(_previous_value(values) for values in _sequences(text))