"""Boat races: count the button-hold times that beat each record."""

from bisect import bisect_left
from math import prod


def ways_to_win(time, record):
    """Count hold times h in [0, time] whose distance h * (time - h) beats the record."""
    if time < 0 or record < 0:
        raise ValueError("time and record must be non-negative")
    half = time // 2
    if half * (time - half) <= record:
        return 0
    # Distance rises up to the midpoint and is symmetric about it.
    first = bisect_left(range(half + 1), True, key=lambda h: h * (time - h) > record)
    return time - 2 * first + 1


def _number_rows(text):
    lines = text.splitlines()
    if len(lines) < 2:
        raise ValueError("expected a time line and a distance line")
    return lines[0].split()[1:], lines[1].split()[1:]


def part1(text):
    """Multiply together the number of winning hold times of every race."""
    times, records = _number_rows(text)
    if len(records) < len(times):
        raise ValueError("every race needs a record distance")
    return prod(ways_to_win(int(t), int(r)) for t, r in zip(times, records))


def part2(text):
    """Count winning hold times for the single race read with spaces ignored."""
    times, records = _number_rows(text)
    return ways_to_win(int("".join(times)), int("".join(records)))