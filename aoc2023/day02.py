"""Cube conundrum: which games fit the bag, and the power of the minimal bag."""

from math import prod

_LIMITS = {"red": 12, "green": 13, "blue": 14}
_COLOURS = ("red", "green", "blue")


def _game_sets(line):
    """Split a game line into its sets, each a list of (count, colour) draws."""
    record = "".join(line.split(":")[1:])
    for drawn in record.split(";"):
        draws = []
        for draw in drawn.split(","):
            words = draw.strip().split(" ")
            count = int(words[0])
            draws.append((count, words[-1]))
        yield draws


def _is_possible(line):
    for draws in _game_sets(line):
        for count, colour in draws:
            limit = _LIMITS.get(colour)
            if limit is not None and count > limit:
                return False
    return True


def part1(text):
    """Sum the (1-based) line numbers of the games that fit the bag."""
    return sum(
        number
        for number, line in enumerate(text.splitlines(), start=1)
        if _is_possible(line)
    )


def _power(line):
    fewest = dict.fromkeys(_COLOURS, 0)
    for draws in _game_sets(line):
        for count, colour in draws:
            if colour in fewest:
                fewest[colour] = max(fewest[colour], count)
    return prod(fewest.values())


def part2(text):
    """Sum the powers of the smallest bag that makes each game possible."""
    return sum(_power(line) for line in text.splitlines())