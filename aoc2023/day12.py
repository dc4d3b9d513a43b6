"""Hot springs: count arrangements of damaged springs that match group sizes."""

from functools import lru_cache

_SYMBOLS = frozenset(".#?")
_FOLDS = 5


def count_arrangements(pattern, sizes):
    """Count ways to fill each '?' with '.' or '#' so the '#' runs match the sizes."""
    if not set(pattern) <= _SYMBOLS:
        raise ValueError(f"unexpected character in pattern: {pattern!r}")
    groups = tuple(sizes)
    if any(size <= 0 for size in groups):
        raise ValueError("group sizes must be positive")
    length = len(pattern)

    @lru_cache(maxsize=None)
    def ways(position, group):
        if position >= length:
            return 1 if group == len(groups) else 0
        total = 0
        ch = pattern[position]
        if ch in ".?":
            total += ways(position + 1, group)
        if ch in "#?" and group < len(groups):
            end = position + groups[group]
            if (
                end <= length
                and "." not in pattern[position:end]
                and (end == length or pattern[end] != "#")
            ):
                total += ways(end + 1, group + 1)
        return total

    return ways(0, 0)


def part1(text):
    """Sum the arrangement counts of every row as written."""
    total = 0
    for line in text.splitlines():
        fields = line.split(" ")
        if len(fields) < 2:
            raise ValueError(f"row has no group sizes: {line!r}")
        sizes = [int(size) for size in fields[1].split(",")]
        total += count_arrangements(fields[0], sizes)
    return total


def _int_or_none(word):
    try:
        return int(word)
    except ValueError:
        return None


def part2(text):
    """Sum the arrangement counts of every row unfolded five times."""
    total = 0
    for line in text.splitlines():
        pattern, separator, rest = line.partition(" ")
        if not separator:
            continue
        sizes = [n for n in map(_int_or_none, rest.split(",")) if n is not None]
        unfolded = "?".join([pattern] * _FOLDS) + "."
        total += count_arrangements(unfolded, sizes * _FOLDS)
    return total