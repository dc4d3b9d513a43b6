"""Seed almanac: follow seeds through a chain of range maps to the nearest location."""

from collections import deque

_MAP_COUNT = 7


class RangeMap:
    """One almanac map: source ranges shifted onto destination ranges."""

    def __init__(self, entries=()):
        """Build the map from (destination_start, source_start, length) rows."""
        pairs = [
            (range(source, source + length), destination)
            for destination, source, length in entries
        ]
        pairs.sort(key=lambda pair: pair[0].start)
        self._pairs = pairs

    def __repr__(self):
        return f"{type(self).__name__}({self._pairs!r})"

    def lookup(self, value):
        """Map one source value; values outside every source range map to themselves."""
        for source, destination in self._pairs:
            if value in source:
                return destination + (value - source.start)
        return value

    def _map_piece(self, piece):
        return range(self.lookup(piece.start), self.lookup(piece.stop - 1) + 1)

    def map_ranges(self, ranges):
        """Map source ranges onto destination ranges, sorted by their start."""
        mapped = []
        for source_range in ranges:
            remainder = source_range
            for source, _ in self._pairs:
                if remainder is None:
                    break
                before, common, after = _split(remainder, source)
                if before is not None:
                    mapped.append(before)
                if common is not None:
                    mapped.append(self._map_piece(common))
                remainder = after
            if remainder is not None:
                mapped.append(self._map_piece(remainder))
        mapped.sort(key=lambda r: r.start)
        return mapped


def _split(piece, pivot):
    """Split a range around a pivot into the parts before, inside and after it."""
    before = common = after = None
    if piece.start < pivot.start:
        before = piece if piece.stop < pivot.start else range(piece.start, pivot.start)
    if piece.stop > pivot.stop:
        after = piece if piece.start > pivot.stop else range(pivot.stop, piece.stop)
    if piece.start <= pivot.stop and piece.stop >= pivot.start:
        common = range(max(piece.start, pivot.start), min(piece.stop, pivot.stop))
    return before, common, after


def _parse_row(row):
    numbers = [int(n) for n in row.split(" ")]
    if len(numbers) != 3:
        raise ValueError(f"expected three numbers in row: {row}")
    return tuple(numbers)


def _take_map(lines):
    rows = []
    while lines:
        row = lines.popleft()
        if not row:
            break
        if row.endswith("map:"):
            continue
        rows.append(_parse_row(row))
    return RangeMap(rows)


def _parse(text):
    lines = deque(line.strip() for line in text.splitlines())
    while lines and not lines[0].startswith("seeds:"):
        lines.popleft()
    if not lines:
        raise ValueError("no seeds found")
    _, separator, numbers = lines.popleft().partition(": ")
    if not separator:
        raise ValueError("seeds line has no ': ' separator")
    seeds = [int(n) for n in numbers.split(" ")]
    if lines:
        lines.popleft()
    maps = [_take_map(lines) for _ in range(_MAP_COUNT)]
    return seeds, maps


def part1(text):
    """Return the lowest location number that any listed seed maps to."""
    seeds, maps = _parse(text)
    if not seeds:
        raise ValueError("could not find min location")

    def locate(seed):
        for mapping in maps:
            seed = mapping.lookup(seed)
        return seed

    return min(locate(seed) for seed in seeds)


def part2(text):
    """Return the lowest location reached when seed numbers come in (start, length) pairs."""
    numbers, maps = _parse(text)
    if len(numbers) % 2:
        raise ValueError("seed ranges must come in (start, length) pairs")
    ranges = sorted(
        (range(start, start + length) for start, length in zip(numbers[::2], numbers[1::2])),
        key=lambda r: r.start,
    )
    for mapping in maps:
        ranges = mapping.map_ranges(ranges)
    if not ranges:
        raise ValueError("location range cannot be empty")
    return ranges[0].start