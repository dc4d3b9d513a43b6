"""Parabolic reflector dish: tilt a platform of rocks and measure the load on it."""

_CUBE = "#"
_ROUNDED = "O"
_EMPTY = "."
_SYMBOLS = frozenset((_CUBE, _ROUNDED, _EMPTY))
_DEFAULT_SPINS = 1_000_000_000


def _tilt(line):
    """Slide every rounded rock in the line towards its start, stopping at cube rocks."""
    return _CUBE.join(
        _ROUNDED * segment.count(_ROUNDED) + _EMPTY * segment.count(_EMPTY)
        for segment in line.split(_CUBE)
    )


def _transpose(rows):
    return ["".join(column) for column in zip(*rows)]


class Platform:
    """A grid of cube rocks ('#'), rounded rocks ('O') and empty spaces ('.')."""

    def __init__(self, text):
        rows = text.splitlines()
        if not rows:
            raise ValueError("empty platform")
        for row in rows:
            unexpected = set(row) - _SYMBOLS
            if unexpected:
                raise ValueError(f"unexpected character: {sorted(unexpected)[0]!r}")
        self.width = len(rows[0])
        self.height = len(rows)
        if any(len(row) != self.width for row in rows):
            raise ValueError("platform rows differ in length")
        self._rows = rows
        self._seen = {}

    def __str__(self):
        return "".join(row + "\n" for row in self._rows)

    def __repr__(self):
        return f"{type(self).__name__}({str(self)!r})"

    def roll_north(self):
        """Tilt the platform so rounded rocks roll to the top."""
        self._rows = _transpose([_tilt(column) for column in _transpose(self._rows)])

    def roll_south(self):
        """Tilt the platform so rounded rocks roll to the bottom."""
        columns = [_tilt(column[::-1])[::-1] for column in _transpose(self._rows)]
        self._rows = _transpose(columns)

    def roll_west(self):
        """Tilt the platform so rounded rocks roll to the left."""
        self._rows = [_tilt(row) for row in self._rows]

    def roll_east(self):
        """Tilt the platform so rounded rocks roll to the right."""
        self._rows = [_tilt(row[::-1])[::-1] for row in self._rows]

    def spin(self, iterations):
        """Run spin cycles (north, west, south, east), skipping ahead once they repeat."""
        if iterations < 0:
            raise ValueError("iterations must be non-negative")
        for cycles in range(1, iterations + 1):
            self.roll_north()
            self.roll_west()
            self.roll_south()
            self.roll_east()

            state = tuple(self._rows)
            previous = self._seen.get(state)
            if previous is not None:
                loop_length = cycles - previous
                if (iterations - cycles) % loop_length == 0:
                    break
            self._seen[state] = cycles

    def north_load(self):
        """Total load on the north beams: each rounded rock weighs its distance from the south edge."""
        return sum(
            (self.height - y) * row.count(_ROUNDED) for y, row in enumerate(self._rows)
        )


def part1(text):
    """Load on the north beams after tilting the platform north."""
    platform = Platform(text)
    platform.roll_north()
    return platform.north_load()


def part2(text, iterations=_DEFAULT_SPINS):
    """Load on the north beams after the given number of spin cycles."""
    platform = Platform(text)
    platform.spin(iterations)
    return platform.north_load()