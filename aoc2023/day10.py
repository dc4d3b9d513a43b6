"""Pipe maze: the length of the loop through S, and the tiles it encloses."""

from collections import deque
from enum import Enum

_START = "S"

# Where a pipe sends a walker, keyed by the (dx, dy) it arrives with.
_TURNS = {
    "L": {(0, 1): (1, 0), (-1, 0): (0, -1)},
    "J": {(0, 1): (-1, 0), (1, 0): (0, -1)},
    "7": {(0, -1): (-1, 0), (1, 0): (0, 1)},
    "F": {(0, -1): (1, 0), (-1, 0): (0, 1)},
}

_FIRST_DIRECTIONS = ((1, 0), (0, -1), (-1, 0), (0, 1))


class Heading(Enum):
    """A walking direction on the grid, as a (dx, dy) step with y growing downwards."""

    NORTH = (0, -1)
    SOUTH = (0, 1)
    EAST = (1, 0)
    WEST = (-1, 0)

    def step(self, x, y):
        dx, dy = self.value
        return x + dx, y + dy


# Tiles a heading may start onto from S, in the order they are tried.
_ENTRY_TILES = (
    (Heading.NORTH, "|7F"),
    (Heading.SOUTH, "|LJ"),
    (Heading.EAST, "-J7"),
    (Heading.WEST, "-LF"),
)

# Heading changes on reaching a tile; tiles not listed keep the heading.
_NEXT_HEADING = {
    Heading.NORTH: {"|": Heading.NORTH, "7": Heading.WEST, "F": Heading.EAST},
    Heading.SOUTH: {"|": Heading.SOUTH, "J": Heading.WEST, "L": Heading.EAST},
    Heading.EAST: {"-": Heading.EAST, "J": Heading.NORTH, "7": Heading.SOUTH},
    Heading.WEST: {"-": Heading.WEST, "L": Heading.NORTH, "F": Heading.SOUTH},
}

# Each tile drawn as a 3x3 block, top row first, so gaps between pipes open up.
_BLOCKS = {
    "S": (".|.", "-S-", ".|."),
    "F": ("...", ".F-", ".|."),
    "L": (".|.", ".L-", "..."),
    "J": (".|.", "-J.", "..."),
    "7": ("...", "-7.", ".|."),
    "-": ("...", "---", "..."),
    "|": (".|.", ".|.", ".|."),
}
_EMPTY_BLOCK = ("...", "...", "...")


def _tile(grid, x, y):
    if 0 <= y < len(grid) and 0 <= x < len(grid[y]):
        return grid[y][x]
    return None


def _find_start(grid):
    for y, row in enumerate(grid):
        x = row.find(_START)
        if x >= 0:
            return x, y
    raise ValueError("no start found")


def _loop_steps(grid, start, direction):
    """Follow pipes from the start; return the steps back to S, or None on a dead end."""
    x, y = start
    dx, dy = direction
    steps = 0
    while True:
        steps += 1
        x, y = x + dx, y + dy
        tile = _tile(grid, x, y)
        if tile is None:
            raise ValueError(f"path leaves the grid at ({x}, {y})")
        if tile == "|":
            if dy == 0:
                return None
        elif tile == "-":
            if dx == 0:
                return None
        elif tile in _TURNS:
            turn = _TURNS[tile].get((dx, dy))
            if turn is None:
                return None
            dx, dy = turn
        elif tile == ".":
            return None
        elif tile == _START:
            return steps
        else:
            raise ValueError(f"unknown tile: {tile!r}")


def part1(text):
    """Return the number of steps to the point of the loop farthest from S."""
    grid = text.splitlines()
    start = _find_start(grid)
    for direction in _FIRST_DIRECTIONS:
        steps = _loop_steps(grid, start, direction)
        if steps is not None:
            return steps // 2
    raise ValueError("no loop through the start")


def _first_heading(grid, start):
    for heading, tiles in _ENTRY_TILES:
        tile = _tile(grid, *heading.step(*start))
        if tile is not None and tile in tiles:
            return heading
    raise ValueError("no pipe leads away from the start")


def _loop_tiles(grid, start):
    """Walk the loop from S and return its tiles keyed by position."""
    heading = _first_heading(grid, start)
    position = start
    tiles = {}
    seen = set()
    while True:
        x, y = position
        tiles[position] = grid[y][x]
        if (position, heading) in seen:
            raise ValueError("path never returns to the start")
        seen.add((position, heading))
        position = heading.step(*position)
        tile = _tile(grid, *position)
        if tile is None:
            raise ValueError(f"path leaves the grid at {position}")
        heading = _NEXT_HEADING[heading].get(tile, heading)
        if position == start:
            return tiles


def _expand(rows):
    expanded = []
    for row in rows:
        blocks = [_BLOCKS.get(ch, _EMPTY_BLOCK) for ch in row]
        for level in range(3):
            expanded.append("".join(block[level] for block in blocks))
    return expanded


def _outside_cells(expanded):
    """Return the empty cells connected to the edge of the expanded grid."""
    height = len(expanded)
    outside = set()
    queue = deque()
    for y, row in enumerate(expanded):
        for x, ch in enumerate(row):
            on_edge = x == 0 or y == 0 or x == len(row) - 1 or y == height - 1
            if ch == "." and on_edge:
                outside.add((x, y))
                queue.append((x, y))
    while queue:
        x, y = queue.popleft()
        for heading in Heading:
            nx, ny = heading.step(x, y)
            if (nx, ny) not in outside and _tile(expanded, nx, ny) == ".":
                outside.add((nx, ny))
                queue.append((nx, ny))
    return outside


def part2(text):
    """Count the tiles enclosed by the loop through S."""
    grid = text.splitlines()
    start = _find_start(grid)
    loop = _loop_tiles(grid, start)

    height = len(grid)
    width = len(grid[0])
    only_loop = [
        "".join(loop.get((x, y), ".") for x in range(width)) for y in range(height)
    ]

    expanded = _expand(only_loop)
    outside = _outside_cells(expanded)
    return sum(
        1
        for y in range(height)
        for x in range(width)
        if expanded[3 * y + 1][3 * x + 1] == "."
        and (3 * x + 1, 3 * y + 1) not in outside
    )