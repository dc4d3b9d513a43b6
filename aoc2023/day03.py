"""Gear ratios: part numbers next to symbols on an engine schematic."""

import string
from collections import defaultdict
from math import prod

_PUNCTUATION = frozenset(string.punctuation)

_DIRECTIONS = (
    (-1, 0, "up"),
    (1, 0, "down"),
    (-1, -1, "up_left"),
    (-1, 1, "up_right"),
    (1, -1, "down_left"),
    (1, 1, "down_right"),
    (0, -1, "left"),
    (0, 1, "right"),
)


def _clean(ch):
    if (ch in _PUNCTUATION and ch != ".") or ch.isnumeric():
        return ch
    return " "


def part1(text):
    """Sum the numbers on the schematic that touch a symbol."""
    grid = [[_clean(ch) for ch in line] for line in text.splitlines()]
    height = len(grid)
    found = []

    for i, row in enumerate(grid):
        width = len(row)
        group = ""
        seen_symbol = False

        for j, cell in enumerate(row):
            if cell in _PUNCTUATION:
                continue

            for di, dj, name in _DIRECTIONS:
                r, c = i + di, j + dj
                if r < 0 or c < 0 or c >= width or r >= height:
                    continue

                neighbour = grid[r][c]
                if cell == " ":
                    seen_symbol = False

                if name == "left" and j == width - 1:
                    group += cell
                    if seen_symbol and group.strip():
                        found.append(group.strip())
                    group = ""
                    seen_symbol = False

                if name == "right":
                    group += cell
                    if neighbour == " ":
                        if seen_symbol and group.strip():
                            found.append(group.strip())
                        group = ""
                        seen_symbol = False
                    elif neighbour in _PUNCTUATION and group.strip():
                        seen_symbol = False
                        found.append(group.strip())
                        group = ""

                if neighbour in _PUNCTUATION:
                    seen_symbol = True

    return sum(int(number) for number in found)


def _digit(ch):
    if ch not in "0123456789":
        raise ValueError(f"not a decimal digit: {ch!r}")
    return int(ch)


def part2(text):
    """Sum the products of the number pairs that share exactly one '*' gear."""
    grid = [list(line) for line in text.splitlines()]
    height = len(grid)
    width = len(grid[0])

    gear_cells = {}
    numbers = []
    gear_id = 0

    for y in range(height):
        x = 0
        while x < width:
            ch = grid[y][x]
            if ch == "*":
                for dx in (-1, 0, 1):
                    for dy in (-1, 0, 1):
                        px = min(max(x + dx, 0), width)
                        py = min(max(y + dy, 0), height)
                        gear_cells[(px, py)] = gear_id
                gear_id += 1
                x += 1
            elif ch.isnumeric():
                value = _digit(ch)
                positions = [(x, y)]
                x += 1
                while x < width and grid[y][x].isnumeric():
                    value = value * 10 + _digit(grid[y][x])
                    positions.append((x, y))
                    x += 1
                numbers.append((value, positions))
            else:
                x += 1

    by_gear = defaultdict(list)
    for value, positions in numbers:
        gear = next((gear_cells[p] for p in positions if p in gear_cells), None)
        if gear is not None:
            by_gear[gear].append(value)

    return sum(prod(values) for values in by_gear.values() if len(values) == 2)