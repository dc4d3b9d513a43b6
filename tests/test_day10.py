import pytest

from aoc2023.day10 import part1, part2

SQUARE = """.....
.S-7.
.|.|.
.L-J.
....."""

WINDING = """..F7.
.FJ|.
SJ.L7
|F--J
LJ..."""

ENCLOSING = """...........
.S-------7.
.|F-----7|.
.||.....||.
.||.....||.
.|L-7.F-J|.
.|..|.|..|.
.L--J.L--J.
..........."""

_TRANSPOSED_TILE = {"-": "|", "|": "-", "7": "L", "L": "7"}


def _transpose(text):
    rows = text.splitlines()
    return "\n".join(
        "".join(_TRANSPOSED_TILE.get(row[x], row[x]) for row in rows)
        for x in range(len(rows[0]))
    )


def _pad(text):
    rows = text.splitlines()
    blank = "." * (len(rows[0]) + 2)
    return "\n".join([blank, *("." + row + "." for row in rows), blank])


def _replace(text, x, y, ch):
    rows = [list(row) for row in text.splitlines()]
    rows[y][x] = ch
    return "\n".join("".join(row) for row in rows)


def test_part1_square_loop():
    assert part1(SQUARE) == 4


def test_part1_winding_loop():
    assert part1(WINDING) == 8


def test_part1_unchanged_by_padding():
    assert part1(_pad(WINDING)) == part1(WINDING)


def test_part1_unchanged_by_transpose():
    assert part1(_transpose(WINDING)) == part1(WINDING)
    assert part1(_transpose(ENCLOSING)) == part1(ENCLOSING)


def test_part2_enclosed_tiles():
    assert part2(ENCLOSING) == 4


def test_part2_unchanged_by_transpose_and_padding():
    expected = part2(ENCLOSING)
    assert part2(_transpose(ENCLOSING)) == expected
    assert part2(_pad(ENCLOSING)) == expected


def test_part2_ignores_pipes_not_on_the_loop():
    expected = part2(ENCLOSING)
    with_junk_inside = _replace(ENCLOSING, 2, 6, "7")
    with_junk_outside = _replace(ENCLOSING, 0, 0, "F")
    assert part2(with_junk_inside) == expected
    assert part2(with_junk_outside) == expected


def test_part2_never_exceeds_grid_area():
    rows = ENCLOSING.splitlines()
    assert 0 <= part2(ENCLOSING) <= len(rows) * len(rows[0])


def test_missing_start_raises():
    with pytest.raises(ValueError):
        part1("...\n...")
    with pytest.raises(ValueError):
        part2("...\n...")


def test_part1_unknown_tile_raises():
    with pytest.raises(ValueError):
        part1("S-X")


def test_part1_path_leaving_grid_raises():
    with pytest.raises(ValueError):
        part1("S-")


def test_part2_start_without_pipes_raises():
    with pytest.raises(ValueError):
        part2("S")