import pytest

from aoc2023.day14 import Platform, part1, part2

EXAMPLE = """O....#....
O.OO#....#
.....##...
OO.#O....O
.O.....O#.
O.#..O.#.#
..O..#O..O
.......O..
#....###..
#OO..#...."""


def _cells(platform, symbol):
    return {
        (x, y)
        for y, row in enumerate(str(platform).splitlines())
        for x, ch in enumerate(row)
        if ch == symbol
    }


def test_part1_example():
    assert part1(EXAMPLE) == 136


def test_part2_example():
    assert part2(EXAMPLE, 1_000_000_000) == 64


def test_part2_default_matches_billion_spins():
    assert part2(EXAMPLE) == part2(EXAMPLE, 1_000_000_000)


def test_str_round_trip():
    assert str(Platform(EXAMPLE)) == EXAMPLE + "\n"


def test_zero_spins_leave_platform_unchanged():
    platform = Platform(EXAMPLE)
    platform.spin(0)
    assert str(platform) == EXAMPLE + "\n"


@pytest.mark.parametrize("roll", ["roll_north", "roll_south", "roll_west", "roll_east"])
def test_rolling_is_idempotent(roll):
    platform = Platform(EXAMPLE)
    getattr(platform, roll)()
    once = str(platform)
    getattr(platform, roll)()
    assert str(platform) == once


@pytest.mark.parametrize("roll", ["roll_north", "roll_south", "roll_west", "roll_east"])
def test_rolling_keeps_cubes_and_rock_count(roll):
    platform = Platform(EXAMPLE)
    cubes = _cells(platform, "#")
    rounded = len(_cells(platform, "O"))
    getattr(platform, roll)()
    assert _cells(platform, "#") == cubes
    assert len(_cells(platform, "O")) == rounded


def test_horizontal_rolls_keep_row_contents():
    platform = Platform(EXAMPLE)
    before = [sorted(row) for row in str(platform).splitlines()]
    platform.roll_east()
    assert [sorted(row) for row in str(platform).splitlines()] == before
    platform.roll_west()
    assert [sorted(row) for row in str(platform).splitlines()] == before


def test_north_roll_raises_load_and_south_roll_lowers_it():
    original = Platform(EXAMPLE).north_load()
    north = Platform(EXAMPLE)
    north.roll_north()
    south = Platform(EXAMPLE)
    south.roll_south()
    assert north.north_load() >= original >= south.north_load()
    assert north.north_load() == part1(EXAMPLE)


def test_dimensions():
    platform = Platform("O.#\n...")
    assert (platform.width, platform.height) == (3, 2)


def test_unexpected_character_is_rejected():
    with pytest.raises(ValueError):
        Platform("O.x\n...")


def test_empty_platform_is_rejected():
    with pytest.raises(ValueError):
        part1("")


def test_ragged_platform_is_rejected():
    with pytest.raises(ValueError):
        Platform("O..\n.")


def test_negative_iterations_are_rejected():
    with pytest.raises(ValueError):
        Platform(EXAMPLE).spin(-1)