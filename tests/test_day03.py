import pytest

from aoc2023.day03 import part1, part2

INPUT01 = """467..114..
...*......
..35..633.
......#...
617*......
.....+.58.
..592.....
......755.
...$.*....
.664.598.."""


def test_part1_example():
    assert part1(INPUT01) == 4361


def test_part2_example():
    assert part2(INPUT01) == 467835


def test_part1_no_symbols_gives_zero():
    assert part1("123..\n.....\n..45.") == 0


def test_part2_gear_with_one_number_counts_nothing():
    assert part2("12*..\n.....") == 0


def test_part2_gear_with_two_numbers():
    assert part2("12*3.\n.....") == 36


def test_part2_gear_with_three_numbers_counts_nothing():
    assert part2("12*3.\n..4..") == 0


def test_part2_empty_input_raises():
    with pytest.raises(IndexError):
        part2("")