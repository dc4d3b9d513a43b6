import pytest

from aoc2023.day12 import count_arrangements, part1, part2

EXAMPLE = """???.### 1,1,3
.??..??...?##. 1,1,3
?#?#?#?#?#?#?#? 1,3,1,6
????.#...#... 4,1,1
????.######..#####. 1,6,5
?###???????? 3,2,1"""

WITH_LISTING = """?###???????? 3,2,1
.###.##.#...
.###.##..#..
.###.##...#.
.###.##....#
.###..##.#..
.###..##..#.
.###..##...#
.###...##.#.
.###...##..#
.###....##.#"""


@pytest.mark.parametrize(
    ("pattern", "sizes", "expected"),
    [
        ("???.###", [1, 1, 3], 1),
        (".??..??...?##.", [1, 1, 3], 4),
        ("?#?#?#?#?#?#?#?", [1, 3, 1, 6], 1),
        ("????.#...#...", [4, 1, 1], 1),
        ("????.######..#####.", [1, 6, 5], 4),
        ("?###????????", [3, 2, 1], 10),
    ],
)
def test_count_arrangements(pattern, sizes, expected):
    assert count_arrangements(pattern, sizes) == expected


def test_count_arrangements_impossible():
    assert count_arrangements("#.#", [3]) == 0


def test_count_arrangements_bad_character():
    with pytest.raises(ValueError):
        count_arrangements("?x?", [1])


def test_part1_example():
    assert part1(EXAMPLE) == 21


def test_part2_example():
    assert part2(EXAMPLE) == 525152


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("???.### 1,1,3", 1),
        (".??..??...?##. 1,1,3", 16384),
        ("?#?#?#?#?#?#?#? 1,3,1,6", 1),
        ("????.#...#... 4,1,1", 16),
        ("????.######..#####. 1,6,5", 2500),
        ("?###???????? 3,2,1", 506250),
    ],
)
def test_part2_single_rows(line, expected):
    assert part2(line) == expected


def test_part1_row_without_sizes_raises():
    with pytest.raises(ValueError):
        part1(WITH_LISTING)


def test_part2_skips_rows_without_sizes():
    assert part2(WITH_LISTING) == 506250