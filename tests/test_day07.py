import pytest

from aoc2023.day07 import part1, part2

EXAMPLE = """32T3K 765
T55J5 684
KK677 28
KTJJT 220
QQQJA 483"""


def test_part1_example():
    assert part1(EXAMPLE) == 6440


def test_part2_example():
    assert part2(EXAMPLE) == 5905


def test_order_of_lines_does_not_matter():
    reordered = "\n".join(reversed(EXAMPLE.splitlines()))
    assert part1(reordered) == 6440
    assert part2(reordered) == 5905


def test_joker_changes_ranking():
    text = "2345J 1\n22345 10"
    assert part1(text) == 21
    assert part2(text) == 12


def test_invalid_card_raises():
    with pytest.raises(ValueError):
        part1("32X3K 765")


def test_missing_bet_raises():
    with pytest.raises(ValueError):
        part2("32T3K")