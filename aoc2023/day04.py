"""Scratchcards: points for winning numbers, and cards won as copies."""

from collections import Counter


def _card_body(line):
    parts = line.split(":")
    if len(parts) < 2:
        raise ValueError(f"card has no ':' separator: {line!r}")
    return parts


def part1(text):
    """Sum the points of all cards: 1 for the first match, doubled for each further one."""
    total = 0
    for line in text.splitlines():
        halves = line.split(":")[-1].split("|")
        winning = [n for n in halves[0].split(" ") if n]
        have = [n for n in halves[-1].split(" ") if n]
        matches = sum(1 for n in winning if n in have)
        if matches:
            total += 2 ** (matches - 1)
    return total


def part2(text):
    """Count the scratchcards held once every win has produced its copies."""
    copies = Counter()
    for card, line in enumerate(text.splitlines(), start=1):
        copies[card] += 1
        groups = _card_body(line)[1].split("|")
        if len(groups) < 2:
            raise ValueError(f"card has no '|' separator: {line!r}")
        winning = set(groups[0].split())
        have = set(groups[1].split())
        for offset in range(len(winning & have)):
            copies[card + 1 + offset] += copies[card]
    return sum(copies.values())