"""Camel cards: rank poker-like hands and total their winnings."""

from collections import Counter

_PLAIN_ORDER = "23456789TJQKA"
_JOKER_ORDER = "J23456789TQKA"
_CARD_KINDS = 13


def _hand_key(hand, order, jokers):
    """Sort key for a hand: size, then its count profile, then its cards in order."""
    try:
        ranks = [order.index(card) for card in hand]
    except ValueError:
        raise ValueError(f"invalid character in hand string: {hand!r}") from None
    counts = Counter(hand)
    wild = counts.pop("J", 0) if jokers else 0
    shape = sorted(counts.values(), reverse=True)
    shape += [0] * (_CARD_KINDS - len(shape))
    shape[0] += wild
    return len(hand), shape, ranks


def _parse(text):
    for line in text.splitlines():
        hand, separator, bet = line.partition(" ")
        if not separator:
            raise ValueError(f"line has no bet: {line!r}")
        yield hand, int(bet)


def _winnings(text, order, jokers):
    hands = sorted(
        (_hand_key(hand, order, jokers), bet) for hand, bet in _parse(text)
    )
    return sum(rank * bet for rank, (_, bet) in enumerate(hands, start=1))


def part1(text):
    """Total winnings with 'J' as a jack."""
    return _winnings(text, _PLAIN_ORDER, jokers=False)


def part2(text):
    """Total winnings with 'J' as the weakest card that joins the largest group."""
    return _winnings(text, _JOKER_ORDER, jokers=True)