"""Trebuchet calibration values: first and last digit of every line."""

_SPELLED = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}

_ASCII_DIGITS = "0123456789"


def _numeric_calibration(line):
    digits = [ch for ch in line if ch.isnumeric()]
    if not digits:
        return 0
    pair = digits[0] + digits[-1]
    # Numeric characters that are not plain decimal digits count as nothing.
    if pair.isascii() and pair.isdigit():
        return int(pair)
    return 0


def part1(text):
    """Sum the values made of the first and last numeric character of each line."""
    return sum(_numeric_calibration(line) for line in text.splitlines())


def _digits_with_words(line):
    """Yield every digit in the line, spelled-out digits included, overlaps allowed."""
    for index, ch in enumerate(line):
        for word, value in _SPELLED.items():
            if line.startswith(word, index):
                yield value
                break
        else:
            if ch in _ASCII_DIGITS:
                yield int(ch)


def _spelled_calibration(line):
    digits = _digits_with_words(line)
    first = next(digits, None)
    if first is None:
        raise ValueError(f"line holds no digit: {line!r}")
    last = first
    for last in digits:
        pass
    return first * 10 + last


def part2(text):
    """Sum the calibration values, reading spelled-out digits as digits too."""
    return sum(_spelled_calibration(line) for line in text.splitlines())