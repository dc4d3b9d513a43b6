"""Point of incidence: find the lines of reflection in patterns of ash and rocks."""


def _checked(block):
    if not block:
        raise ValueError("empty pattern")
    width = len(block[0])
    if any(len(row) != width for row in block):
        raise ValueError("pattern rows differ in length")
    return block


def _patterns(text):
    """Yield the patterns of the note, each a list of equally long rows."""
    block = []
    for line in text.splitlines():
        if line:
            block.append(line)
        else:
            yield _checked(block)
            block = []
    yield _checked(block)


def _reflection(rows, smudges):
    """Return the count of rows above the first axis whose mirror differs in exactly `smudges` cells."""
    for axis in range(1, len(rows)):
        mismatches = sum(
            a != b
            for upper, lower in zip(reversed(rows[:axis]), rows[axis:])
            for a, b in zip(upper, lower)
        )
        if mismatches == smudges:
            return axis
    return 0


def _pattern_value(rows, smudges):
    columns = ["".join(column) for column in zip(*rows)]
    return _reflection(columns, smudges) + 100 * _reflection(rows, smudges)


def _summarize(text, smudges):
    return sum(_pattern_value(rows, smudges) for rows in _patterns(text))


def part1(text):
    """Summarize the notes using perfect reflections."""
    return _summarize(text, 0)


def part2(text):
    """Summarize the notes using reflections that need exactly one smudge fixed."""
    return _summarize(text, 1)