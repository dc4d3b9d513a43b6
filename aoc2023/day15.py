"""Lens library: the HASH algorithm and the HASHMAP initialisation sequence."""

_BOX_COUNT = 256


def hash_step(step):
    """Return the HASH of a step: add each byte, multiply by 17, keep it below 256."""
    value = 0
    for byte in step.encode():
        value = (value + byte) * 17 % _BOX_COUNT
    return value


class LensBoxes:
    """A row of 256 boxes, each holding labelled lenses in the order they went in."""

    def __init__(self):
        self._boxes = [{} for _ in range(_BOX_COUNT)]

    def __repr__(self):
        filled = {i: box for i, box in enumerate(self._boxes) if box}
        return f"{type(self).__name__}({filled!r})"

    def _box(self, label):
        return self._boxes[hash_step(label)]

    def remove(self, label):
        """Take the lens with this label out of its box, if it is there."""
        self._box(label).pop(label, None)

    def insert(self, label, focal_length):
        """Replace the focal length of a labelled lens in place, or add the lens at the back."""
        self._box(label)[label] = focal_length

    def focusing_power(self):
        """Sum box number times slot number times focal length over every lens."""
        return sum(
            box_number * slot * focal_length
            for box_number, box in enumerate(self._boxes, start=1)
            for slot, focal_length in enumerate(box.values(), start=1)
        )


def _steps(text):
    return text.strip().split(",")


def part1(text):
    """Sum the HASH of every comma-separated step."""
    return sum(hash_step(step) for step in _steps(text))


def part2(text):
    """Run the initialisation sequence and return the resulting focusing power."""
    boxes = LensBoxes()
    for step in _steps(text):
        if step.endswith("-"):
            boxes.remove(step[:-1])
            continue
        label, separator, focal_length = step.partition("=")
        if not separator:
            raise ValueError(f"invalid step {step!r}")
        boxes.insert(label, int(focal_length))
    return boxes.focusing_power()