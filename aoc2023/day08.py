"""Haunted wasteland: follow left/right instructions through a node network."""

import math
import re
from itertools import cycle

_NODE = re.compile(r"^([A-Z]{3}) = \(([A-Z]{3}), ([A-Z]{3})\)$", re.MULTILINE)


def _parse(text):
    lines = text.splitlines()
    if not lines or not lines[0]:
        raise ValueError("no instructions found")
    network = {name: (left, right) for name, left, right in _NODE.findall(text)}
    return lines[0], network


def _step(network, node, direction):
    if direction == "L":
        side = 0
    elif direction == "R":
        side = 1
    else:
        raise ValueError(f"unknown symbol: {direction!r}")
    try:
        return network[node][side]
    except KeyError:
        raise ValueError(f"unknown node: {node!r}") from None


def part1(text):
    """Count the steps from AAA until ZZZ is reached at a pass through the instructions."""
    directions, network = _parse(text)
    steps = 0
    node = "AAA"
    while node != "ZZZ":
        for direction in directions:
            steps += 1
            if node == "ZZZ":
                break
            node = _step(network, node, direction)
    return steps


def _steps_to_end(network, directions, node):
    steps = 0
    for direction in cycle(directions):
        if node.endswith("Z"):
            return steps
        steps += 1
        node = _step(network, node, direction)
    return steps


def part2(text):
    """Steps until every node ending in A is on a node ending in Z at once."""
    directions, network = _parse(text)
    starts = [name for name in network if name.endswith("A")]
    return math.lcm(*(_steps_to_end(network, directions, start) for start in starts))