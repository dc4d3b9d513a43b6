"""Command line: solve one part of one day's puzzle and report how long it took."""

import argparse
import sys
import time

from aoc2023 import (
    day01,
    day02,
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day10,
    day11,
    day12,
    day13,
    day14,
    day15,
)

_DAYS = {
    1: day01,
    2: day02,
    3: day03,
    4: day04,
    5: day05,
    6: day06,
    7: day07,
    8: day08,
    9: day09,
    10: day10,
    11: day11,
    12: day12,
    13: day13,
    14: day14,
    15: day15,
}

_SOLVERS = {
    (day, part): getattr(module, f"part{part}")
    for day, module in _DAYS.items()
    for part in (1, 2)
}


def _build_parser():
    parser = argparse.ArgumentParser(
        prog="aoc2023", description="Solve a part of an Advent of Code 2023 puzzle."
    )
    parser.add_argument("day", type=int, choices=sorted(_DAYS), help="puzzle day")
    parser.add_argument("part", type=int, choices=(1, 2), help="puzzle part")
    parser.add_argument(
        "input",
        nargs="?",
        default="input.txt",
        help="puzzle input file, or '-' for standard input (default: input.txt)",
    )
    return parser


def _read_input(parser, path):
    if path == "-":
        return sys.stdin.read()
    try:
        with open(path, encoding="utf-8") as handle:
            return handle.read()
    except OSError as error:
        parser.error(f"cannot read {path}: {error}")


def main(argv=None):
    """Run the chosen solver on the input and print its answer and the time taken."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    text = _read_input(parser, args.input)
    solve = _SOLVERS[(args.day, args.part)]

    started = time.perf_counter_ns()
    try:
        answer = solve(text)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    elapsed = time.perf_counter_ns() - started

    print(f"Part {args.part} answer: {answer}")
    print(f"took {elapsed // 1_000_000}ms ({elapsed // 1_000}us)")
    return 0


if __name__ == "__main__":
    sys.exit(main())