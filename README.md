# aoc2023

Solutions to the first fifteen days of the 2023 Advent of Code puzzles.
Each day lives in its own module, `aoc2023.day01` through `aoc2023.day15`,
and every solver takes the raw puzzle input as a string. The package has no
dependencies beyond the standard library.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Using the modules

Every day has a `part1(text)` and a `part2(text)` function that return the
answer for that half of the puzzle as an integer. Malformed input raises
`ValueError`.

```python
from pathlib import Path

from aoc2023 import day01, day07

text = Path("input.txt").read_text()
print(day01.part1(text))
print(day07.part2(text))
```

Some days expose more than the two parts:

- `day05.RangeMap(entries)` is one of the almanac's maps, built from
  `(destination_start, source_start, length)` rows. `lookup(value)` maps a
  single number (numbers outside every source range map to themselves), and
  `map_ranges(ranges)` maps a list of `range` objects onto a list of
  destination ranges sorted by their start.
- `day06.ways_to_win(time, record)` counts the button hold times from `0` to
  `time` whose distance beats `record`.
- `day12.count_arrangements(pattern, sizes)` counts the ways the `?` in a row
  of springs can be filled so the runs of `#` match the given group sizes.
- `day14.Platform(text)` holds the rock platform. It tilts in any direction
  (`roll_north`, `roll_south`, `roll_west`, `roll_east`), runs spin cycles
  with `spin(iterations)`, skipping ahead once the platform repeats, and
  reports the load on the north beams with `north_load()`.
  `day14.part2(text, iterations)` takes the number of spin cycles to run and
  defaults to one billion.
- `day15.hash_step(step)` computes the HASH of one initialisation step, and
  `day15.LensBoxes` holds the 256 lens boxes (`insert(label, focal_length)`,
  `remove(label)`, `focusing_power()`).

## Command line

Installing the package provides the `aoc2023` command, which runs one part
of one day's solution and prints the answer along with how long it took:

```
aoc2023 7 2 input.txt
```

The arguments are the day (1 to 15), the part (1 or 2) and the input file,
which defaults to `input.txt` in the current directory; `-` reads the input
from standard input. If the input cannot be solved, the command prints the
error to standard error and exits with status 1. See all options with:

```
aoc2023 --help
```

## What it does not do

The package does not download puzzle inputs or submit answers; bring your
own input file.