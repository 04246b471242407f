# advent25

Solvers for the first nine days of a holiday puzzle calendar, with a small
command-line runner.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Inputs

Each day reads its puzzle input from a file relative to the current working
directory:

```
inputs/day_1/part1.txt
inputs/day_2/part1.txt
...
inputs/day_9/part1.txt
```

Both parts of a day read the same file.

## Usage

Choose a day and a part:

```
advent25 --day 1 --part 1
advent25 -d 8 -p 2
```

Days are given as `1` to `9` (or `day1` to `day9`). Parts are `1` or `2` (or
`part1`, `part2`). Both options are required. The answer is logged to the
console at INFO level. If the input file cannot be read or does not parse,
the error is printed to standard error and the command exits with status 1.

## The days

| Day | Module                    | Puzzle                                              |
|-----|---------------------------|-----------------------------------------------------|
| 1   | `advent25.days.day_01`    | Count how often a safe dial lands on or passes zero |
| 2   | `advent25.days.day_02`    | Sum product ids made of repeated digit blocks       |
| 3   | `advent25.days.day_03`    | Pick the largest joltage from battery banks         |
| 4   | `advent25.days.day_04`    | Find paper rolls that a forklift can reach          |
| 5   | `advent25.days.day_05`    | Count fresh ingredients from id ranges              |
| 6   | `advent25.days.day_06`    | Solve a column-wise maths worksheet                 |
| 7   | `advent25.days.day_07`    | Count beam splits and tachyon timelines             |
| 8   | `advent25.days.day_08`    | Join junction boxes into circuits                   |
| 9   | `advent25.days.day_09`    | Find the largest rectangle between red tiles        |

## Using the solvers as a library

Each day has a class (`DayOne` to `DayNine`) whose `part_1()` and `part_2()`
methods return the answer. The input file can be chosen with `input_path`:

```python
from advent25.days.day_01 import DayOne

DayOne(input_path="my_input.txt").part_1()
```

`run()` takes a `Part`, or `1`/`2`, and calls the matching method:

```python
from advent25.models import Part

DayOne(input_path="my_input.txt").run(Part.PART2)
```

The solver functions can also be called on text directly, for example:

```python
from advent25.days.day_03 import maximise_joltage_n_times

maximise_joltage_n_times("811111111111119", 2)  # 89
```

```python
from advent25.days.day_05 import count_fresh

count_fresh("3-5\n10-14\n\n1\n5\n11\n")  # 2
```

Shared helpers live in `advent25.coordinates` (`Coordinate2D`,
`Coordinate3D`), `advent25.grid` (`Grid`), `advent25.load` (`load_tokens`,
`load_text`) and `advent25.sets` (`inplace_intersection`).

## What it does not do

Only days 1 to 9 are solved. The package does not fetch puzzle inputs; they
must be placed in the `inputs/` directory (or passed as `input_path`) by hand.