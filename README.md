# adventkit

A small workbench for Advent of Code. It creates the files for each day,
fetches inputs and puzzle text through the `aoc` command-line client, runs
solutions, benchmarks them, and keeps a benchmark table in your `README.md`
up to date.

## Installation

```
pip install .
```

To download inputs, read puzzles or submit answers, the `aoc` client must
be on your `PATH`. If the `AOC_YEAR` environment variable holds a number,
it is passed to `aoc` as `--year`.

## Working layout

Commands run from the root of your puzzle workspace and use these paths:

- `src/bin/NN.py`: your solution script for day `NN`
- `data/inputs/NN.txt`: your puzzle input for day `NN`
- `data/examples/NN.txt`: example input from the puzzle text
- `data/puzzles/NN.md`: the puzzle description
- `data/timings.json`: stored benchmark results

Days are always written with two digits, such as `01` or `25`. The
directories are not created for you; make `src/bin`, `data/inputs`,
`data/examples` and `data/puzzles` before the first `scaffold`.

## Commands

```
adventkit scaffold 1 [--download] [--overwrite]
adventkit download 1
adventkit read 1
adventkit solve 1 [--release] [--dhat] [--submit 2]
adventkit all [--release]
adventkit time [1] [--all] [--store]
adventkit today
```

- `scaffold` creates `src/bin/NN.py` from a template, plus empty input and
  example files. An existing solution script is kept unless `--overwrite` is
  given. With `--download` it then fetches the input as well.
- `download` calls `aoc` to fetch the input and puzzle into `data/`; `read`
  calls `aoc` to show the puzzle description.
- `solve` runs the day's solution script with the current Python.
  `--release` runs it with `-O`; `--dhat` also turns on `tracemalloc` and
  prints each part's peak and current heap use. `--submit N` sends part `N`'s
  answer through `aoc`.
- `all` runs every day that has a solution script, in order.
- `time` benchmarks solutions: each part runs repeatedly for about a second
  (between 10 and 10,000 samples) and the mean is reported. Without a day
  number it only runs days that are not fully benchmarked in
  `data/timings.json`; `--all` runs every day. `--store` merges the results
  into `data/timings.json` and rewrites the table between the two
  `<!--- benchmarking table --->` markers in `README.md`.
- `today` scaffolds, downloads and reads the current day. It works only from
  1 to 25 December, in puzzle server time (UTC-5).

A day without a solution script, or whose script prints nothing, is shown as
"Not solved."

## Writing a solution

A scaffolded script defines `part_one(text)` and `part_two(text)`, each
returning an answer or `None`, and passes them to
`adventkit.runner.run_day`. That reads `data/inputs/NN.txt`, runs each part,
prints its answer and time, benchmarks it when `--time` is on the command
line, and submits it when `--submit N` names that part.

The solution for day 1 ships with the package and runs on its own from the
workspace root:

```
adventkit-day01
adventkit-day01 --time
```

## Using the library

```python
from adventkit.day import Day, all_days
from adventkit.timings import Timings

day = Day.parse("8")
print(day)                      # 08

stored = Timings.read_from_file("data/timings.json")
print(stored.total_millis())
print([str(d) for d in all_days() if not stored.is_day_complete(d)])
```

`adventkit.readme_benchmarks.update_content(text, timings, total_millis)`
returns a README text with its benchmark table replaced, and
`adventkit.run_multi.parse_exec_time(lines, day)` reads the timings out of a
solution's printed output.

## Limits

adventkit does not talk to the puzzle website itself: downloading,
reading and submitting all go through the external `aoc` client. Only the
day 1 solution is included; other days are yours to write.