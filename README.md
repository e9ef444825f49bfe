# exerciser

Worked Python solutions to a course of small Rust exercises, together with two
helpers for tooling around such a course: coloured status lines for the
terminal, and a generator for the `rust-project.json` file that rust-analyzer
reads.

## Requirements

- Python 3.11 or later
- `rich` (installed automatically)
- `rustc` on your `PATH` only if you want `RustAnalyzerProject.get_sysroot_src`
  to ask it for the toolchain location

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Status lines: `exerciser.ui`

```python
from exerciser.ui import success, warn

success("Successfully ran exercises/intro/intro1.rs")
warn("Compiling of exercises/intro/intro2.rs failed!")
```

`success` prints a green line starting with `✅`, `warn` a red line starting
with `⚠️`. When the `NO_EMOJI` environment variable is set, the prefixes are
`✓` and `!` instead.

## rust-analyzer projects: `exerciser.project`

```python
from exerciser.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()
project.exercises_to_json("exercises")
if project.crates:
    project.write_to_disk("rust-project.json")
```

- `get_sysroot_src()` uses `RUST_SRC_PATH` if it is set; otherwise it runs
  `rustc --print sysroot`, prints the toolchain it found and points at
  `lib/rustlib/src/rust/library` below it. The path is stored in
  `sysroot_src` and returned.
- `exercises_to_json(root="exercises")` walks every path below `root` and
  calls `add_path` on each.
- `add_path(path)` adds a `Crate` when the text after the first `.` in the
  path is `rs`. Each crate has edition `2021`, no dependencies and the `test`
  cfg, so rust-analyzer also works inside test blocks.
- `to_dict()` returns the JSON structure; `write_to_disk(path="./rust-project.json")`
  writes it as compact JSON.

## Lessons: `exerciser.lessons`

Each module holds solutions to one part of the course, as ordinary Python
functions and classes:

| Module | Covers |
| --- | --- |
| `basics` | conditionals, functions, strings, optional values, lists, `longest` |
| `errors` | raising and wrapping errors: `total_cost`, `parse_pos_nonzero`, `PositiveNonzeroInteger` |
| `quizzes` | `calculate_price_of_apples`, `transformer` with `Command`/`Append`, `ReportCard` |
| `collections` | fruit baskets, `build_scores_table`, counting `Progress` values |
| `iterators` | capitalising words, exact `divide`, `factorial` |
| `traits` | `append_bar`, `Licensed` software, the generic `Wrapper` |
| `structs` | colour structs, `Order`, `Package`, a message-driven `State` |
| `pointers` | `Cons`/`Nil` lists and the copy-on-write `abs_all` |
| `concurrency` | per-offset sums in threads, timed workers, a shared job counter, sending a `Queue` over a channel |

Some examples:

```python
from exerciser.lessons.quizzes import Append, Command, calculate_price_of_apples, transformer
from exerciser.lessons.iterators import NotDivisibleError, divide
from exerciser.lessons.errors import NegativeError, ParsePosNonzeroError, parse_pos_nonzero

calculate_price_of_apples(40)   # 80
calculate_price_of_apples(41)   # 41
transformer([("hello", Command.UPPERCASE), ("foo", Append(1))])  # ["HELLO", "foobar"]

divide(81, 9)                   # 9
try:
    divide(81, 6)
except NotDivisibleError as err:
    print(err.dividend, err.divisor)   # 81 6

try:
    parse_pos_nonzero("-555")
except ParsePosNonzeroError as err:
    assert isinstance(err.error, NegativeError)
```

The functions in `concurrency` really start threads and sleep: `timed_threads`
and `count_jobs` wait 0.25 s per worker by default, and `receive_all` pauses
`Queue.delay` seconds (1 s by default) between sends.

## What this package does not do

There is no command-line program. The package does not read an exercise list,
compile, run, test or lint exercises, track which ones are done, watch files
for changes, or reset exercises; `exerciser.ui` and `exerciser.project` are
building blocks for such a tool, not the tool itself.