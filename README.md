# drillrunner

drillrunner takes you through a set of small exercises, one at a time. Each
exercise is a Rust source file. Some exercises only have to compile. Others
have to compile as a test binary and pass their tests. drillrunner builds
each exercise with `rustc` and tells you which one to fix next.

You need `rustc` on your `PATH`. drillrunner writes the compiled binary to a
temporary file named `temp_<pid>` in the current directory. It removes that
file once each check is done.

## Installation

```
pip install .
```

To run the test suite too:

```
pip install .[test]
pytest
```

## The exercise list

Run drillrunner from the directory that holds `info.toml`. This file lists
the exercises in the order you should work through them:

```toml
[[exercises]]
path = "exercises/variables/variables1.rs"
mode = "compile"

[[exercises]]
path = "exercises/tests/tests1.rs"
mode = "test"
```

- A `compile` exercise passes when `rustc` compiles it.
- A `test` exercise passes when `rustc --test` compiles it and the resulting
  binary exits successfully.

If the current directory has no `info.toml`, drillrunner prints a message
and exits with status 1.

## Commands

```
drillrunner
```

With no subcommand, drillrunner prints a welcome banner and then the
contents of `default_out.txt`.

```
drillrunner verify      # alias: drillrunner v
```

Checks every exercise in order and stops at the first failure. On a failure
it shows the compiler or test output and exits with status 1.

```
drillrunner watch       # alias: drillrunner w
```

Runs `verify` once, then watches `./exercises` recursively. File changes are
collected until two seconds pass with no further change. Then, for each
changed `.rs` file that still exists, drillrunner verifies again starting
from the matching exercise in the list. Stop it with Ctrl-C.

```
drillrunner run exercises/if/if1.rs      # alias: drillrunner r <file>
```

Checks one exercise. The file must exist, and its full path must end with an
exercise path from `info.toml`. What happens depends on the mode:

- A `compile` exercise is compiled and run, and its output is printed.
- A `test` exercise is checked the same way as under `verify`.

The command exits with status 1 in three cases:

- no file name is given;
- no exercise matches the file;
- the exercise fails.

`run` also accepts a `-t`/`--test` flag, but the flag has no effect. The
exercise's mode in `info.toml` alone decides how it is checked.

## Using it from Python

- `drillrunner.exercise` provides:
  - `Exercise` and `Mode`;
  - `parse_exercise_list`, which parses the TOML text;
  - `load_exercises`, which reads the file.
- `drillrunner.verify.verify` and `drillrunner.run.run` raise
  `drillrunner.verify.ExerciseFailed` when an exercise does not pass.
- `drillrunner.cli.main(argv)` runs the command line and returns the exit
  status.

## Practice drills

The `drillrunner.drills` package holds worked answers to many of the
exercises, written as Python functions:

- `drillrunner.drills.basics` covers prices, simple arithmetic, colour words,
  list filling, tuples and simple records. Examples: `calculate_price`,
  `bigger`, `fill_vec`, `ColorClassicStruct`.
- `drillrunner.drills.errors` covers name tags, token costs and validated
  integers. Examples: `generate_nametag_text`, `total_cost`,
  `read_and_validate`, `PositiveNonzeroInteger`.
- `drillrunner.drills.iterators` covers capitalising words, checked division
  and factorial. Examples: `capitalize_first`, `divide`, `divide_all`,
  `division_results`, `factorial`.
- `drillrunner.drills.concurrency` covers sums over shared data and a job
  counter that several threads update. Examples: `shared_offset_sums`,
  `JobStatus`, `run_jobs`.

The drills do not run the exercise files. They are separate Python answers
that you can compare your own reasoning against.