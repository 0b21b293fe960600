"""Running a single exercise and showing what it printed."""

from __future__ import annotations

from .exercise import Exercise, Mode
from .verify import (
    SUCCESS_MARK,
    WARNING_MARK,
    ExerciseFailed,
    _decode,
    _progress,
    _say,
    test,
)


def run(exercise: Exercise) -> None:
    """Run or test one exercise; raise ExerciseFailed if it does not pass."""
    if exercise.mode is Mode.TEST:
        test(exercise)
    else:
        compile_and_run(exercise)


def compile_and_run(exercise: Exercise) -> None:
    """Compile an exercise, run it and show its output."""
    with _progress(f"Compiling {exercise}...") as set_message:
        compiled = exercise.compile()
        set_message(f"Running {exercise}...")
        ran = exercise.run() if compiled.returncode == 0 else None
    try:
        if ran is None:
            _say(
                f"{WARNING_MARK} Compilation of {exercise} failed! Compiler error message:\n",
                "red",
            )
            _say(_decode(compiled.stderr))
            raise ExerciseFailed(exercise)
        _say(_decode(ran.stdout))
        if ran.returncode == 0:
            _say(f"{SUCCESS_MARK} Successfully ran {exercise}", "green")
            return
        _say(_decode(ran.stderr))
        _say(f"{WARNING_MARK} Ran {exercise} with errors", "red")
        raise ExerciseFailed(exercise)
    finally:
        exercise.clean()