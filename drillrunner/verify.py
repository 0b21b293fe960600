"""Checking exercises one after another, stopping at the first failure."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager

from rich.console import Console

from .exercise import Exercise, Mode

SUCCESS_MARK = "✅"
WARNING_MARK = "⚠️ "

_console = Console(highlight=False)


class ExerciseFailed(Exception):
    """Raised when an exercise does not compile or its run fails."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(f"{exercise} did not pass")
        self.exercise = exercise


def _say(text: str, style: str | None = None) -> None:
    _console.print(
        text, style=style, markup=False, emoji=False, highlight=False, soft_wrap=True
    )


def _decode(data: bytes | None) -> str:
    return (data or b"").decode("utf-8", errors="replace")


@contextmanager
def _progress(message: str) -> Iterator[Callable[[str], None]]:
    """Show a spinner while work is done; yields a function to change its text."""
    if not _console.is_terminal:
        yield lambda _message: None
        return
    with _console.status(message) as status:
        yield status.update


def verify(exercises: Iterable[Exercise]) -> None:
    """Check each exercise in order; raise ExerciseFailed at the first failure."""
    for exercise in exercises:
        if exercise.mode is Mode.TEST:
            test(exercise)
        else:
            compile_only(exercise)


def compile_only(exercise: Exercise) -> None:
    """Check that an exercise compiles."""
    with _progress(f"Compiling {exercise}..."):
        output = exercise.compile()
    try:
        if output.returncode == 0:
            _say(f"{SUCCESS_MARK} Successfully compiled {exercise}!", "green")
            return
        _say(
            f"{WARNING_MARK} Compilation of {exercise} failed! Compiler error message:\n",
            "red",
        )
        _say(_decode(output.stderr))
        raise ExerciseFailed(exercise)
    finally:
        exercise.clean()


def test(exercise: Exercise) -> None:
    """Build an exercise as a test binary and check that its tests pass."""
    with _progress(f"Testing {exercise}...") as set_message:
        compiled = exercise.compile()
        ran = None
        if compiled.returncode == 0:
            set_message(f"Running {exercise}...")
            ran = exercise.run()
    try:
        if ran is None:
            _say(
                f"{WARNING_MARK} Compiling of {exercise} failed! "
                "Please try again. Here's the output:",
                "red",
            )
            _say(_decode(compiled.stderr))
            raise ExerciseFailed(exercise)
        if ran.returncode == 0:
            _say(f"{SUCCESS_MARK} Successfully tested {exercise}!", "green")
            return
        _say(
            f"{WARNING_MARK} Testing of {exercise} failed! "
            "Please try again. Here's the output:",
            "red",
        )
        _say(_decode(ran.stdout))
        raise ExerciseFailed(exercise)
    finally:
        exercise.clean()