"""Exercise descriptions and the compiler invocations behind them."""

from __future__ import annotations

import enum
import os
import subprocess
import tomllib
from dataclasses import dataclass
from pathlib import Path

RUSTC_COLOR_ARGS = ("--color", "always")


def temp_file() -> str:
    """Return the path of the binary built for the current process."""
    return f"./temp_{os.getpid()}"


class Mode(enum.Enum):
    """How an exercise is checked: compiled only, or built and run as tests."""

    COMPILE = "compile"
    TEST = "test"


@dataclass
class Exercise:
    """A single exercise file and the way it is checked."""

    path: Path
    mode: Mode

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.mode = Mode(self.mode)

    def compile(self) -> subprocess.CompletedProcess:
        """Compile the exercise into the temporary binary."""
        args = ["rustc"]
        if self.mode is Mode.TEST:
            args.append("--test")
        args += [str(self.path), "-o", temp_file(), *RUSTC_COLOR_ARGS]
        return subprocess.run(args, capture_output=True, check=False)

    def run(self) -> subprocess.CompletedProcess:
        """Run the binary built by :meth:`compile`."""
        return subprocess.run([temp_file()], capture_output=True, check=False)

    def clean(self) -> None:
        """Remove the temporary binary, if there is one."""
        try:
            os.remove(temp_file())
        except OSError:
            pass

    def __str__(self) -> str:
        return str(self.path)


def parse_exercise_list(text: str) -> list[Exercise]:
    """Parse the TOML exercise list into exercises, in file order."""
    data = tomllib.loads(text)
    entries = data.get("exercises")
    if not isinstance(entries, list):
        raise ValueError("exercise list has no 'exercises' array")
    exercises = []
    for entry in entries:
        try:
            exercises.append(Exercise(Path(entry["path"]), Mode(entry["mode"])))
        except (KeyError, TypeError) as error:
            raise ValueError(f"malformed exercise entry: {entry!r}") from error
    return exercises


def load_exercises(path: str | os.PathLike) -> list[Exercise]:
    """Read and parse an exercise list file."""
    return parse_exercise_list(Path(path).read_text(encoding="utf-8"))