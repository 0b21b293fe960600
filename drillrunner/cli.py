"""Command line entry point: verify, watch or run exercises."""

from __future__ import annotations

import argparse
import os
import queue
import sys
import time
from collections.abc import Iterable, Sequence
from itertools import dropwhile
from pathlib import Path

from .exercise import Exercise, load_exercises
from .run import run
from .verify import ExerciseFailed, verify

INFO_FILE = "info.toml"
DEFAULT_OUT_FILE = "default_out.txt"
EXERCISES_DIR = "./exercises"
DEBOUNCE_SECONDS = 2.0

_BANNER = r"""
       welcome to...
      _      _ _ _
   __| |_ __(_) | |_ __ _   _ _ __  _ __   ___ _ __
  / _` | '__| | | | '__| | | | '_ \| '_ \ / _ \ '__|
 | (_| | |  | | | | |  | |_| | | | | | | |  __/ |
  \__,_|_|  |_|_|_|_|   \__,_|_| |_|_| |_|\___|_|
"""


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="drillrunner",
        description="A collection of small exercises to practise reading and writing code",
    )
    parser.set_defaults(command=None)
    commands = parser.add_subparsers()
    verify_cmd = commands.add_parser(
        "verify", aliases=["v"], help="Verifies all exercises according to the recommended order"
    )
    verify_cmd.set_defaults(command="verify")
    watch_cmd = commands.add_parser(
        "watch", aliases=["w"], help="Reruns `verify` when files were edited"
    )
    watch_cmd.set_defaults(command="watch")
    run_cmd = commands.add_parser("run", aliases=["r"], help="Runs/Tests a single exercise")
    run_cmd.add_argument("file", nargs="?")
    run_cmd.add_argument("-t", "--test", action="store_true", help="Run the file as a test")
    run_cmd.set_defaults(command="run")
    return parser


def _ends_with(path: Path, suffix: Path) -> bool:
    """Whether the trailing components of ``path`` equal those of ``suffix``."""
    parts, tail = Path(path).parts, Path(suffix).parts
    return len(tail) <= len(parts) and parts[len(parts) - len(tail):] == tail


def find_exercise(exercises: Iterable[Exercise], filename: str) -> Exercise | None:
    """Find the exercise whose path the existing file ``filename`` ends with."""
    try:
        resolved = Path(filename).resolve(strict=True)
    except OSError:
        return None
    return next((e for e in exercises if _ends_with(resolved, e.path)), None)


def exercises_from(exercises: Iterable[Exercise], path: Path) -> list[Exercise]:
    """The exercises starting with the one that ``path`` belongs to."""
    return list(dropwhile(lambda e: not _ends_with(path, e.path), exercises))


def _verify_quietly(exercises: Iterable[Exercise]) -> None:
    try:
        verify(exercises)
    except ExerciseFailed:
        pass


def watch(exercises: Sequence[Exercise]) -> None:
    """Verify, then re-verify from each edited exercise until interrupted."""
    from watchdog.events import FileSystemEventHandler
    from watchdog.observers import Observer

    changes: queue.Queue[Path] = queue.Queue()

    class _Handler(FileSystemEventHandler):
        def _record(self, event) -> None:
            if not event.is_directory:
                changes.put(Path(os.fsdecode(event.src_path)))

        on_created = _record
        on_modified = _record

    observer = Observer()
    observer.schedule(_Handler(), EXERCISES_DIR, recursive=True)
    observer.start()
    try:
        _verify_quietly(exercises)
        while True:
            pending = {changes.get(): None}
            while True:
                try:
                    pending[changes.get(timeout=DEBOUNCE_SECONDS)] = None
                except queue.Empty:
                    break
            for path in pending:
                if path.suffix == ".rs" and path.exists():
                    print("----------**********----------\n")
                    _verify_quietly(exercises_from(exercises, path.resolve()))
    except KeyboardInterrupt:
        pass
    finally:
        observer.stop()
        observer.join()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; returns the process exit status."""
    args = _parser().parse_args(argv)

    if args.command is None:
        print(_BANNER)

    if not Path(INFO_FILE).exists():
        print(f"{sys.argv[0]} must be run from the course directory")
        print(f"Try `cd` into the directory that holds {INFO_FILE}!")
        return 1

    exercises = load_exercises(INFO_FILE)

    if args.command == "run":
        if not args.file:
            print("Please supply a file name!")
            return 1
        exercise = find_exercise(exercises, args.file)
        if exercise is None:
            print("No exercise found for your file name!")
            return 1
        try:
            run(exercise)
        except ExerciseFailed:
            return 1
    elif args.command == "verify":
        try:
            verify(exercises)
        except ExerciseFailed:
            return 1
    elif args.command == "watch":
        watch(exercises)
    else:
        print(Path(DEFAULT_OUT_FILE).read_text(encoding="utf-8"))
    return 0


if __name__ == "__main__":
    sys.exit(main())