import subprocess
from pathlib import Path

import pytest

from drillrunner.cli import exercises_from, find_exercise, main
from drillrunner.exercise import Exercise, Mode, temp_file


class FakeToolchain:
    """Compiler stand-in: '*Failure.rs' does not compile, '*NotPassed.rs' fails at run time."""

    def __init__(self):
        self.compiled = []

    def __call__(self, args, **kwargs):
        if args[0] == "rustc":
            source = next(a for a in args if a.endswith(".rs"))
            self.compiled.append(source)
            Path(temp_file()).touch()
            ok = "Failure" not in Path(source).name
        else:
            ok = "NotPassed" not in Path(self.compiled[-1]).name
        return subprocess.CompletedProcess(args, 0 if ok else 1, b"", b"")


def write_fixture(directory, entries, extra_files=()):
    directory.mkdir(parents=True, exist_ok=True)
    lines = []
    for name, mode in entries:
        (directory / name).write_text("fn main() {}\n", encoding="utf-8")
        lines.append(f'[[exercises]]\npath = "{name}"\nmode = "{mode}"\n')
    for name in extra_files:
        (directory / name).write_text("fn main() {}\n", encoding="utf-8")
    (directory / "info.toml").write_text("\n".join(lines), encoding="utf-8")
    (directory / "default_out.txt").write_text("Thanks for installing!", encoding="utf-8")
    return directory


@pytest.fixture
def tools(monkeypatch):
    toolchain = FakeToolchain()
    monkeypatch.setattr(subprocess, "run", toolchain)
    return toolchain


@pytest.fixture
def success_dir(tmp_path, monkeypatch, tools):
    directory = write_fixture(
        tmp_path / "success", [("compSuccess.rs", "compile"), ("testSuccess.rs", "test")]
    )
    monkeypatch.chdir(directory)
    return directory


@pytest.fixture
def failure_dir(tmp_path, monkeypatch, tools):
    directory = write_fixture(
        tmp_path / "failure",
        [
            ("compFailure.rs", "compile"),
            ("testFailure.rs", "test"),
            ("testNotPassed.rs", "test"),
        ],
        extra_files=["compNoExercise.rs"],
    )
    monkeypatch.chdir(directory)
    return directory


def test_runs_without_arguments(success_dir, capsys):
    assert main([]) == 0
    assert "Thanks for installing!" in capsys.readouterr().out


def test_fails_when_in_wrong_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main([]) == 1


def test_verify_all_success(success_dir, tools):
    assert main(["v"]) == 0
    assert tools.compiled == ["compSuccess.rs", "testSuccess.rs"]


def test_verify_all_failure(failure_dir):
    assert main(["v"]) == 1


def test_verify_long_name(success_dir):
    assert main(["verify"]) == 0


def test_run_single_compile_success(success_dir):
    assert main(["r", "compSuccess.rs"]) == 0


def test_run_single_compile_failure(failure_dir):
    assert main(["r", "compFailure.rs"]) == 1


def test_run_single_test_success(success_dir):
    assert main(["r", "testSuccess.rs"]) == 0


def test_run_single_test_failure(failure_dir):
    assert main(["r", "testFailure.rs"]) == 1


def test_run_single_test_not_passed(failure_dir):
    assert main(["run", "testNotPassed.rs"]) == 1


def test_run_single_test_no_filename(success_dir, capsys):
    assert main(["r"]) == 1
    assert "Please supply a file name!" in capsys.readouterr().out


def test_run_single_test_no_exercise(failure_dir, capsys):
    assert main(["r", "compNoExercise.rs"]) == 1
    assert "No exercise found for your file name!" in capsys.readouterr().out


def test_find_exercise_matches_by_path_suffix(tmp_path, monkeypatch):
    target = tmp_path / "exercises" / "if" / "if1.rs"
    target.parent.mkdir(parents=True)
    target.touch()
    monkeypatch.chdir(tmp_path)
    wanted = Exercise(Path("exercises/if/if1.rs"), Mode.TEST)
    other = Exercise(Path("exercises/if/if2.rs"), Mode.TEST)
    assert find_exercise([other, wanted], "exercises/if/if1.rs") is wanted


def test_find_exercise_missing_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    exercise = Exercise(Path("gone.rs"), Mode.COMPILE)
    assert find_exercise([exercise], "gone.rs") is None


def test_exercises_from_skips_earlier_ones():
    exercises = [
        Exercise(Path("exercises/a.rs"), Mode.COMPILE),
        Exercise(Path("exercises/b.rs"), Mode.TEST),
        Exercise(Path("exercises/c.rs"), Mode.COMPILE),
    ]
    result = exercises_from(exercises, Path("/home/learner/course/exercises/b.rs"))
    assert result == exercises[1:]


def test_exercises_from_unknown_path_is_empty():
    exercises = [Exercise(Path("exercises/a.rs"), Mode.COMPILE)]
    assert exercises_from(exercises, Path("/tmp/elsewhere/z.rs")) == []


def test_exercises_from_requires_whole_components():
    exercises = [Exercise(Path("a.rs"), Mode.COMPILE)]
    assert exercises_from(exercises, Path("/x/ba.rs")) == []