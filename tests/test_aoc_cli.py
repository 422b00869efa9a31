import subprocess
from unittest import mock

import pytest

from adventkit import aoc_cli
from adventkit.day import Day


def completed(returncode=0):
    return subprocess.CompletedProcess(args=["aoc"], returncode=returncode)


def test_paths_use_padded_day():
    assert aoc_cli.get_input_path(Day(1)) == "data/inputs/01.txt"
    assert aoc_cli.get_puzzle_path(Day(12)) == "data/puzzles/12.md"


@pytest.mark.parametrize("value", ["abc", "", " 2015", "70000", "-1"])
def test_get_year_rejects_invalid(monkeypatch, value):
    monkeypatch.setenv("AOC_YEAR", value)
    assert aoc_cli.get_year() is None


def test_get_year_reads_env(monkeypatch):
    monkeypatch.setenv("AOC_YEAR", "2015")
    assert aoc_cli.get_year() == 2015


def test_get_year_unset(monkeypatch):
    monkeypatch.delenv("AOC_YEAR", raising=False)
    assert aoc_cli.get_year() is None


def test_build_args_without_year(monkeypatch):
    monkeypatch.delenv("AOC_YEAR", raising=False)
    assert aoc_cli.build_args("read", ["--x"], Day(5)) == ["--x", "--day", "05", "read"]


def test_build_args_with_year(monkeypatch):
    monkeypatch.setenv("AOC_YEAR", "2015")
    assert aoc_cli.build_args("read", [], Day(5)) == ["--year", "2015", "--day", "05", "read"]


def test_check_raises_when_missing():
    with mock.patch("subprocess.run", side_effect=FileNotFoundError):
        with pytest.raises(aoc_cli.CommandNotFound) as info:
            aoc_cli.check()
    assert str(info.value) == "aoc-cli is not present in environment."


def test_check_passes_when_present():
    with mock.patch("subprocess.run", return_value=completed()) as run:
        result = aoc_cli.check()
    assert result is None
    assert run.call_args.args[0] == ["aoc", "-V"]


def test_submit_argument_order(monkeypatch):
    monkeypatch.delenv("AOC_YEAR", raising=False)
    process = completed()
    with mock.patch("subprocess.run", return_value=process) as run:
        result = aoc_cli.submit(Day(3), 1, "42")
    assert result is process
    assert run.call_args.args[0] == ["aoc", "--day", "03", "submit", "1", "42"]


def test_read_arguments(monkeypatch):
    monkeypatch.delenv("AOC_YEAR", raising=False)
    process = completed()
    with mock.patch("subprocess.run", return_value=process) as run:
        result = aoc_cli.read(Day(7))
    assert result is process
    assert run.call_args.args[0] == [
        "aoc",
        "--description-only",
        "--puzzle-file",
        "data/puzzles/07.md",
        "--day",
        "07",
        "read",
    ]


def test_download_reports_paths(monkeypatch, capsys):
    monkeypatch.delenv("AOC_YEAR", raising=False)
    with mock.patch("subprocess.run", return_value=completed()) as run:
        aoc_cli.download(Day(2))
    args = run.call_args.args[0]
    assert args[:2] == ["aoc", "--overwrite"]
    assert args[-3:] == ["--day", "02", "download"]
    out = capsys.readouterr().out
    assert '"data/inputs/02.txt"' in out
    assert '"data/puzzles/02.md"' in out


def test_bad_exit_status_raises():
    process = completed(returncode=1)
    with mock.patch("subprocess.run", return_value=process):
        with pytest.raises(aoc_cli.BadExitStatus) as info:
            aoc_cli.read(Day(1))
    assert info.value.process is process
    assert str(info.value) == "aoc-cli exited with a non-zero status."


def test_not_callable_raises():
    with mock.patch("subprocess.run", side_effect=PermissionError):
        with pytest.raises(aoc_cli.CommandNotCallable) as info:
            aoc_cli.submit(Day(1), 2, "x")
    assert isinstance(info.value, aoc_cli.AocCommandError)
    assert str(info.value) == "aoc-cli could not be called."