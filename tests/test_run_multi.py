import pytest

from adventkit.day import Day
from adventkit.run_multi import parse_exec_time, parse_time, run_multi, run_solution

SCRIPT = """\
import sys
print("Part 1: 5 (1.0ms @ 10 samples)")
print("Part 2: 7 (2.0ms @ 10 samples)")
print("args: " + " ".join(sys.argv[1:]))
print("debug " + str(__debug__))
print("oops", file=sys.stderr)
"""


@pytest.fixture
def project(tmp_path, monkeypatch):
    bin_dir = tmp_path / "src" / "bin"
    bin_dir.mkdir(parents=True)
    (bin_dir / "01.py").write_text(SCRIPT, encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_parses_execution_times():
    res = parse_exec_time(
        [
            "Part 1: 0 (74.13ns @ 100000 samples)",
            "Part 2: 10 (74.13ms @ 99999 samples)",
            "",
        ],
        Day(1),
    )
    assert res.total_nanos == pytest.approx(74130074.13, abs=1e-6)
    assert res.part_1 == "74.13ns"
    assert res.part_2 == "74.13ms"


def test_parses_with_patterns_in_input():
    res = parse_exec_time(
        [
            "Part 1: @ @ @ ( ) ms (2s @ 5 samples)",
            "Part 2: 10s (100ms @ 1 samples)",
            "",
        ],
        Day(1),
    )
    assert res.total_nanos == pytest.approx(2100000000.0, abs=1e-6)
    assert res.part_1 == "2s"
    assert res.part_2 == "100ms"


def test_parses_missing_parts():
    res = parse_exec_time(
        ["Part 1: ✖        ", "Part 2: ✖        ", ""],
        Day(1),
    )
    assert res.total_nanos == pytest.approx(0.0, abs=1e-6)
    assert res.part_1 is None
    assert res.part_2 is None


def test_parse_time_microseconds():
    result = parse_time("Part 1: 3 (2.5µs @ 10 samples)")
    assert result[0] == "2.5µs"
    assert result[1] == pytest.approx(2500.0)


def test_parse_time_unparseable_returns_none():
    assert parse_time("Part 1: 3 (abcms @ 10 samples)") is None


def test_unparseable_line_is_skipped(capsys):
    res = parse_exec_time(["Part 1: 3 (abcms @ 10 samples)"], Day(2))
    assert res.part_1 is None
    assert res.total_nanos == 0.0
    assert "Could not parse timings" in capsys.readouterr().err


def test_run_solution_missing_script(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert run_solution(Day(3), True, False) == []


def test_run_solution_collects_stdout(project, capsys):
    output = run_solution(Day(1), True, False)
    assert output[0] == "Part 1: 5 (1.0ms @ 10 samples)"
    assert "args: --time" in output
    assert "debug True" in output
    captured = capsys.readouterr()
    assert "oops" in captured.err
    assert "Part 2: 7 (2.0ms @ 10 samples)" in captured.out


def test_run_solution_release_and_untimed(project):
    output = run_solution(Day(1), False, True)
    assert "args: " in output
    assert "debug False" in output


def test_run_multi_timed(project, capsys):
    timings = run_multi({Day(1), Day(2)}, False, True)
    assert [t.day for t in timings.data] == [Day(1)]
    assert timings.data[0].part_1 == "1.0ms"
    assert timings.data[0].part_2 == "2.0ms"
    assert timings.total_millis() == pytest.approx(3.0)
    out = capsys.readouterr().out
    assert "Not solved." in out
    assert out.index("Day 01") < out.index("Day 02")


def test_run_multi_untimed_returns_none(project):
    assert run_multi([Day(2)], False, False) is None