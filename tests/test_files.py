import pytest

from adventkit.day import Day
from adventkit.files import read_file, read_file_part


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for folder in ("inputs", "examples"):
        (tmp_path / "data" / folder).mkdir(parents=True)
    return tmp_path / "data"


def test_read_file_uses_padded_day(data_dir):
    content = "(()(()(\n"
    (data_dir / "inputs" / "01.txt").write_text(content, encoding="utf-8")
    assert read_file("inputs", Day(1)) == content


def test_read_file_part_uses_suffix(data_dir):
    first = "(())"
    second = "()())"
    (data_dir / "examples" / "07-1.txt").write_text(first, encoding="utf-8")
    (data_dir / "examples" / "07-2.txt").write_text(second, encoding="utf-8")
    assert read_file_part("examples", Day(7), 1) == first
    assert read_file_part("examples", Day(7), 2) == second


def test_read_file_missing_raises(data_dir):
    with pytest.raises(FileNotFoundError):
        read_file("inputs", Day(12))


def test_read_file_part_missing_raises(data_dir):
    (data_dir / "examples" / "03.txt").write_text("x", encoding="utf-8")
    with pytest.raises(FileNotFoundError):
        read_file_part("examples", Day(3), 1)