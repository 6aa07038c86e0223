import pytest

from Calculator import history_manager
from Calculator import error as E


def test_format_entry():
    assert history_manager.format_entry(" 2+3 ", "5") == "2+3 = 5"


def test_missing_file_is_empty_history(tmp_path):
    assert history_manager.load_history(tmp_path / "history.txt") == []


def test_save_then_load(tmp_path):
    history_file = tmp_path / "history.txt"
    entries = ["2+3 = 5", "5! = 120"]

    history_manager.save_history(entries, history_file)

    assert history_file.read_text(encoding="utf-8") == "2+3 = 5\n5! = 120\n"
    assert history_manager.load_history(history_file) == entries


def test_save_overwrites(tmp_path):
    history_file = tmp_path / "history.txt"
    history_manager.save_history(["1+1 = 2"], history_file)
    history_manager.save_history(["2+2 = 4"], history_file)
    assert history_manager.load_history(history_file) == ["2+2 = 4"]


def test_append_entry(tmp_path):
    history_file = tmp_path / "history.txt"
    history_manager.append_entry("1+1 = 2", history_file)
    history_manager.append_entry("sin(30) = 0.5", history_file)
    assert history_manager.load_history(history_file) == ["1+1 = 2", "sin(30) = 0.5"]


def test_blank_lines_are_skipped(tmp_path):
    history_file = tmp_path / "history.txt"
    history_file.write_text("1+1 = 2\n\n   \n2*3 = 6\n", encoding="utf-8")
    assert history_manager.load_history(history_file) == ["1+1 = 2", "2*3 = 6"]


def test_clear_history(tmp_path):
    history_file = tmp_path / "history.txt"
    history_manager.save_history(["1+1 = 2"], history_file)
    history_manager.clear_history(history_file)
    assert history_manager.load_history(history_file) == []


def test_write_failure_raises(tmp_path):
    with pytest.raises(E.HistoryError) as excinfo:
        history_manager.append_entry("1+1 = 2", tmp_path / "no_dir" / "history.txt")
    assert excinfo.value.code == "5002"


def test_read_failure_raises(tmp_path):
    # a directory cannot be opened as a text file
    with pytest.raises(E.HistoryError) as excinfo:
        history_manager.load_history(tmp_path)
    assert excinfo.value.code == "5003"


def test_undecodable_file_raises(tmp_path):
    history_file = tmp_path / "history.txt"
    history_file.write_bytes(b"1+1 = 2\n\xff\xfe\n")
    with pytest.raises(E.HistoryError) as excinfo:
        history_manager.load_history(history_file)
    assert excinfo.value.code == "5003"
