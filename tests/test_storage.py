"""
Tests for the JSON file backend: fail-open loading, exact round trips and
write failures.
"""
import json
from pathlib import Path

import pytest

from errors import PersistenceWriteFailure
from storage import JsonStorage, dump_snapshot
from task_manager import Task


def test_missing_file_loads_empty(data_file: Path) -> None:
    assert JsonStorage(data_file).load() == {}
    assert not data_file.exists()


def test_invalid_json_loads_empty(data_file: Path) -> None:
    data_file.write_text("{not json", encoding="utf-8")
    assert JsonStorage(data_file).load() == {}


@pytest.mark.parametrize(
    "content",
    [
        [],
        "just a string",
        {"Work": "not a list"},
        {"Work": [{"done": True}]},
        {"Work": [{"text": 3, "done": False}]},
        {"Work": [{"text": "a", "done": "yes"}]},
        {"Work": ["plain string"]},
    ],
)
def test_wrong_shape_loads_empty(data_file: Path, content) -> None:
    data_file.write_text(json.dumps(content), encoding="utf-8")
    assert JsonStorage(data_file).load() == {}


def test_missing_done_reads_as_pending(data_file: Path) -> None:
    data_file.write_text(json.dumps({"Work": [{"text": "a"}]}), encoding="utf-8")
    assert JsonStorage(data_file).load() == {"Work": [Task("a", False)]}


def test_round_trip_keeps_order_and_flags(data_file: Path) -> None:
    stored = {
        "Zeta": [{"text": "last", "done": True}, {"text": "first", "done": False}],
        "Alpha": [],
        "Mid": [{"text": "ünïcode ✓", "done": False}],
    }
    data_file.write_text(json.dumps(stored), encoding="utf-8")
    storage = JsonStorage(data_file)

    loaded = storage.load()
    assert list(loaded) == ["Zeta", "Alpha", "Mid"]
    storage.save(loaded)

    assert storage.load() == loaded
    assert json.loads(data_file.read_text(encoding="utf-8")) == stored
    assert list(json.loads(data_file.read_text(encoding="utf-8"))) == ["Zeta", "Alpha", "Mid"]


def test_save_is_human_readable(data_file: Path) -> None:
    JsonStorage(data_file).save({"Café": [Task("thé", True)]})
    text = data_file.read_text(encoding="utf-8")
    assert "Café" in text
    assert '  "Café": [' in text
    assert json.loads(text) == {"Café": [{"text": "thé", "done": True}]}


def test_save_creates_parent_directory(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "dir" / "tasks.json"
    JsonStorage(path).save({"Work": []})
    assert json.loads(path.read_text(encoding="utf-8")) == {"Work": []}


def test_save_leaves_no_temp_files(tmp_path: Path, data_file: Path) -> None:
    storage = JsonStorage(data_file)
    storage.save({"Work": []})
    storage.save({"Work": [Task("a")]})
    assert sorted(p.name for p in tmp_path.iterdir()) == ["tasks.json"]


def test_write_failure_raises(tmp_path: Path) -> None:
    target = tmp_path / "taken"
    target.mkdir()
    with pytest.raises(PersistenceWriteFailure):
        JsonStorage(target).save({"Work": []})
    assert [p.name for p in tmp_path.iterdir()] == ["taken"]


def test_dump_snapshot() -> None:
    assert dump_snapshot({"A": [Task("x", True)], "B": []}) == {
        "A": [{"text": "x", "done": True}],
        "B": [],
    }
