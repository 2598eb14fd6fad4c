"""Tests for profile/history persistence."""

import json
from datetime import timedelta

import pytest

from splitlog.errors import StorageError
from splitlog.storage import HISTORY_KEY, PROFILE_KEY, JsonFileStorage, MemoryStorage

from .conftest import T0, make_profile, make_workout


def _history():
    return [
        make_workout("push", T0, {"flat_bench_press": [(60, 10), (62.5, 8)]}, duration=3120),
        make_workout("pull", T0 + timedelta(days=2), {"lat_pulldown": [(45, 12)]}, duration=2900),
    ]


@pytest.fixture(params=["memory", "file"])
def storage(request, tmp_path):
    if request.param == "memory":
        return MemoryStorage()
    return JsonFileStorage(tmp_path / "data")


def test_empty_storage_loads_nothing(storage):
    assert storage.load_profile() is None
    assert storage.load_history() == []


def test_round_trip_reproduces_records(storage):
    profile = make_profile()
    history = _history()
    storage.save(profile, history)
    assert storage.load_profile() == profile
    assert storage.load_history() == history


def test_saving_no_profile(storage):
    storage.save(None, _history())
    assert storage.load_profile() is None
    assert len(storage.load_history()) == 2


def test_clear_all(storage):
    storage.save(make_profile(), _history())
    storage.clear_all()
    assert storage.load_profile() is None
    assert storage.load_history() == []


def test_clear_all_on_empty_storage(storage):
    storage.clear_all()
    assert storage.load_history() == []


class TestJsonFileStorage:
    def test_writes_one_file_per_record(self, tmp_path):
        storage = JsonFileStorage(tmp_path)
        storage.save(make_profile(), _history())
        profile_data = json.loads((tmp_path / f"{PROFILE_KEY}.json").read_text())
        history_data = json.loads((tmp_path / f"{HISTORY_KEY}.json").read_text())
        assert profile_data["name"] == "Sam"
        assert [w["workoutType"] for w in history_data] == ["push", "pull"]
        assert not list(tmp_path.glob("*.tmp"))

    def test_creates_missing_directory(self, tmp_path):
        storage = JsonFileStorage(tmp_path / "nested" / "dir")
        storage.save(None, [])
        assert (tmp_path / "nested" / "dir" / f"{HISTORY_KEY}.json").exists()

    def test_corrupt_history_raises_storage_error(self, tmp_path):
        (tmp_path / f"{HISTORY_KEY}.json").write_text("{not json")
        with pytest.raises(StorageError, match="Could not parse"):
            JsonFileStorage(tmp_path).load_history()

    def test_history_must_be_a_list(self, tmp_path):
        (tmp_path / f"{HISTORY_KEY}.json").write_text('{"id": "x"}')
        with pytest.raises(StorageError, match="must contain a JSON list"):
            JsonFileStorage(tmp_path).load_history()

    def test_invalid_workout_raises_storage_error(self, tmp_path):
        (tmp_path / f"{HISTORY_KEY}.json").write_text('[{"id": "x"}]')
        with pytest.raises(StorageError, match="Invalid workout"):
            JsonFileStorage(tmp_path).load_history()

    def test_invalid_profile_raises_storage_error(self, tmp_path):
        (tmp_path / f"{PROFILE_KEY}.json").write_text('{"name": "Sam", "currentSplit": []}')
        with pytest.raises(StorageError, match="Could not parse userProfile"):
            JsonFileStorage(tmp_path).load_profile()

    def test_blank_file_treated_as_missing(self, tmp_path):
        (tmp_path / f"{PROFILE_KEY}.json").write_text("\n")
        assert JsonFileStorage(tmp_path).load_profile() is None

    def test_unwritable_location_raises_storage_error(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory")
        with pytest.raises(StorageError, match="Could not write"):
            JsonFileStorage(blocker / "data").save(None, [])
