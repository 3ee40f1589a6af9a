"""Tests for file-backed slot storage."""

import pytest

from calorie_tracker.adapters.slot_storage import FileSlotStorage
from calorie_tracker.domain.errors import PersistenceError


def test_read_missing_slot_returns_none(tmp_path) -> None:
    assert FileSlotStorage(tmp_path).read("dailyEntries") is None


def test_write_creates_directory_and_replaces(tmp_path) -> None:
    storage = FileSlotStorage(tmp_path / "nested")

    storage.write("dailyEntries", b"[1]")
    storage.write("dailyEntries", b"[2]")

    assert storage.read("dailyEntries") == b"[2]"
    assert [path.name for path in (tmp_path / "nested").iterdir()] == [
        "dailyEntries.json"
    ]


def test_write_failure_raises_persistence_error(tmp_path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    storage = FileSlotStorage(blocker)

    with pytest.raises(PersistenceError):
        storage.write("dailyEntries", b"[]")
