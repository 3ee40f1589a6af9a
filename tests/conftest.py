"""Shared test fixtures."""

import logging
from dataclasses import dataclass, field
from datetime import datetime

import pytest

from calorie_tracker.adapters.slot_storage import SlotStorage
from calorie_tracker.config import Settings
from calorie_tracker.domain.energy import EnergyUnit, EnergyValue
from calorie_tracker.domain.errors import PersistenceError
from calorie_tracker.domain.preferences import Preferences
from calorie_tracker.domain.records import DailyRecord, FoodEntry
from calorie_tracker.services.preferences import (
    PreferencesRepository,
    PreferencesService,
)
from calorie_tracker.services.records import RecordRepository, RecordStore


@dataclass
class InMemorySlotStorage(SlotStorage):
    """In-memory slot storage for tests."""

    slots: dict[str, bytes] = field(default_factory=dict)
    writes: int = 0

    def read(self, slot: str) -> bytes | None:
        return self.slots.get(slot)

    def write(self, slot: str, data: bytes) -> None:
        self.writes += 1
        self.slots[slot] = data


@dataclass
class FailingSlotStorage(InMemorySlotStorage):
    """Slot storage whose writes always fail."""

    fail_reads: bool = False

    def read(self, slot: str) -> bytes | None:
        if self.fail_reads:
            raise PersistenceError("disk unavailable")
        return super().read(slot)

    def write(self, slot: str, data: bytes) -> None:
        raise PersistenceError("disk full")


@dataclass
class InMemoryRecordRepository(RecordRepository):
    """In-memory record repository for tests."""

    stored: list[DailyRecord] = field(default_factory=list)
    saves: int = 0

    def load(self) -> list[DailyRecord]:
        return list(self.stored)

    def save(self, records: list[DailyRecord]) -> None:
        self.saves += 1
        self.stored = list(records)


@dataclass
class InMemoryPreferencesRepository(PreferencesRepository):
    """In-memory preferences repository for tests."""

    preferences: Preferences | None = None

    def load(self) -> Preferences | None:
        return self.preferences

    def save(self, preferences: Preferences) -> None:
        self.preferences = preferences


def kcal(name: str, amount: int) -> FoodEntry:
    return FoodEntry(name=name, energy=EnergyValue(amount, EnergyUnit.KCAL))


def kj(name: str, amount: int) -> FoodEntry:
    return FoodEntry(name=name, energy=EnergyValue(amount, EnergyUnit.KJ))


def day(year: int, month: int, day_of_month: int, hour: int = 12) -> datetime:
    return datetime(year, month, day_of_month, hour)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(data_dir=tmp_path / "data", timezone="UTC")


@pytest.fixture
def record_repository() -> InMemoryRecordRepository:
    return InMemoryRecordRepository()


@pytest.fixture
def store(record_repository: InMemoryRecordRepository) -> RecordStore:
    return RecordStore(record_repository)


@pytest.fixture
def preferences_service() -> PreferencesService:
    return PreferencesService(InMemoryPreferencesRepository())


@pytest.fixture(autouse=True)
def _restore_app_logger():
    logger = logging.getLogger("calorie_tracker")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
