"""JSON repository for daily records kept in one storage slot."""

import logging
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

import pydantic
from pydantic import BaseModel, Field, TypeAdapter

from calorie_tracker.adapters.slot_storage import SlotStorage
from calorie_tracker.domain.energy import EnergyUnit, EnergyValue
from calorie_tracker.domain.errors import PersistenceError, ValidationError
from calorie_tracker.domain.records import DailyRecord, FoodEntry
from calorie_tracker.services.records import RecordRepository, sort_newest_first

_logger = logging.getLogger(__name__)

DEFAULT_RECORDS_SLOT = "dailyEntries"


class FoodEntryPayload(BaseModel):
    """Stored form of a food entry."""

    id: UUID
    name: str = Field(min_length=1)
    value: int = Field(ge=0)
    unit: EnergyUnit


class DailyRecordPayload(BaseModel):
    """Stored form of a daily record."""

    id: UUID
    date: datetime
    foods: list[FoodEntryPayload] = Field(default_factory=list)
    steps: int = Field(ge=0)
    binge: bool


_RECORDS = TypeAdapter(list[DailyRecordPayload])


@dataclass
class JsonRecordRepository(RecordRepository):
    """Persists the whole record collection as one JSON blob."""

    storage: SlotStorage
    slot: str = DEFAULT_RECORDS_SLOT

    def load(self) -> list[DailyRecord]:
        """Return stored records, or an empty list if none can be read."""
        try:
            raw = self.storage.read(self.slot)
        except PersistenceError:
            _logger.warning("Records slot unreadable: slot=%s", self.slot)
            return []
        if raw is None:
            return []
        try:
            payloads = _RECORDS.validate_json(raw)
            records = [_to_record(payload) for payload in payloads]
        except (pydantic.ValidationError, ValidationError):
            _logger.warning("Records slot undecodable: slot=%s", self.slot)
            return []
        return sort_newest_first(records)

    def save(self, records: list[DailyRecord]) -> None:
        """Overwrite the slot; failures are logged and leave the old blob."""
        try:
            data = _RECORDS.dump_json([_to_payload(record) for record in records])
            self.storage.write(self.slot, data)
        except (PersistenceError, ValueError):
            _logger.exception(
                "Failed to save records: slot=%s count=%s", self.slot, len(records)
            )


def _to_payload(record: DailyRecord) -> DailyRecordPayload:
    return DailyRecordPayload(
        id=record.id,
        date=record.date,
        foods=[
            FoodEntryPayload(
                id=food.id,
                name=food.name,
                value=food.energy.amount,
                unit=food.energy.unit,
            )
            for food in record.foods
        ],
        steps=record.steps,
        binge=record.binge,
    )


def _to_record(payload: DailyRecordPayload) -> DailyRecord:
    return DailyRecord(
        id=payload.id,
        date=payload.date,
        foods=[
            FoodEntry(
                id=food.id,
                name=food.name,
                energy=EnergyValue(amount=food.value, unit=food.unit),
            )
            for food in payload.foods
        ],
        steps=payload.steps,
        binge=payload.binge,
    )
