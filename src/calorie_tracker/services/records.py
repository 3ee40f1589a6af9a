"""Record store for daily food logs."""

import logging
from collections.abc import Collection, Iterable
from dataclasses import dataclass, field
from datetime import UTC, datetime, tzinfo
from typing import Protocol
from uuid import UUID

from calorie_tracker.domain.errors import DateConflictError
from calorie_tracker.domain.records import (
    DailyRecord,
    FoodEntry,
    as_instant,
    calendar_day,
)

_logger = logging.getLogger(__name__)


class RecordRepository(Protocol):
    """Persistence interface for the full record collection."""

    def load(self) -> list[DailyRecord]:
        """Return all stored records, newest first."""

    def save(self, records: list[DailyRecord]) -> None:
        """Replace the stored collection with ``records``."""


def sort_newest_first(
    records: Iterable[DailyRecord], tz: tzinfo = UTC
) -> list[DailyRecord]:
    """Return records ordered by date, newest first.

    Naive dates are read as local to ``tz``.
    """
    return sorted(
        records, key=lambda record: as_instant(record.date, tz), reverse=True
    )


@dataclass
class RecordStore:
    """In-memory collection of daily records, saved after every change.

    Every command returns a snapshot of the records ordered newest first.
    At most one record exists per calendar day in ``timezone``.
    """

    repository: RecordRepository
    timezone: tzinfo = UTC
    _records: list[DailyRecord] = field(init=False, default_factory=list)

    def __post_init__(self) -> None:
        self._records = sort_newest_first(self.repository.load(), self.timezone)
        _logger.info("Loaded daily records: count=%s", len(self._records))

    @property
    def records(self) -> list[DailyRecord]:
        """Current records, newest first."""
        return list(self._records)

    def get(self, record_id: UUID) -> DailyRecord | None:
        """Return a record by id."""
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def find_by_day(self, moment: datetime) -> DailyRecord | None:
        """Return the record on the same calendar day as ``moment``."""
        day = calendar_day(moment, self.timezone)
        for record in self._records:
            if record.is_on(day, self.timezone):
                return record
        return None

    def upsert_today(
        self,
        date: datetime,
        foods: Iterable[FoodEntry],
        steps: int = 0,
        binge: bool = False,
    ) -> list[DailyRecord]:
        """Merge a save into the record for ``date`` or create one."""
        existing = self.find_by_day(date)
        if existing is not None:
            existing.add_steps(steps)
            existing.append_foods(foods)
            existing.set_binge(binge)
            _logger.info("Merged into daily record: record_id=%s", existing.id)
        else:
            record = DailyRecord(date=date, foods=list(foods), steps=steps, binge=binge)
            self._records.append(record)
            _logger.info("Created daily record: record_id=%s", record.id)
        return self._commit()

    def delete_many(self, record_ids: Collection[UUID]) -> list[DailyRecord]:
        """Delete every record whose id is in ``record_ids``."""
        before = len(self._records)
        self._records = [
            record for record in self._records if record.id not in record_ids
        ]
        _logger.info("Deleted daily records: count=%s", before - len(self._records))
        return self._commit()

    def delete_food_from(self, record_id: UUID, food_id: UUID) -> list[DailyRecord]:
        """Remove one food from a record."""
        record = self.get(record_id)
        if record is None:
            return self.records
        record.remove_food(food_id)
        return self._commit()

    def reset_steps_for(self, record_id: UUID) -> list[DailyRecord]:
        """Clear the step count of a record."""
        record = self.get(record_id)
        if record is None:
            return self.records
        record.reset_steps()
        return self._commit()

    def rebind_date(self, record_id: UUID, new_date: datetime) -> list[DailyRecord]:
        """Move a record to another date.

        Raises DateConflictError when another record already holds that day.
        """
        record = self.get(record_id)
        if record is None:
            return self.records
        day = calendar_day(new_date, self.timezone)
        for other in self._records:
            if other.id != record_id and other.is_on(day, self.timezone):
                raise DateConflictError(
                    f"Record {other.id} already exists for {day.isoformat()}"
                )
        moved = as_instant(new_date, self.timezone)
        ordered = sorted(
            self._records,
            key=lambda other: (
                moved
                if other.id == record_id
                else as_instant(other.date, self.timezone)
            ),
            reverse=True,
        )
        record.set_date(new_date)
        self._records = ordered
        return self._save()

    def average_kcal(self, record_ids: Collection[UUID]) -> int | None:
        """Return the truncated mean daily kcal of the selected records.

        Returns None when no selected record exists.
        """
        selected = [record for record in self._records if record.id in record_ids]
        if not selected:
            return None
        total = sum(record.total_kcal() for record in selected)
        return total // len(selected)

    def _commit(self) -> list[DailyRecord]:
        self._records = sort_newest_first(self._records, self.timezone)
        return self._save()

    def _save(self) -> list[DailyRecord]:
        self.repository.save(list(self._records))
        return self.records
