"""State of the History screen."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from calorie_tracker.domain.errors import DateConflictError
from calorie_tracker.domain.preferences import GraphStyle
from calorie_tracker.domain.records import DailyRecord, as_instant, calendar_day
from calorie_tracker.presentation.formatting import format_short_date
from calorie_tracker.services.preferences import PreferencesService
from calorie_tracker.services.records import RecordStore

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChartPoint:
    """One day's total on the history chart."""

    label: str
    total_kcal: int


@dataclass
class HistoryView:
    """Expansion, selection and edit state over the stored records."""

    store: RecordStore
    preferences_service: PreferencesService
    expanded: set[UUID] = field(default_factory=set)
    selected: set[UUID] = field(default_factory=set)
    edit_mode: bool = False
    average: int | None = None

    @property
    def records(self) -> list[DailyRecord]:
        return self.store.records

    @property
    def show_average(self) -> bool:
        return self.average is not None

    def toggle_expanded(self, record_id: UUID) -> None:
        if record_id in self.expanded:
            self.expanded.remove(record_id)
        else:
            self.expanded.add(record_id)

    def toggle_selection(self, record_id: UUID) -> None:
        if not self.edit_mode:
            return
        if record_id in self.selected:
            self.selected.remove(record_id)
        else:
            self.selected.add(record_id)

    def toggle_edit_mode(self) -> None:
        self.edit_mode = not self.edit_mode
        self.selected.clear()
        self.average = None

    def calculate_average(self) -> int | None:
        """Show the average card, or hide it and clear the selection if shown."""
        if self.show_average:
            self.average = None
            self.selected.clear()
            return None
        if not self.selected:
            return None
        self.average = self.store.average_kcal(self.selected)
        return self.average

    def delete_selected(self) -> list[DailyRecord]:
        records = self.store.delete_many(set(self.selected))
        self.expanded -= self.selected
        self.selected.clear()
        self.average = None
        return records

    def delete_food(self, record_id: UUID, food_id: UUID) -> list[DailyRecord]:
        return self.store.delete_food_from(record_id, food_id)

    def delete_steps(self, record_id: UUID) -> list[DailyRecord]:
        return self.store.reset_steps_for(record_id)

    def change_date(self, record_id: UUID, new_date: datetime) -> bool:
        """Move a record to ``new_date``; returns False if the day is taken."""
        try:
            self.store.rebind_date(record_id, new_date)
        except DateConflictError as exc:
            _logger.warning("Rejected date change: record_id=%s %s", record_id, exc)
            return False
        return True

    def graph_style(self) -> GraphStyle:
        return self.preferences_service.get().graph_style

    def chart_points(self) -> list[ChartPoint]:
        """Daily totals oldest first, labelled with short dates."""
        ordered = sorted(
            self.store.records,
            key=lambda record: as_instant(record.date, self.store.timezone),
        )
        return [
            ChartPoint(
                label=format_short_date(calendar_day(record.date, self.store.timezone)),
                total_kcal=record.total_kcal(),
            )
            for record in ordered
        ]
