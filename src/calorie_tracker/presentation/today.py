"""State of the Today screen form."""

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from calorie_tracker.domain.energy import EnergyUnit, EnergyValue
from calorie_tracker.domain.errors import ValidationError
from calorie_tracker.domain.records import DailyRecord, FoodEntry
from calorie_tracker.services.records import RecordStore

_logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


def parse_steps(text: str) -> int:
    """Parse the steps field; anything but a whole number counts as zero."""
    cleaned = text.strip()
    if cleaned.isascii() and cleaned.isdigit():
        return int(cleaned)
    return 0


@dataclass
class TodayForm:
    """Collects the foods, steps and binge flag for one save."""

    store: RecordStore
    clock: Callable[[], datetime] = _utc_now
    food_name: str = ""
    food_value: str = ""
    food_unit: EnergyUnit = EnergyUnit.KCAL
    foods: list[FoodEntry] = field(default_factory=list)
    steps: str = ""
    binge: bool = False
    selected_date: datetime | None = None

    def __post_init__(self) -> None:
        if self.selected_date is None:
            self.selected_date = self.clock()

    def add_food(self) -> FoodEntry | None:
        """Add the typed food to the pending list.

        Does nothing and returns None when the name is empty or the
        energy is not a whole number.
        """
        try:
            energy = EnergyValue.parse(self.food_value, self.food_unit)
            food = FoodEntry(name=self.food_name, energy=energy)
        except ValidationError as exc:
            _logger.debug("Ignored add food: %s", exc)
            return None
        self.foods.append(food)
        self.food_name = ""
        self.food_value = ""
        return food

    def remove_pending_food(self, food_id: UUID) -> None:
        self.foods = [food for food in self.foods if food.id != food_id]

    def total_kcal(self) -> int:
        """Truncated kcal total of the pending foods."""
        return math.floor(sum(food.energy.kcal_value for food in self.foods))

    def save(self) -> list[DailyRecord]:
        """Merge the form into the store and start a fresh form."""
        records = self.store.upsert_today(
            date=self.selected_date or self.clock(),
            foods=list(self.foods),
            steps=parse_steps(self.steps),
            binge=self.binge,
        )
        self.reset()
        return records

    def reset(self) -> None:
        self.foods = []
        self.steps = ""
        self.binge = False
        self.selected_date = self.clock()
