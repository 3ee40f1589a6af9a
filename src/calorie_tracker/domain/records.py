"""Domain models for daily food records."""

import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import UTC, date, datetime, tzinfo
from uuid import UUID, uuid4

from calorie_tracker.domain.energy import EnergyValue
from calorie_tracker.domain.errors import ValidationError


def calendar_day(moment: datetime, tz: tzinfo | None = None) -> date:
    """Return the calendar day of a moment in the given time zone.

    Naive datetimes are taken as already being local time.
    """
    if tz is not None and moment.tzinfo is not None:
        return moment.astimezone(tz).date()
    return moment.date()


def as_instant(moment: datetime, tz: tzinfo = UTC) -> datetime:
    """Return an aware datetime, reading naive values as local to ``tz``.

    Naive and aware dates compare consistently once passed through this.
    """
    if moment.tzinfo is None:
        return moment.replace(tzinfo=tz)
    return moment


@dataclass(frozen=True)
class FoodEntry:
    """A named food or drink with its energy."""

    name: str
    energy: EnergyValue
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Food name must not be empty")


@dataclass
class DailyRecord:
    """Everything logged for one calendar day."""

    date: datetime
    foods: list[FoodEntry] = field(default_factory=list)
    steps: int = 0
    binge: bool = False
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        if self.steps < 0:
            raise ValidationError(f"Steps must not be negative: {self.steps}")

    def total_kcal(self) -> int:
        """Return the summed energy of all foods, truncated to whole kcal."""
        return math.floor(sum(food.energy.kcal_value for food in self.foods))

    def append_foods(self, foods: Iterable[FoodEntry]) -> None:
        """Add foods to the end of the day's list."""
        self.foods.extend(foods)

    def add_steps(self, steps: int) -> None:
        if steps < 0:
            raise ValidationError(f"Steps must not be negative: {steps}")
        self.steps += steps

    def set_binge(self, flag: bool) -> None:
        """Merge a binge flag; once set for the day it stays set."""
        self.binge = self.binge or flag

    def remove_food(self, food_id: UUID) -> bool:
        """Remove the food with ``food_id``; return False when absent."""
        remaining = [food for food in self.foods if food.id != food_id]
        removed = len(remaining) != len(self.foods)
        self.foods = remaining
        return removed

    def reset_steps(self) -> None:
        self.steps = 0

    def set_date(self, new_date: datetime) -> None:
        self.date = new_date

    def is_on(self, day: date, tz: tzinfo | None = None) -> bool:
        """Return True when the record falls on ``day``."""
        return calendar_day(self.date, tz) == day
