"""Display formatting helpers."""

import math
from datetime import date, datetime

from calorie_tracker.domain.energy import EnergyUnit
from calorie_tracker.domain.preferences import AppLanguage
from calorie_tracker.domain.records import FoodEntry
from calorie_tracker.presentation.localization import UiText, app_text

_MONTHS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


def format_short_date(moment: date | datetime) -> str:
    """Format as ``"Jan 2 2026"`` independent of the process locale."""
    return f"{_MONTHS[moment.month - 1]} {moment.day} {moment.year}"


def format_food_energy(food: FoodEntry) -> str:
    """Format a food's energy, showing the kJ amount alongside for kJ entries."""
    energy = food.energy
    if energy.unit is EnergyUnit.KCAL:
        return f"{energy.amount} kcal"
    return f"{math.floor(energy.kcal_value)} kcal ({energy.amount} kJ)"


def format_daily_total(kcal: int, language: AppLanguage = AppLanguage.ENGLISH) -> str:
    return f"{app_text(UiText.DAILY_TOTAL, language)}: {kcal} kcal"


def format_steps(steps: int, language: AppLanguage = AppLanguage.ENGLISH) -> str:
    return f"{app_text(UiText.STEPS, language)}: {steps}"


def format_average(kcal: int, language: AppLanguage = AppLanguage.ENGLISH) -> str:
    return f"{app_text(UiText.AVERAGE_KCAL, language)}: {kcal}"
