"""Domain models for food energy quantities."""

from dataclasses import dataclass
from enum import Enum

from calorie_tracker.domain.errors import ValidationError

KJ_PER_KCAL = 4.184


class EnergyUnit(str, Enum):
    """Unit an energy amount was entered in."""

    KCAL = "kcal"
    KJ = "kj"

    @classmethod
    def parse(cls, value: str) -> "EnergyUnit":
        """Return the unit for a raw string such as ``"kJ"``."""
        try:
            return cls(value.strip().lower())
        except ValueError as exc:
            raise ValidationError(f"Unknown energy unit: {value!r}") from exc


@dataclass(frozen=True)
class EnergyValue:
    """An amount of food energy tagged with its unit."""

    amount: int
    unit: EnergyUnit = EnergyUnit.KCAL

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise ValidationError(f"Energy amount must be an integer: {self.amount!r}")
        if self.amount < 0:
            raise ValidationError(f"Energy amount must not be negative: {self.amount}")
        if not isinstance(self.unit, EnergyUnit):
            object.__setattr__(self, "unit", EnergyUnit.parse(str(self.unit)))

    @classmethod
    def parse(cls, text: str, unit: EnergyUnit = EnergyUnit.KCAL) -> "EnergyValue":
        """Build a value from raw text-field input."""
        cleaned = text.strip()
        if not (cleaned.isascii() and cleaned.isdigit()):
            raise ValidationError(f"Energy amount is not a whole number: {text!r}")
        return cls(amount=int(cleaned), unit=unit)

    @property
    def kcal_value(self) -> float:
        """Energy in kilocalories."""
        if self.unit is EnergyUnit.KCAL:
            return float(self.amount)
        return self.amount / KJ_PER_KCAL

    def to_kcal(self) -> float:
        """Return the energy converted to kilocalories."""
        return self.kcal_value
