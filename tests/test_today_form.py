"""Tests for the Today form."""

from datetime import datetime

from calorie_tracker.domain.energy import EnergyUnit
from calorie_tracker.presentation.today import TodayForm, parse_steps
from calorie_tracker.services.records import RecordStore
from tests.conftest import day


def _form(store: RecordStore, moment: datetime | None = None) -> TodayForm:
    fixed = moment or day(2026, 1, 2)
    return TodayForm(store, clock=lambda: fixed)


def _add(form: TodayForm, name: str, value: str, unit=EnergyUnit.KCAL) -> None:
    form.food_name = name
    form.food_value = value
    form.food_unit = unit
    form.add_food()


def test_add_food_clears_fields(store: RecordStore) -> None:
    form = _form(store)

    _add(form, "Apple", "95")

    assert [food.name for food in form.foods] == ["Apple"]
    assert form.food_name == ""
    assert form.food_value == ""


def test_add_food_ignores_bad_input(store: RecordStore) -> None:
    form = _form(store)
    _add(form, "", "95")
    _add(form, "Cake", "lots")
    _add(form, "Cake", "-3")

    assert form.foods == []
    assert form.food_name == "Cake"


def test_save_builds_daily_record_and_resets(store: RecordStore) -> None:
    form = _form(store)
    _add(form, "Apple", "95")
    _add(form, "Soda", "150")
    form.steps = "3000"

    records = form.save()

    assert records[0].total_kcal() == 245
    assert records[0].steps == 3000
    assert records[0].binge is False
    assert form.foods == []
    assert form.steps == ""


def test_pending_total_uses_kilojoules(store: RecordStore) -> None:
    form = _form(store)
    _add(form, "Juice", "200", EnergyUnit.KJ)

    assert form.total_kcal() == 47


def test_remove_pending_food(store: RecordStore) -> None:
    form = _form(store)
    _add(form, "Apple", "95")
    form.remove_pending_food(form.foods[0].id)

    assert form.foods == []


def test_binge_flag_survives_later_save(store: RecordStore) -> None:
    form = _form(store)
    form.binge = True
    form.save()
    form.save()

    assert store.records[0].binge is True


def test_parse_steps_defaults_to_zero() -> None:
    assert parse_steps(" 1200 ") == 1200
    assert parse_steps("") == 0
    assert parse_steps("-50") == 0
    assert parse_steps("many") == 0
