"""Dependency container wiring for the application."""

from dataclasses import dataclass

from calorie_tracker.adapters.json_preferences_repository import (
    JsonPreferencesRepository,
)
from calorie_tracker.adapters.json_record_repository import JsonRecordRepository
from calorie_tracker.adapters.slot_storage import FileSlotStorage, SlotStorage
from calorie_tracker.app_logging import configure_logging
from calorie_tracker.config import Settings, resolve_timezone
from calorie_tracker.presentation.history import HistoryView
from calorie_tracker.presentation.today import TodayForm
from calorie_tracker.services.preferences import PreferencesService
from calorie_tracker.services.records import RecordStore


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    storage: SlotStorage
    record_store: RecordStore
    preferences_service: PreferencesService
    today_form: TodayForm
    history_view: HistoryView


def build_container(
    settings: Settings | None = None, storage: SlotStorage | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    configure_logging(resolved_settings.log_level)
    resolved_storage = storage or FileSlotStorage(resolved_settings.data_dir)
    record_repository = JsonRecordRepository(
        resolved_storage, slot=resolved_settings.records_slot
    )
    preferences_repository = JsonPreferencesRepository(
        resolved_storage, slot=resolved_settings.preferences_slot
    )
    record_store = RecordStore(
        repository=record_repository,
        timezone=resolve_timezone(resolved_settings.timezone),
    )
    preferences_service = PreferencesService(preferences_repository)
    return AppContainer(
        settings=resolved_settings,
        storage=resolved_storage,
        record_store=record_store,
        preferences_service=preferences_service,
        today_form=TodayForm(record_store),
        history_view=HistoryView(record_store, preferences_service),
    )
