"""JSON repository for display preferences."""

import logging
from dataclasses import dataclass

import pydantic
from pydantic import BaseModel

from calorie_tracker.adapters.slot_storage import SlotStorage
from calorie_tracker.domain.errors import PersistenceError
from calorie_tracker.domain.preferences import AppLanguage, GraphStyle, Preferences
from calorie_tracker.services.preferences import PreferencesRepository

_logger = logging.getLogger(__name__)

DEFAULT_PREFERENCES_SLOT = "appPreferences"


class PreferencesPayload(BaseModel):
    """Stored form of display preferences."""

    language: AppLanguage = AppLanguage.ENGLISH
    graph_style: GraphStyle = GraphStyle.HISTOGRAM


@dataclass
class JsonPreferencesRepository(PreferencesRepository):
    """Keeps preferences in their own storage slot."""

    storage: SlotStorage
    slot: str = DEFAULT_PREFERENCES_SLOT

    def load(self) -> Preferences | None:
        try:
            raw = self.storage.read(self.slot)
        except PersistenceError:
            _logger.warning("Preferences slot unreadable: slot=%s", self.slot)
            return None
        if raw is None:
            return None
        try:
            payload = PreferencesPayload.model_validate_json(raw)
        except pydantic.ValidationError:
            _logger.warning("Preferences slot undecodable: slot=%s", self.slot)
            return None
        return Preferences(language=payload.language, graph_style=payload.graph_style)

    def save(self, preferences: Preferences) -> None:
        payload = PreferencesPayload(
            language=preferences.language, graph_style=preferences.graph_style
        )
        try:
            self.storage.write(self.slot, payload.model_dump_json().encode("utf-8"))
        except PersistenceError:
            _logger.exception("Failed to save preferences: slot=%s", self.slot)
