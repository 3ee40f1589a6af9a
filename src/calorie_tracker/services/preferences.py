"""Display preferences service."""

from dataclasses import dataclass, replace
from typing import Protocol

from calorie_tracker.domain.preferences import AppLanguage, GraphStyle, Preferences


class PreferencesRepository(Protocol):
    """Persistence interface for display preferences."""

    def load(self) -> Preferences | None:
        """Return stored preferences if present."""

    def save(self, preferences: Preferences) -> None:
        """Persist preferences."""


@dataclass
class PreferencesService:
    """Service for reading and changing display preferences."""

    repository: PreferencesRepository

    def get(self) -> Preferences:
        """Return stored preferences or the defaults."""
        return self.repository.load() or Preferences()

    def set_language(self, language: AppLanguage) -> Preferences:
        updated = replace(self.get(), language=language)
        self.repository.save(updated)
        return updated

    def set_graph_style(self, graph_style: GraphStyle) -> Preferences:
        updated = replace(self.get(), graph_style=graph_style)
        self.repository.save(updated)
        return updated
