"""Domain models for display preferences."""

from dataclasses import dataclass
from enum import Enum


class AppLanguage(str, Enum):
    """Languages the interface can be shown in."""

    ENGLISH = "English"
    CHINESE = "简体中文"


class GraphStyle(str, Enum):
    """How the history chart draws daily totals."""

    HISTOGRAM = "histogram"
    LINE = "line"


@dataclass(frozen=True)
class Preferences:
    """User display preferences."""

    language: AppLanguage = AppLanguage.ENGLISH
    graph_style: GraphStyle = GraphStyle.HISTOGRAM
