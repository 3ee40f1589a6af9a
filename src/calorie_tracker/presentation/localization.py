"""Interface strings and their translations."""

from enum import Enum

from calorie_tracker.domain.preferences import AppLanguage


class UiText(Enum):
    """Interface strings keyed by their English text."""

    APP_TITLE = "Calorie Tracker"
    DATE = "Date"
    FOOD_NAME = "Food / Drink"
    ENERGY = "Energy"
    ADD_FOOD = "Add Food"
    DAILY_TOTAL = "Daily Total"
    STEPS_WALKED = "Steps Walked"
    BINGE_EATING = "Binge Eating"
    SAVE_ENTRY = "Save Entry"
    TODAY = "Today"
    HISTORY = "History"
    SETTINGS = "Settings"
    AVERAGE_KCAL = "Average kcal"
    STEPS = "Steps"


_CHINESE: dict[UiText, str] = {
    UiText.DATE: "日期",
    UiText.FOOD_NAME: "食物/饮料",
    UiText.ENERGY: "能量",
    UiText.ADD_FOOD: "添加食物",
    UiText.DAILY_TOTAL: "每日总量",
    UiText.STEPS_WALKED: "步数",
    UiText.BINGE_EATING: "是否暴食",
    UiText.SAVE_ENTRY: "保存记录",
    UiText.TODAY: "今日",
    UiText.HISTORY: "历史",
    UiText.SETTINGS: "设置",
}

_TRANSLATIONS: dict[AppLanguage, dict[UiText, str]] = {
    AppLanguage.CHINESE: _CHINESE,
}


def app_text(key: UiText, language: AppLanguage = AppLanguage.ENGLISH) -> str:
    """Return ``key`` in ``language``, falling back to English."""
    return _TRANSLATIONS.get(language, {}).get(key, key.value)
