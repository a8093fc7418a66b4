from functools import lru_cache
from importlib.resources import files

from pydantic import BaseModel, ConfigDict, Field

import month_calendar.locales
from month_calendar.enums import SupportedLocale

FALLBACK_LOCALE = SupportedLocale.EN


class Translations(BaseModel):
    """Read-only translation table, shared by every render through the cache."""

    model_config = ConfigDict(frozen=True)

    months: tuple[str, ...] = Field(min_length=12, max_length=12)
    weekdays_abbr: tuple[str, ...] = Field(min_length=7, max_length=7)
    week_label: str


@lru_cache()
def load_translations(locale: str) -> Translations:
    """Load translations using importlib.resources and cache in memory"""
    try:
        supported = SupportedLocale(locale)
    except ValueError:
        # Fallback to English
        supported = FALLBACK_LOCALE

    locale_file = files(month_calendar.locales).joinpath(f"{supported}.json")
    return Translations.model_validate_json(locale_file.read_text(encoding="utf-8"))


def month_name(month: int, locale: str = "nl") -> str:
    """
    Get the localized name of a month.

    Args:
        month: Month number (1-12)
        locale: Language code (e.g., "nl", "en")

    Returns:
        Month name as used in the calendar title
    """
    return load_translations(locale).months[month - 1]


def weekday_abbreviation(weekday: int, locale: str = "nl") -> str:
    """Abbreviated weekday name, weekday as in date.weekday() (0 = Monday)"""
    return load_translations(locale).weekdays_abbr[weekday]


def week_label(locale: str = "nl") -> str:
    return load_translations(locale).week_label
