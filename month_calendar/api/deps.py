from typing import Annotated

from fastapi import Depends, Query

from month_calendar.core.config import Settings, settings
from month_calendar.enums import RenderMode, SupportedLocale
from month_calendar.grid import CalendarOptions


def get_settings() -> Settings:
    return settings


SettingsDep = Annotated[Settings, Depends(get_settings)]


LocaleQuery = Annotated[
    SupportedLocale | None,
    Query(
        description="Language code (ISO 639-1), defaults to DEFAULT_LOCALE",
    ),
]

ModeQuery = Annotated[
    RenderMode,
    Query(description="Page layout of the document"),
]

MonthQuery = Annotated[
    int | None,
    Query(ge=1, le=12, description="Month, required for single-month mode"),
]


def get_calendar_options(
    config: SettingsDep, locale: LocaleQuery = None
) -> CalendarOptions:
    return CalendarOptions.from_settings(config, locale=locale)


OptionsDep = Annotated[CalendarOptions, Depends(get_calendar_options)]
