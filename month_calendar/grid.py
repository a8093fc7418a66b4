import logging
from datetime import date
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from month_calendar.core.config import Settings
from month_calendar.core.date_utils import (
    get_month_grid,
    iso_week_number,
    validate_timezone,
)
from month_calendar.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

MIN_YEAR = 1582  # Introduction of the Gregorian calendar
MAX_YEAR = 3000


class CalendarOptions(BaseModel):
    """Locale, timezone and week start used for building and labeling grids."""

    model_config = ConfigDict(frozen=True)

    locale: str = "nl"
    timezone: str = "Europe/Amsterdam"
    week_start: Annotated[int, Field(ge=0, le=6)] = 0  # Monday

    @field_validator("timezone")
    @classmethod
    def _validate_timezone(cls, value: str) -> str:
        return validate_timezone(value)

    @classmethod
    def from_settings(
        cls, settings: Settings, **overrides: str | int | None
    ) -> "CalendarOptions":
        values: dict[str, str | int] = {
            "locale": settings.DEFAULT_LOCALE,
            "timezone": settings.TIMEZONE,
            "week_start": settings.WEEK_START,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate(values)


class DayCell(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: date
    is_in_month: bool  # Padding days from prev/next month render blank

    @computed_field  # type: ignore[prop-decorator]
    @property
    def label(self) -> str:
        return str(self.date.day) if self.is_in_month else ""


class WeekRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    week_number: Annotated[int, Field(ge=1, le=53)]
    days: Annotated[list[DayCell], Field(min_length=7, max_length=7)]

    @property
    def anchor(self) -> date:
        return self.days[0].date


class MonthGrid(BaseModel):
    model_config = ConfigDict(frozen=True)

    year: int
    month: Annotated[int, Field(ge=1, le=12)]
    weeks: Annotated[list[WeekRow], Field(min_length=6, max_length=6)]

    @property
    def anchor(self) -> date:
        return self.weeks[0].anchor

    def column(self, index: int) -> list[DayCell]:
        """All cells of one weekday column, top to bottom."""
        return [week.days[index] for week in self.weeks]


def validate_year(year: int) -> int:
    if year < MIN_YEAR or year > MAX_YEAR:
        raise InvalidArgumentError(
            f"Year should be between {MIN_YEAR} and {MAX_YEAR}!"
        )
    return year


def validate_month(month: int) -> int:
    if month < 1 or month > 12:
        raise InvalidArgumentError("Month should be between 1 and 12!")
    return month


class MonthGridBuilder:
    def __init__(self, options: CalendarOptions | None = None) -> None:
        self.options = options or CalendarOptions()

    def build(self, year: int, month: int) -> MonthGrid:
        validate_year(year)
        validate_month(month)

        weeks = []
        for week_dates in get_month_grid(year, month, self.options.week_start):
            weeks.append(
                WeekRow(
                    week_number=iso_week_number(week_dates),
                    days=[
                        DayCell(date=d, is_in_month=(d.month == month))
                        for d in week_dates
                    ],
                )
            )

        logger.debug(
            "Built grid for %04d-%02d anchored at %s", year, month, weeks[0].anchor
        )
        return MonthGrid(year=year, month=month, weeks=weeks)

    def build_year(self, year: int) -> list[MonthGrid]:
        return [self.build(year, month) for month in range(1, 13)]
