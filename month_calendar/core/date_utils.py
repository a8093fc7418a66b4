from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

WEEKS_PER_GRID = 6
DAYS_PER_WEEK = 7


def last_day_of_month(year: int, month: int) -> date:
    if month == 12:
        return date(year + 1, 1, 1) - timedelta(days=1)
    return date(year, month + 1, 1) - timedelta(days=1)


def get_grid_anchor(year: int, month: int, week_start: int = 0) -> date:
    """
    Return the week start day on or before the first of the month.

    Args:
        year: The year
        month: The month (1-12)
        week_start: First day of the week, 0 (Monday) to 6 (Sunday)

    Returns:
        Date the month grid starts at
    """
    first_day = date(year, month, 1)
    offset = (first_day.weekday() - week_start) % DAYS_PER_WEEK
    return first_day - timedelta(days=offset)


def get_month_grid(year: int, month: int, week_start: int = 0) -> list[list[date]]:
    """
    Generate a fixed 6x7 date grid for a month.

    Rows are consecutive weeks starting at the grid anchor, so leading and
    trailing dates from the adjacent months are included. Six rows cover every
    month: the first of the month is at most six days after the anchor and a
    month has at most 31 days.
    """
    anchor = get_grid_anchor(year, month, week_start)
    return [
        [
            anchor + timedelta(days=DAYS_PER_WEEK * row + column)
            for column in range(DAYS_PER_WEEK)
        ]
        for row in range(WEEKS_PER_GRID)
    ]


def iso_week_number(week: list[date]) -> int:
    """ISO week number of the Monday contained in a 7-day week."""
    monday = next(d for d in week if d.weekday() == 0)
    return monday.isocalendar().week


def today_in(timezone: str) -> date:
    return datetime.now(ZoneInfo(timezone)).date()


def validate_timezone(value: str) -> str:
    """Return the IANA timezone name unchanged, raise ValueError if unknown."""
    try:
        ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError):
        raise ValueError(f"Unknown timezone {value!r}")
    return value
