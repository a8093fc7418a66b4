from pydantic import BaseModel, ConfigDict

from month_calendar.enums import RenderMode
from month_calendar.exceptions import InvalidArgumentError
from month_calendar.grid import MonthGrid, MonthGridBuilder, validate_month

# Pages of rows of months, January - June on the first page
COMPACT_LAYOUT: tuple[tuple[tuple[int, ...], ...], ...] = (
    ((1, 2, 3), (4, 5, 6)),
    ((7, 8, 9), (10, 11, 12)),
)


class Page(BaseModel):
    model_config = ConfigDict(frozen=True)

    rows: list[list[MonthGrid]]

    @property
    def months(self) -> list[int]:
        return [grid.month for row in self.rows for grid in row]


def compose_pages(
    builder: MonthGridBuilder,
    year: int,
    mode: RenderMode,
    month: int | None = None,
) -> list[Page]:
    """
    Arrange the month grids of a year into pages.

    Args:
        builder: Builder used for every month grid
        year: The year
        mode: Page layout
        month: Month to render, only used (and required) for single month mode

    Returns:
        Pages in print order
    """
    match mode:
        case RenderMode.SINGLE_MONTH:
            if month is None:
                raise InvalidArgumentError("A month is required for single month mode")
            validate_month(month)
            return [Page(rows=[[builder.build(year, month)]])]
        case RenderMode.COMPACT:
            return [
                Page(rows=[[builder.build(year, m) for m in row] for row in layout])
                for layout in COMPACT_LAYOUT
            ]
        case RenderMode.FULL_YEAR:
            return [Page(rows=[[grid]]) for grid in builder.build_year(year)]
