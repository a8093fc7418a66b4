from enum import StrEnum

from jinja2 import Environment, PackageLoader, select_autoescape
from pydantic import BaseModel, Field

from month_calendar.composer import Page
from month_calendar.grid import MonthGrid
from month_calendar.locale import month_name, week_label, weekday_abbreviation

# Saturday and Sunday as in date.weekday()
WEEKEND = (5, 6)


class CellKind(StrEnum):
    HEADER = "th"
    DATA = "td"


class TableCell(BaseModel):
    text: str = ""  # Empty text renders as a blank cell
    kind: CellKind = CellKind.DATA
    colspan: int = Field(default=1, ge=1)


class TableRow(BaseModel):
    cells: list[TableCell]
    css_class: str | None = None


class Table(BaseModel):
    rows: list[TableRow]
    css_class: str = "month"


env = Environment(
    loader=PackageLoader("month_calendar", "templates"),
    autoescape=select_autoescape(default=True),
    trim_blocks=True,
    lstrip_blocks=True,
)


def build_month_table(grid: MonthGrid, locale: str = "nl") -> Table:
    """
    Lay out a month grid as a table with weeks as columns.

    The first row holds the title, the second the week numbers and every
    following row one weekday, starting with the first day of the week.
    """
    title = TableRow(
        css_class="title",
        cells=[
            TableCell(
                text=f"{month_name(grid.month, locale)} {grid.year}",
                kind=CellKind.HEADER,
                colspan=7,
            )
        ],
    )
    week_numbers = TableRow(
        css_class="week",
        cells=[TableCell(text=week_label(locale), kind=CellKind.HEADER)]
        + [TableCell(text=str(week.week_number)) for week in grid.weeks],
    )

    weekdays = []
    for index in range(7):
        column = grid.column(index)
        weekday = column[0].date.weekday()
        weekdays.append(
            TableRow(
                css_class="weekend" if weekday in WEEKEND else None,
                cells=[
                    TableCell(
                        text=weekday_abbreviation(weekday, locale),
                        kind=CellKind.HEADER,
                    )
                ]
                + [TableCell(text=cell.label) for cell in column]
            )
        )

    return Table(rows=[title, week_numbers, *weekdays])


def render_table(table: Table) -> str:
    return env.get_template("table.html").render(table=table)


def render_document(
    pages: list[Page],
    title: str,
    author: str,
    locale: str = "nl",
) -> str:
    table_pages = [
        [[build_month_table(grid, locale) for grid in row] for row in page.rows]
        for page in pages
    ]
    return env.get_template("document.html").render(
        pages=table_pages,
        title=title,
        author=author,
        locale=locale,
    )
