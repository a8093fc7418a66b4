import logging
from typing import Annotated, Any
from urllib.parse import quote

from fastapi import APIRouter, Path, Response
from fastapi.responses import HTMLResponse

from month_calendar.api.deps import ModeQuery, MonthQuery, OptionsDep, SettingsDep
from month_calendar.definitions import Tag
from month_calendar.document import MonthCalendar
from month_calendar.enums import RenderMode
from month_calendar.grid import MonthGrid

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/calendar", tags=[Tag.CALENDAR])

# Range is checked by MonthCalendar
YearPath = Annotated[int, Path(description="Calendar year (1582 - 3000)")]


def content_disposition(filename: str) -> str:
    # Plain filename for old clients, RFC 5987 encoded variant for the rest
    return f"attachment; filename=\"{filename}\"; filename*=UTF-8''{quote(filename)}"


@router.get(
    "/{year}/pdf",
    response_class=Response,
    responses={200: {"content": {"application/pdf": {}}}},
)
def get_calendar_pdf(
    year: YearPath,
    config: SettingsDep,
    options: OptionsDep,
    mode: ModeQuery = RenderMode.COMPACT,
    month: MonthQuery = None,
) -> Response:
    calendar = MonthCalendar(year, options=options, config=config)
    data = calendar.pdf(mode, month)
    logger.info("Serving %s (%d bytes)", calendar.filename, len(data))

    return Response(
        content=data,
        media_type="application/pdf",
        headers={"Content-Disposition": content_disposition(calendar.filename)},
    )


@router.get("/{year}/html", response_class=HTMLResponse)
def get_calendar_html(
    year: YearPath,
    config: SettingsDep,
    options: OptionsDep,
    mode: ModeQuery = RenderMode.COMPACT,
    month: MonthQuery = None,
) -> Any:
    calendar = MonthCalendar(year, options=options, config=config)
    return HTMLResponse(calendar.html(mode, month))


@router.get("/{year}/{month}", response_model=MonthGrid)
def get_month_grid(
    year: YearPath,
    month: int,
    config: SettingsDep,
    options: OptionsDep,
) -> Any:
    calendar = MonthCalendar(year, options=options, config=config)
    return calendar.month_grid(month)
