from typing import Any

from fastapi import APIRouter

from month_calendar.api.routes import calendar
from month_calendar.core.config import settings
from month_calendar.definitions import Tag
from month_calendar.exceptions import StylesheetError
from month_calendar.pdf import load_stylesheet

api_router = APIRouter()

api_router.include_router(calendar.router)


@api_router.get("/health", tags=[Tag.HEALTH])
def health_check() -> Any:
    health_status = {
        "status": "healthy",
        "stylesheet": "unknown",
    }

    try:
        load_stylesheet(settings.STYLESHEET_PATH)
        health_status["stylesheet"] = "healthy"
    except StylesheetError as e:
        health_status["stylesheet"] = "unhealthy"
        health_status["status"] = "unhealthy"
        health_status["stylesheet_error"] = str(e)

    return health_status
