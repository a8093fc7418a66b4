import contextvars
import json
import logging
import logging.config
from datetime import datetime, timezone
from typing import Any

import structlog

from month_calendar.core.config import settings

request_id_context: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id", default=None
)


def get_request_id() -> str:
    return request_id_context.get() or "-"


class JSONFormatter(logging.Formatter):
    """
    Formatter that outputs one JSON object per log record.
    Used when LOG_FORMAT is set to "json".
    """

    def format(self, record: logging.LogRecord) -> str:
        log_obj: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "request_id": request_id_context.get(),
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        # Extra fields passed via logger.info(..., extra={"extra_data": {...}})
        if hasattr(record, "extra_data"):
            log_obj.update(record.extra_data)  # type: ignore

        return json.dumps(log_obj)


class ConsoleFormatter(logging.Formatter):
    format_str = (
        "%(levelname)-8s | "
        "%(asctime)s | "
        "%(request_id)-36s | "
        "%(name)30s:%(lineno)-4d | "
        "%(message)s"
    )

    def format(self, record: logging.LogRecord) -> str:
        record.request_id = get_request_id()  # type: ignore

        original_name = record.name
        if original_name == "month_calendar":
            record.name = "app"
        elif original_name.startswith("month_calendar."):
            record.name = original_name[len("month_calendar.") :]

        formatter = logging.Formatter(self.format_str, datefmt="%Y-%m-%d %H:%M:%S")
        formatted_message = formatter.format(record)

        record.name = original_name

        return formatted_message


def setup_logging() -> None:
    """
    Configures the logging system for the API and the CLI.
    """
    formatter_cls = (
        "month_calendar.core.logging_utils.JSONFormatter"
        if settings.LOG_FORMAT == "json"
        else "month_calendar.core.logging_utils.ConsoleFormatter"
    )

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "()": formatter_cls,
            },
        },
        "handlers": {
            "default": {
                "formatter": "default",
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            "": {"handlers": ["default"], "level": settings.LOG_LEVEL},
            "month_calendar": {
                "handlers": ["default"],
                "level": settings.LOG_LEVEL,
                "propagate": False,
            },
            # WeasyPrint reports every unsupported CSS property
            "weasyprint": {
                "handlers": ["default"],
                "level": "WARNING",
                "propagate": False,
            },
            "fontTools": {
                "handlers": ["default"],
                "level": "WARNING",
                "propagate": False,
            },
            "uvicorn.access": {
                "handlers": ["default"],
                "level": "WARNING",
                "propagate": False,
            },
            "uvicorn": {"handlers": ["default"], "level": "INFO", "propagate": False},
        },
    }

    logging.config.dictConfig(logging_config)

    # Route structlog loggers through the handlers above
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.render_to_log_kwargs,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
