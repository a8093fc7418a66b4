import logging
from pathlib import Path

from month_calendar.composer import Page, compose_pages
from month_calendar.core.config import Settings, settings
from month_calendar.core.timing import log_timing
from month_calendar.enums import RenderMode
from month_calendar.grid import (
    CalendarOptions,
    MonthGrid,
    MonthGridBuilder,
    validate_year,
)
from month_calendar.pdf import load_stylesheet, write_pdf
from month_calendar.render import render_document

logger = logging.getLogger(__name__)


class MonthCalendar:
    """Printable month calendar for a single year."""

    def __init__(
        self,
        year: int,
        options: CalendarOptions | None = None,
        config: Settings = settings,
    ) -> None:
        self.year = validate_year(year)
        self.config = config
        self.options = options or CalendarOptions.from_settings(config)
        self.builder = MonthGridBuilder(self.options)

    @property
    def title(self) -> str:
        return f"{self.config.PDF_TITLE_PREFIX} {self.year}"

    @property
    def filename(self) -> str:
        return f"{self.title}.pdf"

    def month_grid(self, month: int) -> MonthGrid:
        return self.builder.build(self.year, month)

    def pages(
        self, mode: RenderMode = RenderMode.COMPACT, month: int | None = None
    ) -> list[Page]:
        return compose_pages(self.builder, self.year, mode, month)

    def html(
        self, mode: RenderMode = RenderMode.COMPACT, month: int | None = None
    ) -> str:
        return render_document(
            self.pages(mode, month),
            title=self.title,
            author=self.config.PDF_AUTHOR,
            locale=self.options.locale,
        )

    @log_timing
    def pdf(
        self, mode: RenderMode = RenderMode.COMPACT, month: int | None = None
    ) -> bytes:
        # Stylesheet has to be available before anything is rendered
        stylesheet = load_stylesheet(self.config.STYLESHEET_PATH)
        html = self.html(mode, month)
        logger.info(
            "Rendering %s (mode=%s, month=%s, locale=%s)",
            self.title,
            mode,
            month,
            self.options.locale,
        )
        return write_pdf(html, stylesheet, self.config.PAGE)

    def save(
        self,
        directory: Path,
        mode: RenderMode = RenderMode.COMPACT,
        month: int | None = None,
    ) -> Path:
        data = self.pdf(mode, month)
        path = Path(directory) / self.filename
        path.write_bytes(data)
        return path
