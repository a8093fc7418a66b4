import logging
from importlib.resources import files
from pathlib import Path

import month_calendar.static
from month_calendar.core.config import PageSettings
from month_calendar.core.timing import log_timing
from month_calendar.exceptions import StylesheetError

logger = logging.getLogger(__name__)


def load_stylesheet(path: Path | None = None) -> str:
    """
    Read the stylesheet for a render.

    Without a path the stylesheet shipped with the package is used. Any read
    failure is fatal for the render and raised as StylesheetError.
    """
    try:
        if path is None:
            return files(month_calendar.static).joinpath("style.css").read_text(
                encoding="utf-8"
            )
        return Path(path).read_text(encoding="utf-8")
    except OSError as e:
        source = path or "style.css"
        logger.error("Reading stylesheet %s failed: %s", source, e)
        raise StylesheetError(f"Cannot read stylesheet {source}: {e}") from e


def page_css(page: PageSettings) -> str:
    return (
        "@page {"
        f" size: {page.size} {page.orientation};"
        f" margin: {page.margin_top}mm {page.margin_right}mm"
        f" {page.margin_bottom}mm {page.margin_left}mm;"
        f" padding-top: {page.margin_header}mm;"
        f" padding-bottom: {page.margin_footer}mm;"
        " }\n"
        "section.page + section.page { break-before: page; }\n"
    )


@log_timing
def write_pdf(html: str, stylesheet: str, page: PageSettings) -> bytes:
    """Render the HTML document to PDF bytes with WeasyPrint."""
    # Lazy import, WeasyPrint loads the native pango libraries on import
    from weasyprint import CSS, HTML

    pdf = HTML(string=html).write_pdf(
        stylesheets=[CSS(string=page_css(page)), CSS(string=stylesheet)]
    )
    if pdf is None:
        raise RuntimeError("WeasyPrint did not return a document")
    logger.info("Rendered PDF with %d bytes", len(pdf))
    return pdf
