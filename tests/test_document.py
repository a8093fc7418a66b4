from pathlib import Path

import pytest

from month_calendar.core.config import Settings
from month_calendar.document import MonthCalendar
from month_calendar.enums import RenderMode
from month_calendar.exceptions import InvalidArgumentError, StylesheetError
from month_calendar.grid import CalendarOptions


@pytest.mark.parametrize("year", [1581, 3001])
def test_invalid_year_fails_on_construction(year: int) -> None:
    with pytest.raises(InvalidArgumentError, match="between 1582 and 3000"):
        MonthCalendar(year)


@pytest.mark.parametrize("year", [1582, 3000])
def test_year_bounds_are_valid(year: int) -> None:
    calendar = MonthCalendar(year)
    assert calendar.month_grid(1).year == year


def test_title_and_filename() -> None:
    calendar = MonthCalendar(2024)
    assert calendar.title == "Maandkalender 2024"
    assert calendar.filename == "Maandkalender 2024.pdf"


def test_options_default_to_settings() -> None:
    config = Settings(DEFAULT_LOCALE="de", WEEK_START=6)
    calendar = MonthCalendar(2024, config=config)

    assert calendar.options.locale == "de"
    assert calendar.options.week_start == 6
    assert calendar.month_grid(9).anchor.weekday() == 6


def test_html_uses_locale() -> None:
    calendar = MonthCalendar(2024, options=CalendarOptions(locale="en"))
    html = calendar.html(RenderMode.SINGLE_MONTH, month=2)

    assert "February 2024" in html
    assert '<html lang="en">' in html
    assert html.count('<table class="month">') == 1


def test_pdf(fake_write_pdf) -> None:  # noqa: ANN001
    calendar = MonthCalendar(2024)
    data = calendar.pdf(RenderMode.FULL_YEAR)

    assert data == fake_write_pdf.return_value
    fake_write_pdf.assert_called_once()
    html, stylesheet, page = fake_write_pdf.call_args.args
    assert html.count('<section class="page">') == 12
    assert "table.month" in stylesheet
    assert page.size == "A5"
    assert page.orientation == "landscape"


def test_pdf_with_custom_stylesheet(tmp_path: Path, fake_write_pdf) -> None:  # noqa: ANN001
    css = tmp_path / "style.css"
    css.write_text(".month { color: red; }", encoding="utf-8")
    calendar = MonthCalendar(2024, config=Settings(STYLESHEET_PATH=css))

    calendar.pdf()

    _, stylesheet, _ = fake_write_pdf.call_args.args
    assert stylesheet == ".month { color: red; }"


def test_pdf_missing_stylesheet_aborts(tmp_path: Path, fake_write_pdf) -> None:  # noqa: ANN001
    with pytest.warns(UserWarning, match="STYLESHEET_PATH"):
        config = Settings(STYLESHEET_PATH=tmp_path / "missing.css")
    calendar = MonthCalendar(2024, config=config)

    with pytest.raises(StylesheetError, match="missing.css"):
        calendar.pdf()
    fake_write_pdf.assert_not_called()


def test_pdf_single_month_requires_month(fake_write_pdf) -> None:  # noqa: ANN001
    with pytest.raises(InvalidArgumentError):
        MonthCalendar(2024).pdf(RenderMode.SINGLE_MONTH)
    fake_write_pdf.assert_not_called()


def test_save(tmp_path: Path, fake_write_pdf) -> None:  # noqa: ANN001
    path = MonthCalendar(2024).save(tmp_path)

    assert path == tmp_path / "Maandkalender 2024.pdf"
    assert path.read_bytes() == fake_write_pdf.return_value
