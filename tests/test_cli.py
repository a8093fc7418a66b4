from datetime import date
from pathlib import Path

import pytest

from month_calendar.cli.render_calendar import build_parser, main
from month_calendar.enums import RenderMode


def test_parser_defaults() -> None:
    args = build_parser().parse_args(["2024"])

    assert args.year == 2024
    assert args.mode == RenderMode.COMPACT
    assert args.month is None
    assert args.locale is None


def test_parser_rejects_unknown_mode() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["2024", "--mode", "weekly"])


def test_main_writes_pdf(
    tmp_path: Path, fake_write_pdf, capsys: pytest.CaptureFixture[str]  # noqa: ANN001
) -> None:
    exit_code = main(
        [
            "2024",
            "--mode",
            "Single-Month",
            "--month",
            "2",
            "--locale",
            "en",
            "--output-dir",
            str(tmp_path),
        ]
    )

    assert exit_code == 0
    path = tmp_path / "Maandkalender 2024.pdf"
    assert path.read_bytes() == fake_write_pdf.return_value
    assert str(path) in capsys.readouterr().out
    html = fake_write_pdf.call_args.args[0]
    assert "February 2024" in html


def test_main_invalid_year(
    tmp_path: Path, fake_write_pdf, capsys: pytest.CaptureFixture[str]  # noqa: ANN001
) -> None:
    exit_code = main(["1581", "--output-dir", str(tmp_path)])

    assert exit_code == 1
    assert "Year should be between 1582 and 3000!" in capsys.readouterr().err
    assert not list(tmp_path.iterdir())


def test_main_missing_stylesheet(
    tmp_path: Path, fake_write_pdf, capsys: pytest.CaptureFixture[str]  # noqa: ANN001
) -> None:
    exit_code = main(
        [
            "2024",
            "--stylesheet",
            str(tmp_path / "missing.css"),
            "--output-dir",
            str(tmp_path),
        ]
    )

    assert exit_code == 1
    assert "missing.css" in capsys.readouterr().err
    fake_write_pdf.assert_not_called()


def test_main_defaults_to_current_year(
    tmp_path: Path, fake_write_pdf, mocker  # noqa: ANN001
) -> None:
    mocker.patch(
        "month_calendar.cli.render_calendar.today_in", return_value=date(2031, 5, 4)
    )

    assert main(["--output-dir", str(tmp_path)]) == 0
    assert (tmp_path / "Maandkalender 2031.pdf").exists()


def test_main_missing_output_dir(
    tmp_path: Path, fake_write_pdf, capsys: pytest.CaptureFixture[str]  # noqa: ANN001
) -> None:
    exit_code = main(["2024", "--output-dir", str(tmp_path / "nope")])

    assert exit_code == 1
    assert "nope" in capsys.readouterr().err
    fake_write_pdf.assert_not_called()
    assert not (tmp_path / "nope").exists()


def test_main_unwritable_output(
    tmp_path: Path,
    fake_write_pdf,  # noqa: ANN001
    mocker,  # noqa: ANN001
    capsys: pytest.CaptureFixture[str],
) -> None:
    mocker.patch.object(Path, "write_bytes", side_effect=PermissionError("denied"))

    exit_code = main(["2024", "--output-dir", str(tmp_path)])

    assert exit_code == 1
    assert "denied" in capsys.readouterr().err


def test_main_default_year_uses_configured_timezone(
    tmp_path: Path, fake_write_pdf, mocker  # noqa: ANN001
) -> None:
    today_in = mocker.patch(
        "month_calendar.cli.render_calendar.today_in", return_value=date(2030, 1, 1)
    )

    assert main(["--output-dir", str(tmp_path)]) == 0
    today_in.assert_called_once_with("Europe/Amsterdam")
