import argparse
import logging
import sys
from pathlib import Path

from month_calendar.core.config import settings
from month_calendar.core.date_utils import today_in
from month_calendar.core.logging_utils import setup_logging
from month_calendar.document import MonthCalendar
from month_calendar.enums import RenderMode, SupportedLocale
from month_calendar.exceptions import InvalidArgumentError
from month_calendar.grid import CalendarOptions

logger = logging.getLogger(__name__)


def parse_mode(value: str) -> RenderMode:
    try:
        return RenderMode(value.lower())
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Invalid mode '{value}'. Choose from: "
            + ", ".join(mode.value for mode in RenderMode)
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render a printable month calendar as PDF"
    )
    parser.add_argument(
        "year",
        type=int,
        nargs="?",
        default=None,
        help="Calendar year (1582 - 3000, default: current year in TIMEZONE)",
    )
    parser.add_argument(
        "--mode",
        type=parse_mode,
        default=RenderMode.COMPACT,
        help="Page layout: single-month, compact or full-year (default: compact)",
    )
    parser.add_argument(
        "--month",
        type=int,
        default=None,
        help="Month to render, required for single-month mode",
    )
    parser.add_argument(
        "--locale",
        type=str,
        choices=[locale.value for locale in SupportedLocale],
        default=None,
        help=(
            "Language of month and weekday names "
            f"(default: {settings.DEFAULT_LOCALE})"
        ),
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("."),
        help="Directory the PDF is written to (default: current directory)",
    )
    parser.add_argument(
        "--stylesheet",
        type=Path,
        default=None,
        help="CSS file to use instead of STYLESHEET_PATH",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    setup_logging()

    config = settings
    if args.stylesheet is not None:
        config = settings.model_copy(update={"STYLESHEET_PATH": args.stylesheet})

    if not args.output_dir.is_dir():
        print(
            f"Error: Output directory {args.output_dir} does not exist",
            file=sys.stderr,
        )
        return 1

    options = CalendarOptions.from_settings(config, locale=args.locale)
    year = args.year
    if year is None:
        year = today_in(options.timezone).year

    try:
        calendar = MonthCalendar(year, options=options, config=config)
        path = calendar.save(args.output_dir, args.mode, args.month)
    except (InvalidArgumentError, OSError) as e:
        # StylesheetError is an OSError, as are failures writing the PDF
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.info("Wrote %s", path)
    print(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
