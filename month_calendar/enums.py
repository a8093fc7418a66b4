from enum import StrEnum


class RenderMode(StrEnum):
    SINGLE_MONTH = "single-month"  # One requested month on one page
    COMPACT = "compact"  # Six months per page, two pages
    FULL_YEAR = "full-year"  # One month per page, twelve pages


class SupportedLocale(StrEnum):
    NL = "nl"
    EN = "en"
    DE = "de"
