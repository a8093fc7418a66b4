import warnings
from pathlib import Path
from typing import Literal

from pydantic import (
    BaseModel,
    Field,
    field_validator,
    model_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import Self

from month_calendar.core.date_utils import validate_timezone


class PageSettings(BaseModel):
    size: Literal["A4", "A5", "A6"] = "A5"
    orientation: Literal["portrait", "landscape"] = "landscape"
    # All margins in millimeter
    margin_left: float = 5.0
    margin_right: float = 5.0
    margin_top: float = 5.0
    margin_bottom: float = 5.0
    margin_header: float = 0.0
    margin_footer: float = 0.0


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        env_nested_delimiter="__",
        extra="ignore",
    )
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: Literal["console", "json"] = "console"

    API_V1_STR: str = "/api/v1"
    ENVIRONMENT: Literal["local", "staging", "production", "testing"] = "local"

    PROJECT_NAME: str = "Month Calendar"
    FRONTEND_HOST: str = "http://localhost:5173"

    STYLESHEET_PATH: Path | None = None

    DEFAULT_LOCALE: str = "nl"
    TIMEZONE: str = "Europe/Amsterdam"
    # 0 = Monday ... 6 = Sunday, same as date.weekday()
    WEEK_START: int = Field(default=0, ge=0, le=6)

    PDF_AUTHOR: str = "Frans-Willem Post (FWieP)"
    PDF_TITLE_PREFIX: str = "Maandkalender"

    PAGE: PageSettings = PageSettings()

    @field_validator("TIMEZONE")
    @classmethod
    def _validate_timezone(cls, value: str) -> str:
        return validate_timezone(value)

    @model_validator(mode="after")
    def _check_stylesheet(self) -> Self:
        if self.STYLESHEET_PATH is not None and not self.STYLESHEET_PATH.is_file():
            message = (
                f"STYLESHEET_PATH {self.STYLESHEET_PATH} does not exist, "
                "rendering will fail until the file is provided."
            )
            warnings.warn(message, stacklevel=1)

        return self


settings = Settings()  # type: ignore
