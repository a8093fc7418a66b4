import os
from typing import Generator

import pytest
from fastapi.testclient import TestClient

FAKE_PDF = b"%PDF-1.7\n%fake calendar\n"


# This runs right after cmd arg parsing but before the tests are collected,
# so the settings picked up on import see the testing environment
def pytest_configure(config) -> None:
    os.environ["ENVIRONMENT"] = "testing"
    os.environ.pop("STYLESHEET_PATH", None)


@pytest.fixture
def fake_write_pdf(mocker):  # noqa: ANN001, ANN201
    """Replace the WeasyPrint render with a fixed document."""
    return mocker.patch("month_calendar.document.write_pdf", return_value=FAKE_PDF)


@pytest.fixture(scope="session")
def client() -> Generator[TestClient, None, None]:
    from month_calendar.core.config import settings
    from month_calendar.main import app

    assert settings.ENVIRONMENT == "testing"

    with TestClient(
        app,
        base_url=f"http://testserver{settings.API_V1_STR}",
    ) as c:
        yield c
