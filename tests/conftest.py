"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - settings: Service settings with an isolated scratch directory
    - scratch_dir: Path uploads are staged into
    - sample_pdf / blank_pdf: Generated PDF documents
    - async_client: HTTPX client for API testing

Every test gets its own app instance so dependency overrides never leak.
"""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from pdftext.api.app import create_app
from pdftext.config import Settings, get_settings
from tests.pdfs import make_pdf

SAMPLE_PAGES = [
    "Information security policy overview",
    "Access control and incident response",
]


@pytest.fixture
def scratch_dir(tmp_path: Path) -> Path:
    """Return the scratch directory used by the test app.

    Returns:
        Path under tmp_path; created lazily by the pipeline.
    """
    return tmp_path / "uploads"


@pytest.fixture
def settings(scratch_dir: Path) -> Settings:
    """Settings pointing uploads at the test scratch directory."""
    return Settings(upload_dir=scratch_dir, fetch_timeout=None, max_fetch_size=None)


@pytest.fixture
def sample_pdf() -> bytes:
    """Two-page PDF with text and document info.

    Returns:
        PDF bytes titled "Quarterly Report".
    """
    return make_pdf(
        SAMPLE_PAGES,
        info={"Title": "Quarterly Report", "Author": "Finance Team"},
    )


@pytest.fixture
def blank_pdf() -> bytes:
    """Single blank page, no info dictionary."""
    return make_pdf([""])


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    """Fresh application with settings overridden for the test."""
    application = create_app()
    application.dependency_overrides[get_settings] = lambda: settings
    return application


@pytest.fixture
async def async_client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
