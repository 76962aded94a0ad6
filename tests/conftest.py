"""
Pytest fixtures shared by the PDF function and client tests.
"""

import os
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

# IMPORTANT: Set environment variables BEFORE any imports from html_pdf_service
# so ServiceSettings (cached on first use) is configured for tests.
os.environ["ENVIRONMENT"] = "development"
os.environ["MAX_CONCURRENT_PDFS"] = "2"
os.environ["PLAYWRIGHT_TIMEOUT"] = "5000"
os.environ["PLAYWRIGHT_HEADLESS"] = "true"
os.environ["BROWSER_SANDBOX"] = "false"

import pytest

FAKE_PDF = b"%PDF-1.4 fake pdf content"


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "integration: renders with a real Chromium (skipped when unavailable)"
    )


@pytest.fixture
def mock_chromium():
    """
    Replace Playwright with mocks that hand out a fake browser and page.

    The page renders FAKE_PDF; tests override ``page.pdf`` or
    ``page.set_content`` side effects to simulate failures.
    """
    with patch("html_pdf_service.renderer.async_playwright") as mock_playwright:
        mock_page = AsyncMock()
        # set_default_timeout is synchronous in Playwright's async API
        mock_page.set_default_timeout = MagicMock()
        mock_page.pdf = AsyncMock(return_value=FAKE_PDF)

        mock_browser = AsyncMock()
        mock_browser.new_page = AsyncMock(return_value=mock_page)

        chromium = MagicMock(launch=AsyncMock(return_value=mock_browser))
        mock_playwright.return_value.__aenter__ = AsyncMock(
            return_value=MagicMock(chromium=chromium)
        )

        yield SimpleNamespace(
            playwright=mock_playwright,
            chromium=chromium,
            browser=mock_browser,
            page=mock_page,
            pdf=FAKE_PDF,
        )
