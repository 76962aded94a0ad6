"""
Playwright/Chromium rendering for the PDF function.

Every conversion launches its own browser process and closes it before
returning, whether rendering succeeded or not. Nothing is pooled or shared
between requests.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict

from playwright.async_api import Browser, async_playwright

from .config import ServiceSettings
from .models import ConversionRequest

logger = logging.getLogger(__name__)

PDF_SIGNATURE = b"%PDF-"
PAGE_FORMAT = "A4"

# Chromium falls back to its own date/title strip when one template is missing
BLANK_TEMPLATE = "<span></span>"

TEST_HTML = "<html><body><h1>Test</h1></body></html>"


class RenderError(Exception):
    """Navigation or PDF rendering failed."""


@asynccontextmanager
async def launch_browser(settings: ServiceSettings) -> AsyncIterator[Browser]:
    """
    Launch a Chromium process scoped to the ``async with`` block.

    The browser is closed on exit even when the block raises. A failure
    while closing is logged and never replaces the block's own exception.
    """
    async with async_playwright() as p:
        browser = await p.chromium.launch(
            headless=settings.playwright_headless,
            args=settings.chromium_args,
        )
        try:
            yield browser
        finally:
            try:
                await browser.close()
            except Exception as e:
                logger.warning(f"Browser close failed: {e}")


def build_pdf_options(request: ConversionRequest) -> Dict[str, Any]:
    """
    Build keyword arguments for ``page.pdf``.

    Args:
        request: Validated conversion request

    Returns:
        Options dict: A4, backgrounds on, header/footer templates when
        supplied, margins bound to the header/footer heights
    """
    options: Dict[str, Any] = {
        "format": PAGE_FORMAT,
        "print_background": True,
        "display_header_footer": request.has_header_footer,
        "margin": request.margins,
    }
    if request.has_header_footer:
        options["header_template"] = request.header_html or BLANK_TEMPLATE
        options["footer_template"] = request.footer_html or BLANK_TEMPLATE
    return options


async def render_pdf(request: ConversionRequest, settings: ServiceSettings) -> bytes:
    """
    Render the request's HTML to PDF bytes.

    Sequence: launch -> new page -> set inline content and wait for network
    idle -> print to PDF -> close browser.

    Args:
        request: Validated conversion request
        settings: Service settings (headless, sandbox, timeout)

    Returns:
        PDF bytes starting with ``%PDF-``

    Raises:
        RenderError: On any launch, navigation or rendering failure
    """
    try:
        async with launch_browser(settings) as browser:
            page = await browser.new_page()
            page.set_default_timeout(settings.playwright_timeout)

            await page.set_content(request.pdf_body, wait_until="networkidle")
            pdf_bytes = await page.pdf(**build_pdf_options(request))
    except Exception as e:
        raise RenderError(f"{type(e).__name__}: {e}") from e

    if not pdf_bytes or not pdf_bytes.startswith(PDF_SIGNATURE):
        raise RenderError("Renderer returned an empty or non-PDF result")

    return pdf_bytes


async def check_browser(settings: ServiceSettings) -> int:
    """
    Render a test document to confirm Chromium works in this environment.

    Returns:
        Size of the test PDF in bytes

    Raises:
        RenderError: If the test document could not be rendered
    """
    test_request = ConversionRequest(pdf_body=TEST_HTML)
    pdf_bytes = await render_pdf(test_request, settings)
    return len(pdf_bytes)
