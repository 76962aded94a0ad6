"""
PDF Function - FastAPI application for HTML-to-PDF conversion.

Provides a single conversion endpoint that renders inline HTML (with optional
header/footer templates) to an A4 PDF using Playwright/Chromium, plus a
health check for the container platform.
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import Response

from . import __version__
from .config import get_settings, validate_config_on_startup
from .models import ConversionRequest, HealthResponse
from .renderer import RenderError, check_browser, render_pdf

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="HTML to PDF Function",
    version=__version__,
    description="Converts inline HTML with header/footer templates to PDF using Playwright/Chromium"
)

# Semaphore bounding browser processes in this instance
_pdf_semaphore = asyncio.Semaphore(settings.max_concurrent_pdfs)

# Browser readiness state
_browser_ready = False
_browser_error: Optional[str] = None


# ============================================================================
# Startup Event - Validate Configuration and Chromium
# ============================================================================

@app.on_event("startup")
async def validate_browser_on_startup():
    """
    Validate configuration and that Chromium can render a PDF.

    A failed check does not stop the process; it is reported through
    /health so the platform does not route traffic to a broken instance.
    """
    global _browser_ready, _browser_error

    validate_config_on_startup()
    logger.info("PDF function starting - validating Chromium installation...")

    try:
        size = await check_browser(settings)
        _browser_ready = True
        _browser_error = None
        logger.info(f"Chromium validation successful - generated {size} byte test PDF")
    except RenderError as e:
        _browser_ready = False
        _browser_error = str(e)
        logger.error(f"Chromium validation failed: {_browser_error}")
        logger.error("PDF conversion will not work until this is resolved.")


# ============================================================================
# Error Handlers
# ============================================================================

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Reject malformed requests with 400 and no body; details go to the log."""
    logger.warning(f"Rejected malformed request to {request.url.path}: {exc.errors()}")
    return Response(status_code=400)


# ============================================================================
# Health Check Endpoint
# ============================================================================

def _active_renders() -> int:
    return settings.max_concurrent_pdfs - _pdf_semaphore._value


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Health check endpoint for the container platform.

    Returns HTTP 503 if the Chromium check failed on startup.
    """
    if not _browser_ready:
        raise HTTPException(
            status_code=503,
            detail={
                "status": "unhealthy",
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "active_renders": _active_renders(),
                "max_concurrent": settings.max_concurrent_pdfs,
                "browser_ready": False,
                "browser_error": _browser_error,
            }
        )

    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        active_renders=_active_renders(),
        max_concurrent=settings.max_concurrent_pdfs,
        browser_ready=True,
        browser_error=None
    )


# ============================================================================
# Conversion Endpoint
# ============================================================================

@app.post("/api/html-to-pdf")
async def html_to_pdf(request: ConversionRequest):
    """
    Convert inline HTML to PDF.

    Args:
        request: HTML body, optional header/footer templates and heights

    Returns:
        200 with the PDF bytes; 500 with no body if rendering failed;
        503 with no body if this instance is at capacity
    """
    if _pdf_semaphore.locked():
        logger.warning("PDF function overloaded, rejecting request")
        return Response(status_code=503)

    async with _pdf_semaphore:
        logger.info(
            f"Starting PDF render (body={len(request.pdf_body)} chars, "
            f"header_footer={request.has_header_footer}, margins={request.margins})"
        )
        try:
            pdf_bytes = await render_pdf(request, settings)
        except RenderError:
            logger.exception("PDF rendering failed")
            return Response(status_code=500)

    logger.info(f"PDF render completed ({len(pdf_bytes)} bytes)")

    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": 'inline; filename="document.pdf"'
        }
    )
