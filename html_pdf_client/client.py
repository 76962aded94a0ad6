"""
Client for the HTML-to-PDF function.

Posts a JSON conversion request to the function and returns the raw PDF
bytes. A single attempt is made; any failure surfaces as PdfConversionError.
"""

import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

logger = logging.getLogger(__name__)

# PDF function URL (from env or default)
PDF_SERVICE_URL = os.getenv("PDF_SERVICE_URL", "http://localhost:7071")

CONVERT_PATH = "/api/html-to-pdf"


class PdfConversionError(Exception):
    """The PDF function could not produce a PDF for this request."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


@dataclass
class ConversionRequest:
    """HTML document plus optional header/footer, as sent to the function."""

    pdf_body: str
    header_html: str = ""
    footer_html: str = ""
    header_height: str = "0px"
    footer_height: str = "0px"

    def to_payload(self) -> Dict[str, Any]:
        """Serialize to the camelCase JSON object the function expects."""
        return {
            "pdfBody": self.pdf_body,
            "headerHtml": self.header_html,
            "footerHtml": self.footer_html,
            "headerHeight": self.header_height,
            "footerHeight": self.footer_height,
        }


class HtmlToPdfClient:
    """Synchronous caller for the conversion endpoint."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = (base_url or PDF_SERVICE_URL).rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}{CONVERT_PATH}"

    def convert(self, request: ConversionRequest) -> bytes:
        """
        Convert HTML to PDF via the function.

        Args:
            request: Conversion request

        Returns:
            PDF binary content

        Raises:
            PdfConversionError: On a non-success status or transport failure
        """
        try:
            response = self.session.post(
                self.endpoint,
                json=request.to_payload(),
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"PDF function request failed: {e}")
            raise PdfConversionError(f"PDF function unavailable: {e}") from e

        if not 200 <= response.status_code < 300:
            logger.error(f"PDF function error: {response.status_code}")
            raise PdfConversionError(
                f"PDF function error: {response.status_code}",
                status_code=response.status_code,
            )

        return response.content


def convert_html(pdf_body: str, base_url: Optional[str] = None, **options: str) -> bytes:
    """
    Convert an HTML string to PDF with a one-off client.

    Args:
        pdf_body: HTML document or fragment
        base_url: Function base URL (defaults to PDF_SERVICE_URL)
        **options: header_html, footer_html, header_height, footer_height

    Returns:
        PDF binary content
    """
    client = HtmlToPdfClient(base_url=base_url)
    return client.convert(ConversionRequest(pdf_body=pdf_body, **options))
