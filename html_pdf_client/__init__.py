"""
HTML-to-PDF Client - calls the conversion function from a backend application.
"""

from .client import (
    ConversionRequest,
    HtmlToPdfClient,
    PdfConversionError,
    convert_html,
)

__all__ = [
    "ConversionRequest",
    "HtmlToPdfClient",
    "PdfConversionError",
    "convert_html",
]
