"""
Request/response models for the PDF function.

JSON field names follow the wire format (camelCase); attributes are
snake_case and populated through aliases.
"""

import re
from datetime import datetime
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Units accepted by Chromium print margins; a bare number means pixels
LENGTH_PATTERN = re.compile(r"^\d+(\.\d+)?(px|in|cm|mm)?$")

ZERO_LENGTH = "0px"


def normalize_length(value: str) -> str:
    """
    Normalize a CSS length string for use as a PDF margin.

    Args:
        value: Length such as "100px", "1.5cm" or "40"

    Returns:
        Length with an explicit unit ("40" becomes "40px")

    Raises:
        ValueError: If the value is not a non-negative length
    """
    cleaned = value.strip().lower()
    if not cleaned:
        return ZERO_LENGTH
    if not LENGTH_PATTERN.match(cleaned):
        raise ValueError(f"invalid length: {value!r} (expected e.g. '100px', '2cm', '0.5in')")
    if cleaned[-1].isdigit():
        cleaned = f"{cleaned}px"
    return cleaned


class ConversionRequest(BaseModel):
    """HTML document plus optional header/footer to render as a PDF."""

    model_config = ConfigDict(populate_by_name=True)

    pdf_body: str = Field(..., alias="pdfBody", description="HTML document or fragment to render")
    header_html: str = Field("", alias="headerHtml", description="Header template repeated on every page")
    footer_html: str = Field("", alias="footerHtml", description="Footer template repeated on every page")
    header_height: str = Field(ZERO_LENGTH, alias="headerHeight", description="Top margin reserved for the header")
    footer_height: str = Field(ZERO_LENGTH, alias="footerHeight", description="Bottom margin reserved for the footer")

    @field_validator("pdf_body")
    @classmethod
    def validate_pdf_body(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("pdfBody must not be blank")
        return v

    @field_validator("header_html", "footer_html", mode="before")
    @classmethod
    def default_missing_template(cls, v):
        return "" if v is None else v

    @field_validator("header_height", "footer_height", mode="before")
    @classmethod
    def validate_height(cls, v):
        if v is None:
            return ZERO_LENGTH
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            v = str(v)
        if not isinstance(v, str):
            raise ValueError("height must be a length string")
        return normalize_length(v)

    @property
    def has_header_footer(self) -> bool:
        """True when either template carries content."""
        return bool(self.header_html.strip() or self.footer_html.strip())

    @property
    def margins(self) -> Dict[str, str]:
        """Page margins: header/footer heights top and bottom, nothing on the sides."""
        return {
            "top": self.header_height,
            "bottom": self.footer_height,
            "left": ZERO_LENGTH,
            "right": ZERO_LENGTH,
        }


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "healthy"
    timestamp: datetime
    active_renders: int
    max_concurrent: int
    browser_ready: bool = True
    browser_error: Optional[str] = None
