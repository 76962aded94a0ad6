"""
Unit tests for the conversion request model.
"""

import pytest
from pydantic import ValidationError

from html_pdf_service.models import ConversionRequest, normalize_length


class TestConversionRequest:

    def test_parses_camel_case_wire_format(self):
        request = ConversionRequest.model_validate({
            "pdfBody": "<h1>Hello</h1>",
            "headerHtml": "<div>H</div>",
            "footerHtml": "<div>F</div>",
            "headerHeight": "100px",
            "footerHeight": "100px",
        })

        assert request.pdf_body == "<h1>Hello</h1>"
        assert request.header_html == "<div>H</div>"
        assert request.footer_html == "<div>F</div>"
        assert request.margins == {"top": "100px", "bottom": "100px", "left": "0px", "right": "0px"}
        assert request.has_header_footer is True

    def test_optional_fields_default_to_empty(self):
        request = ConversionRequest.model_validate({"pdfBody": "<p>x</p>"})

        assert request.header_html == ""
        assert request.footer_html == ""
        assert request.header_height == "0px"
        assert request.footer_height == "0px"
        assert request.has_header_footer is False

    def test_null_fields_fall_back_to_defaults(self):
        request = ConversionRequest.model_validate({
            "pdfBody": "<p>x</p>",
            "headerHtml": None,
            "footerHtml": None,
            "headerHeight": None,
            "footerHeight": None,
        })

        assert request.header_html == ""
        assert request.header_height == "0px"

    def test_numeric_height_is_pixels(self):
        request = ConversionRequest.model_validate({"pdfBody": "<p>x</p>", "headerHeight": 40})

        assert request.header_height == "40px"

    def test_missing_pdf_body_is_rejected(self):
        with pytest.raises(ValidationError):
            ConversionRequest.model_validate({"headerHtml": "<div>H</div>"})

    def test_blank_pdf_body_is_rejected(self):
        with pytest.raises(ValidationError, match="pdfBody must not be blank"):
            ConversionRequest.model_validate({"pdfBody": "  \n "})

    @pytest.mark.parametrize("height", ["tall", "-5px", "10pt", "px", "1e3px"])
    def test_invalid_heights_are_rejected(self, height):
        with pytest.raises(ValidationError):
            ConversionRequest.model_validate({"pdfBody": "<p>x</p>", "headerHeight": height})


class TestNormalizeLength:

    @pytest.mark.parametrize("raw,expected", [
        ("100px", "100px"),
        ("100", "100px"),
        (" 2.5CM ", "2.5cm"),
        ("0.5in", "0.5in"),
        ("12mm", "12mm"),
        ("", "0px"),
    ])
    def test_normalizes_units(self, raw, expected):
        assert normalize_length(raw) == expected
