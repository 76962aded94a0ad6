"""
Convert an HTML file to PDF through the HTML-to-PDF function.

Usage:
    python -m html_pdf_client page.html                       # writes page.pdf
    python -m html_pdf_client page.html -o out.pdf
    python -m html_pdf_client page.html --header header.html --header-height 100px
    python -m html_pdf_client page.html --url http://localhost:7071
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .client import ConversionRequest, HtmlToPdfClient, PdfConversionError

logger = logging.getLogger("html_pdf_client")


def _read_optional(path: Optional[Path]) -> str:
    if path is None:
        return ""
    return path.read_text(encoding="utf-8")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="html_pdf_client",
        description="Convert an HTML file to PDF via the HTML-to-PDF function",
    )
    parser.add_argument("input", type=Path, help="HTML file to convert")
    parser.add_argument("-o", "--output", type=Path, help="Output PDF path (default: input with .pdf)")
    parser.add_argument("--header", type=Path, help="HTML file used as the page header template")
    parser.add_argument("--footer", type=Path, help="HTML file used as the page footer template")
    parser.add_argument("--header-height", default="0px", help="Top margin reserved for the header")
    parser.add_argument("--footer-height", default="0px", help="Bottom margin reserved for the footer")
    parser.add_argument("--url", help="Function base URL (default: $PDF_SERVICE_URL)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    args = build_parser().parse_args(argv)

    try:
        request = ConversionRequest(
            pdf_body=args.input.read_text(encoding="utf-8"),
            header_html=_read_optional(args.header),
            footer_html=_read_optional(args.footer),
            header_height=args.header_height,
            footer_height=args.footer_height,
        )
    except OSError as e:
        logger.error(f"Cannot read input: {e}")
        return 1
    output = args.output or args.input.with_suffix(".pdf")

    client = HtmlToPdfClient(base_url=args.url)
    try:
        pdf_bytes = client.convert(request)
    except PdfConversionError as e:
        logger.error(f"Conversion failed: {e}")
        return 1

    output.write_bytes(pdf_bytes)
    logger.info(f"Wrote {len(pdf_bytes):,} bytes to {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
