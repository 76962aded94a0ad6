"""
HTML-to-PDF Function - containerized conversion endpoint.

Receives an inline HTML document plus optional header/footer templates and
renders it to an A4 PDF with Playwright/Chromium. One browser process is
launched per request and always closed before the response is returned.
"""

__version__ = "0.1.0"
