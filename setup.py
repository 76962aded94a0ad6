"""
Setup script for the html-pdf-function project.

Allows development installation with `pip install -e .`
"""

from setuptools import setup, find_packages

setup(
    name="html-pdf-function",
    version="0.1.0",
    packages=find_packages(include=["html_pdf_service", "html_pdf_client"]),
    python_requires=">=3.11",
    install_requires=[
        "fastapi",
        "uvicorn",
        "pydantic>=2",
        "pydantic-settings>=2",
        "playwright",
        "requests",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
            "httpx",
            "pdfplumber",
            "psutil",
        ],
    },
)
