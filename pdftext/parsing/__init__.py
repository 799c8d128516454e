"""PDF parsing utilities for document extraction.

Wraps pypdf behind a single entry point that turns raw bytes into a
normalized PDFContent value.

Responsibilities:
    - PDF header validation before handing bytes to pypdf
    - Text extraction across all pages
    - Document information normalization (title, author, form flags)
    - Format version detection from the file header
"""

from pdftext.parsing.pdf_parser import PDFContent, PDFParseError, parse_pdf

__all__ = ["PDFContent", "PDFParseError", "parse_pdf"]
