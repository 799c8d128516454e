"""Unit tests for PDF parser module."""

import pytest
import pytest_check as check

from pdftext.parsing.pdf_parser import (
    HEADER_SEARCH_WINDOW,
    PDFParseError,
    _extract_version,
    _validate_pdf_bytes,
    parse_pdf,
)
from tests.pdfs import make_pdf


class TestParsePdfValid:
    """Tests for successful PDF parsing."""

    def test_extracts_text_and_page_count(self, sample_pdf: bytes) -> None:
        """Valid PDF returns text content and correct page count."""
        result = parse_pdf(sample_pdf)

        check.greater(len(result.text), 0)
        check.is_in("Information security", result.text)
        check.is_in("incident response", result.text)
        check.equal(result.pages, 2)

    def test_returns_info_without_slashes(self, sample_pdf: bytes) -> None:
        """Info keys drop the leading slash and keep their values."""
        result = parse_pdf(sample_pdf)

        check.equal(result.info.get("Title"), "Quarterly Report")
        check.equal(result.info.get("Author"), "Finance Team")
        check.is_false(any(key.startswith("/") for key in result.info))

    def test_reports_format_version(self) -> None:
        """Version comes from the %PDF header."""
        result = parse_pdf(make_pdf(["Versioned"], version="1.7"))

        check.equal(result.version, "1.7")
        check.equal(result.info.get("PDFFormatVersion"), "1.7")

    def test_reports_form_flags(self, sample_pdf: bytes) -> None:
        """Documents without forms report both form flags as false."""
        result = parse_pdf(sample_pdf)

        check.is_false(result.info.get("IsAcroFormPresent"))
        check.is_false(result.info.get("IsXFAPresent"))

    def test_empty_page_pdf_succeeds(self, blank_pdf: bytes) -> None:
        """PDF with empty pages parses to empty text without error."""
        result = parse_pdf(blank_pdf)

        check.equal(result.pages, 1)
        check.equal(result.text.strip(), "")

    def test_zero_page_pdf_succeeds(self) -> None:
        """A document without pages reports zero pages, not an error."""
        result = parse_pdf(make_pdf([]))

        check.equal(result.pages, 0)
        check.equal(result.text, "")

    def test_missing_info_dictionary(self, blank_pdf: bytes) -> None:
        """Without an info dictionary only derived fields are reported."""
        result = parse_pdf(blank_pdf)

        check.is_not_in("Title", result.info)
        check.equal(result.info.get("PDFFormatVersion"), "1.4")


class TestParsePdfRejection:
    """Tests for PDF validation and rejection."""

    def test_rejects_empty_bytes(self) -> None:
        """Empty bytes raises PDFParseError."""
        with pytest.raises(PDFParseError, match="Empty file"):
            parse_pdf(b"")

    def test_rejects_non_pdf_file(self) -> None:
        """Non-PDF content raises PDFParseError."""
        with pytest.raises(PDFParseError, match="Invalid PDF"):
            parse_pdf(b"This is a plain text file, not a PDF.")

    def test_rejects_truncated_pdf(self) -> None:
        """Truncated PDF raises PDFParseError."""
        with pytest.raises(PDFParseError, match="Corrupt|Failed"):
            parse_pdf(b"%PDF-1.4\n1 0 obj\n<<")


    def test_rejects_header_beyond_search_window(self) -> None:
        """A %PDF marker past the first KiB does not count as a header."""
        content = b"x" * (HEADER_SEARCH_WINDOW + 76) + make_pdf(["Too late"])

        with pytest.raises(PDFParseError, match="Invalid PDF"):
            parse_pdf(content)


class TestPdfHeader:
    """Tests for header detection and version reading."""

    def test_accepts_header_after_leading_junk(self) -> None:
        """Leading bytes before %PDF are tolerated within the first KiB."""
        content = b"junk bytes from a mail gateway\n" + make_pdf(["Prefixed"])

        _validate_pdf_bytes(content)

    def test_accepts_header_at_end_of_window(self) -> None:
        """A header that starts inside the window is accepted."""
        content = b"x" * (HEADER_SEARCH_WINDOW - 8) + b"%PDF-1.6\n"

        _validate_pdf_bytes(content)

    def test_version_after_leading_junk(self) -> None:
        """Version is read from the header wherever it sits in the window."""
        content = b"\xef\xbb\xbfpreamble\r\n" + make_pdf(["Prefixed"], version="1.6")

        check.equal(_extract_version(content), "1.6")

    def test_version_unknown_without_number(self) -> None:
        """A bare %PDF marker yields an unknown version."""
        check.equal(_extract_version(b"%PDF\n1 0 obj\n"), "Unknown")
