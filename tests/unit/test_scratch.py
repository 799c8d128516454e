"""Unit tests for scratch file naming and removal."""

import logging
import re
from pathlib import Path

import pytest
import pytest_check as check

from pdftext.ingestion.scratch import (
    ensure_scratch_dir,
    generate_scratch_name,
    remove_scratch_file,
)

SCRATCH_NAME = re.compile(r"^pdf-\d{13}-\d{1,9}\.pdf$")


class TestGenerateScratchName:
    """Tests for scratch filename generation."""

    def test_follows_naming_scheme(self) -> None:
        """Names are <field>-<millis>-<random><ext>."""
        name = generate_scratch_name("pdf", "report.pdf")

        assert SCRATCH_NAME.match(name), name

    def test_preserves_original_extension_case(self) -> None:
        """Extension is copied from the original filename as-is."""
        check.is_true(generate_scratch_name("pdf", "SCAN.PDF").endswith(".PDF"))
        check.is_true(generate_scratch_name("pdf", "archive.tar.gz").endswith(".gz"))

    def test_no_extension(self) -> None:
        """Files without an extension get none."""
        name = generate_scratch_name("pdf", "README")

        check.equal(name.count("."), 0)

    def test_ignores_directory_components(self) -> None:
        """Path separators in client filenames never reach the name."""
        name = generate_scratch_name("pdf", "../../etc/passwd.pdf")

        check.is_not_in("/", name)
        check.is_true(name.endswith(".pdf"))

    def test_names_are_unique(self) -> None:
        """Repeated calls do not collide."""
        names = {generate_scratch_name("pdf", "a.pdf") for _ in range(200)}

        assert len(names) == 200


class TestRemoveScratchFile:
    """Tests for best-effort scratch removal."""

    def test_removes_existing_file(self, tmp_path: Path) -> None:
        """Existing file is deleted."""
        staged = tmp_path / "pdf-1-1.pdf"
        staged.write_bytes(b"%PDF-1.4")

        remove_scratch_file(staged)

        assert not staged.exists()

    def test_missing_file_is_not_an_error(self, tmp_path: Path) -> None:
        """Removing a file that was never written is silent."""
        remove_scratch_file(tmp_path / "never-written.pdf")

    def test_failure_is_logged_not_raised(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """OS errors during removal are logged and swallowed."""

        def fail_unlink(self: Path, missing_ok: bool = False) -> None:
            raise PermissionError("read-only filesystem")

        monkeypatch.setattr(Path, "unlink", fail_unlink)

        with caplog.at_level(logging.ERROR, logger="pdftext.ingestion.scratch"):
            remove_scratch_file(tmp_path / "locked.pdf")

        assert "read-only filesystem" in caplog.text


def test_ensure_scratch_dir_creates_nested_directory(tmp_path: Path) -> None:
    """Scratch directory is created along with missing parents."""
    target = tmp_path / "a" / "b" / "uploads"

    assert ensure_scratch_dir(target) == target
    assert target.is_dir()
