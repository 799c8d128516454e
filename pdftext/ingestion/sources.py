"""Client-supplied PDF sources and their canonical fetch form."""

import logging
import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

GOOGLE_DRIVE_FILE_PATTERN = re.compile(r"https://drive\.google\.com/file/d/([a-zA-Z0-9_-]+)")
GOOGLE_DRIVE_DOWNLOAD_URL = "https://drive.google.com/uc?export=download&id={file_id}"


class UploadedSource(BaseModel):
    """A PDF uploaded by the client and staged in the scratch directory.

    Attributes:
        temporary_path: Scratch file holding the upload for this request only.
        original_filename: Filename as sent by the client.
        declared_size: Bytes received while staging.
        content_type: Content type declared by the client.
    """

    model_config = ConfigDict(frozen=True)

    temporary_path: Path
    original_filename: str
    declared_size: int
    content_type: str | None = None


class RemoteSource(BaseModel):
    """A PDF referenced by URL.

    Attributes:
        url: URL exactly as supplied by the client.
        resolved_url: URL actually fetched.
        filename: Optional display name echoed back to the client.
    """

    model_config = ConfigDict(frozen=True)

    url: str
    resolved_url: str
    filename: str | None = None


def resolve_source_url(url: str) -> str:
    """Rewrite known sharing links into direct-download URLs.

    Google Drive viewer links (https://drive.google.com/file/d/<ID>/...)
    become https://drive.google.com/uc?export=download&id=<ID>. Anything
    else is returned unchanged.

    Args:
        url: URL as supplied by the client.

    Returns:
        The URL to fetch.
    """
    match = GOOGLE_DRIVE_FILE_PATTERN.search(url) if isinstance(url, str) else None
    if match is None:
        return url

    resolved = GOOGLE_DRIVE_DOWNLOAD_URL.format(file_id=match.group(1))
    logger.info(f"Converted Google Drive URL to: {resolved}")
    return resolved


def remote_source(url: str, filename: str | None = None) -> RemoteSource:
    """Build a RemoteSource, resolving the URL to fetch."""
    return RemoteSource(url=url, resolved_url=resolve_source_url(url), filename=filename)
