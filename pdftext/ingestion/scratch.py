"""Scratch directory handling for staged uploads.

Every staged upload gets a unique name and is removed by the pipeline at the
end of its request. Nothing else writes to or cleans the directory.
"""

import logging
import os
import secrets
import time
from pathlib import Path

logger = logging.getLogger(__name__)

RANDOM_SUFFIX_BOUND = 10**9


def generate_scratch_name(field_name: str, original_filename: str) -> str:
    """Generate a collision-resistant scratch filename.

    Names follow ``<fieldname>-<timestamp>-<random><ext>``, where the
    timestamp is in milliseconds, the random part comes from ``secrets``
    and the extension is taken from the original filename.

    Args:
        field_name: Multipart field the file arrived under.
        original_filename: Filename as sent by the client.

    Returns:
        A bare filename (no directory component).
    """
    extension = os.path.splitext(os.path.basename(original_filename))[1]
    timestamp = time.time_ns() // 1_000_000
    suffix = secrets.randbelow(RANDOM_SUFFIX_BOUND)
    return f"{field_name}-{timestamp}-{suffix}{extension}"


def ensure_scratch_dir(directory: Path) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def remove_scratch_file(path: Path) -> None:
    """Remove a staged file, logging instead of raising on failure.

    Args:
        path: Scratch file to delete. A missing file is not an error.
    """
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        logger.error(f"Error cleaning up file {path}: {e}")
