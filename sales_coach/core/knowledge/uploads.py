"""
Temporary upload file handling.

Uploaded files are spooled to a private temp directory and removed as
soon as their content has been read.

Dependencies: tempfile, shutil
System role: Scoped resource handling for file ingestion
"""

import logging
import shutil
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO

logger = logging.getLogger(__name__)

TEMP_DIR_PREFIX = "salescoach_"
DEFAULT_UPLOAD_NAME = "upload.txt"


def save_upload_to_temp(stream: BinaryIO, filename: str) -> Path:
    """
    Copy an upload stream into a fresh temp directory.

    Args:
        stream: Binary file-like object (UploadFile.file)
        filename: Original file name; only its final component is used

    Returns:
        Path: Location of the spooled file
    """
    name = Path(filename or "").name
    if name in ("", ".", ".."):
        name = DEFAULT_UPLOAD_NAME

    temp_dir = Path(tempfile.mkdtemp(prefix=TEMP_DIR_PREFIX))
    target = temp_dir / name
    try:
        with target.open("wb") as out:
            shutil.copyfileobj(stream, out)
    except Exception:
        shutil.rmtree(temp_dir, ignore_errors=True)
        raise
    return target


def cleanup_temp_file(file_path: str | Path) -> None:
    """
    Safely remove temporary file and its parent temp directory.

    Args:
        file_path: Path to file to remove
    """
    try:
        path = Path(file_path)
        parent_dir = path.parent

        if path.exists():
            path.unlink()
            logger.debug("Cleaned up temp file", extra={"file_path": str(file_path)})

        if parent_dir.exists() and parent_dir.name.startswith(TEMP_DIR_PREFIX):
            shutil.rmtree(parent_dir, ignore_errors=True)
            logger.debug("Cleaned up temp directory", extra={"temp_dir": str(parent_dir)})

    except OSError as e:
        logger.warning(
            "Failed to cleanup temp file",
            extra={"file_path": str(file_path), "error": str(e)},
        )


@contextmanager
def scoped_upload(file_path: str | Path) -> Iterator[Path]:
    """Yield the upload path and always remove it on exit."""
    path = Path(file_path)
    try:
        yield path
    finally:
        cleanup_temp_file(path)
