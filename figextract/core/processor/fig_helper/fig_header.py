# figextract/core/processor/fig_helper/fig_header.py
"""
Figma File Header Inspection

Classifies raw file bytes and unwraps the ZIP container used by larger files.

Two independent checks:
- is_zip_container(): 2-byte 'PK' signature, never fails
- detect_file_type(): exact 8-byte magic comparison ('fig-kiwi' / 'fig-jam.')

ZIP detection runs first; the extracted canvas.fig is then classified.
"""
import io
import zlib
import logging
import zipfile
from enum import Enum

from figextract.core.functions.errors import (
    CanvasNotFoundError,
    FileTooSmallError,
    InvalidMagicHeaderError,
    ZipExtractionError,
)
from figextract.core.processor.fig_helper.fig_constants import (
    CANVAS_ENTRY_NAME,
    FIGJAM_MAGIC,
    FIGMA_MAGIC,
    MAGIC_SIZE,
    ZIP_MAGIC,
)

logger = logging.getLogger("document-processor.FIG")


class FileType(Enum):
    """Document type encoded in the magic header."""
    FIGMA = "figma"
    FIGJAM = "figjam"

    @property
    def magic(self) -> bytes:
        return FIGMA_MAGIC if self is FileType.FIGMA else FIGJAM_MAGIC


def detect_file_type(data: bytes) -> FileType:
    """
    Classify bytes by their 8-byte magic header.

    Args:
        data: File bytes (already unwrapped from ZIP if needed)

    Returns:
        FileType.FIGMA or FileType.FIGJAM

    Raises:
        FileTooSmallError: If fewer than 8 bytes are given
        InvalidMagicHeaderError: If the header matches neither signature
    """
    if len(data) < MAGIC_SIZE:
        raise FileTooSmallError(expected=MAGIC_SIZE, actual=len(data))

    header = bytes(data[:MAGIC_SIZE])

    for file_type in FileType:
        if header == file_type.magic:
            return file_type

    raise InvalidMagicHeaderError(header)


def is_zip_container(data: bytes) -> bool:
    """
    Check for the ZIP local-file signature ('PK').

    Args:
        data: Raw file bytes

    Returns:
        True if the data starts with 'PK' (False for short input)
    """
    return len(data) >= len(ZIP_MAGIC) and bytes(data[:len(ZIP_MAGIC)]) == ZIP_MAGIC


def extract_from_zip(data: bytes, entry_name: str = CANVAS_ENTRY_NAME) -> bytes:
    """
    Extract the canvas entry from a ZIP-wrapped .fig file.

    Only the matching entry is read; other entries (images, thumbnails,
    meta.json) are left compressed.

    Args:
        data: ZIP archive bytes
        entry_name: Exact entry name to extract

    Returns:
        Decompressed entry bytes

    Raises:
        ZipExtractionError: If the archive is corrupt or the entry unreadable
        CanvasNotFoundError: If no entry has the given name
    """
    try:
        archive = zipfile.ZipFile(io.BytesIO(data))
    except (zipfile.BadZipFile, zipfile.LargeZipFile, ValueError, OSError) as e:
        raise ZipExtractionError(f"Cannot open ZIP archive: {e}") from e

    with archive:
        for info in archive.infolist():
            if info.filename != entry_name:
                continue
            try:
                contents = archive.read(info)
            except (zipfile.BadZipFile, zlib.error, NotImplementedError, RuntimeError, OSError) as e:
                raise ZipExtractionError(f"Cannot read '{entry_name}' from ZIP archive: {e}") from e
            logger.debug(f"Extracted {entry_name} from ZIP: {info.compress_size} -> {len(contents)} bytes")
            return contents

    raise CanvasNotFoundError(entry_name)


__all__ = [
    'FileType',
    'detect_file_type',
    'is_zip_container',
    'extract_from_zip',
]
