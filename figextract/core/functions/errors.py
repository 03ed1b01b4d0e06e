# figextract/core/functions/errors.py
"""
Fig Conversion Errors

Fatal, container-level failures that abort the conversion of a whole file.
Each exception keeps its diagnostic values (offsets, expected vs. actual
sizes, attempted algorithms) as attributes.

Soft failures (unknown blob roles, malformed geometry blobs, incomplete
transform matrices) are NOT represented here: those decoders return None
and leave the tree untouched.
"""
from typing import Dict, Optional


class FigError(Exception):
    """Base class for all fatal .fig conversion errors."""


class InvalidMagicHeaderError(FigError):
    """The first 8 bytes match neither 'fig-kiwi' nor 'fig-jam.'."""

    def __init__(self, header: bytes):
        self.header = bytes(header)
        super().__init__(
            f"Invalid magic header: expected 'fig-kiwi' or 'fig-jam.', found {self.header!r}"
        )


class FileTooSmallError(FigError):
    """The input is shorter than the structure being read requires."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"File too small: expected at least {expected} bytes, found {actual}"
        )


class IncompleteChunkError(FigError):
    """A chunk declares more bytes than remain in the container."""

    def __init__(self, offset: int, expected: int, actual: int):
        self.offset = offset
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Incomplete chunk at offset {offset}: expected {expected} bytes, found {actual}"
        )


class NotEnoughChunksError(FigError):
    """The container holds fewer chunks than schema + data."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Not enough chunks: expected at least {expected}, found {actual}"
        )


class ZipExtractionError(FigError):
    """The ZIP wrapper could not be opened or read."""


class CanvasNotFoundError(FigError):
    """The ZIP wrapper opened fine but has no canvas entry."""

    def __init__(self, entry_name: str):
        self.entry_name = entry_name
        super().__init__(f"Canvas file '{entry_name}' not found in ZIP archive")


class DecompressionError(FigError):
    """A chunk could be decompressed by neither DEFLATE nor Zstandard."""

    def __init__(self, errors: Optional[Dict[str, str]] = None):
        self.errors = dict(errors or {})
        details = "; ".join(f"{name}: {message}" for name, message in self.errors.items())
        super().__init__(
            f"Failed to decompress chunk (tried both DEFLATE and Zstandard): {details}"
        )


class BlobExtractionError(FigError):
    """A blob's byte payload is missing or cannot be decoded."""


class DocumentDecodeError(FigError):
    """The decoded message is unusable (decoder failure, bad node tree)."""


__all__ = [
    'FigError',
    'InvalidMagicHeaderError',
    'FileTooSmallError',
    'IncompleteChunkError',
    'NotEnoughChunksError',
    'ZipExtractionError',
    'CanvasNotFoundError',
    'DecompressionError',
    'BlobExtractionError',
    'DocumentDecodeError',
]
