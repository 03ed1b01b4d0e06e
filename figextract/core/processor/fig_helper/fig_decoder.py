# figextract/core/processor/fig_helper/fig_decoder.py
"""
Figma Chunk Decompression Utilities

Schema and data chunks are compressed with one of two codecs, and the
container does not say which:
- Older files: raw DEFLATE (no zlib header)
- Newer files: Zstandard

Image chunks (PNG/JPEG) are stored as-is and pass through unchanged.
"""
import zlib
import logging
from typing import Dict

import zstandard as zstd

from figextract.core.functions.errors import DecompressionError
from figextract.core.processor.fig_helper.fig_constants import JPEG_MAGIC, PNG_MAGIC

logger = logging.getLogger("document-processor.FIG")


def is_already_compressed(data: bytes) -> bool:
    """
    Check for a PNG or JPEG signature.

    Args:
        data: Chunk bytes

    Returns:
        True for image payloads that must not be decompressed
    """
    if len(data) < 2:
        return False
    prefix = bytes(data[:2])
    return prefix == PNG_MAGIC or prefix == JPEG_MAGIC


def decompress_deflate(data: bytes) -> bytes:
    """Decompress raw DEFLATE data (wbits=-15)."""
    return zlib.decompress(data, -15)


def decompress_zstd(data: bytes) -> bytes:
    """
    Decompress a Zstandard stream.

    Uses a decompression object so frames written without a content-size
    header still decode.

    Raises:
        zstd.ZstdError: If the data is not a complete frame (empty or truncated)
    """
    dobj = zstd.ZstdDecompressor().decompressobj()
    result = dobj.decompress(data)
    if not dobj.eof:
        raise zstd.ZstdError(
            f"incomplete Zstandard frame ({len(data)} input bytes, {len(result)} decoded)"
        )
    return result


def decompress_chunk(data: bytes) -> bytes:
    """
    Decompress a container chunk.

    Tries raw DEFLATE first, then Zstandard.

    Args:
        data: Raw chunk payload

    Returns:
        Decompressed bytes (or the input itself for PNG/JPEG payloads)

    Raises:
        DecompressionError: If neither codec accepts the data
    """
    if is_already_compressed(data):
        logger.debug(f"Chunk is an embedded image ({len(data)} bytes), skipping decompression")
        return data

    errors: Dict[str, str] = {}

    try:
        result = decompress_deflate(data)
        logger.debug(f"DEFLATE: {len(data)} -> {len(result)} bytes")
        return result
    except zlib.error as e:
        errors['deflate'] = str(e)

    try:
        result = decompress_zstd(data)
        logger.debug(f"Zstandard: {len(data)} -> {len(result)} bytes")
        return result
    except zstd.ZstdError as e:
        errors['zstd'] = str(e)

    raise DecompressionError(errors)


__all__ = [
    'is_already_compressed',
    'decompress_deflate',
    'decompress_zstd',
    'decompress_chunk',
]
