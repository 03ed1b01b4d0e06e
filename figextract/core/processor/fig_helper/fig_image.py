# figextract/core/processor/fig_helper/fig_image.py
"""
Image References and Embedded Image Chunks

Two unrelated image concerns of a .fig file:

1. Image paints reference their bitmap by a SHA-1 byte array:
       "image": {"hash": [96, 73, 161, 122, ...]}
   transform_image_hashes() rewrites it to the file name used inside the
   ZIP container:
       "image": {"filename": "images/6049a17a..."}

2. Chunks after the schema and data chunks hold raw PNG/JPEG payloads.
   describe_image_chunks() reports their format and pixel size.
"""
import io
import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

from PIL import Image, UnidentifiedImageError

from figextract.core.processor.fig_helper.fig_chunks import ChunkStream
from figextract.core.processor.fig_helper.fig_constants import (
    IMAGE_DIRECTORY,
    IMAGE_FIELDS,
    IMAGE_FILENAME_KEY,
    IMAGE_HASH_KEY,
    MIN_CHUNK_COUNT,
)

logger = logging.getLogger("document-processor.FIG")


# ==========================================================================
# Image Hash References
# ==========================================================================

def hash_to_filename(hash_value: Any) -> Optional[str]:
    """
    Convert a hash byte array to "images/<lowercase hex>".

    Args:
        hash_value: List of ints in 0..255 (or raw bytes)

    Returns:
        File name, or None if any entry is not a byte value
    """
    if isinstance(hash_value, (bytes, bytearray)):
        return f"{IMAGE_DIRECTORY}/{bytes(hash_value).hex()}"

    if not isinstance(hash_value, list):
        return None

    for value in hash_value:
        if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= 255:
            return None

    return f"{IMAGE_DIRECTORY}/{bytes(hash_value).hex()}"


def transform_image_hashes(tree: Any) -> None:
    """Rewrite image hash arrays to file names throughout the tree, in place."""
    if isinstance(tree, dict):
        for key in IMAGE_FIELDS:
            image = tree.get(key)
            if not isinstance(image, dict) or IMAGE_HASH_KEY not in image:
                continue

            filename = hash_to_filename(image[IMAGE_HASH_KEY])
            if filename is not None:
                del image[IMAGE_HASH_KEY]
                image[IMAGE_FILENAME_KEY] = filename

        for value in tree.values():
            transform_image_hashes(value)

    elif isinstance(tree, list):
        for item in tree:
            transform_image_hashes(item)


# ==========================================================================
# Embedded Image Chunks
# ==========================================================================

@dataclass
class ImageChunkInfo:
    """
    Description of one embedded image chunk.

    Attributes:
        index: Chunk index within the container
        size_bytes: Payload size
        format: Pillow format name ("PNG", "JPEG", ...), None if unreadable
        width: Pixel width, None if unreadable
        height: Pixel height, None if unreadable
    """
    index: int
    size_bytes: int
    format: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def inspect_image_chunk(index: int, data: bytes) -> ImageChunkInfo:
    """
    Identify an image chunk without decoding its pixels.

    Args:
        index: Chunk index within the container
        data: Chunk payload

    Returns:
        ImageChunkInfo (format/width/height are None when Pillow cannot
        identify the data)
    """
    info = ImageChunkInfo(index=index, size_bytes=len(data))

    try:
        with Image.open(io.BytesIO(data)) as img:
            info.format = img.format
            info.width, info.height = img.size
    except (UnidentifiedImageError, OSError, ValueError) as e:
        logger.debug(f"Chunk #{index} is not a recognizable image: {e}")

    return info


def describe_image_chunks(stream: ChunkStream) -> List[ImageChunkInfo]:
    """Describe every chunk that follows the schema and data chunks."""
    return [
        inspect_image_chunk(MIN_CHUNK_COUNT + offset, chunk)
        for offset, chunk in enumerate(stream.image_chunks)
    ]


__all__ = [
    'hash_to_filename',
    'transform_image_hashes',
    'ImageChunkInfo',
    'inspect_image_chunk',
    'describe_image_chunks',
]
