# figextract/core/processor/fig_helper/fig_chunks.py
"""
Figma Container Chunk Reader

Splits the bytes that follow the magic header into length-prefixed chunks.

Layout:
- 0-7:  Magic header (validated separately by detect_file_type)
- 8-11: Version (u32 LE)
- 12-:  Repeated {length (u32 LE), payload}

A trailing length header shorter than 4 bytes marks the end of the stream.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from figextract.core.functions.errors import (
    FileTooSmallError,
    IncompleteChunkError,
    NotEnoughChunksError,
)
from figextract.core.processor.fig_helper.fig_constants import (
    CHUNK_HEADER_SIZE,
    DATA_CHUNK_INDEX,
    MAGIC_SIZE,
    MIN_CHUNK_COUNT,
    MIN_FILE_SIZE,
    SCHEMA_CHUNK_INDEX,
)
from figextract.core.processor.fig_helper.fig_reader import ByteCursor, ShortReadError

logger = logging.getLogger("document-processor.FIG")


@dataclass
class ChunkStream:
    """
    Parsed container: format version plus raw (still compressed) chunks.

    Attributes:
        version: Container format version
        chunks: Chunk payloads in file order (schema, data, images...)
    """
    version: int
    chunks: List[bytes] = field(default_factory=list)

    @property
    def schema_chunk(self) -> Optional[bytes]:
        if len(self.chunks) > SCHEMA_CHUNK_INDEX:
            return self.chunks[SCHEMA_CHUNK_INDEX]
        return None

    @property
    def data_chunk(self) -> Optional[bytes]:
        if len(self.chunks) > DATA_CHUNK_INDEX:
            return self.chunks[DATA_CHUNK_INDEX]
        return None

    @property
    def image_chunks(self) -> List[bytes]:
        return self.chunks[MIN_CHUNK_COUNT:]

    def __repr__(self) -> str:
        sizes = [len(c) for c in self.chunks]
        return f"ChunkStream(version={self.version}, chunk_sizes={sizes})"


def extract_chunks(data: bytes) -> ChunkStream:
    """
    Read the version and every length-prefixed chunk.

    Args:
        data: Container bytes starting with the 8-byte magic header

    Returns:
        ChunkStream with at least two chunks

    Raises:
        FileTooSmallError: If data is shorter than header + version (12 bytes)
        IncompleteChunkError: If a chunk length exceeds the remaining bytes
        NotEnoughChunksError: If fewer than two chunks were found
    """
    if len(data) < MIN_FILE_SIZE:
        raise FileTooSmallError(expected=MIN_FILE_SIZE, actual=len(data))

    cursor = ByteCursor(data, offset=MAGIC_SIZE)
    version = cursor.read_u32()

    chunks: List[bytes] = []

    while cursor.remaining >= CHUNK_HEADER_SIZE:
        header_offset = cursor.offset
        chunk_length = cursor.read_u32()

        try:
            chunk = cursor.read_bytes(chunk_length)
        except ShortReadError as e:
            raise IncompleteChunkError(
                offset=header_offset,
                expected=chunk_length,
                actual=e.actual,
            ) from e

        logger.debug(f"Chunk #{len(chunks)} at offset {header_offset}: {chunk_length} bytes")
        chunks.append(chunk)

    if cursor.remaining:
        logger.debug(f"Ignoring {cursor.remaining} trailing bytes after last chunk")

    if len(chunks) < MIN_CHUNK_COUNT:
        raise NotEnoughChunksError(expected=MIN_CHUNK_COUNT, actual=len(chunks))

    return ChunkStream(version=version, chunks=chunks)


__all__ = ['ChunkStream', 'extract_chunks']
