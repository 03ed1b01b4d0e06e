# figextract/core/processor/fig_helper/__init__.py
"""
Figma .fig Format Helper Module

Provides utilities for decoding the Figma / FigJam binary container.

A .fig file is a small length-prefixed container (optionally wrapped in a
ZIP archive) holding a compressed Kiwi schema, a compressed Kiwi message
and embedded images. The message itself is decoded by an injected
schema decoder; everything around it lives here.

File structure:
- fig_constants.py: Magic values, record sizes, opcodes
- fig_reader.py: Bounds-checked byte cursor
- fig_header.py: Magic header detection and ZIP unwrapping
- fig_chunks.py: Length-prefixed chunk framing
- fig_decoder.py: DEFLATE / Zstandard chunk decompression
- fig_tree.py: Flat nodeChanges list to nested tree
- fig_blob.py: Blob payload extraction, role dispatch, output encoding
- fig_substitution.py: "<role>Blob" reference substitution
- fig_commands.py: Path command blob decoder
- fig_vector_network.py: Vector network blob decoder
- fig_matrix.py: Affine matrix to CSS transform
- fig_image.py: Image hash references and embedded image chunks
"""

# Reader
from figextract.core.processor.fig_helper.fig_reader import (
    ByteCursor,
    ShortReadError,
    finite_or_none,
)

# Header / ZIP
from figextract.core.processor.fig_helper.fig_header import (
    FileType,
    detect_file_type,
    is_zip_container,
    extract_from_zip,
)

# Chunks
from figextract.core.processor.fig_helper.fig_chunks import ChunkStream, extract_chunks

# Decoder
from figextract.core.processor.fig_helper.fig_decoder import (
    is_already_compressed,
    decompress_chunk,
)

# Tree
from figextract.core.processor.fig_helper.fig_tree import build_tree

# Blobs
from figextract.core.processor.fig_helper.fig_blob import (
    BLOB_PARSERS,
    extract_blob_bytes,
    parse_blob,
    process_blobs,
)
from figextract.core.processor.fig_helper.fig_substitution import substitute_blobs
from figextract.core.processor.fig_helper.fig_commands import parse_commands
from figextract.core.processor.fig_helper.fig_vector_network import parse_vector_network

# Matrix
from figextract.core.processor.fig_helper.fig_matrix import (
    CssTransform,
    decompose_matrix,
    transform_matrix_to_css,
)

# Images
from figextract.core.processor.fig_helper.fig_image import (
    ImageChunkInfo,
    describe_image_chunks,
    inspect_image_chunk,
    transform_image_hashes,
)


__all__ = [
    # Reader
    'ByteCursor',
    'ShortReadError',
    'finite_or_none',
    # Header / ZIP
    'FileType',
    'detect_file_type',
    'is_zip_container',
    'extract_from_zip',
    # Chunks
    'ChunkStream',
    'extract_chunks',
    # Decoder
    'is_already_compressed',
    'decompress_chunk',
    # Tree
    'build_tree',
    # Blobs
    'BLOB_PARSERS',
    'extract_blob_bytes',
    'parse_blob',
    'process_blobs',
    'substitute_blobs',
    'parse_commands',
    'parse_vector_network',
    # Matrix
    'CssTransform',
    'decompose_matrix',
    'transform_matrix_to_css',
    # Images
    'ImageChunkInfo',
    'describe_image_chunks',
    'inspect_image_chunk',
    'transform_image_hashes',
]
