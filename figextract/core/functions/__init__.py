# figextract/core/functions/__init__.py
"""
Shared building blocks: the error hierarchy and the pluggable message decoder.
"""
from figextract.core.functions.errors import (
    FigError,
    InvalidMagicHeaderError,
    FileTooSmallError,
    IncompleteChunkError,
    NotEnoughChunksError,
    ZipExtractionError,
    CanvasNotFoundError,
    DecompressionError,
    BlobExtractionError,
    DocumentDecodeError,
)
from figextract.core.functions.document_decoder import (
    BaseDocumentDecoder,
    CallableDocumentDecoder,
    DecodedDocument,
)


__all__ = [
    # Errors
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
    # Decoder
    'BaseDocumentDecoder',
    'CallableDocumentDecoder',
    'DecodedDocument',
]
