# figextract/core/processor/fig_handler.py
"""
Fig Handler - Figma / FigJam .fig File Processor

Class-based handler that turns a .fig (or .jam) file into a JSON-ready
document tree.

Processing steps:
1. Unwrap the ZIP container (if the file starts with 'PK')
2. Classify the magic header (Figma / FigJam)
3. Split the container into length-prefixed chunks
4. Decompress the schema and data chunks (DEFLATE or Zstandard)
5. Decode the message with the injected schema decoder
6. Nest nodeChanges into a tree
7. Substitute blob references, decompose transforms, resolve image hashes
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from figextract.core.functions.document_decoder import BaseDocumentDecoder, DecodedDocument
from figextract.core.functions.errors import DocumentDecodeError, FigError
from figextract.core.processor.base_handler import BaseHandler
from figextract.core.processor.fig_helper import (
    ChunkStream,
    FileType,
    build_tree,
    decompress_chunk,
    describe_image_chunks,
    detect_file_type,
    extract_chunks,
    extract_from_zip,
    is_zip_container,
    process_blobs,
    substitute_blobs,
    transform_image_hashes,
    transform_matrix_to_css,
)
from figextract.core.processor.fig_helper.fig_constants import CANVAS_ENTRY_NAME

logger = logging.getLogger("document-processor.FIG")


@dataclass
class FigConfig:
    """Configuration for the .fig conversion pipeline."""
    canvas_entry_name: str = CANVAS_ENTRY_NAME
    substitute_blobs: bool = True
    decompose_matrices: bool = True
    resolve_image_hashes: bool = True
    include_blobs: bool = True
    inspect_images: bool = True


class FigHandler(BaseHandler):
    """Figma .fig File Processing Handler Class"""

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        decoder: Optional[BaseDocumentDecoder] = None
    ):
        """
        Initialize FigHandler.

        Args:
            config: Configuration dictionary; a FigConfig under "fig_config"
                overrides the defaults
            decoder: Schema/message decoder for the data chunk
        """
        super().__init__(config=config, document_decoder=decoder)
        self._fig_config: Optional[FigConfig] = None

    @property
    def fig_config(self) -> FigConfig:
        if self._fig_config is None:
            self._fig_config = self._config.get("fig_config") or FigConfig()
        return self._fig_config

    def read_container(self, data: bytes) -> Tuple[FileType, ChunkStream]:
        """
        Unwrap, classify and split a .fig file without decoding it.

        Args:
            data: Raw file bytes (.fig or ZIP-wrapped .fig)

        Returns:
            Tuple of (file type, chunk stream)

        Raises:
            FigError: On any container-level failure
        """
        if is_zip_container(data):
            self.logger.debug("ZIP container detected, extracting canvas")
            data = extract_from_zip(data, self.fig_config.canvas_entry_name)

        file_type = detect_file_type(data)
        stream = extract_chunks(data)

        self.logger.info(
            f"{file_type.value} file, version {stream.version}, {len(stream.chunks)} chunks"
        )
        return file_type, stream

    def decode_message(self, stream: ChunkStream) -> DecodedDocument:
        """
        Decompress the schema and data chunks and decode the message.

        Raises:
            DecompressionError: If a chunk cannot be decompressed
            DocumentDecodeError: If no decoder is configured or decoding fails
        """
        decoder = self.document_decoder
        if decoder is None:
            raise DocumentDecodeError("No document decoder configured")

        schema_data = decompress_chunk(stream.schema_chunk)
        message_data = decompress_chunk(stream.data_chunk)

        self.logger.debug(
            f"Decoding with {decoder.get_format_name()}: "
            f"schema {len(schema_data)} bytes, message {len(message_data)} bytes"
        )

        try:
            document = decoder.decode(schema_data, message_data)
        except FigError:
            raise
        except Exception as e:
            raise DocumentDecodeError(f"Decoder failed: {e}") from e

        if not isinstance(document, DecodedDocument):
            document = DecodedDocument(message=document)
        document.validate()
        return document

    def convert(self, data: bytes, **kwargs) -> Dict[str, Any]:
        """
        Convert a .fig file into a JSON-ready document.

        Args:
            data: Raw file bytes
            **kwargs: Unused

        Returns:
            {"version", "fileType", "document", "blobs", "images"}
            ("blobs" and "images" depend on FigConfig)

        Raises:
            FigError: On any fatal container, decompression, blob or decode error
        """
        config = self.fig_config

        file_type, stream = self.read_container(data)
        decoded = self.decode_message(stream)

        document = build_tree(decoded.node_changes)
        blobs = decoded.blobs

        try:
            if config.substitute_blobs:
                substitute_blobs(document, blobs)
            if config.decompose_matrices:
                transform_matrix_to_css(document)
            if config.resolve_image_hashes:
                transform_image_hashes(document)
        except RecursionError as e:
            raise DocumentDecodeError(f"Document tree too deep to process: {e}") from e

        result: Dict[str, Any] = {
            "version": stream.version,
            "fileType": file_type.value,
            "document": document,
        }

        if config.include_blobs:
            result["blobs"] = process_blobs(blobs)

        if config.inspect_images:
            images = describe_image_chunks(stream)
            if images:
                self.logger.info(f"{len(images)} embedded image chunks")
            result["images"] = [info.to_dict() for info in images]

        return result


__all__ = ['FigConfig', 'FigHandler']
