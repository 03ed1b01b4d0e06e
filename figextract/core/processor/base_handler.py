# figextract/core/processor/base_handler.py
"""
BaseHandler - Abstract base class for design-file handlers

Holds the configuration dictionary and the message decoder passed in at
creation, and exposes them to format-specific handlers. The decoder is
resolved lazily: an explicit instance wins, then the "document_decoder"
config entry, then _create_document_decoder().

Usage Example:
    class FigHandler(BaseHandler):
        def convert(self, data: bytes) -> Dict[str, Any]:
            # Access self.config, self.document_decoder, self.logger
            ...
"""
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional, Union

from figextract.core.functions.document_decoder import BaseDocumentDecoder

logger = logging.getLogger("document-processor")


class BaseHandler(ABC):
    """
    Abstract base class for design-file handlers.

    Attributes:
        config: Configuration dictionary
        document_decoder: Message decoder (lazy-initialized, may be None)
        logger: Logging instance
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        document_decoder: Optional[BaseDocumentDecoder] = None
    ):
        """
        Initialize BaseHandler.

        Args:
            config: Configuration dictionary
            document_decoder: Decoder for the schema/data chunks
        """
        self._config = config or {}
        self._document_decoder = document_decoder
        self._logger = logging.getLogger(f"document-processor.{self.__class__.__name__}")

    def _create_document_decoder(self) -> Optional[BaseDocumentDecoder]:
        """
        Create the default decoder.

        Override in subclasses that ship a built-in decoder.
        """
        return None

    @property
    def config(self) -> Dict[str, Any]:
        """Configuration dictionary."""
        return self._config

    @property
    def document_decoder(self) -> Optional[BaseDocumentDecoder]:
        if self._document_decoder is None:
            if "document_decoder" in self._config:
                self._document_decoder = self._config["document_decoder"]
            else:
                self._document_decoder = self._create_document_decoder()
        return self._document_decoder

    @property
    def logger(self) -> logging.Logger:
        """Logger instance."""
        return self._logger

    @abstractmethod
    def convert(self, data: bytes, **kwargs) -> Dict[str, Any]:
        """
        Convert raw file bytes into a JSON-ready document.

        Args:
            data: Raw file bytes
            **kwargs: Additional options

        Returns:
            Converted document
        """
        pass

    def convert_file(self, path: Union[str, Path], **kwargs) -> Dict[str, Any]:
        """
        Read a file from disk and convert it.

        Args:
            path: File path

        Returns:
            Converted document
        """
        data = Path(path).read_bytes()
        self._logger.debug(f"Read {len(data)} bytes from {path}")
        return self.convert(data, **kwargs)


__all__ = ["BaseHandler"]
