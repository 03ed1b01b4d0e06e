# figextract/core/functions/document_decoder.py
"""
BaseDocumentDecoder - Abstract base class for Kiwi message decoding

The schema chunk of a .fig file describes the binary layout of the data
chunk (Kiwi encoding). Decoding it is delegated to an external decoder so
the container logic does not depend on a particular Kiwi implementation.

Pipeline position:
    .fig bytes → chunks → decompress → DocumentDecoder → tree passes

Usage:
    class KiwiDecoder(BaseDocumentDecoder):
        def decode(self, schema_data: bytes, message_data: bytes) -> DecodedDocument:
            schema = kiwi.decode_schema(schema_data)
            return DecodedDocument(message=schema.decode_message(message_data))

        def get_format_name(self) -> str:
            return "Kiwi Decoder"

    # or wrap a plain function
    decoder = CallableDocumentDecoder(my_decode_function)
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List

from figextract.core.functions.errors import DocumentDecodeError, FigError

NODE_CHANGES_KEY = 'nodeChanges'
BLOBS_KEY = 'blobs'


@dataclass
class DecodedDocument:
    """
    Result of decoding the schema and data chunks.

    Attributes:
        message: Decoded Kiwi message (JSON-like dict)
    """
    message: Dict[str, Any] = field(default_factory=dict)

    @property
    def node_changes(self) -> List[Dict[str, Any]]:
        return self.message[NODE_CHANGES_KEY]

    @property
    def blobs(self) -> List[Any]:
        return self.message[BLOBS_KEY]

    def validate(self) -> None:
        """
        Check that the message holds the lists the pipeline needs.

        Raises:
            DocumentDecodeError: If nodeChanges or blobs is missing or not a list
        """
        if not isinstance(self.message, dict):
            raise DocumentDecodeError(
                f"Decoded message is not an object: {type(self.message).__name__}"
            )
        for key in (NODE_CHANGES_KEY, BLOBS_KEY):
            if not isinstance(self.message.get(key), list):
                raise DocumentDecodeError(f"Decoded message has no '{key}' list")


class BaseDocumentDecoder(ABC):
    """
    Abstract base class for schema/message decoders.

    Subclasses must implement:
    - decode(): Decode decompressed schema and data chunks
    - get_format_name(): Return human-readable decoder name
    """

    @abstractmethod
    def decode(self, schema_data: bytes, message_data: bytes) -> DecodedDocument:
        """
        Decode the message chunk using the schema chunk.

        Args:
            schema_data: Decompressed schema chunk
            message_data: Decompressed data chunk

        Returns:
            DecodedDocument

        Raises:
            DocumentDecodeError: If decoding fails
        """
        pass

    @abstractmethod
    def get_format_name(self) -> str:
        pass


class CallableDocumentDecoder(BaseDocumentDecoder):
    """
    Adapter for a plain `(schema_data, message_data) -> dict` function.

    Any exception other than a FigError raised by the function is wrapped
    in DocumentDecodeError.
    """

    def __init__(self, func: Callable[[bytes, bytes], Dict[str, Any]], name: str = ""):
        self._func = func
        self._name = name or getattr(func, "__name__", "callable")

    def decode(self, schema_data: bytes, message_data: bytes) -> DecodedDocument:
        try:
            message = self._func(schema_data, message_data)
        except FigError:
            raise
        except Exception as e:
            raise DocumentDecodeError(f"{self._name} failed to decode message: {e}") from e

        if isinstance(message, DecodedDocument):
            return message
        return DecodedDocument(message=message)

    def get_format_name(self) -> str:
        return f"Callable Decoder ({self._name})"


__all__ = [
    'BaseDocumentDecoder',
    'CallableDocumentDecoder',
    'DecodedDocument',
    'NODE_CHANGES_KEY',
    'BLOBS_KEY',
]
