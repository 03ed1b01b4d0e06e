# figextract/core/processor/fig_helper/fig_blob.py
"""
Blob Decoding and Encoding

The decoded message carries a root-level "blobs" list. Each blob holds its
payload in a "bytes" field, either as a base64 string or as a list of
integers (depending on the schema decoder). Nodes reference blobs by index
through fields named "<role>Blob"; the role selects the parser.

Registered roles:
- "commands"      -> parse_commands
- "vectorNetwork" -> parse_vector_network
"""
import base64
import binascii
import logging
from typing import Any, Callable, Dict, List, Optional

from figextract.core.functions.errors import BlobExtractionError
from figextract.core.processor.fig_helper.fig_commands import parse_commands
from figextract.core.processor.fig_helper.fig_constants import (
    BLOB_TYPE_COMMANDS,
    BLOB_TYPE_VECTOR_NETWORK,
)
from figextract.core.processor.fig_helper.fig_vector_network import parse_vector_network

logger = logging.getLogger("document-processor.FIG")

BLOB_BYTES_KEY = 'bytes'

BLOB_PARSERS: Dict[str, Callable[[bytes], Optional[Any]]] = {
    BLOB_TYPE_COMMANDS: parse_commands,
    BLOB_TYPE_VECTOR_NETWORK: parse_vector_network,
}


def _is_byte_value(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def extract_blob_bytes(blob: Any) -> bytes:
    """
    Get the raw payload of a blob.

    Args:
        blob: {"bytes": base64 str | list of ints}, or raw bytes

    Returns:
        Payload bytes

    Raises:
        BlobExtractionError: If the payload is missing, not valid base64,
            or of an unsupported type
    """
    if isinstance(blob, (bytes, bytearray, memoryview)):
        return bytes(blob)

    if not isinstance(blob, dict):
        raise BlobExtractionError(f"Blob is not an object: {type(blob).__name__}")

    if BLOB_BYTES_KEY not in blob:
        raise BlobExtractionError("Blob missing bytes field")

    value = blob[BLOB_BYTES_KEY]

    if isinstance(value, (bytes, bytearray)):
        return bytes(value)

    if isinstance(value, str):
        try:
            return base64.b64decode(value, validate=True)
        except (binascii.Error, ValueError) as e:
            raise BlobExtractionError(f"Failed to decode base64: {e}") from e

    if isinstance(value, list):
        # Non-integer entries are dropped, integers keep their low byte
        return bytes(v & 0xFF for v in value if _is_byte_value(v))

    raise BlobExtractionError(
        f"Blob bytes field is neither string nor array: {type(value).__name__}"
    )


def parse_blob(blob_type: str, blob: Any) -> Optional[Any]:
    """
    Decode a blob for the role named by its referencing field.

    Bytes are extracted before the role is looked up, so a malformed
    payload is an error even for roles without a parser.

    Args:
        blob_type: Field name without the "Blob" suffix
        blob: Blob entry from the root "blobs" list

    Returns:
        Decoded structure, or None for unknown roles and malformed data

    Raises:
        BlobExtractionError: If the payload cannot be extracted
    """
    data = extract_blob_bytes(blob)

    parser = BLOB_PARSERS.get(blob_type)
    if parser is None:
        logger.debug(f"No parser for blob type '{blob_type}' ({len(data)} bytes)")
        return None

    return parser(data)


def process_blobs(blobs: List[Any]) -> List[Any]:
    """
    Normalize the root blob list for output.

    Integer-list and raw byte payloads become standard base64 strings. The
    input list and its entries are not modified.
    """
    processed = []
    for blob in blobs:
        if isinstance(blob, (bytes, bytearray)):
            blob = {BLOB_BYTES_KEY: bytes(blob)}

        if isinstance(blob, dict) and isinstance(blob.get(BLOB_BYTES_KEY), (list, bytes, bytearray)):
            data = extract_blob_bytes(blob)
            blob = dict(blob)
            blob[BLOB_BYTES_KEY] = base64.b64encode(data).decode('ascii')

        processed.append(blob)
    return processed


__all__ = [
    'BLOB_PARSERS',
    'extract_blob_bytes',
    'parse_blob',
    'process_blobs',
]
