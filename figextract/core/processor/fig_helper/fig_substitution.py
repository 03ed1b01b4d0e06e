# figextract/core/processor/fig_helper/fig_substitution.py
"""
Blob Reference Substitution

Replaces "<role>Blob": <index> fields in the document tree with the decoded
blob under the base name, e.g.

    {"commandsBlob": 3}  ->  {"commands": ["M", 0.0, 0.0, "L", 10.0, 0.0, "Z"]}

References that are out of range, or whose blob cannot be decoded into a
structure, are left as they are.
"""
import logging
from typing import Any, List, Tuple

from figextract.core.processor.fig_helper.fig_blob import parse_blob
from figextract.core.processor.fig_helper.fig_constants import BLOB_FIELD_SUFFIX

logger = logging.getLogger("document-processor.FIG")


def _blob_index(value: Any) -> int:
    if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
        return value
    return -1


def substitute_blobs(tree: Any, blobs: List[Any]) -> None:
    """
    Substitute blob references throughout the tree, in place.

    Args:
        tree: Decoded document (dicts, lists and scalars)
        blobs: Root-level blob list from the decoded message

    Raises:
        BlobExtractionError: If a referenced blob has an unreadable payload
    """
    if isinstance(tree, dict):
        replacements: List[Tuple[str, str, Any]] = []

        for key, value in tree.items():
            if not key.endswith(BLOB_FIELD_SUFFIX):
                continue

            index = _blob_index(value)
            if index < 0 or index >= len(blobs):
                continue

            base_name = key[:-len(BLOB_FIELD_SUFFIX)]
            parsed = parse_blob(base_name, blobs[index])
            if parsed is not None:
                replacements.append((key, base_name, parsed))

        for old_key, new_key, parsed in replacements:
            del tree[old_key]
            tree[new_key] = parsed
            logger.debug(f"Substituted {old_key} -> {new_key}")

        for value in tree.values():
            substitute_blobs(value, blobs)

    elif isinstance(tree, list):
        for item in tree:
            substitute_blobs(item, blobs)


__all__ = ['substitute_blobs']
