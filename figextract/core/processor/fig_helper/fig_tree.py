# figextract/core/processor/fig_helper/fig_tree.py
"""
Node Tree Builder

The decoded message stores the document as a flat "nodeChanges" list. Each
node carries its own GUID and a parentIndex pointing at its parent:

    {
        "guid": {"sessionID": 0, "localID": 5},
        "parentIndex": {"guid": {"sessionID": 0, "localID": 1}, "position": "!"},
        ...
    }

build_tree() nests the nodes under the root "0:0", ordering siblings by
their position string.
"""
import logging
from collections import defaultdict
from typing import Any, Dict, List, Set, Tuple

from figextract.core.functions.errors import DocumentDecodeError
from figextract.core.processor.fig_helper.fig_constants import ROOT_GUID

logger = logging.getLogger("document-processor.FIG")

PARENT_INDEX_KEY = 'parentIndex'
CHILDREN_KEY = 'children'


def _is_id(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def format_guid(guid: Any, context: str = "node") -> str:
    """
    Format a {"sessionID", "localID"} object as "sessionID:localID".

    Raises:
        DocumentDecodeError: If either id is missing or not a non-negative int
    """
    if not isinstance(guid, dict):
        raise DocumentDecodeError(f"{context} missing guid field")

    session_id = guid.get('sessionID')
    local_id = guid.get('localID')

    if not _is_id(session_id):
        raise DocumentDecodeError(f"Invalid sessionID in {context} guid: {session_id!r}")
    if not _is_id(local_id):
        raise DocumentDecodeError(f"Invalid localID in {context} guid: {local_id!r}")

    return f"{session_id}:{local_id}"


def build_tree(node_changes: List[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Nest a flat node list into a tree.

    Args:
        node_changes: Flat node list from the decoded message

    Returns:
        Root node ("0:0") with nested "children"

    Raises:
        DocumentDecodeError: On malformed GUIDs, a missing root node, a
            parent cycle or a tree deeper than the recursion limit
    """
    nodes: Dict[str, Dict[str, Any]] = {}
    children_of: Dict[str, List[Tuple[str, str]]] = defaultdict(list)

    for node in node_changes:
        if not isinstance(node, dict):
            raise DocumentDecodeError(f"Node is not an object: {type(node).__name__}")
        nodes[format_guid(node.get('guid'))] = node

    for node in node_changes:
        if PARENT_INDEX_KEY not in node:
            continue

        parent_index = node[PARENT_INDEX_KEY]
        parent_guid = format_guid(
            parent_index.get('guid') if isinstance(parent_index, dict) else None,
            context="parentIndex",
        )
        position = parent_index.get('position')
        if not isinstance(position, str):
            position = ""

        children_of[parent_guid].append((position, format_guid(node.get('guid'))))

    # sort() is stable: equal positions keep message order
    for entries in children_of.values():
        entries.sort(key=lambda entry: entry[0])

    if ROOT_GUID not in nodes:
        raise DocumentDecodeError(f"Root node {ROOT_GUID} not found")

    logger.debug(f"Building tree from {len(nodes)} nodes")
    try:
        return _build_node(ROOT_GUID, nodes, children_of, set())
    except RecursionError as e:
        raise DocumentDecodeError(f"Node tree too deep to build: {e}") from e


def _build_node(guid: str,
                nodes: Dict[str, Dict[str, Any]],
                children_of: Dict[str, List[Tuple[str, str]]],
                in_progress: Set[str]) -> Dict[str, Any]:
    if guid not in nodes:
        raise DocumentDecodeError(f"Node {guid} not found")
    if guid in in_progress:
        raise DocumentDecodeError(f"Cycle in node tree at {guid}")

    in_progress.add(guid)

    node = dict(nodes[guid])
    node.pop(PARENT_INDEX_KEY, None)

    children = [
        _build_node(child_guid, nodes, children_of, in_progress)
        for _, child_guid in children_of.get(guid, [])
    ]
    if children:
        node[CHILDREN_KEY] = children

    in_progress.discard(guid)
    return node


__all__ = ['format_guid', 'build_tree']
