# figextract/core/processor/fig_helper/fig_vector_network.py
"""
Vector Network Blob Decoder

Binary layout (all little-endian):

    Header (12 bytes): vertexCount u32, segmentCount u32, regionCount u32

    Vertex (12 bytes):  styleID u32, x f32, y f32

    Segment (28 bytes): styleID u32,
                        startVertex u32, startDx f32, startDy f32,
                        endVertex u32, endDx f32, endDy f32

    Region (8 bytes + loops):
        packed u32   - bit 0: winding rule (1 = NONZERO, 0 = ODD)
                       bits 1-31: styleID
        loopCount u32
        per loop: indexCount u32, then indexCount segment indices (u32)

Counts come straight from the blob, so each one is checked against the
bytes that remain before any record is read.
"""
import struct
import logging
from typing import Any, Dict, List, Optional

from figextract.core.processor.fig_helper.fig_constants import (
    LOOP_HEADER_SIZE,
    REGION_HEADER_SIZE,
    SEGMENT_RECORD_SIZE,
    VERTEX_RECORD_SIZE,
    WINDING_NONZERO,
    WINDING_ODD,
    WINDING_RULE_BIT,
)
from figextract.core.processor.fig_helper.fig_reader import (
    ByteCursor,
    ShortReadError,
    finite_or_none,
)

logger = logging.getLogger("document-processor.FIG")

_HEADER = struct.Struct('<III')
_VERTEX = struct.Struct('<Iff')
_SEGMENT = struct.Struct('<IIffIff')
_REGION = struct.Struct('<II')


class _InvalidIndex(Exception):
    pass


def _read_vertices(cursor: ByteCursor, count: int) -> List[Dict[str, Any]]:
    cursor.ensure(count * VERTEX_RECORD_SIZE)

    vertices = []
    for _ in range(count):
        style_id, x, y = cursor.read_struct(_VERTEX)
        vertices.append({
            'styleID': style_id,
            'x': finite_or_none(x),
            'y': finite_or_none(y),
        })
    return vertices


def _read_segments(cursor: ByteCursor, count: int, vertex_count: int) -> List[Dict[str, Any]]:
    cursor.ensure(count * SEGMENT_RECORD_SIZE)

    segments = []
    for i in range(count):
        style_id, start, start_dx, start_dy, end, end_dx, end_dy = cursor.read_struct(_SEGMENT)

        if start >= vertex_count or end >= vertex_count:
            raise _InvalidIndex(
                f"segment {i} references vertex {max(start, end)}, only {vertex_count} vertices"
            )

        segments.append({
            'styleID': style_id,
            'start': {
                'vertex': start,
                'dx': finite_or_none(start_dx),
                'dy': finite_or_none(start_dy),
            },
            'end': {
                'vertex': end,
                'dx': finite_or_none(end_dx),
                'dy': finite_or_none(end_dy),
            },
        })
    return segments


def _read_regions(cursor: ByteCursor, count: int, segment_count: int) -> List[Dict[str, Any]]:
    cursor.ensure(count * REGION_HEADER_SIZE)

    regions = []
    for _ in range(count):
        packed, loop_count = cursor.read_struct(_REGION)
        cursor.ensure(loop_count * LOOP_HEADER_SIZE)

        loops = []
        for _ in range(loop_count):
            index_count = cursor.read_u32()
            indices = cursor.read_u32_array(index_count)

            for index in indices:
                if index >= segment_count:
                    raise _InvalidIndex(
                        f"loop references segment {index}, only {segment_count} segments"
                    )

            loops.append({'segments': indices})

        regions.append({
            'styleID': packed >> 1,
            'windingRule': WINDING_NONZERO if packed & WINDING_RULE_BIT else WINDING_ODD,
            'loops': loops,
        })
    return regions


def parse_vector_network(data: bytes) -> Optional[Dict[str, Any]]:
    """
    Decode a vector network blob.

    Args:
        data: Blob bytes

    Returns:
        {"vertices": [...], "segments": [...], "regions": [...]}, or None if
        the blob is truncated or references an out-of-range vertex/segment
    """
    cursor = ByteCursor(data)

    try:
        vertex_count, segment_count, region_count = cursor.read_struct(_HEADER)

        vertices = _read_vertices(cursor, vertex_count)
        segments = _read_segments(cursor, segment_count, vertex_count)
        regions = _read_regions(cursor, region_count, segment_count)
    except ShortReadError as e:
        logger.debug(f"Truncated vector network blob: {e}")
        return None
    except _InvalidIndex as e:
        logger.debug(f"Invalid vector network: {e}")
        return None

    return {
        'vertices': vertices,
        'segments': segments,
        'regions': regions,
    }


__all__ = ['parse_vector_network']
