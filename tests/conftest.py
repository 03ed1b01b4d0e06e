"""Shared test fixtures and byte builders."""

from __future__ import annotations

import copy
import io
import struct
import zipfile
import zlib

import pytest
import zstandard
from PIL import Image

from figextract.core.functions.document_decoder import BaseDocumentDecoder, DecodedDocument


FIGMA_MAGIC = b"fig-kiwi"
FIGJAM_MAGIC = b"fig-jam."


# ---------------------------------------------------------------------------
# Byte builders
# ---------------------------------------------------------------------------

def u32(value: int) -> bytes:
    return struct.pack("<I", value)


def f32(value: float) -> bytes:
    return struct.pack("<f", value)


def build_container(chunks, magic: bytes = FIGMA_MAGIC, version: int = 48) -> bytes:
    """Magic + version + length-prefixed chunks."""
    out = bytearray(magic)
    out += u32(version)
    for chunk in chunks:
        out += u32(len(chunk))
        out += chunk
    return bytes(out)


def deflate_raw(data: bytes) -> bytes:
    compressor = zlib.compressobj(wbits=-15)
    return compressor.compress(data) + compressor.flush()


def zstd_compress(data: bytes, write_content_size: bool = True) -> bytes:
    return zstandard.ZstdCompressor(write_content_size=write_content_size).compress(data)


def zip_wrap(entries) -> bytes:
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for name, data in entries.items():
            archive.writestr(name, data)
    return buffer.getvalue()


def png_bytes(width: int = 4, height: int = 3) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (width, height), (255, 0, 0)).save(buffer, format="PNG")
    return buffer.getvalue()


def commands_blob(*ops) -> bytes:
    """ops: (opcode, *floats) tuples."""
    out = bytearray()
    for opcode, *values in ops:
        out.append(opcode)
        for value in values:
            out += f32(value)
    return bytes(out)


def vector_network_blob(vertices=(), segments=(), regions=()) -> bytes:
    """
    vertices: (styleID, x, y)
    segments: (styleID, start, start_dx, start_dy, end, end_dx, end_dy)
    regions:  (packed, [[segment indices], ...])
    """
    out = bytearray(u32(len(vertices)) + u32(len(segments)) + u32(len(regions)))
    for style_id, x, y in vertices:
        out += struct.pack("<Iff", style_id, x, y)
    for style_id, start, sdx, sdy, end, edx, edy in segments:
        out += struct.pack("<IIffIff", style_id, start, sdx, sdy, end, edx, edy)
    for packed, loops in regions:
        out += u32(packed) + u32(len(loops))
        for indices in loops:
            out += u32(len(indices))
            for index in indices:
                out += u32(index)
    return bytes(out)


def guid(session_id: int, local_id: int) -> dict:
    return {"sessionID": session_id, "localID": local_id}


def node(local_id: int, name: str, parent=None, position: str = "", **fields) -> dict:
    result = {"guid": guid(0, local_id), "name": name}
    if parent is not None:
        result["parentIndex"] = {"guid": guid(0, parent), "position": position}
    result.update(fields)
    return result


# ---------------------------------------------------------------------------
# Sample document
# ---------------------------------------------------------------------------

TRIANGLE_COMMANDS = commands_blob((1, 0.0, 0.0), (2, 10.0, 0.0), (2, 5.0, 8.0), (0,))

SAMPLE_MESSAGE = {
    "nodeChanges": [
        node(0, "Document", type="DOCUMENT"),
        node(1, "Page 1", parent=0, position="!", type="CANVAS"),
        node(
            2, "Triangle", parent=1, position="b", type="VECTOR",
            transform={"m00": 1.0, "m01": 0.0, "m02": 248.0, "m10": 0.0, "m11": 1.0, "m12": -7.0},
            fillGeometry=[{"windingRule": "NONZERO", "commandsBlob": 0}],
        ),
        node(
            3, "Photo", parent=1, position="a", type="RECTANGLE",
            fillPaints=[{"type": "IMAGE", "image": {"hash": [96, 73, 161, 122]}}],
        ),
    ],
    "blobs": [
        {"bytes": list(TRIANGLE_COMMANDS)},
    ],
}


class FakeDecoder(BaseDocumentDecoder):
    """Returns a fixed message and records what it was given."""

    def __init__(self, message=None):
        self.message = copy.deepcopy(SAMPLE_MESSAGE if message is None else message)
        self.calls = []

    def decode(self, schema_data: bytes, message_data: bytes) -> DecodedDocument:
        self.calls.append((schema_data, message_data))
        return DecodedDocument(message=copy.deepcopy(self.message))

    def get_format_name(self) -> str:
        return "Fake Decoder"


@pytest.fixture
def sample_message() -> dict:
    return copy.deepcopy(SAMPLE_MESSAGE)


@pytest.fixture
def fake_decoder() -> FakeDecoder:
    return FakeDecoder()


@pytest.fixture
def deflate_container() -> bytes:
    return build_container([deflate_raw(b"schema"), deflate_raw(b"message")])


@pytest.fixture
def zstd_container() -> bytes:
    return build_container([zstd_compress(b"schema"), zstd_compress(b"message")])
