"""Tests for container chunk framing."""

from __future__ import annotations

import pytest

from figextract.core.functions.errors import (
    FileTooSmallError,
    IncompleteChunkError,
    NotEnoughChunksError,
)
from figextract.core.processor.fig_helper.fig_chunks import extract_chunks
from figextract.core.processor.fig_helper.fig_reader import ByteCursor, ShortReadError
from tests.conftest import FIGMA_MAGIC, build_container, u32


def test_reads_version_and_chunks():
    data = build_container([b"schema", b"data", b"img1", b"img2"], version=101)
    stream = extract_chunks(data)

    assert stream.version == 101
    assert stream.chunks == [b"schema", b"data", b"img1", b"img2"]
    assert stream.schema_chunk == b"schema"
    assert stream.data_chunk == b"data"
    assert stream.image_chunks == [b"img1", b"img2"]


def test_empty_chunks_are_allowed():
    stream = extract_chunks(build_container([b"", b""]))
    assert stream.chunks == [b"", b""]


def test_chunk_order_and_lengths_roundtrip():
    payloads = [bytes([i]) * (i * 7) for i in range(5)]
    data = build_container(payloads)
    assert extract_chunks(data).chunks == payloads


def test_too_small():
    with pytest.raises(FileTooSmallError) as exc_info:
        extract_chunks(FIGMA_MAGIC + b"\x01\x00")
    assert exc_info.value.expected == 12
    assert exc_info.value.actual == 10


def test_header_only_has_no_chunks():
    with pytest.raises(NotEnoughChunksError) as exc_info:
        extract_chunks(FIGMA_MAGIC + u32(48))
    assert exc_info.value.expected == 2
    assert exc_info.value.actual == 0


def test_single_chunk():
    with pytest.raises(NotEnoughChunksError) as exc_info:
        extract_chunks(build_container([b"schema"]))
    assert exc_info.value.actual == 1


def test_incomplete_chunk_reports_offsets():
    data = FIGMA_MAGIC + u32(48) + u32(100) + b"12345"
    with pytest.raises(IncompleteChunkError) as exc_info:
        extract_chunks(data)

    error = exc_info.value
    assert error.offset == 12
    assert error.expected == 100
    assert error.actual == 5


def test_incomplete_second_chunk_offset():
    data = FIGMA_MAGIC + u32(48) + u32(3) + b"abc" + u32(10) + b"xy"
    with pytest.raises(IncompleteChunkError) as exc_info:
        extract_chunks(data)
    assert exc_info.value.offset == 19
    assert exc_info.value.actual == 2


def test_huge_declared_length_is_rejected_before_slicing():
    data = FIGMA_MAGIC + u32(48) + u32(0xFFFFFFFF) + b"x"
    with pytest.raises(IncompleteChunkError) as exc_info:
        extract_chunks(data)
    assert exc_info.value.expected == 0xFFFFFFFF


def test_trailing_partial_header_is_ignored():
    data = build_container([b"schema", b"data"]) + b"\x01\x02\x03"
    stream = extract_chunks(data)
    assert len(stream.chunks) == 2


class TestByteCursor:
    def test_reads_little_endian(self):
        cursor = ByteCursor(b"\x01\x00\x00\x00\x00\x00\x80\x3f")
        assert cursor.read_u32() == 1
        assert cursor.read_f32() == 1.0
        assert cursor.at_end()

    def test_short_read(self):
        cursor = ByteCursor(b"\x01\x02")
        with pytest.raises(ShortReadError) as exc_info:
            cursor.read_u32()
        assert exc_info.value.expected == 4
        assert exc_info.value.actual == 2
        assert cursor.offset == 0

    def test_u32_array_checks_full_size_first(self):
        cursor = ByteCursor(u32(1) + u32(2))
        with pytest.raises(ShortReadError):
            cursor.read_u32_array(1_000_000_000)
        assert cursor.read_u32_array(2) == [1, 2]
