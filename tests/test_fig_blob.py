"""Tests for blob payload extraction, role dispatch and output encoding."""

from __future__ import annotations

import base64

import pytest

from figextract.core.functions.errors import BlobExtractionError
from figextract.core.processor.fig_helper.fig_blob import (
    BLOB_PARSERS,
    extract_blob_bytes,
    parse_blob,
    process_blobs,
)
from tests.conftest import TRIANGLE_COMMANDS, vector_network_blob


# ---------------------------------------------------------------------------
# extract_blob_bytes
# ---------------------------------------------------------------------------

class TestExtractBlobBytes:
    def test_base64_string(self):
        assert extract_blob_bytes({"bytes": "SGVsbG8="}) == b"Hello"

    def test_integer_list(self):
        assert extract_blob_bytes({"bytes": [72, 101, 108, 108, 111]}) == b"Hello"

    def test_integer_list_skips_non_integers_and_keeps_low_byte(self):
        assert extract_blob_bytes({"bytes": [72, "x", 1.5, None, 256 + 105]}) == b"Hi"

    def test_raw_bytes(self):
        assert extract_blob_bytes(b"\x01\x02") == b"\x01\x02"
        assert extract_blob_bytes({"bytes": b"\x03"}) == b"\x03"

    def test_missing_bytes_field(self):
        with pytest.raises(BlobExtractionError):
            extract_blob_bytes({"id": 1})

    def test_invalid_base64(self):
        with pytest.raises(BlobExtractionError):
            extract_blob_bytes({"bytes": "not base64!!"})

    def test_unpadded_base64_is_rejected(self):
        with pytest.raises(BlobExtractionError):
            extract_blob_bytes({"bytes": "SGVsbG8"})

    def test_wrong_type(self):
        with pytest.raises(BlobExtractionError):
            extract_blob_bytes({"bytes": 42})

    def test_not_an_object(self):
        with pytest.raises(BlobExtractionError):
            extract_blob_bytes("SGVsbG8=")


# ---------------------------------------------------------------------------
# parse_blob
# ---------------------------------------------------------------------------

def test_registered_roles():
    assert set(BLOB_PARSERS) == {"commands", "vectorNetwork"}


def test_parse_commands_blob():
    blob = {"bytes": base64.b64encode(TRIANGLE_COMMANDS).decode()}
    assert parse_blob("commands", blob) == ["M", 0.0, 0.0, "L", 10.0, 0.0, "L", 5.0, 8.0, "Z"]


def test_parse_vector_network_blob():
    blob = {"bytes": list(vector_network_blob(vertices=[(0, 1.0, 2.0)]))}
    result = parse_blob("vectorNetwork", blob)
    assert result["vertices"] == [{"styleID": 0, "x": 1.0, "y": 2.0}]


def test_unknown_role_returns_none():
    assert parse_blob("fillGeometry", {"bytes": "AAAA"}) is None


def test_unknown_role_still_requires_valid_bytes():
    with pytest.raises(BlobExtractionError):
        parse_blob("somethingElse", {"bytes": "%%%"})


def test_malformed_payload_returns_none():
    assert parse_blob("commands", {"bytes": [7]}) is None


# ---------------------------------------------------------------------------
# process_blobs
# ---------------------------------------------------------------------------

def test_process_blobs_encodes_integer_lists():
    blobs = [{"id": 1, "bytes": [72, 101, 108, 108, 111]}]
    processed = process_blobs(blobs)

    assert processed == [{"id": 1, "bytes": "SGVsbG8="}]
    assert blobs[0]["bytes"] == [72, 101, 108, 108, 111]


def test_process_blobs_keeps_strings_and_other_entries():
    blobs = [{"bytes": "SGVsbG8="}, {"other": True}, 5]
    assert process_blobs(blobs) == blobs


def test_process_blobs_encodes_raw_bytes():
    assert process_blobs([{"bytes": b"Hello"}, b"Hi"]) == [{"bytes": "SGVsbG8="}, {"bytes": "SGk="}]
