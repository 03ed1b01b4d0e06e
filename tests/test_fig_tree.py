"""Tests for building the nested node tree."""

from __future__ import annotations

import pytest

from figextract.core.functions.errors import DocumentDecodeError
from figextract.core.processor.fig_helper.fig_tree import build_tree, format_guid
from tests.conftest import guid, node


def test_format_guid():
    assert format_guid({"sessionID": 1, "localID": 42}) == "1:42"


@pytest.mark.parametrize("bad", [None, {}, {"sessionID": 1}, {"sessionID": "1", "localID": 2},
                                 {"sessionID": -1, "localID": 2}, {"sessionID": True, "localID": 2}])
def test_format_guid_rejects_malformed(bad):
    with pytest.raises(DocumentDecodeError):
        format_guid(bad)


def test_children_sorted_by_position():
    nodes = [
        node(0, "Root"),
        node(1, "Second", parent=0, position="b"),
        node(2, "First", parent=0, position="a"),
        node(3, "Grandchild", parent=1, position="!"),
    ]
    root = build_tree(nodes)

    assert root["name"] == "Root"
    assert [child["name"] for child in root["children"]] == ["First", "Second"]
    assert root["children"][1]["children"][0]["name"] == "Grandchild"


def test_equal_positions_keep_message_order():
    nodes = [node(0, "Root"), node(1, "A", parent=0), node(2, "B", parent=0), node(3, "C", parent=0)]
    root = build_tree(nodes)
    assert [child["name"] for child in root["children"]] == ["A", "B", "C"]


def test_parent_index_removed_and_leaves_have_no_children():
    root = build_tree([node(0, "Root"), node(1, "Leaf", parent=0, position="a")])
    leaf = root["children"][0]

    assert "parentIndex" not in leaf
    assert "children" not in leaf


def test_input_nodes_are_not_mutated():
    nodes = [node(0, "Root"), node(1, "Leaf", parent=0, position="a")]
    build_tree(nodes)
    assert "parentIndex" in nodes[1]
    assert "children" not in nodes[0]


def test_orphans_are_dropped():
    root = build_tree([node(0, "Root"), node(5, "Orphan", parent=99)])
    assert "children" not in root


def test_missing_root():
    with pytest.raises(DocumentDecodeError):
        build_tree([node(1, "Page")])


def test_node_without_guid():
    with pytest.raises(DocumentDecodeError):
        build_tree([node(0, "Root"), {"name": "Nameless"}])


def test_parent_index_without_guid():
    bad = {"guid": guid(0, 1), "parentIndex": {"position": "a"}}
    with pytest.raises(DocumentDecodeError):
        build_tree([node(0, "Root"), bad])


def test_cycle_through_root():
    with pytest.raises(DocumentDecodeError):
        build_tree([node(0, "Root", parent=1), node(1, "Child", parent=0)])


def test_too_deep_chain_is_a_decode_error():
    depth = 5000
    nodes = [node(0, "Root")] + [
        node(i, f"Level {i}", parent=i - 1, position="a") for i in range(1, depth)
    ]
    with pytest.raises(DocumentDecodeError):
        build_tree(nodes)
