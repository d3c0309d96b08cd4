"""Tests for the reference-preserving JSON transport encoding."""

from __future__ import annotations

import json

import pytest

from result_inspector import create, create_exception
from result_inspector.transport import dumps, from_payload, loads, to_payload
from result_inspector.tree.nodes import ExceptionTreeNode, TreeNode


class TestEncoding:
    def test_payload_shape(self) -> None:
        tree = TreeNode("x", "<enumerable Count: 1>", (TreeNode(None, "1"),))
        payload = to_payload(tree)
        assert payload == {
            "$id": 1,
            "label": "x",
            "value": "<enumerable Count: 1>",
            "children": [{"$id": 2, "label": None, "value": "1", "children": []}],
        }

    def test_shared_node_written_once(self) -> None:
        shared = TreeNode("s", "v")
        payload = to_payload(TreeNode(None, "root", (shared, shared)))
        first, second = payload["children"]
        assert first["$id"] == 2
        assert second == {"$ref": 2}

    def test_built_trees_contain_no_references(self) -> None:
        item = [1]
        text = dumps(create([item, item], "twice"))
        assert "$ref" not in text

    def test_exception_fields(self) -> None:
        node = ExceptionTreeNode("ValueError", "bad", message="bad", source_line=4)
        payload = to_payload(node)
        assert payload["$type"] == "exception"
        assert payload["message"] == "bad"
        assert payload["source_line"] == 4

    def test_dumps_forwards_kwargs(self) -> None:
        text = dumps(TreeNode("x", "1"), indent=2)
        assert text.startswith("{\n")


class TestDecoding:
    def test_restores_tree(self) -> None:
        tree = create({"a": [1, 2]}, "d")
        assert loads(dumps(tree)) == tree

    def test_restores_sharing(self) -> None:
        shared = TreeNode("s", "v")
        restored = from_payload(to_payload(TreeNode(None, "root", (shared, shared))))
        assert restored.children[0] is restored.children[1]

    def test_restores_exception_node(self) -> None:
        node = create_exception(ValueError("bad"))
        restored = loads(dumps(node))
        assert isinstance(restored, ExceptionTreeNode)
        assert restored == node

    def test_unknown_reference(self) -> None:
        payload = {"$id": 1, "label": None, "value": "r", "children": [{"$ref": 9}]}
        with pytest.raises(ValueError, match="unknown node id"):
            from_payload(payload)

    def test_missing_value(self) -> None:
        with pytest.raises(ValueError, match="missing 'value'"):
            from_payload({"$id": 1, "label": "x"})

    def test_non_object_payload(self) -> None:
        with pytest.raises(ValueError, match="must be an object"):
            loads(json.dumps([1, 2]))
