"""JSON transport encoding for trees delivered to another process.

Encoding is reference-preserving: each node object is written in full the
first time it is met, tagged with ``"$id"``, and every later occurrence of the
same object is written as ``{"$ref": <id>}``.  Trees produced by a single build
never share nodes, so references only appear for trees a caller assembled
from shared parts.

Payload shape::

    {"$id": 1, "label": "x", "value": "<enumerable Count: 1>",
     "children": [{"$id": 2, "label": null, "value": "1", "children": []}]}

Exception roots additionally carry ``"$type": "exception"``, ``"message"`` and
``"source_line"``.
"""

from __future__ import annotations

import json
from typing import Any

from result_inspector.tree.nodes import ExceptionTreeNode, TreeNode

__all__ = ["dumps", "from_payload", "loads", "to_payload"]

_EXCEPTION_TYPE = "exception"


def to_payload(node: TreeNode) -> dict[str, Any]:
    """Encode ``node`` and its subtree as JSON-compatible dicts."""
    ids: dict[int, int] = {}

    def encode(current: TreeNode) -> dict[str, Any]:
        known = ids.get(id(current))
        if known is not None:
            return {"$ref": known}
        ident = ids[id(current)] = len(ids) + 1
        payload: dict[str, Any] = {
            "$id": ident,
            "label": current.label,
            "value": current.value,
            "children": [encode(child) for child in current.children],
        }
        if isinstance(current, ExceptionTreeNode):
            payload["$type"] = _EXCEPTION_TYPE
            payload["message"] = current.message
            payload["source_line"] = current.source_line
        return payload

    return encode(node)


def from_payload(payload: dict[str, Any]) -> TreeNode:
    """Decode a payload produced by ``to_payload``, restoring shared nodes.

    Raises:
        ValueError: If the payload is malformed or references an unknown id.
    """
    nodes: dict[int, TreeNode] = {}

    def decode(current: Any) -> TreeNode:
        if not isinstance(current, dict):
            msg = f"node payload must be an object, got {type(current).__name__}"
            raise ValueError(msg)
        if "$ref" in current:
            try:
                return nodes[current["$ref"]]
            except KeyError:
                msg = f"reference to unknown node id {current['$ref']!r}"
                raise ValueError(msg) from None
        if "value" not in current:
            msg = "node payload is missing 'value'"
            raise ValueError(msg)

        children = tuple(decode(child) for child in current.get("children", ()))
        node: TreeNode
        if current.get("$type") == _EXCEPTION_TYPE:
            node = ExceptionTreeNode(
                label=current.get("label"),
                value=current["value"],
                children=children,
                message=current.get("message", ""),
                source_line=int(current.get("source_line", 0)),
            )
        else:
            node = TreeNode(current.get("label"), current["value"], children)
        if "$id" in current:
            nodes[current["$id"]] = node
        return node

    return decode(payload)


def dumps(node: TreeNode, **kwargs: Any) -> str:
    """Serialise ``node`` to a JSON string; ``kwargs`` go to ``json.dumps``."""
    return json.dumps(to_payload(node), **kwargs)


def loads(text: str) -> TreeNode:
    return from_payload(json.loads(text))
