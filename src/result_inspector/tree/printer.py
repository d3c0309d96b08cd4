"""Indented text rendering of a TreeNode tree, for diagnostics and tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from result_inspector.tree.nodes import TreeNode

_INDENT = "  "


class TreePrinter:
    """Renders a tree depth-first, one node per line.

    Each line is indented two spaces per level and reads ``label = value``.
    The ``" = "`` separator appears only when the node has both a label and a
    value; every line, including the last, ends with a newline.

    Example::
        TreePrinter().render(create({"a": 1}, "d"))
        # 'd = <enumerable Count: 1>\\n  <enumerable Count: 2>\\n    a\\n    1\\n'
    """

    def render(self, node: TreeNode) -> str:
        lines: list[str] = []
        self._render_into(node, 0, lines)
        return "".join(lines)

    def _render_into(self, node: TreeNode, level: int, lines: list[str]) -> None:
        parts = [_INDENT * level]
        if node.label is not None:
            parts.append(node.label)
            if node.value is not None:
                parts.append(" = ")
        if node.value is not None:
            parts.append(node.value)
        parts.append("\n")
        lines.append("".join(parts))
        for child in node.children:
            self._render_into(child, level + 1, lines)
