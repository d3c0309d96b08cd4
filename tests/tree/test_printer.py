"""Tests for TreePrinter: indentation, separator rules and traversal order."""

from __future__ import annotations

import pytest

from result_inspector.tree.nodes import TreeNode
from result_inspector.tree.printer import TreePrinter


@pytest.fixture
def printer() -> TreePrinter:
    return TreePrinter()


class TestLineFormat:
    def test_label_and_value(self, printer: TreePrinter) -> None:
        assert printer.render(TreeNode("x", "42")) == "x = 42\n"

    def test_value_only(self, printer: TreePrinter) -> None:
        assert printer.render(TreeNode(None, "42")) == "42\n"

    def test_empty_value_keeps_separator(self, printer: TreePrinter) -> None:
        # Both fields are present, so the separator is written.
        assert printer.render(TreeNode("cause", "")) == "cause = \n"


class TestTraversal:
    def test_two_spaces_per_level(self, printer: TreePrinter) -> None:
        tree = TreeNode(
            "root",
            "r",
            (TreeNode("a", "1", (TreeNode("b", "2"),)),),
        )
        assert printer.render(tree) == "root = r\n  a = 1\n    b = 2\n"

    def test_preorder_sibling_order(self, printer: TreePrinter) -> None:
        tree = TreeNode(
            None,
            "<enumerable Count: 2>",
            (
                TreeNode(None, "first", (TreeNode("inner", "x"),)),
                TreeNode(None, "second"),
            ),
        )
        assert printer.render(tree).splitlines() == [
            "<enumerable Count: 2>",
            "  first",
            "    inner = x",
            "  second",
        ]

    def test_every_line_ends_with_newline(self, printer: TreePrinter) -> None:
        text = printer.render(TreeNode("a", "1", (TreeNode("b", "2"),)))
        assert text.endswith("\n")
        assert text.count("\n") == 2
