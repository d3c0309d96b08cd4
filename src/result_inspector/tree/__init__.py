"""Tree subpackage: the output data types and their text rendering.

Re-exports:
- TreeNode: immutable node (label, value, children)
- ExceptionTreeNode: TreeNode root for exceptions, with message and source_line
- TreePrinter: indented text rendering of a tree
"""

from result_inspector.tree.nodes import ExceptionTreeNode, TreeNode
from result_inspector.tree.printer import TreePrinter

__all__ = ["ExceptionTreeNode", "TreeNode", "TreePrinter"]
