"""TreeNode and ExceptionTreeNode: the immutable output of ValueFormatter.

A tree mirrors the part of a runtime value reachable from the root within the
configured depth.  Nodes are built bottom-up, never mutated afterwards, and
never shared between two builds.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

__all__ = ["ExceptionTreeNode", "TreeNode"]


@dataclass(frozen=True, slots=True)
class TreeNode:
    """A node in the displayable tree of a runtime value.

    Attributes:
        label:    Name shown before the value (member name, caller-supplied
                  label, or an exception's qualified type name).  ``None`` for
                  sequence elements and unlabelled roots.
        value:    Display text for the value.
        children: Child nodes in display order.  An empty tuple marks a leaf.
    """

    label: str | None
    value: str
    children: tuple[TreeNode, ...] = ()

    @property
    def has_children(self) -> bool:
        return len(self.children) > 0

    def __str__(self) -> str:
        from result_inspector.tree.printer import TreePrinter

        return TreePrinter().render(self)

    # Binding layers that expect an observable object may attach here.  Trees
    # never change, so nothing is emitted and no subscriber is retained.

    def subscribe(self, callback: Callable[..., Any]) -> None:
        """Accept a change listener without storing it."""

    def unsubscribe(self, callback: Callable[..., Any]) -> None:
        """Counterpart of ``subscribe``; a no-op."""


@dataclass(frozen=True, slots=True)
class ExceptionTreeNode(TreeNode):
    """Root node produced for a top-level exception.

    Attributes:
        message:     ``str(exception)``.
        source_line: Line number of the innermost traceback frame in script
                     code, or 0 when no frame could be attributed to a script.
    """

    message: str = ""
    source_line: int = 0
