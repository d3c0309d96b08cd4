"""ExceptionAdapter: builds the root node for an exception raised by a submission.

The tree itself comes from ValueFormatter at depth 0, so an exception is shown
exactly as it would be if it were an ordinary result (type name, message,
``args``, ``cause``, ``context``, filtered ``stack_trace`` and any public
attributes).  On top of that the root carries the raw message and the line of
the submission that raised, for hosts that want to highlight it.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from result_inspector.formatting.builder import ValueFormatter
from result_inspector.formatting.stack import find_source_line
from result_inspector.tree.nodes import ExceptionTreeNode

__all__ = ["ExceptionAdapter"]


@dataclass
class ExceptionAdapter:
    formatter: ValueFormatter = field(default_factory=ValueFormatter)

    def build(self, error: BaseException) -> ExceptionTreeNode:
        root = self.formatter.build(error, None, 0)
        return ExceptionTreeNode(
            label=root.label,
            value=root.value,
            children=root.children,
            message=str(error),
            source_line=find_source_line(error, self.formatter.script_boundary),
        )
