"""ValueFormatter: converts any runtime value into a bounded TreeNode tree.

Dispatch happens once per value through ``classify``:

- SCALAR values become leaves.
- SEQUENCE values are handed to SequenceFormatter.
- ERROR and COMPOSITE values get a header node (exceptions are labelled with
  their qualified type name and show their message) and one child per member,
  built in member context.

Member context is how a composite's members are built: the member is read
from its owner, and a failing read becomes a ``Threw <Kind>`` node instead of
aborting the whole build.

Depth accounting:
    The root is built at depth 0.  A value at depth ``d`` is expanded only
    while ``d + 1 < max_depth``; past that it is reduced to its header.  No
    cycle detection is attempted: self-referencing values are cut off by the
    depth cap, and so are acyclic values nested deeper than the cap.
"""

from __future__ import annotations

import logging
from dataclasses import InitVar, dataclass, field
from typing import Any

from result_inspector.config import InspectorConfig
from result_inspector.formatting.classify import ValueKind, classify, is_simple_type
from result_inspector.formatting.members import (
    STACK_TRACE,
    Member,
    MemberRegistry,
    default_registry,
)
from result_inspector.formatting.sequences import SequenceFormatter
from result_inspector.formatting.stack import (
    FilenamePrefixBoundary,
    format_stack_trace,
)
from result_inspector.formatting.text import (
    format_text,
    qualified_name,
    short_name,
    truncate,
)
from result_inspector.protocols import ScriptBoundary
from result_inspector.tree.nodes import TreeNode

__all__ = ["NULL_TEXT", "ValueFormatter"]

logger = logging.getLogger(__name__)

NULL_TEXT = "<null>"


@dataclass
class ValueFormatter:
    """Builds the displayable tree of a runtime value.

    A formatter holds no per-build state, so one instance may serve any number
    of independent builds.

    Attributes:
        config:   Depth, text and sequence limits.
        registry: Member tables used to expand composite values.
        boundary: Script-frame detector for ``stack_trace`` members.  Defaults
                  to a FilenamePrefixBoundary built from ``config``; the
                  resolved detector is kept as ``script_boundary``.

    Example::
        formatter = ValueFormatter()
        tree = formatter.build([1, 2, 3], "nums")
        # tree: nums = <enumerable Count: 3> -> [1, 2, 3]
    """

    config: InspectorConfig = field(default_factory=InspectorConfig)
    registry: MemberRegistry = field(default=default_registry)
    boundary: InitVar[ScriptBoundary | None] = None
    script_boundary: ScriptBoundary = field(init=False)

    def __post_init__(self, boundary: ScriptBoundary | None) -> None:
        if boundary is None:
            boundary = FilenamePrefixBoundary(self.config.script_filename_prefix)
        self.script_boundary = boundary
        self._sequences = SequenceFormatter(self.build, self.config)

    def build(
        self,
        value: Any,
        label: str | None = None,
        depth: int = 0,
        member: Member | None = None,
    ) -> TreeNode:
        """Build the node for ``value`` at ``depth``.

        Args:
            value:  The value to format.  In member context this is the owner
                    the member is read from.
            label:  Label for the node.  Exceptions replace it with their
                    qualified type name.
            depth:  Depth of the node being built (0 for the root).
            member: When given, build the node for this member of ``value``.

        Returns:
            A freshly built TreeNode.
        """
        if member is not None:
            return self._build_member(value, member, depth)

        if value is None:
            return TreeNode(label, NULL_TEXT)

        if isinstance(value, str):
            if self.config.truncate_root_text:
                return TreeNode(label, truncate(value, self.config.max_string_length))
            return TreeNode(label, value)

        kind = classify(value)
        if depth + 1 >= self.config.max_depth or kind is ValueKind.SCALAR:
            return self._header(value, label, kind)

        if kind is ValueKind.SEQUENCE:
            return self._sequences.build(value, label, depth)

        header = self._header(value, label, kind)
        children = tuple(
            self.build(value, None, depth + 1, member=child)
            for child in self.registry.members_for(value)
        )
        return TreeNode(header.label, header.value, children)

    def _header(self, value: Any, label: str | None, kind: ValueKind) -> TreeNode:
        limit = self.config.max_string_length
        if kind is ValueKind.ERROR:
            return TreeNode(qualified_name(type(value)), format_text(value, limit))
        return TreeNode(label, format_text(value, limit))

    def _build_member(self, owner: Any, member: Member, depth: int) -> TreeNode:
        try:
            value = self._read(owner, member)
        except Exception as error:
            failure = error
        else:
            return self._member_node(member, value, depth)

        logger.debug(
            "Reading %s.%s raised %r", type(owner).__name__, member.name, failure
        )
        return TreeNode(
            member.name,
            f"Threw {short_name(type(failure))}",
            (self.build(failure, None, depth + 1),),
        )

    def _member_node(self, member: Member, value: Any, depth: int) -> TreeNode:
        kind = classify(value, member.declared_type)
        if kind is ValueKind.SEQUENCE:
            return self._sequences.build(value, member.name, depth, member.name)

        text = format_text(value, self.config.max_string_length)
        if depth + 1 >= self.config.max_depth:
            return TreeNode(member.name, text)
        if value is None and _declares_composite(member):
            return TreeNode(member.name, text, (self.build(None, None, depth + 1),))
        if kind is ValueKind.SCALAR:
            return TreeNode(member.name, text)
        return TreeNode(member.name, text, (self.build(value, None, depth + 1),))

    def _read(self, owner: Any, member: Member) -> Any:
        if member is STACK_TRACE and isinstance(owner, BaseException):
            return format_stack_trace(owner, self.script_boundary)
        return member.read(owner)


def _declares_composite(member: Member) -> bool:
    return member.declared_type is not None and not is_simple_type(
        member.declared_type
    )
