"""Formatting subpackage: the recursive value-to-tree builder and its helpers.

Re-exports the public API for the formatting module:
- ValueFormatter: builds a TreeNode tree for any value
- SequenceFormatter: expands iterables with a capped element count
- ExceptionAdapter: builds the root node for a raised exception
- ValueKind / classify: the single per-value dispatch
- Member / MemberRegistry: the member accessor table
"""

from result_inspector.formatting.builder import ValueFormatter
from result_inspector.formatting.classify import ValueKind, classify
from result_inspector.formatting.exceptions import ExceptionAdapter
from result_inspector.formatting.members import Member, MemberRegistry
from result_inspector.formatting.sequences import SequenceFormatter

__all__ = [
    "ExceptionAdapter",
    "Member",
    "MemberRegistry",
    "SequenceFormatter",
    "ValueFormatter",
    "ValueKind",
    "classify",
]
