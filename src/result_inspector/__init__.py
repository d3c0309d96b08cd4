"""Result inspector - bounded display trees for arbitrary runtime values."""

from __future__ import annotations

import logging

from result_inspector.api import create, create_exception, render
from result_inspector.config import InspectorConfig
from result_inspector.formatting.builder import ValueFormatter
from result_inspector.formatting.classify import ValueKind
from result_inspector.formatting.members import (
    Member,
    MemberRegistry,
    register_members,
)
from result_inspector.formatting.stack import FilenamePrefixBoundary
from result_inspector.tree.nodes import ExceptionTreeNode, TreeNode

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "ExceptionTreeNode",
    "FilenamePrefixBoundary",
    "InspectorConfig",
    "Member",
    "MemberRegistry",
    "TreeNode",
    "ValueFormatter",
    "ValueKind",
    "create",
    "create_exception",
    "register_members",
    "render",
]
