"""Public API functions for result-inspector.

This module provides the user-facing entry points: create, create_exception
and render.  Each call creates a fresh ValueFormatter so that no formatting
state is carried from one call to the next.
"""

from __future__ import annotations

from typing import Any

from result_inspector.config import InspectorConfig
from result_inspector.formatting.builder import ValueFormatter
from result_inspector.formatting.exceptions import ExceptionAdapter
from result_inspector.protocols import ScriptBoundary
from result_inspector.tree.nodes import ExceptionTreeNode, TreeNode
from result_inspector.tree.printer import TreePrinter

__all__ = ["create", "create_exception", "render"]


def _formatter(
    config: InspectorConfig | None, boundary: ScriptBoundary | None
) -> ValueFormatter:
    return ValueFormatter(config=config or InspectorConfig(), boundary=boundary)


def create(
    value: Any,
    label: str | None = None,
    config: InspectorConfig | None = None,
    boundary: ScriptBoundary | None = None,
) -> TreeNode:
    """Build the display tree for the result of an evaluated expression.

    Args:
        value:    Any runtime value.
        label:    Label of the root node, e.g. the expression text.
        config:   Limits to apply.  Defaults to ``InspectorConfig()`` when None.
        boundary: Script-frame detector used for ``stack_trace`` members of
                  exceptions found inside ``value``.  Defaults to matching the
                  ``script_filename_prefix`` of ``config``.

    Returns:
        A TreeNode no deeper than ``config.max_depth`` levels.

    Raises:
        Exception: Anything raised outside a member read or a sequence
            iteration (for example by a value's ``__str__``) propagates.
    """
    return _formatter(config, boundary).build(value, label, 0)


def create_exception(
    error: BaseException,
    config: InspectorConfig | None = None,
    boundary: ScriptBoundary | None = None,
) -> ExceptionTreeNode:
    """Build the display tree for an exception raised by a submission.

    Args:
        error:    The exception, ideally with its ``__traceback__`` attached.
        config:   Limits to apply.  Defaults to ``InspectorConfig()`` when None.
        boundary: Script-frame detector used for ``source_line`` and
                  ``stack_trace``.

    Returns:
        An ExceptionTreeNode whose ``message`` is ``str(error)`` and whose
        ``source_line`` is the innermost script line, or 0.
    """
    return ExceptionAdapter(_formatter(config, boundary)).build(error)


def render(node: TreeNode) -> str:
    """Return the indented text rendering of ``node`` (see TreePrinter)."""
    return TreePrinter().render(node)
