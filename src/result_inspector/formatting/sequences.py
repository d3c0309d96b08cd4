"""SequenceFormatter: expands iterables into a capped list of element nodes.

Reads at most ``max_sequence_length`` elements and peeks one more to tell a
complete sequence from a truncated one.  Mappings are expanded through
``items()``; each entry becomes a MappingEntry with ``key`` and ``value``
members.

Only the iteration itself is guarded (obtaining the iterator, advancing it,
reading a grouping's key): a failure there discards the partial result and
yields a ``Threw <Kind>`` node.  Failures while building an element's own
subtree are not iteration failures and propagate to the caller.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from result_inspector.config import InspectorConfig
from result_inspector.formatting.text import format_text, short_name, truncate
from result_inspector.tree.nodes import TreeNode

__all__ = ["MappingEntry", "SequenceFormatter"]

logger = logging.getLogger(__name__)

# Signature of ValueFormatter.build: (value, label, depth) -> TreeNode
BuildFn = Callable[[Any, "str | None", int], TreeNode]

_NO_KEY = object()


@dataclass(frozen=True, slots=True)
class MappingEntry:
    """One ``(key, value)`` entry of an expanded mapping."""

    key: Any
    value: Any

    def __str__(self) -> str:
        return f"{self.key}: {self.value}"


class SequenceFormatter:
    """Builds ``<enumerable Count: n>`` / ``<grouping Count: n Key: k>`` nodes.

    Args:
        build:  Element builder, normally ``ValueFormatter.build``.
        config: Limits to apply.
    """

    def __init__(self, build: BuildFn, config: InspectorConfig) -> None:
        self._build = build
        self._config = config

    def build(
        self,
        sequence: Iterable[Any],
        label: str | None,
        depth: int,
        member_name: str | None = None,
    ) -> TreeNode:
        """Expand ``sequence`` into a node whose children sit at ``depth + 1``.

        Args:
            sequence:    The iterable to expand.
            label:       Label of the resulting node.
            depth:       Depth of the resulting node.
            member_name: Name of the enclosing member, if the sequence was read
                         from one.  Labels an iteration-failure node; ``label``
                         is used when there is no enclosing member.
        """
        failure_label = member_name if member_name is not None else label
        limit = self._config.max_sequence_length

        items: list[TreeNode] = []
        has_more = False
        key: Any = _NO_KEY
        failure: Exception | None = None
        try:
            is_mapping = isinstance(sequence, Mapping)
            source = sequence.items() if is_mapping else sequence
            iterator: Iterator[Any] = iter(source)
        except Exception as error:
            failure = error
        else:
            exhausted = False
            while len(items) < limit:
                try:
                    element = next(iterator)
                    if is_mapping:
                        element = MappingEntry(*element)
                except StopIteration:
                    exhausted = True
                    break
                except Exception as error:
                    failure = error
                    break
                items.append(self._build(element, None, depth + 1))

            if failure is None:
                try:
                    has_more = False if exhausted else _has_next(iterator)
                    # Grouping protocol, checked statically to skip __getattr__.
                    if _has_key(sequence):
                        key = sequence.key  # type: ignore[attr-defined]
                except Exception as error:
                    failure = error

        # Partial children are discarded once iteration has failed.
        if failure is not None:
            return self._failure(sequence, failure_label, failure, depth)

        cap = self._config.max_string_length
        more = "+" if has_more else ""
        count = f"Count: {len(items)}{more}"
        if key is _NO_KEY:
            value = f"<enumerable {count}>"
        else:
            value = f"<grouping {count} Key: {format_text(key, cap)}>"
        return TreeNode(label, truncate(value, cap), tuple(items))

    def _failure(
        self,
        sequence: Iterable[Any],
        label: str | None,
        error: Exception,
        depth: int,
    ) -> TreeNode:
        logger.debug("Iterating %s raised %r", type(sequence).__name__, error)
        return TreeNode(
            label,
            f"Threw {short_name(type(error))}",
            (self._build(error, None, depth + 1),),
        )


def _has_key(sequence: Any) -> bool:
    return inspect.getattr_static(sequence, "key", _NO_KEY) is not _NO_KEY


def _has_next(iterator: Iterator[Any]) -> bool:
    try:
        next(iterator)
    except StopIteration:
        return False
    return True
