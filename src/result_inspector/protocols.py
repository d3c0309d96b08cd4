"""Structural protocols for the capabilities the formatter consumes.

Values and hosts plug into the formatter without inheriting from any base
class; any object with the right attributes passes the ``isinstance`` checks.

Example::

    from result_inspector.protocols import Grouping

    class Bucket:
        def __init__(self, key, items):
            self.key = key
            self._items = items

        def __iter__(self):
            return iter(self._items)

    assert isinstance(Bucket("K", [1, 2]), Grouping)  # structural conformance
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from traceback import FrameSummary

    from result_inspector.formatting.members import Member


@runtime_checkable
class Grouping(Protocol):
    """An iterable whose elements share one associated ``key``.

    Summarised as ``<grouping Count: n Key: key>`` instead of the plain
    ``<enumerable Count: n>``.
    """

    key: Any

    def __iter__(self) -> Iterator[Any]: ...


@runtime_checkable
class SupportsMembers(Protocol):
    """A value that lists its own displayable members.

    ``__inspect_members__`` returns the members in display order.  It takes
    precedence over automatic discovery but not over an explicit
    ``MemberRegistry.register`` call for the value's class.
    """

    def __inspect_members__(self) -> Iterable[Member]: ...


@runtime_checkable
class ScriptBoundary(Protocol):
    """Decides whether a traceback frame belongs to user script code.

    The host compiles submissions itself, so it is the one that knows how its
    script frames can be told apart from library and runtime frames.
    """

    def is_script_frame(self, frame: FrameSummary) -> bool: ...
