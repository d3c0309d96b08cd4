"""Member enumeration: the accessor table used to expand composite values.

A ``Member`` pairs a display name with a fallible getter and, when known, the
declared type of the member.  ``MemberRegistry`` answers "which members does
this value have, in what order" from three sources, in priority order:

1. An explicit ``register(cls, members)`` call for a class in the value's MRO.
2. An ``__inspect_members__()`` method defined by the value's class
   (``SupportsMembers``).
3. Automatic discovery: dataclass fields, public properties in declaration
   order, ``__slots__`` entries, then public instance attributes.

Class-level discovery results are cached per type in an ``LRUCache``; each
registry owns its own cache, so two registries never interfere.

Example::

    from result_inspector.formatting.members import Member, MemberRegistry

    registry = MemberRegistry()
    registry.register(Point, [Member("x", lambda p: p.coords[0], float)])
"""

from __future__ import annotations

import dataclasses
import functools
import logging
import threading
import types
import typing
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from operator import attrgetter
from typing import Any

from cachetools import LRUCache

from result_inspector.formatting.stack import (
    FilenamePrefixBoundary,
    format_stack_trace,
)

__all__ = [
    "EXCEPTION_MEMBERS",
    "STACK_TRACE",
    "STACK_TRACE_MEMBER",
    "Member",
    "MemberRegistry",
    "default_registry",
    "register_members",
]

logger = logging.getLogger(__name__)

STACK_TRACE_MEMBER = "stack_trace"


@dataclass(frozen=True, slots=True)
class Member:
    """A named, readable member of a value.

    Attributes:
        name:          Display name; becomes the node label.
        getter:        Called with the owning value.  May raise; the formatter
                       turns the failure into a ``Threw <Kind>`` node.
        declared_type: Annotation of the member if one is known, else None.
                       A simple declared type forces leaf rendering.
    """

    name: str
    getter: Callable[[Any], Any]
    declared_type: Any = None

    def read(self, owner: Any) -> Any:
        return self.getter(owner)


def _attribute(name: str, declared_type: Any = None) -> Member:
    return Member(name, attrgetter(name), declared_type)


def _stack_trace(error: BaseException) -> str:
    return format_stack_trace(error, FilenamePrefixBoundary())


# ValueFormatter reads this member through its own ScriptBoundary.
STACK_TRACE = Member(STACK_TRACE_MEMBER, _stack_trace, str)

EXCEPTION_MEMBERS: tuple[Member, ...] = (
    Member("args", attrgetter("args")),
    Member("cause", attrgetter("__cause__")),
    Member("context", attrgetter("__context__")),
    STACK_TRACE,
)

_PROPERTY_TYPES = (property, functools.cached_property)


def _is_public(name: str) -> bool:
    return not name.startswith("_")


def _type_hints(target: Any) -> dict[str, Any]:
    try:
        return typing.get_type_hints(target)
    except Exception:  # unresolvable forward refs: fall back to runtime types
        logger.debug("Could not resolve annotations of %r", target, exc_info=True)
        return {}


def _property_type(attr: property | functools.cached_property) -> Any:
    func = attr.fget if isinstance(attr, property) else attr.func
    if func is None:
        return None
    return _type_hints(func).get("return")


def _slot_names(cls: type) -> tuple[str, ...]:
    slots = vars(cls).get("__slots__", ())
    if isinstance(slots, str):
        return (slots,)
    return tuple(slots)


class MemberRegistry:
    """Per-type member tables with explicit registration and cached discovery.

    Args:
        max_types: Maximum number of discovered class tables kept in memory.
            Least-recently-used tables are silently evicted and rediscovered
            on next use.
    """

    def __init__(self, max_types: int = 512) -> None:
        self._registered: dict[type, tuple[Member, ...]] = {}
        self._discovered: LRUCache[type, tuple[Member, ...]] = LRUCache(
            maxsize=max_types
        )
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_types(self) -> int:
        return int(self._discovered.maxsize)

    @property
    def cached_types(self) -> int:
        """Number of class tables currently held by the discovery cache."""
        return int(self._discovered.currsize)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, cls: type, members: Iterable[Member]) -> None:
        """Use ``members`` for ``cls`` and its subclasses, replacing discovery.

        Raises:
            TypeError: If ``cls`` is not a class.
        """
        if not isinstance(cls, type):
            msg = f"members can only be registered for classes, got {cls!r}"
            raise TypeError(msg)
        with self._lock:
            self._registered[cls] = tuple(members)

    def unregister(self, cls: type) -> None:
        with self._lock:
            self._registered.pop(cls, None)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def members_for(self, value: Any) -> tuple[Member, ...]:
        """Return the members of ``value`` in display order.

        Errors raised by an ``__inspect_members__`` hook propagate.
        """
        cls = type(value)
        with self._lock:
            for klass in cls.__mro__:
                registered = self._registered.get(klass)
                if registered is not None:
                    return registered

        # Hooks are looked up on the class so a __getattr__ never runs here.
        if not isinstance(value, type) and hasattr(cls, "__inspect_members__"):
            return tuple(value.__inspect_members__())

        members = list(self._class_members(cls))
        if isinstance(value, BaseException):
            members = [*EXCEPTION_MEMBERS, *members]
        seen = {member.name for member in members}
        for name in self._instance_attributes(value):
            if name not in seen:
                seen.add(name)
                members.append(_attribute(name))
        return tuple(members)

    def _class_members(self, cls: type) -> tuple[Member, ...]:
        with self._lock:
            cached = self._discovered.get(cls)
            if cached is None:
                cached = self._discover(cls)
                self._discovered[cls] = cached
            return cached

    @staticmethod
    def _discover(cls: type) -> tuple[Member, ...]:
        members: list[Member] = []
        seen: set[str] = set()

        def add(name: str, declared: Any) -> None:
            if _is_public(name) and name not in seen:
                seen.add(name)
                members.append(_attribute(name, declared))

        if dataclasses.is_dataclass(cls):
            hints = _type_hints(cls)
            for field in dataclasses.fields(cls):
                add(field.name, hints.get(field.name))

        # Base classes first; dict order within a class body is declaration order.
        for klass in reversed(cls.__mro__):
            if klass is object:
                continue
            for name, attr in vars(klass).items():
                if isinstance(attr, _PROPERTY_TYPES):
                    add(name, _property_type(attr))
            for name in _slot_names(klass):
                add(name, None)

        return tuple(members)

    @staticmethod
    def _instance_attributes(value: Any) -> list[str]:
        if isinstance(value, (type, types.ModuleType)):
            return []
        try:
            namespace = vars(value)
        except TypeError:
            return []
        return [name for name in namespace if _is_public(name)]


default_registry = MemberRegistry()


def register_members(cls: type, members: Iterable[Member]) -> None:
    """Register ``members`` for ``cls`` on the process-wide default registry."""
    default_registry.register(cls, members)
