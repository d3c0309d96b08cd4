"""ValueKind StrEnum and the single dispatch that assigns a kind to a value.

Every value the formatter sees is classified exactly once into one of four
kinds, and the builder branches on that kind instead of re-testing
"is this an error / iterable / scalar" at each call site.
"""

from __future__ import annotations

import enum
import numbers
import types
import uuid
from collections.abc import Iterable
from enum import StrEnum, auto
from typing import Annotated, Any, Literal, Union, get_args, get_origin

import numpy as np

__all__ = ["ValueKind", "classify", "is_scalar", "is_simple_type"]


class ValueKind(StrEnum):
    """The closed set of shapes a value can take in the tree.

    - ERROR      -> "error"      : an exception instance
    - SEQUENCE   -> "sequence"   : a non-scalar iterable
    - SCALAR     -> "scalar"     : an atomic value rendered as a leaf
    - COMPOSITE  -> "composite"  : anything else; expanded through its members
    """

    ERROR = auto()
    SEQUENCE = auto()
    SCALAR = auto()
    COMPOSITE = auto()


# numbers.Number covers bool, int, float, complex, Decimal, Fraction and the
# numpy numeric scalars (numpy registers them with the ABC).
_SCALAR_TYPES: tuple[type, ...] = (
    type(None),
    str,
    bytes,
    bytearray,
    numbers.Number,
    enum.Enum,
    uuid.UUID,
    np.generic,
)

_UNION_ORIGINS = (Union, types.UnionType)


def is_simple_type(declared: Any) -> bool:
    """Return True if a declared type names a scalar (optionals unwrapped).

    ``Optional[int]``, ``int | None`` and ``Annotated[UUID, ...]`` are simple;
    ``list[int]``, unresolved forward references and ``Any`` are not.
    """
    if declared is None:
        return False
    origin = get_origin(declared)
    if origin in _UNION_ORIGINS:
        members = [arg for arg in get_args(declared) if arg is not type(None)]
        return bool(members) and all(is_simple_type(arg) for arg in members)
    if origin is Annotated:
        return is_simple_type(get_args(declared)[0])
    if origin is Literal:
        return True
    if origin is not None:
        # Parametrised generics such as list[int]: judge the bare origin.
        return is_simple_type(origin)
    if not isinstance(declared, type):
        return False
    return issubclass(declared, _SCALAR_TYPES)


def is_scalar(value: Any) -> bool:
    if isinstance(value, _SCALAR_TYPES):
        return True
    # 0-d arrays are iterable by type but refuse iteration at runtime.
    return isinstance(value, np.ndarray) and value.ndim == 0


def classify(value: Any, declared_type: Any = None) -> ValueKind:
    """Assign a ValueKind to ``value``.

    A simple declared type wins over the runtime type, so a member annotated
    ``int | None`` is a SCALAR even when it currently holds something else.
    The order matters below: ``str`` and ``bytes`` are iterable and must be
    caught as scalars before the Iterable test.
    """
    if is_simple_type(declared_type):
        return ValueKind.SCALAR
    if is_scalar(value):
        return ValueKind.SCALAR
    if isinstance(value, BaseException):
        return ValueKind.ERROR
    if isinstance(value, Iterable):
        return ValueKind.SEQUENCE
    return ValueKind.COMPOSITE
