"""Null-safe, length-capped text conversion and type naming."""

from __future__ import annotations

from typing import Any

from result_inspector.config import MAX_STRING_LENGTH

__all__ = ["format_text", "qualified_name", "short_name", "truncate"]


def truncate(text: str, limit: int = MAX_STRING_LENGTH) -> str:
    return text if len(text) <= limit else text[:limit]


def format_text(value: Any, limit: int = MAX_STRING_LENGTH) -> str:
    """Return ``str(value)`` capped at ``limit`` characters; ``""`` for None.

    Exceptions raised by ``__str__`` are not caught here.  They propagate out of
    the build that asked for the text.
    """
    if value is None:
        return ""
    return truncate(str(value), limit)


def qualified_name(cls: type) -> str:
    """Return ``module.QualName`` for ``cls``; builtins are left unprefixed.

    Example::
        qualified_name(ValueError)          # "ValueError"
        qualified_name(json.JSONDecodeError)  # "json.decoder.JSONDecodeError"
    """
    module = getattr(cls, "__module__", None)
    name = getattr(cls, "__qualname__", cls.__name__)
    if not module or module == "builtins":
        return name
    return f"{module}.{name}"


def short_name(cls: type) -> str:
    return cls.__name__
