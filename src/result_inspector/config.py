"""InspectorConfig: limits and script-boundary settings for tree construction.

InspectorConfig is a frozen (immutable) dataclass holding the bounds that make
formatting terminate on any input: the depth cap, the text cap and the
sequence cap.  It also names the filename prefix the host uses when compiling
user submissions, which is how stack frames are attributed to script code.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "DEFAULT_SCRIPT_FILENAME_PREFIX",
    "MAX_DEPTH",
    "MAX_SEQUENCE_LENGTH",
    "MAX_STRING_LENGTH",
    "InspectorConfig",
]

MAX_DEPTH = 5
MAX_STRING_LENGTH = 10_000
MAX_SEQUENCE_LENGTH = 10_000

# Hosts compile submissions with filenames such as "<submission#3>".
DEFAULT_SCRIPT_FILENAME_PREFIX = "<submission"


@dataclass(frozen=True, slots=True)
class InspectorConfig:
    """Immutable configuration for ValueFormatter.

    Attributes:
        max_depth: Depth at which expansion stops.  A value built at depth
            ``d`` is expanded only while ``d + 1 < max_depth``.
        max_string_length: Maximum length of any formatted value text.
        max_sequence_length: Maximum number of elements read from a sequence.
            One further element is peeked to decide the ``+`` marker.
        script_filename_prefix: Traceback frames whose filename starts with
            this prefix belong to user script code.
        truncate_root_text: When True (default), plain ``str`` values at the
            root or inside sequences are truncated like every other value text.
            When False they are passed through untouched.
    """

    max_depth: int = MAX_DEPTH
    max_string_length: int = MAX_STRING_LENGTH
    max_sequence_length: int = MAX_SEQUENCE_LENGTH
    script_filename_prefix: str = DEFAULT_SCRIPT_FILENAME_PREFIX
    truncate_root_text: bool = True

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            msg = f"max_depth must be >= 1, got {self.max_depth}"
            raise ValueError(msg)
        if self.max_string_length < 1:
            msg = f"max_string_length must be >= 1, got {self.max_string_length}"
            raise ValueError(msg)
        if self.max_sequence_length < 0:
            msg = f"max_sequence_length must be >= 0, got {self.max_sequence_length}"
            raise ValueError(msg)
        if not self.script_filename_prefix:
            msg = "script_filename_prefix must be a non-empty string"
            raise ValueError(msg)
