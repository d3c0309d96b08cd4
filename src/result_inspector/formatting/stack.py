"""Script-aware traceback filtering.

The host compiles each submission under a recognisable filename (by default
``"<submission#N>"``).  Frames carrying that filename are script frames; all
others belong to the host, the runtime or libraries.  Two questions are
answered here:

- which traceback lines to show: everything from the outermost frame through
  the innermost script frame, so library frames beneath the user's deepest
  call are dropped;
- which script line raised: the line of the innermost script frame.
"""

from __future__ import annotations

import traceback
from dataclasses import dataclass
from typing import TYPE_CHECKING

from result_inspector.config import DEFAULT_SCRIPT_FILENAME_PREFIX

if TYPE_CHECKING:
    from traceback import FrameSummary

    from result_inspector.protocols import ScriptBoundary

__all__ = [
    "FilenamePrefixBoundary",
    "extract_frames",
    "find_source_line",
    "format_stack_trace",
    "script_frames",
]


@dataclass(frozen=True, slots=True)
class FilenamePrefixBoundary:
    """ScriptBoundary that recognises script frames by filename prefix."""

    prefix: str = DEFAULT_SCRIPT_FILENAME_PREFIX

    def is_script_frame(self, frame: FrameSummary) -> bool:
        return frame.filename.startswith(self.prefix)


def extract_frames(error: BaseException) -> list[FrameSummary]:
    """Return the traceback frames of ``error``, outermost first."""
    return list(traceback.extract_tb(error.__traceback__))


def script_frames(
    frames: list[FrameSummary], boundary: ScriptBoundary
) -> list[FrameSummary]:
    """Keep the frames up to and including the innermost script frame.

    Returns an empty list when no frame belongs to script code.
    """
    for index in range(len(frames) - 1, -1, -1):
        if boundary.is_script_frame(frames[index]):
            return frames[: index + 1]
    return []


def _format_frame(frame: FrameSummary) -> str:
    return f'File "{frame.filename}", line {frame.lineno}, in {frame.name}'


def format_stack_trace(error: BaseException, boundary: ScriptBoundary) -> str:
    """Render the script-relevant part of ``error``'s traceback, one frame per line."""
    frames = script_frames(extract_frames(error), boundary)
    return "\n".join(_format_frame(frame) for frame in frames)


def find_source_line(error: BaseException, boundary: ScriptBoundary) -> int:
    """Return the line of the innermost script frame, or 0 if there is none."""
    for frame in reversed(extract_frames(error)):
        if boundary.is_script_frame(frame):
            return frame.lineno or 0
    return 0
