"""Tests for script-aware traceback filtering.

Exceptions are produced by really executing code compiled under a
``<submission#N>`` filename, the way a hosting evaluation loop would.
"""

from __future__ import annotations

import traceback
from typing import Any

import pytest

from result_inspector.formatting.stack import (
    FilenamePrefixBoundary,
    extract_frames,
    find_source_line,
    format_stack_trace,
    script_frames,
)
from result_inspector.protocols import ScriptBoundary

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _library_call() -> None:
    raise KeyError("missing")


def _run_submission(source: str, **namespace: Any) -> BaseException:
    """Execute ``source`` as submission #1 and return what it raised."""
    code = compile(source, "<submission#1>", "exec")
    try:
        exec(code, dict(namespace))
    except Exception as error:
        return error
    raise AssertionError("submission did not raise")


SCRIPT_RAISES = "def f():\n    raise ValueError('bad')\n\nf()\n"
SCRIPT_CALLS_LIBRARY = "def g():\n    lib()\n\ng()\n"


@pytest.fixture
def boundary() -> FilenamePrefixBoundary:
    return FilenamePrefixBoundary()


# ---------------------------------------------------------------------------
# FilenamePrefixBoundary
# ---------------------------------------------------------------------------


class TestFilenamePrefixBoundary:
    def test_satisfies_protocol(self, boundary: FilenamePrefixBoundary) -> None:
        assert isinstance(boundary, ScriptBoundary)

    def test_matches_submission_frames(self, boundary: FilenamePrefixBoundary) -> None:
        frame = traceback.FrameSummary("<submission#4>", 1, "<module>")
        assert boundary.is_script_frame(frame)

    def test_rejects_file_frames(self, boundary: FilenamePrefixBoundary) -> None:
        frame = traceback.FrameSummary("/usr/lib/python3/json/decoder.py", 1, "x")
        assert not boundary.is_script_frame(frame)

    def test_custom_prefix(self) -> None:
        frame = traceback.FrameSummary("<cell 3>", 1, "<module>")
        assert FilenamePrefixBoundary("<cell").is_script_frame(frame)


# ---------------------------------------------------------------------------
# Frame selection
# ---------------------------------------------------------------------------


class TestScriptFrames:
    def test_frames_are_outermost_first(self) -> None:
        error = _run_submission(SCRIPT_RAISES)
        names = [frame.name for frame in extract_frames(error)]
        assert names == ["_run_submission", "<module>", "f"]

    def test_library_frames_below_script_are_dropped(
        self, boundary: FilenamePrefixBoundary
    ) -> None:
        error = _run_submission(SCRIPT_CALLS_LIBRARY, lib=_library_call)
        kept = script_frames(extract_frames(error), boundary)
        assert [frame.name for frame in kept] == ["_run_submission", "<module>", "g"]

    def test_no_script_frames_gives_empty(
        self, boundary: FilenamePrefixBoundary
    ) -> None:
        try:
            _library_call()
        except KeyError as error:
            assert script_frames(extract_frames(error), boundary) == []

    def test_unraised_exception_has_no_frames(self) -> None:
        assert extract_frames(ValueError("never raised")) == []


class TestFormatStackTrace:
    def test_one_frame_per_line(self, boundary: FilenamePrefixBoundary) -> None:
        error = _run_submission(SCRIPT_CALLS_LIBRARY, lib=_library_call)
        lines = format_stack_trace(error, boundary).splitlines()
        assert len(lines) == 3
        assert lines[-1] == 'File "<submission#1>", line 2, in g'

    def test_library_frame_not_rendered(
        self, boundary: FilenamePrefixBoundary
    ) -> None:
        error = _run_submission(SCRIPT_CALLS_LIBRARY, lib=_library_call)
        assert "_library_call" not in format_stack_trace(error, boundary)

    def test_empty_without_script_frames(
        self, boundary: FilenamePrefixBoundary
    ) -> None:
        assert format_stack_trace(ValueError("x"), boundary) == ""


class TestFindSourceLine:
    def test_innermost_script_line(self, boundary: FilenamePrefixBoundary) -> None:
        error = _run_submission(SCRIPT_RAISES)
        assert find_source_line(error, boundary) == 2

    def test_ignores_library_frames(self, boundary: FilenamePrefixBoundary) -> None:
        error = _run_submission(SCRIPT_CALLS_LIBRARY, lib=_library_call)
        assert find_source_line(error, boundary) == 2

    def test_module_level_raise(self, boundary: FilenamePrefixBoundary) -> None:
        error = _run_submission("x = 1\ny = x / 0\n")
        assert find_source_line(error, boundary) == 2

    def test_zero_when_unresolved(self, boundary: FilenamePrefixBoundary) -> None:
        assert find_source_line(ValueError("x"), boundary) == 0
