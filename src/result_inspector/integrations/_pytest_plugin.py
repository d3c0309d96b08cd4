"""pytest plugin for result-inspector.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

import textwrap
from typing import Any

import pytest

from result_inspector import InspectorConfig, create, render


@pytest.fixture(scope="session")
def assert_renders() -> Any:
    """Fixture that returns a callable asserting on a value's rendered tree.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to create() which builds a fresh ValueFormatter per call).

    Usage in tests::

        def test_list(assert_renders):
            assert_renders([1, 2], '''
                nums = <enumerable Count: 2>
                  1
                  2
            ''', label="nums")

    Returns:
        A callable ``_assert(value, expected, label=None, config=None) -> None``
        that raises ``AssertionError`` when the rendering differs.  ``expected``
        is dedented and stripped of its leading newline before comparison.
    """

    def _assert(
        value: Any,
        expected: str,
        label: str | None = None,
        config: InspectorConfig | None = None,
    ) -> None:
        """Assert that ``value`` renders as ``expected``.

        Raises:
            AssertionError: When the rendered text differs, with both texts
                in the message.
        """
        actual = render(create(value, label, config=config))
        wanted = textwrap.dedent(expected).lstrip("\n")
        if actual.rstrip("\n") != wanted.rstrip("\n"):
            raise AssertionError(
                f"Rendered tree does not match\n"
                f"  actual:\n{textwrap.indent(actual, '    ')}"
                f"  expected:\n{textwrap.indent(wanted, '    ')}"
            )

    return _assert
