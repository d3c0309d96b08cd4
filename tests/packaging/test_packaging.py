"""Packaging correctness verification for result-inspector.

Tests validate that:
- The package imports with only its declared dependencies
- The py.typed marker ships inside the package
- The pytest plugin entry point is registered
- Package metadata is correct

These tests inspect the current installation rather than building wheels or
creating temporary virtualenvs (faster, more reliable in CI).
"""

from __future__ import annotations

from importlib import resources
from importlib.metadata import entry_points, metadata


class TestImports:
    def test_import_result_inspector(self) -> None:
        import result_inspector

        assert hasattr(result_inspector, "create")
        assert hasattr(result_inspector, "create_exception")
        assert hasattr(result_inspector, "render")

    def test_subpackages_import(self) -> None:
        from result_inspector.formatting import ValueFormatter
        from result_inspector.tree import TreePrinter

        assert ValueFormatter is not None
        assert TreePrinter is not None

    def test_py_typed_marker(self) -> None:
        marker = resources.files("result_inspector").joinpath("py.typed")
        assert marker.is_file()


class TestPytestPluginDiscovery:
    def test_entry_point_registered(self) -> None:
        """pytest11 entry point must be registered for result-inspector."""
        eps = [
            ep
            for ep in entry_points(group="pytest11")
            if "result_inspector" in str(ep.value)
        ]
        assert eps, "No pytest11 entry point found for result-inspector"

    def test_fixture_available(self) -> None:
        import importlib

        mod = importlib.import_module("result_inspector.integrations._pytest_plugin")
        assert hasattr(mod, "assert_renders")
        assert callable(mod.assert_renders)


class TestPackageMetadata:
    def test_version(self) -> None:
        import result_inspector

        assert result_inspector.__version__ == "0.1.0"
        assert metadata("result-inspector")["Version"] == "0.1.0"

    def test_all_exports(self) -> None:
        """__all__ must include the documented public API."""
        import result_inspector

        expected = {
            "ExceptionTreeNode",
            "FilenamePrefixBoundary",
            "InspectorConfig",
            "Member",
            "MemberRegistry",
            "TreeNode",
            "ValueFormatter",
            "ValueKind",
            "create",
            "create_exception",
            "register_members",
            "render",
        }
        actual = set(result_inspector.__all__)
        assert expected == actual, (
            f"Missing: {expected - actual}, Extra: {actual - expected}"
        )
