"""Placeholder test verifying package import."""


def test_import() -> None:
    """Verify top-level package is importable."""
    import result_inspector

    assert result_inspector.__version__ is not None
    assert result_inspector.__version__ == "0.1.0"
