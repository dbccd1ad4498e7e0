"""Basic tests to verify package installation and structure."""

import refdb_merge


def test_version():
    """Test that version is defined."""
    assert hasattr(refdb_merge, "__version__")
    assert isinstance(refdb_merge.__version__, str)


def test_package_import():
    """Test that the merge API is importable from the package."""
    from refdb_merge.merge import run_merge, process_primary, process_secondary

    assert callable(run_merge)
    assert callable(process_primary)
    assert callable(process_secondary)
