"""
Tests for top-level package metadata.
"""

import tex_toolkit


class TestPackageMetadata:
    """Tests for tex_toolkit module attributes."""

    def test_version_when_source_checkout_then_matches_pyproject(self):
        """__version__ is read from pyproject.toml in a checkout."""
        assert tex_toolkit.__version__ == "0.3.0"

    def test_copyright_when_imported_then_names_project_and_license(self):
        """__copyright__ carries the project and license."""
        assert tex_toolkit.__copyright__.startswith("Copyright 2026 tex-toolkit")
        assert "License" in tex_toolkit.__copyright__
