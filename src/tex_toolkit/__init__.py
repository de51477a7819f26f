"""LaTeX source analysis toolkit.

Subpackages:
- tex_toolkit.math_scan – prose vs. inline/display math regions
- tex_toolkit.search – corpus-wide search and replace
- tex_toolkit.spellcheck – markup-aware spell checking and suggestions
- tex_toolkit.workspace – project directories, write-back, ignore-list storage
- tex_toolkit.cli – `tex-toolkit` command
"""

from pathlib import Path


def _get_version() -> str:
    """Version from a source checkout's pyproject.toml, else the installed distribution."""
    pyproject = Path(__file__).resolve().parents[2] / "pyproject.toml"
    try:
        for line in pyproject.read_text(encoding="utf-8").splitlines():
            key, sep, value = line.partition("=")
            if sep and key.strip() == "version":
                return value.strip().strip("\"'")
    except OSError:
        pass

    from importlib.metadata import PackageNotFoundError, version

    try:
        return version("tex-toolkit")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()
__copyright__ = "Copyright 2026 tex-toolkit contributors Licensed under the Polyform Noncommercial License 1.0.0"
__all__: list[str] = ["__version__"]
