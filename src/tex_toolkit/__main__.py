"""Allow ``python -m tex_toolkit``."""

from tex_toolkit.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
