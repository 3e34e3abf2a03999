# topmark:header:start
#
#   project      : DocForge
#   file         : __main__.py
#   file_relpath : src/docforge/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Allow ``python -m docforge``."""

from __future__ import annotations

from docforge.cli.main import cli

if __name__ == "__main__":
    cli()
