# topmark:header:start
#
#   project      : DocForge
#   file         : __init__.py
#   file_relpath : src/docforge/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocForge CLI subcommands."""
