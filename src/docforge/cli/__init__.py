# topmark:header:start
#
#   project      : DocForge
#   file         : __init__.py
#   file_relpath : src/docforge/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocForge command-line interface (Click)."""
