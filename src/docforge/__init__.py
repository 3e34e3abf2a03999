# topmark:header:start
#
#   project      : DocForge
#   file         : __init__.py
#   file_relpath : src/docforge/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocForge package.

DocForge synthesizes minimal single-page PDF documents from in-memory text and
moves tabular member records to and from a quoting-aware CSV format. The
library layer is pure (text in, bytes or records out); file and stream handling
lives in the ``docforge`` CLI.
"""

from __future__ import annotations
