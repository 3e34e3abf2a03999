# topmark:header:start
#
#   project      : DocForge
#   file         : __init__.py
#   file_relpath : src/docforge/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocForge configuration: immutable `Config`, builder `MutableConfig`, TOML loading.

Typical use:

```python
from docforge.config import Config, load_config

config = Config.from_defaults()
config = load_config([Path("docforge.toml")])
```
"""

from __future__ import annotations

from docforge.config.model import Config, MutableConfig, load_config
from docforge.config.policy import OverflowPolicy

__all__ = [
    "Config",
    "MutableConfig",
    "OverflowPolicy",
    "load_config",
]
