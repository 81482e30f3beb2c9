"""
prettyslug Utilities Subpackage

This module initializes the `prettyslug.utils` subpackage and exports
the helper functions used by the slug pipeline.

Key features:
- Marks the 'prettyslug/utils' directory as a Python subpackage.
- Exports string helpers (`join_words`, `ascii_lower`, `trim_edges`) and
  `configure_logging`.
"""

from .logging_utils import configure_logging
from .string_utils import ascii_lower, join_words, trim_edges

__all__ = [
    "ascii_lower",
    "configure_logging",
    "join_words",
    "trim_edges",
]
