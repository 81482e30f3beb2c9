"""
prettyslug Package Initializer

This module initializes the prettyslug package and exports its public API.

Key features:
- `Slugifier`: default-configured, chainable slug maker.
- `SlugConfig` and `slugify(text, config)`: the policy object and the pipeline
  function for callers who keep the two apart.
- `ConfigurationError`: raised when a policy cannot be compiled.
- `version()`: the library version string.
"""

__version__ = "1.0.0"

from .config import ConfigurationError, SlugConfig
from .pipeline import slugify
from .slugifier import Slugifier


def version() -> str:
    """Return the library version."""
    return __version__


__all__ = [
    "ConfigurationError",
    "SlugConfig",
    "Slugifier",
    "slugify",
    "version",
    "__version__",
]
