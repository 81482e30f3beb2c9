"""
prettyslug Settings

This module contains global constants and configuration settings for prettyslug.
These settings provide the default slug policy and control library logging.

Key features:
- Centralized default policy values (separator, replacement, allowed set, case folding).
- Logging format and the fallback log level.

@notes
- The policy defaults are fixed. A `SlugConfig` substitutes them for any knob
  that was never explicitly set, at the moment the config is finalized.
- `configure_logging()` loads `.env` and reads `PRETTYSLUG_LOG_LEVEL`, falling
  back to `LOG_LEVEL`. Importing the library touches neither the environment
  nor the logging handlers.
"""

from pathlib import Path

# Slug Policy Defaults
DEFAULT_CASE_FOLD: bool = True
DEFAULT_WORD_SEPARATOR: str = "-"
DEFAULT_INVALID_REPLACEMENT: str = "-"
DEFAULT_ALLOWED_SET: str = "a-zA-Z0-9"  # regex character-class body, no brackets

# Logging
LOG_LEVEL_ENV: str = "PRETTYSLUG_LOG_LEVEL"  # read by configure_logging()
LOG_LEVEL: str = "WARNING"
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"
LOG_FILE: Path | None = (
    None  # Set to a Path object to enable file logging, e.g., Path("prettyslug.log")
)
