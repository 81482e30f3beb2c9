"""
Slug Configuration for prettyslug

This module defines `SlugConfig`, the policy object the slug pipeline reads,
and `ConfigurationError`, raised when that policy cannot be compiled.

Key features:
- Four policy knobs: case folding, word separator, invalid-character
  replacement and allowed character set.
- Fluent `set_*` methods that return the config for chaining.
- Lazily compiled matchers (`invalid_char_matcher`, `dup_separator_matcher`)
  that are dropped on every knob change and rebuilt by `ensure_ready()`.
- Defaults resolved at `ensure_ready()` time, so the order in which knobs
  are set never matters.

@dependencies
- `re` for compiling the character-class and separator-run matchers.
- `prettyslug.settings` for the default policy values.
- `logging` for reporting matcher rebuilds and compile failures.

@notes
- A config is not internally synchronized. Finish configuring it before
  sharing it between threads, or hand each thread its own `copy()`.
- `allowed_set` is the body of a regex character class without the brackets,
  e.g. `"a-zA-Z0-9"` or `"a-z0-9_."`. Regex metacharacters that need escaping
  inside a class must be escaped by the caller. The word separator is escaped
  automatically and is always allowed.
"""

import copy
import logging
import re
from typing import Optional

from prettyslug import settings

logger = logging.getLogger(__name__)

# Matches any single character; used when the allowed class would be empty.
_ANY_CHAR = r"(?s:.)"


class ConfigurationError(Exception):
    """Raised when a slug policy cannot be compiled into valid matchers."""

    pass


def _require_str(name: str, value: object) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


def _find_unescaped_bracket(class_body: str) -> int:
    """Return the index of the first unescaped `]` in `class_body`, or -1."""
    i = 0
    while i < len(class_body):
        char = class_body[i]
        if char == "\\":
            i += 2
            continue
        if char == "]":
            return i
        i += 1
    return -1


class SlugConfig:
    """
    Transformation policy for the slug pipeline.

    Knobs left unset (or passed as ``None``) take the defaults from
    `prettyslug.settings`: case folding on, ``"-"`` as word separator,
    ``"-"`` as invalid-character replacement, ``"a-zA-Z0-9"`` as allowed set.
    """

    def __init__(
        self,
        case_fold: Optional[bool] = None,
        word_separator: Optional[str] = None,
        invalid_replacement: Optional[str] = None,
        allowed_set: Optional[str] = None,
    ):
        self._case_fold: Optional[bool] = None
        self._word_separator: Optional[str] = None
        self._invalid_replacement: Optional[str] = None
        self._allowed_set: Optional[str] = None
        self._invalid_char_matcher: Optional[re.Pattern[str]] = None
        self._dup_separator_matcher: Optional[re.Pattern[str]] = None
        self._ready = False

        if case_fold is not None:
            self.set_case_fold(case_fold)
        if word_separator is not None:
            self.set_word_separator(word_separator)
        if invalid_replacement is not None:
            self.set_invalid_replacement(invalid_replacement)
        if allowed_set is not None:
            self.set_allowed_set(allowed_set)

    # --- Fluent setters -------------------------------------------------

    def set_case_fold(self, case_fold: bool) -> "SlugConfig":
        """Enable or disable lowercasing of the final slug."""
        if not isinstance(case_fold, bool):
            raise TypeError(
                f"case_fold must be a bool, got {type(case_fold).__name__}"
            )
        self._case_fold = case_fold
        self._invalidate()
        return self

    def set_word_separator(self, word_separator: str) -> "SlugConfig":
        """
        Set the string that replaces whitespace between words.

        Leading and trailing separators are trimmed from the slug and runs of
        two or more separators are collapsed into one. An empty separator joins
        words directly.
        """
        self._word_separator = _require_str("word_separator", word_separator)
        self._invalidate()
        return self

    def set_invalid_replacement(self, invalid_replacement: str) -> "SlugConfig":
        """
        Set the string substituted for each character outside the allowed set.

        Leading and trailing replacements are trimmed, but runs of replacements
        are kept as they are. An empty replacement deletes invalid characters.
        """
        self._invalid_replacement = _require_str(
            "invalid_replacement", invalid_replacement
        )
        self._invalidate()
        return self

    def set_allowed_set(self, allowed_set: str) -> "SlugConfig":
        """Set the regex character-class body of characters kept unchanged."""
        self._allowed_set = _require_str("allowed_set", allowed_set)
        self._invalidate()
        return self

    # --- Effective values -----------------------------------------------

    @property
    def case_fold(self) -> bool:
        if self._case_fold is None:
            return settings.DEFAULT_CASE_FOLD
        return self._case_fold

    @property
    def word_separator(self) -> str:
        if self._word_separator is None:
            return settings.DEFAULT_WORD_SEPARATOR
        return self._word_separator

    @property
    def invalid_replacement(self) -> str:
        if self._invalid_replacement is None:
            return settings.DEFAULT_INVALID_REPLACEMENT
        return self._invalid_replacement

    @property
    def allowed_set(self) -> str:
        if self._allowed_set is None:
            return settings.DEFAULT_ALLOWED_SET
        return self._allowed_set

    @property
    def invalid_char_matcher(self) -> re.Pattern[str]:
        """Matches one character outside the allowed set and the separator."""
        self.ensure_ready()
        return self._invalid_char_matcher

    @property
    def dup_separator_matcher(self) -> Optional[re.Pattern[str]]:
        """Matches runs of 2+ separators; ``None`` when the separator is empty."""
        self.ensure_ready()
        return self._dup_separator_matcher

    # --- Matcher lifecycle ----------------------------------------------

    def _invalidate(self) -> None:
        self._invalid_char_matcher = None
        self._dup_separator_matcher = None
        self._ready = False

    def ensure_ready(self) -> "SlugConfig":
        """
        Compile the derived matchers if a knob changed since the last build.

        Idempotent: a ready config is returned untouched.

        Returns:
            The config itself.

        Raises:
            ConfigurationError: If the allowed set and separator do not form a
                valid regex character class.
        """
        if self._ready:
            return self

        bracket = _find_unescaped_bracket(self.allowed_set)
        if bracket != -1:
            msg = (
                f"Allowed set {self.allowed_set!r} closes the character class "
                f"early at position {bracket}; escape it as '\\]'"
            )
            logger.error(msg)
            raise ConfigurationError(msg)

        separator = re.escape(self.word_separator)
        class_body = separator + self.allowed_set
        if class_body:
            invalid_pattern = f"[^{class_body}]"
        else:
            # Nothing is allowed, so every character is invalid.
            invalid_pattern = _ANY_CHAR

        try:
            invalid_char_matcher = re.compile(invalid_pattern)
        except re.error as e:
            msg = (
                f"Allowed set {self.allowed_set!r} with word separator "
                f"{self.word_separator!r} is not a valid character class: {e}"
            )
            logger.error(msg)
            raise ConfigurationError(msg) from e

        dup_separator_matcher = None
        if separator:
            dup_separator_matcher = re.compile(f"(?:{separator}){{2,}}")

        self._invalid_char_matcher = invalid_char_matcher
        self._dup_separator_matcher = dup_separator_matcher
        self._ready = True
        logger.debug(
            "Compiled slug matchers: invalid=%r duplicate=%r",
            invalid_pattern,
            dup_separator_matcher.pattern if dup_separator_matcher else None,
        )
        return self

    # --- Value semantics ------------------------------------------------

    def copy(self) -> "SlugConfig":
        """Return an independent config with the same knobs."""
        return copy.copy(self)

    def _effective(self) -> tuple:
        return (
            self.case_fold,
            self.word_separator,
            self.invalid_replacement,
            self.allowed_set,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SlugConfig):
            return NotImplemented
        return self._effective() == other._effective()

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(case_fold={self.case_fold!r}, "
            f"word_separator={self.word_separator!r}, "
            f"invalid_replacement={self.invalid_replacement!r}, "
            f"allowed_set={self.allowed_set!r})"
        )
