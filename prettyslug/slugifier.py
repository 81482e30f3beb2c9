"""
Slugifier

This module provides `Slugifier`, a `SlugConfig` that also carries its
transliterator and can slugify text directly.

Usage:
    slugifier = Slugifier().set_word_separator("_").set_case_fold(False)
    slugifier.slugify("北京 kožušček")  # "Bei_Jing_kozuscek"

@notes
- Setters may be chained in any order; defaults for knobs that were never set
  are filled in on the first `slugify()` call after a change.
"""

from typing import Optional

from prettyslug.config import SlugConfig
from prettyslug.pipeline import Transliterator, slugify


class Slugifier(SlugConfig):
    """
    Default-configured slug maker with fluent setters.

    Args:
        transliterate: Function mapping Unicode text to ASCII. Defaults to
                       `unidecode.unidecode`.
        **knobs: `case_fold`, `word_separator`, `invalid_replacement` or
                 `allowed_set`, as accepted by `SlugConfig`.
    """

    def __init__(self, transliterate: Optional[Transliterator] = None, **knobs):
        super().__init__(**knobs)
        self._transliterate = transliterate

    def slugify(self, text: str) -> str:
        return slugify(text, self, self._transliterate)

    def __call__(self, text: str) -> str:
        return self.slugify(text)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Slugifier):
            if self._transliterate != other._transliterate:
                return False
        return super().__eq__(other)

    __hash__ = None  # mutable
