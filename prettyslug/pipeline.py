"""
Slug Pipeline

This module turns arbitrary Unicode text into a slug according to a `SlugConfig`.

The passes run in a fixed order, each one feeding the next:
1. Transliterate to ASCII (`unidecode` unless another function is injected).
2. Collapse whitespace: split on any whitespace run and join with the separator.
3. Replace every character outside the allowed set, one for one.
4. Collapse runs of two or more separators (skipped for an empty separator).
5. Trim separators and replacements from both ends.
6. Lowercase A-Z if case folding is on.

Runs of the invalid-character replacement are never collapsed, only runs of
the word separator are. With a ``"#"`` replacement and a ``"*"`` separator,
``"**##x**##**x##**"`` becomes ``"x*##*x"``.

@dependencies
- `unidecode` for transliterating Unicode to ASCII.
- `prettyslug.config.SlugConfig` for the policy and its compiled matchers.
- `prettyslug.utils.string_utils` for whitespace joining, trimming and lowercasing.
"""

from typing import Callable, Optional

from unidecode import unidecode

from prettyslug.config import SlugConfig
from prettyslug.utils.string_utils import ascii_lower, join_words, trim_edges

Transliterator = Callable[[str], str]


def slugify(
    text: str,
    config: Optional[SlugConfig] = None,
    transliterate: Optional[Transliterator] = None,
) -> str:
    """
    Convert a string to a slug.

    Args:
        text: The string to slugify. Any string is accepted; the empty string
              yields the empty string.
        config: The policy to apply. Defaults to a fresh `SlugConfig()`.
        transliterate: Function mapping Unicode text to ASCII. Defaults to
                       `unidecode.unidecode`.

    Returns:
        The slug, possibly empty.

    Raises:
        ConfigurationError: If `config` cannot be compiled. Nothing is raised
            once the config is valid.
    """
    if config is None:
        config = SlugConfig()
    config.ensure_ready()
    if transliterate is None:
        transliterate = unidecode

    separator = config.word_separator
    replacement = config.invalid_replacement

    text = transliterate(text)
    text = join_words(text, separator)

    # Callables keep backslashes in the separator/replacement literal.
    text = config.invalid_char_matcher.sub(lambda _match: replacement, text)
    if config.dup_separator_matcher is not None:
        text = config.dup_separator_matcher.sub(lambda _match: separator, text)

    text = trim_edges(text, (separator, replacement))

    if config.case_fold:
        text = ascii_lower(text)
    return text


if __name__ == "__main__":
    # Example usage
    test_strings = [
        "This is a test ---",
        "___This is a test___",
        "北京kožušček",
        "Nín hǎo. Wǒ shì zhōng guó rén",
        "C'est déjà l'été.",
    ]

    print("Default slugs:")
    for s in test_strings:
        print(f"Original: '{s}' -> Slug: '{slugify(s)}'")

    print("\nWith '*' separator and '#' replacement:")
    starred = SlugConfig(word_separator="*", invalid_replacement="#")
    for s in ["**##x**##**x##**", "##**x##**##x**##"]:
        print(f"Original: '{s}' -> Slug: '{slugify(s, starred)}'")
