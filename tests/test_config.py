"""
Unit tests for SlugConfig and ConfigurationError in prettyslug.config.
"""

import logging
import re

import pytest

from prettyslug import settings
from prettyslug.config import ConfigurationError, SlugConfig


def test_defaults_are_resolved_lazily():
    config = SlugConfig()

    assert config._word_separator is None
    assert config._allowed_set is None
    assert config.case_fold is settings.DEFAULT_CASE_FOLD
    assert config.word_separator == "-"
    assert config.invalid_replacement == "-"
    assert config.allowed_set == "a-zA-Z0-9"


def test_setters_return_same_instance_for_chaining():
    config = SlugConfig()

    chained = (
        config.set_case_fold(False)
        .set_invalid_replacement("#")
        .set_word_separator("*")
        .set_allowed_set("a-z")
    )

    assert chained is config
    assert config.case_fold is False
    assert config.invalid_replacement == "#"
    assert config.word_separator == "*"
    assert config.allowed_set == "a-z"


def test_constructor_knobs_match_setters():
    by_kwargs = SlugConfig(case_fold=False, word_separator="_", allowed_set="a-z")
    by_setters = (
        SlugConfig()
        .set_case_fold(False)
        .set_word_separator("_")
        .set_allowed_set("a-z")
    )

    assert by_kwargs == by_setters


def test_ensure_ready_builds_matchers():
    config = SlugConfig()

    assert config.ensure_ready() is config
    assert config.invalid_char_matcher.pattern == r"[^\-a-zA-Z0-9]"
    assert config.dup_separator_matcher.pattern == r"(?:\-){2,}"


def test_ensure_ready_is_idempotent():
    config = SlugConfig().ensure_ready()
    matcher = config.invalid_char_matcher

    config.ensure_ready()

    assert config.invalid_char_matcher is matcher


@pytest.mark.parametrize(
    "mutate",
    [
        lambda c: c.set_case_fold(False),
        lambda c: c.set_word_separator("_"),
        lambda c: c.set_invalid_replacement("#"),
        lambda c: c.set_allowed_set("a-z"),
    ],
)
def test_every_setter_invalidates_matchers(mutate):
    config = SlugConfig().ensure_ready()

    mutate(config)

    assert config._ready is False
    assert config._invalid_char_matcher is None
    assert config._dup_separator_matcher is None


def test_matchers_follow_separator_change():
    config = SlugConfig().ensure_ready()

    config.set_word_separator("*")

    assert config.invalid_char_matcher.pattern == r"[^\*a-zA-Z0-9]"
    assert config.dup_separator_matcher.fullmatch("***")
    assert not config.dup_separator_matcher.search("--")


def test_empty_separator_has_no_duplicate_matcher():
    config = SlugConfig(word_separator="")

    assert config.invalid_char_matcher.pattern == "[^a-zA-Z0-9]"
    assert config.dup_separator_matcher is None


def test_invalid_matcher_matches_single_characters():
    matcher = SlugConfig().invalid_char_matcher

    assert matcher.findall("a!b??c-d") == ["!", "?", "?"]


def test_empty_allowed_class_matches_everything():
    config = SlugConfig(word_separator="", allowed_set="")

    assert config.invalid_char_matcher.findall("a\nb") == ["a", "\n", "b"]


@pytest.mark.parametrize("allowed_set", ["z-a", "a-z\\", "\\d-z"])
def test_bad_allowed_set_raises_configuration_error(allowed_set):
    config = SlugConfig(allowed_set=allowed_set)

    with pytest.raises(ConfigurationError) as exc_info:
        config.ensure_ready()

    assert isinstance(exc_info.value.__cause__, re.error)
    assert config._ready is False


def test_configuration_error_is_logged(caplog):
    config = SlugConfig(allowed_set="z-a")

    with caplog.at_level(logging.ERROR, logger="prettyslug.config"):
        with pytest.raises(ConfigurationError):
            config.ensure_ready()

    assert "not a valid character class" in caplog.text


def test_fixing_allowed_set_recovers():
    config = SlugConfig(allowed_set="z-a")
    with pytest.raises(ConfigurationError):
        config.ensure_ready()

    config.set_allowed_set("a-z")

    assert config.ensure_ready() is config


def test_matcher_rebuild_is_logged_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="prettyslug.config"):
        SlugConfig(word_separator="_").ensure_ready()

    assert "Compiled slug matchers" in caplog.text


@pytest.mark.parametrize(
    "setter, value",
    [
        ("set_word_separator", None),
        ("set_word_separator", 1),
        ("set_invalid_replacement", b"-"),
        ("set_allowed_set", ["a-z"]),
        ("set_case_fold", "yes"),
    ],
)
def test_setters_reject_wrong_types(setter, value):
    with pytest.raises(TypeError):
        getattr(SlugConfig(), setter)(value)


def test_copy_is_independent():
    original = SlugConfig(word_separator="_").ensure_ready()
    clone = original.copy()

    clone.set_word_separator("*")

    assert original.word_separator == "_"
    assert original.invalid_char_matcher.pattern == r"[^_a-zA-Z0-9]"
    assert clone.word_separator == "*"
    assert clone.invalid_char_matcher.pattern == r"[^\*a-zA-Z0-9]"


def test_equality_uses_effective_values():
    assert SlugConfig() == SlugConfig(word_separator="-", case_fold=True)
    assert SlugConfig() != SlugConfig(word_separator="_")
    assert SlugConfig() != "not a config"


def test_repr_shows_effective_values():
    assert repr(SlugConfig(word_separator="_")) == (
        "SlugConfig(case_fold=True, word_separator='_', "
        "invalid_replacement='-', allowed_set='a-zA-Z0-9')"
    )


@pytest.mark.parametrize("allowed_set", ["a-z]", "a-z]+", "]a-z", "a-z\\\\]"])
def test_allowed_set_closing_the_class_raises_configuration_error(allowed_set):
    config = SlugConfig(allowed_set=allowed_set)

    with pytest.raises(ConfigurationError, match="closes the character class"):
        config.ensure_ready()

    assert config._ready is False


def test_escaped_bracket_in_allowed_set_is_allowed():
    config = SlugConfig(allowed_set="a-z\\]")

    assert config.invalid_char_matcher.pattern == r"[^\-a-z\]]"
    assert config.invalid_char_matcher.findall("a]b!") == ["!"]


def test_config_is_unhashable():
    with pytest.raises(TypeError):
        hash(SlugConfig())
