"""
Tests for text normalization and the choice classifier.
"""

import pytest

from survey_sentiment.lexicon import DEFAULT_LEXICON, Lexicon, classify_choice
from survey_sentiment.text import ascii_lower, normalize, tokenize


def test_normalize_strips_punctuation_and_lowercases():
    assert normalize("Praktis!!123") == "praktis123"


def test_normalize_may_return_empty():
    assert normalize("!!!") == ""


def test_normalize_drops_non_ascii():
    assert normalize("Café") == "caf"


def test_ascii_lower_leaves_non_ascii_untouched():
    assert ascii_lower("TIDAK Ä") == "tidak Ä"


def test_tokenize_splits_on_whitespace_runs():
    assert tokenize("  ini\tok \n enak ") == ["ini", "ok", "enak"]


@pytest.mark.parametrize("separator", ["\u00a0", "\u2003", "\u0085", "\x1f"])
def test_tokenize_keeps_non_ascii_whitespace_inside_tokens(separator):
    assert tokenize(f"enak{separator}banget") == [f"enak{separator}banget"]


def test_tokenize_splits_on_vertical_tab_and_form_feed():
    assert tokenize("enak\vbanget\fcepat\r") == ["enak", "banget", "cepat"]


@pytest.mark.parametrize(
    "choice, expected",
    [
        ("Tidak suka banget", "negative"),
        ("Iya, saya suka!", "positive"),
        ("Lumayan", "neutral"),
        ("SUKA", "positive"),
        ("Iya", "positive"),
        ("Tidak", "neutral"),
        ("", "neutral"),
        # "tidak" + "suka" wins over "iya"
        ("Iya tapi tidak suka", "negative"),
    ],
)
def test_classify_choice(choice, expected):
    assert classify_choice(choice) == expected


def test_classify_matches_substrings():
    assert classify_choice("Sukanya sih biasa") == "positive"


def test_default_lexicon_stop_words():
    assert len(DEFAULT_LEXICON.stop_words) == 33
    assert DEFAULT_LEXICON.is_stop_word("ini")
    assert DEFAULT_LEXICON.is_stop_word("tidak")
    assert not DEFAULT_LEXICON.is_stop_word("enak")


def test_lexicon_is_immutable():
    with pytest.raises(AttributeError):
        DEFAULT_LEXICON.stop_words = frozenset()  # type: ignore[misc]


def test_keyword_sets_do_not_affect_classification():
    lexicon = Lexicon(positive_words=frozenset({"lumayan"}))
    assert "lumayan" in lexicon.positive_words
    assert classify_choice("Lumayan") == "neutral"
