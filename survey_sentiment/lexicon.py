# Survey Sentiment
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Fixed Indonesian lexicon and choice classifier.

The survey asks respondents whether they like the attendance system ("Apakah
kamu suka ...?"). The answer field is classified with a two-token heuristic on
the words "tidak" (not), "suka" (like) and "iya" (yes). This is deliberately not
a general sentiment model.

The positive/negative keyword sets are kept for reference only. The classifier
does not consult them.
"""

from dataclasses import dataclass, field
from typing import Literal

from survey_sentiment.text import ascii_lower


Sentiment = Literal["positive", "negative", "neutral"]

POSITIVE: Sentiment = "positive"
NEGATIVE: Sentiment = "negative"
NEUTRAL: Sentiment = "neutral"

SENTIMENTS: tuple[Sentiment, ...] = (POSITIVE, NEGATIVE, NEUTRAL)


# "kalo" is listed twice in the source list; the set collapses it.
_STOP_WORDS = (
    "yang", "di", "ke", "dari", "ini", "itu", "untuk",
    "dan", "atau", "dengan", "pada", "adalah", "ada",
    "saya", "aku", "kamu", "dia", "kita", "mereka",
    "jika", "kalau", "kalo", "tapi", "tetapi", "namun",
    "karena", "karna", "kalo", "gak", "ga", "tidak",
    "sih", "aja", "aj",
)

_POSITIVE_WORDS = (
    "suka", "bagus", "baik", "senang", "enak", "praktis",
    "mudah", "memudahkan", "canggih", "modern", "seru",
    "efisien", "cepat", "simple",
)

_NEGATIVE_WORDS = (
    "tidak", "ribet", "ruwet", "susah", "lama", "malas",
    "males", "error", "lag", "repot", "lambat", "buruk",
    "jelek", "bosan", "antri", "ngantri", "menghambat",
)


@dataclass(frozen=True)
class Lexicon:
    """
    Immutable word lists used by the analyzer.

    Attributes:
        stop_words:
            Words excluded from frequency counting.
        positive_words:
            Positive keywords. Not used for classification.
        negative_words:
            Negative keywords. Not used for classification.
    """

    stop_words: frozenset[str] = field(default_factory=lambda: frozenset(_STOP_WORDS))
    positive_words: frozenset[str] = field(default_factory=lambda: frozenset(_POSITIVE_WORDS))
    negative_words: frozenset[str] = field(default_factory=lambda: frozenset(_NEGATIVE_WORDS))

    def is_stop_word(self, word: str) -> bool:
        return word in self.stop_words


DEFAULT_LEXICON = Lexicon()


def classify_choice(choice: str) -> Sentiment:
    """
    Classify a survey answer.

    Rules (first match wins):
        1. Contains both "tidak" and "suka" -> negative.
        2. Contains "iya", or "suka" without "tidak" -> positive.
        3. Anything else -> neutral.

    Matching is substring based on the ASCII-lowercased text, so "Sukanya"
    matches "suka" as well.

    Args:
        choice:
            Raw answer text.

    Returns:
        The sentiment label.
    """

    lower = ascii_lower(choice)
    has_tidak = "tidak" in lower
    has_suka = "suka" in lower

    if has_tidak and has_suka:
        return NEGATIVE
    if "iya" in lower or (has_suka and not has_tidak):
        return POSITIVE
    return NEUTRAL
