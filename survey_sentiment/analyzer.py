# Survey Sentiment
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Survey CSV analysis.

The analyzer performs a single pass over a survey export:

- The first line is treated as a header and skipped without validation.
- Every following non-empty line is split into fields.
- Field 3 (the choice) is classified, field 4 (the reason) feeds the word
  frequency table.

Rows with fewer than four fields are skipped silently. A file that cannot be
opened yields an empty result instead of an exception.
"""

import sys
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, MutableMapping

from survey_sentiment.csv_line import parse_line
from survey_sentiment.lexicon import (
    DEFAULT_LEXICON,
    NEGATIVE,
    POSITIVE,
    Lexicon,
    Sentiment,
    classify_choice,
)
from survey_sentiment.text import normalize, tokenize


CHOICE_FIELD = 3
REASON_FIELD = 4

# Only whitespace characters are trimmed from the choice field.
_CHOICE_TRIM = " \t\r\n"


@dataclass(frozen=True)
class AnalysisResult:
    """
    Outcome of one survey analysis.

    Attributes:
        positive:
            Number of rows classified as positive.
        negative:
            Number of rows classified as negative.
        neutral:
            Number of rows classified as neutral.
        word_frequency:
            Read-only mapping from normalized word to occurrence count.
    """

    positive: int = 0
    negative: int = 0
    neutral: int = 0
    word_frequency: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def total(self) -> int:
        return self.positive + self.negative + self.neutral

    def count(self, sentiment: Sentiment) -> int:
        """Return the counter for a sentiment label."""

        return int(getattr(self, sentiment))

    @classmethod
    def empty(cls) -> AnalysisResult:
        return cls()


@dataclass
class _Tally:
    """Mutable accumulator used while a file is being scanned."""

    positive: int = 0
    negative: int = 0
    neutral: int = 0
    word_frequency: dict[str, int] = field(default_factory=dict)

    def add(self, sentiment: Sentiment) -> None:
        if sentiment == POSITIVE:
            self.positive += 1
        elif sentiment == NEGATIVE:
            self.negative += 1
        else:
            self.neutral += 1

    def freeze(self) -> AnalysisResult:
        return AnalysisResult(
            positive=self.positive,
            negative=self.negative,
            neutral=self.neutral,
            word_frequency=MappingProxyType(dict(self.word_frequency)),
        )


class SurveyAnalyzer:
    """Classify survey answers and count reason words.

    The lexicon is fixed at construction time and never modified.
    """

    def __init__(self, lexicon: Lexicon = DEFAULT_LEXICON) -> None:
        self.lexicon = lexicon

    def classify(self, choice: str) -> Sentiment:
        return classify_choice(choice)

    def accumulate(self, text: str, freq: MutableMapping[str, int]) -> None:
        """
        Add the countable words of `text` to a frequency table.

        A token is counted when its normalized form is longer than two
        characters and is not a stop word.

        Args:
            text:
                Free text (may be empty).
            freq:
                Frequency table to update in place.

        Returns:
            None
        """

        for token in tokenize(text):
            word = normalize(token)
            if len(word) > 2 and not self.lexicon.is_stop_word(word):
                freq[word] = freq.get(word, 0) + 1

    def analyze(self, path: Path | str, *, quiet: bool = False) -> AnalysisResult:
        """
        Analyze a survey CSV file.

        Args:
            path:
                CSV file to read. The first line must be a header.
            quiet:
                If True, do not print per-row diagnostics and the final count.

        Returns:
            The finished analysis result. Empty if the file cannot be opened.
        """

        path = Path(path)
        tally = _Tally()

        try:
            handle = path.open("r", encoding="utf-8", errors="replace", newline="\n")
        except OSError:
            print(f"Error: Could not open file {path}", file=sys.stderr)
            return AnalysisResult.empty()

        line_count = 0
        with handle:
            next(handle, None)

            for raw in handle:
                line = raw.rstrip("\n")
                if not line:
                    continue
                line_count += 1

                fields = parse_line(line)
                if len(fields) <= CHOICE_FIELD:
                    continue

                choice = fields[CHOICE_FIELD].strip(_CHOICE_TRIM)
                reason = fields[REASON_FIELD] if len(fields) > REASON_FIELD else ""

                if not quiet:
                    print(f"Line {line_count} sentiment: [{choice}]")

                tally.add(self.classify(choice))
                self.accumulate(reason, tally.word_frequency)

        if not quiet:
            print(f"\nProcessed {line_count} responses.")

        return tally.freeze()
