# Survey Sentiment
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Result summaries shared by all reports.

Every renderer (console, HTML, spreadsheet) derives its numbers from the
helpers in this module so that all outputs agree on counts and word order.
"""

from typing import Mapping

from survey_sentiment.analyzer import AnalysisResult
from survey_sentiment.lexicon import NEGATIVE, NEUTRAL, POSITIVE


RULE = "=" * 48

SENTIMENT_LABELS = {
    POSITIVE: "Positive (Suka)",
    NEGATIVE: "Negative (Tidak Suka)",
    NEUTRAL: "Neutral",
}


def ranked_words(freq: Mapping[str, int], limit: int | None = None) -> list[tuple[str, int]]:
    """
    Order words by descending count.

    Ties are broken alphabetically so the order is reproducible.

    Args:
        freq:
            Word frequency table.
        limit:
            Optional maximum number of entries.

    Returns:
        List of `(word, count)` pairs.
    """

    ranked = sorted(freq.items(), key=lambda item: (-item[1], item[0]))
    if limit is not None:
        ranked = ranked[: max(0, limit)]
    return ranked


def summary_percentages(result: AnalysisResult) -> tuple[float, float, float]:
    """Return `(positive, negative, neutral)` percentages; all zero for an empty result."""

    total = result.total
    if total == 0:
        return (0.0, 0.0, 0.0)
    return (
        result.positive * 100 / total,
        result.negative * 100 / total,
        result.neutral * 100 / total,
    )


def format_percent(value: float) -> str:
    # Six significant digits, no trailing zeros: 33.3333, 50, 0
    return f"{value:g}"


def format_sentiment_stats(result: AnalysisResult) -> str:
    """Render the sentiment statistics block for the console."""

    pos_pct, neg_pct, neu_pct = summary_percentages(result)
    lines = [
        "",
        "========== SENTIMENT ANALYSIS RESULTS ==========",
        f"Total Responses: {result.total}",
        f"{SENTIMENT_LABELS['positive']}: {result.positive} ({format_percent(pos_pct)}%)",
        f"{SENTIMENT_LABELS['negative']}: {result.negative} ({format_percent(neg_pct)}%)",
        f"{SENTIMENT_LABELS['neutral']}: {result.neutral} ({format_percent(neu_pct)}%)",
        RULE,
        "",
    ]
    return "\n".join(lines)


def format_word_bars(freq: Mapping[str, int], top_n: int = 20) -> str:
    """
    Render the ranked word list with proportional `#` bars.

    Each bar is `count * 2` characters long.
    """

    words = ranked_words(freq, top_n)
    lines = ["", f"========== WORD CLOUD (Top {len(words)} Words) =========="]
    for word, count in words:
        lines.append(f"{word} ({count}): {'#' * (count * 2)}")
    lines.append(RULE)
    lines.append("")
    return "\n".join(lines)
