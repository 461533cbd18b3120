# Survey Sentiment
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Visualization HTML report.

Produces a single self-contained HTML page with a sentiment bar chart and a
word cloud. The markup is plain string templating; words in the cloud are
scaled by font size only.
"""

from html import escape
from pathlib import Path

from survey_sentiment.analyzer import AnalysisResult
from survey_sentiment.lexicon import NEGATIVE, NEUTRAL, POSITIVE
from survey_sentiment.summary import ranked_words


_STYLE = "\n".join(
    [
        "body { font-family: Arial, sans-serif; background: #f0f0f0; padding: 20px; }",
        ".container { max-width: 1200px; margin: 0 auto; background: white; padding: 30px; border-radius: 10px; box-shadow: 0 2px 10px rgba(0,0,0,0.1); }",
        "h1 { text-align: center; color: #333; }",
        "h2 { text-align: center; color: #555; margin-top: 40px; }",
        ".chart-container { margin: 40px auto; max-width: 600px; }",
        ".bar-chart { display: flex; justify-content: space-around; align-items: flex-end; height: 300px; padding: 20px; background: #fafafa; border-radius: 10px; margin-bottom: 10px; }",
        ".bar-wrapper { display: flex; flex-direction: column; align-items: center; flex: 1; margin: 0 10px; }",
        ".bar { width: 80px; border-radius: 8px 8px 0 0; display: flex; align-items: flex-end; justify-content: center; color: white; font-weight: bold; font-size: 20px; padding-bottom: 10px; }",
        ".positive-bar { background: linear-gradient(to top, #10b981, #34d399); }",
        ".neutral-bar { background: linear-gradient(to top, #f59e0b, #fbbf24); }",
        ".negative-bar { background: linear-gradient(to top, #ef4444, #f87171); }",
        ".bar-label { margin-top: 10px; font-weight: bold; color: #333; }",
        ".bar-count { margin-top: 5px; font-size: 14px; color: #666; }",
        ".word-cloud { display: flex; flex-wrap: wrap; justify-content: center; gap: 10px; padding: 20px; }",
        ".word { display: inline-block; padding: 5px 15px; margin: 5px; background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); color: white; border-radius: 5px; font-weight: bold; }",
    ]
)

# (sentiment, css class, label, answer text) in display order
BARS = (
    (POSITIVE, "positive-bar", "✅ Suka", "menjawab iya suka!"),
    (NEUTRAL, "neutral-bar", "😐 Netral", "menjawab netral!"),
    (NEGATIVE, "negative-bar", "❌ Tidak Suka", "menjawab tidak suka!"),
)


def bar_heights(result: AnalysisResult, max_height: int) -> dict[str, int]:
    """
    Scale the three sentiment counts to pixel heights.

    The largest count gets `max_height`; all heights are 0 if every count is 0.
    """

    counts = {POSITIVE: result.positive, NEUTRAL: result.neutral, NEGATIVE: result.negative}
    peak = max(counts.values())
    if peak <= 0:
        return {key: 0 for key in counts}
    return {key: value * max_height // peak for key, value in counts.items()}


def font_size(count: int, *, base: int, step: int, cap: int) -> int:
    return min(base + count * step, cap)


def render_wordcloud_html(result: AnalysisResult, top_n: int = 30) -> str:
    """
    Render the visualization page.

    Args:
        result:
            Finished analysis result.
        top_n:
            Number of words shown in the cloud.

    Returns:
        The HTML document as a string.
    """

    heights = bar_heights(result, 250)

    parts: list[str] = [
        "<!DOCTYPE html>",
        "<html>",
        "<head>",
        "<meta charset='UTF-8'>",
        "<title>Word Cloud - Checklock Survey</title>",
        "<style>",
        _STYLE,
        "</style>",
        "</head>",
        "<body>",
        "<div class='container'>",
        "<h1>📊 Analisis Survey Checklock</h1>",
        "<h2>Hasil Sentimen</h2>",
        "<div class='chart-container'>",
        "<div class='bar-chart'>",
    ]

    for sentiment, css_class, label, answer in BARS:
        count = result.count(sentiment)
        parts.extend(
            [
                "<div class='bar-wrapper'>",
                f"<div class='bar {css_class}' style='height: {heights[sentiment]}px;'>{count}</div>",
                f"<div class='bar-label'>{label}</div>",
                f"<div class='bar-count'>{count} {answer}</div>",
                "</div>",
            ]
        )

    parts.extend(
        [
            "</div>",
            "</div>",
            "<h2>Word Cloud - Kata yang Sering Muncul</h2>",
            "<div class='word-cloud'>",
        ]
    )

    for word, count in ranked_words(result.word_frequency, top_n):
        size = font_size(count, base=12, step=3, cap=48)
        parts.append(f"<span class='word' style='font-size: {size}px;'>{escape(word)} ({count})</span>")

    parts.extend(["</div>", "</div>", "</body>", "</html>"])
    return "\n".join(parts)


def write_report(path: Path, html: str) -> None:
    """Write an HTML document as UTF-8, creating parent directories."""

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(html, encoding="utf-8")
