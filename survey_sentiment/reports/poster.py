# Survey Sentiment
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Printable A4 poster.

The poster shows the respondent total, the three sentiment counts, a compact
bar chart, the top words and a QR code linking to the source repository. The
QR code is an image URL for a public QR service; no request is made while the
report is generated.
"""

from html import escape
from urllib.parse import quote

from survey_sentiment.analyzer import AnalysisResult
from survey_sentiment.config import DEFAULT_REPOSITORY_URL
from survey_sentiment.lexicon import NEGATIVE, NEUTRAL, POSITIVE
from survey_sentiment.reports.html_report import bar_heights, font_size
from survey_sentiment.summary import ranked_words


QR_SERVICE_URL = "https://api.qrserver.com/v1/create-qr-code/?size=200x200&data="

_STYLE = "\n".join(
    [
        "@page { size: A4; margin: 0; }",
        "* { margin: 0; padding: 0; box-sizing: border-box; }",
        "body { font-family: 'Segoe UI', Arial, sans-serif; background: white; }",
        ".poster { width: 210mm; height: 297mm; padding: 15mm; background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); position: relative; }",
        ".content { background: white; height: 100%; border-radius: 15px; padding: 20px; box-shadow: 0 10px 40px rgba(0,0,0,0.3); display: flex; flex-direction: column; }",
        ".header { text-align: center; margin-bottom: 15px; }",
        "h1 { color: #667eea; font-size: 32px; margin-bottom: 5px; }",
        ".subtitle { color: #666; font-size: 14px; }",
        ".stats-row { display: flex; justify-content: space-around; margin: 15px 0; gap: 10px; }",
        ".stat-box { flex: 1; text-align: center; padding: 12px; border-radius: 10px; background: #f8f9fa; }",
        ".stat-number { font-size: 28px; font-weight: bold; color: #667eea; }",
        ".stat-label { font-size: 12px; color: #666; margin-top: 3px; }",
        ".chart-section { flex: 1; display: flex; gap: 15px; margin: 10px 0; }",
        ".bar-chart-container { flex: 0.4; display: flex; flex-direction: column; }",
        ".chart-title { font-size: 16px; font-weight: bold; color: #333; margin-bottom: 10px; text-align: center; }",
        ".bar-chart { display: flex; justify-content: space-around; align-items: flex-end; height: 180px; padding: 10px; background: #fafafa; border-radius: 10px; }",
        ".bar-wrapper { display: flex; flex-direction: column; align-items: center; flex: 1; }",
        ".bar { width: 50px; border-radius: 6px 6px 0 0; display: flex; align-items: flex-end; justify-content: center; color: white; font-weight: bold; font-size: 16px; padding-bottom: 8px; }",
        ".positive-bar { background: linear-gradient(to top, #10b981, #34d399); }",
        ".neutral-bar { background: linear-gradient(to top, #f59e0b, #fbbf24); }",
        ".negative-bar { background: linear-gradient(to top, #ef4444, #f87171); }",
        ".bar-label { margin-top: 8px; font-weight: bold; color: #333; font-size: 11px; }",
        ".sentiment-detail { display: flex; flex-direction: column; gap: 8px; margin-top: 10px; }",
        ".sentiment-item { display: flex; align-items: center; gap: 8px; padding: 8px; border-radius: 8px; background: white; }",
        ".sentiment-icon { width: 30px; height: 30px; border-radius: 50%; display: flex; align-items: center; justify-content: center; font-size: 16px; }",
        ".positive-icon { background: #d1fae5; }",
        ".neutral-icon { background: #fef3c7; }",
        ".negative-icon { background: #fee2e2; }",
        ".sentiment-text { flex: 1; font-size: 11px; }",
        ".wordcloud-container { flex: 0.6; display: flex; flex-direction: column; }",
        ".word-cloud { display: flex; flex-wrap: wrap; justify-content: center; align-items: center; gap: 6px; padding: 10px; background: #fafafa; border-radius: 10px; flex: 1; overflow: hidden; }",
        ".word { display: inline-block; padding: 4px 10px; background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); color: white; border-radius: 5px; font-weight: bold; white-space: nowrap; }",
        ".footer { display: flex; justify-content: space-between; align-items: center; margin-top: 10px; padding-top: 10px; border-top: 2px solid #e5e7eb; }",
        ".qr-section { display: flex; align-items: center; gap: 10px; }",
        ".qr-code { width: 80px; height: 80px; }",
        ".qr-text { font-size: 10px; color: #666; }",
        ".footer-text { font-size: 10px; color: #666; text-align: right; }",
        "@media print { body { margin: 0; } .poster { box-shadow: none; } }",
    ]
)

# (sentiment, stat box background, number color, label)
_STAT_BOXES = (
    (POSITIVE, "#d1fae5", "#10b981", "Suka"),
    (NEUTRAL, "#fef3c7", "#f59e0b", "Netral"),
    (NEGATIVE, "#fee2e2", "#ef4444", "Tidak Suka"),
)

# (sentiment, bar class, bar label)
_BARS = (
    (POSITIVE, "positive-bar", "Suka"),
    (NEUTRAL, "neutral-bar", "Netral"),
    (NEGATIVE, "negative-bar", "Tidak"),
)

# (sentiment, icon class, icon, answer)
_DETAILS = (
    (POSITIVE, "positive-icon", "+", "iya suka!"),
    (NEUTRAL, "neutral-icon", "-", "netral"),
    (NEGATIVE, "negative-icon", "x", "tidak suka!"),
)


def qr_code_url(repository_url: str) -> str:
    """Return the QR image URL encoding `repository_url`."""

    return QR_SERVICE_URL + quote(repository_url, safe="")


def render_poster_html(
    result: AnalysisResult,
    repository_url: str = DEFAULT_REPOSITORY_URL,
    top_n: int = 25,
) -> str:
    """
    Render the printable poster.

    Args:
        result:
            Finished analysis result.
        repository_url:
            URL encoded into the QR code.
        top_n:
            Number of words shown in the word cloud.

    Returns:
        The HTML document as a string.
    """

    heights = bar_heights(result, 150)
    total = result.total

    parts: list[str] = [
        "<!DOCTYPE html>",
        "<html>",
        "<head>",
        "<meta charset='UTF-8'>",
        "<title>Poster - Analisis Survey Checklock</title>",
        "<style>",
        _STYLE,
        "</style>",
        "</head>",
        "<body>",
        "<div class='poster'>",
        "<div class='content'>",
        "<div class='header'>",
        "<h1>Analisis Survey Checklock</h1>",
        "<p class='subtitle'>Hasil Survey Kepuasan Sistem Absensi Checklock</p>",
        "</div>",
        "<div class='stats-row'>",
        "<div class='stat-box'>",
        f"<div class='stat-number'>{total}</div>",
        "<div class='stat-label'>Total Responden</div>",
        "</div>",
    ]

    for sentiment, background, color, label in _STAT_BOXES:
        parts.extend(
            [
                f"<div class='stat-box' style='background: {background};'>",
                f"<div class='stat-number' style='color: {color};'>{result.count(sentiment)}</div>",
                f"<div class='stat-label'>{label}</div>",
                "</div>",
            ]
        )

    parts.extend(
        [
            "</div>",
            "<div class='chart-section'>",
            "<div class='bar-chart-container'>",
            "<div class='chart-title'>Hasil Sentimen</div>",
            "<div class='bar-chart'>",
        ]
    )

    for sentiment, bar_class, bar_label in _BARS:
        parts.extend(
            [
                "<div class='bar-wrapper'>",
                f"<div class='bar {bar_class}' style='height: {heights[sentiment]}px;'>{result.count(sentiment)}</div>",
                f"<div class='bar-label'>{bar_label}</div>",
                "</div>",
            ]
        )

    parts.extend(["</div>", "<div class='sentiment-detail'>"])

    for sentiment, icon_class, icon, answer in _DETAILS:
        parts.extend(
            [
                "<div class='sentiment-item'>",
                f"<div class='sentiment-icon {icon_class}'>{icon}</div>",
                f"<div class='sentiment-text'>{result.count(sentiment)} responden menjawab <b>{answer}</b></div>",
                "</div>",
            ]
        )

    parts.extend(
        [
            "</div>",
            "</div>",
            "<div class='wordcloud-container'>",
            "<div class='chart-title'>Kata yang Sering Muncul</div>",
            "<div class='word-cloud'>",
        ]
    )

    for word, count in ranked_words(result.word_frequency, top_n):
        size = font_size(count, base=10, step=2, cap=28)
        parts.append(f"<span class='word' style='font-size: {size}px;'>{escape(word)} ({count})</span>")

    parts.extend(
        [
            "</div>",
            "</div>",
            "</div>",
            "<div class='footer'>",
            "<div class='qr-section'>",
            f"<img class='qr-code' src='{escape(qr_code_url(repository_url), quote=True)}' alt='QR Code'>",
            "<div class='qr-text'><b>Scan untuk kode sumber</b><br>GitHub Repository</div>",
            "</div>",
            "<div class='footer-text'>",
            "Dibuat dengan Survey Sentiment<br>",
            f"Data dianalisis dari {total} responden survey",
            "</div>",
            "</div>",
            "</div>",
            "</div>",
            "</body>",
            "</html>",
        ]
    )

    return "\n".join(parts)
