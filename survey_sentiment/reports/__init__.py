"""Report renderers.

Each renderer is a plain function over a finished `AnalysisResult`:

- `render_wordcloud_html`: bar chart and word cloud page
- `render_poster_html`: printable A4 poster with a QR code
- `build_spreadsheet`: ODS document with summary and word sheets

Renderers never modify the result.
"""

from survey_sentiment.reports.html_report import render_wordcloud_html, write_report
from survey_sentiment.reports.poster import DEFAULT_REPOSITORY_URL, render_poster_html
from survey_sentiment.reports.spreadsheet import build_spreadsheet, write_spreadsheet

__all__ = [
    "DEFAULT_REPOSITORY_URL",
    "build_spreadsheet",
    "render_poster_html",
    "render_wordcloud_html",
    "write_report",
    "write_spreadsheet",
]
