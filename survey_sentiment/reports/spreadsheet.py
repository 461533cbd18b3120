# Survey Sentiment
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Spreadsheet (.ods) report.

The spreadsheet contains:
        - A `Summary` sheet with the count and share of each sentiment.
        - A `Words` sheet with the full ranked word list.
"""

import re
from pathlib import Path
from typing import Any, cast

from odfdo import Document
from odfdo.cell import Cell
from odfdo.column import Column
from odfdo.element import Element
from odfdo.row import Row
from odfdo.style import Style
from odfdo.table import Table

from survey_sentiment.analyzer import AnalysisResult
from survey_sentiment.lexicon import NEGATIVE, NEUTRAL, POSITIVE
from survey_sentiment.summary import SENTIMENT_LABELS, ranked_words, summary_percentages


_XML_ILLEGAL_CHARS_RE = re.compile(
    # XML 1.0 disallows most C0 control chars except TAB, LF, CR.
    r"[\x00-\x08\x0B\x0C\x0E-\x1F]"
    # Surrogates and noncharacters.
    r"|[\uD800-\uDFFF]|[\uFFFE\uFFFF]"
)


def _xml_safe_text(value: Any) -> str:
    """Return a string that is safe to embed in XML/ODS."""

    if value is None:
        return ""
    return _XML_ILLEGAL_CHARS_RE.sub("", str(value))


def _make_style_name(prefix: str, scope: str, *, suffix: str = "") -> str:
    """Return a deterministic, ASCII-only style name."""

    scope_key = re.sub(r"[^A-Za-z0-9_]", "_", scope or "").strip("_")[:40] or "x"
    parts = [prefix, scope_key]
    if suffix:
        parts.append(re.sub(r"[^A-Za-z0-9_]", "_", suffix))
    return "_".join(parts)


def _insert_automatic_style(doc: Document, style: Style | None) -> Style | None:
    """Insert style into document automatic-styles so viewers can apply it."""

    if style is None:
        return None
    try:
        doc.insert_style(style, automatic=True)
        return style
    except Exception:  # noqa: BLE001
        return None


def _col_letters(index_1_based: int) -> str:
    """Convert 1-based column index to spreadsheet letters (A, B, ..., AA, ...)."""

    if index_1_based <= 0:
        return "A"
    n = index_1_based
    out: list[str] = []
    while n:
        n, rem = divmod(n - 1, 26)
        out.append(chr(ord("A") + rem))
    return "".join(reversed(out))


def _enable_autofilter(doc: Document, sheet_ranges: list[tuple[str, int, int]]) -> None:
    """Best-effort: enable auto filter dropdowns on each sheet's used range."""

    try:
        db_ranges = Element.from_tag("table:database-ranges")
        for sheet_name, ncols, nrows in sheet_ranges:
            if ncols <= 0 or nrows <= 0:
                continue

            addr = f"'{sheet_name}'.A1:{_col_letters(ncols)}{nrows}"
            db = Element.from_tag("table:database-range")
            db.set_attribute("table:name", _make_style_name("db", sheet_name))
            db.set_attribute("table:target-range-address", addr)
            db.set_attribute("table:display-filter-buttons", "true")
            db.set_attribute("table:contains-header", "true")
            db_ranges.append(db)

        doc.body.append(db_ranges)
    except Exception:  # noqa: BLE001
        # Filters are a convenience only; the report is still valid without them.
        return


def _append_sheet(
    doc: Document,
    name: str,
    headers: list[str],
    rows: list[list[Any]],
) -> tuple[str, int, int]:
    """
    Append one sheet with a bold header row.

    Args:
        doc:
            ODF spreadsheet document.
        name:
            Sheet name.
        headers:
            Column titles.
        rows:
            Cell values. Ints and floats become numeric cells, everything else text.

    Returns:
        Tuple of (sheet name, columns, rows including the header).
    """

    table = Table(name)

    try:
        header_style = cast(
            Style,
            Style("table-cell", name=_make_style_name("hdr", name), area="text", bold=True),
        )
    except Exception:  # noqa: BLE001
        header_style = None
    header_style = _insert_automatic_style(doc, header_style)

    col_max_chars = [len(title) for title in headers]
    for values in rows:
        for c_idx, value in enumerate(values):
            col_max_chars[c_idx] = max(col_max_chars[c_idx], len(_xml_safe_text(value)))

    for c_idx, chars in enumerate(col_max_chars, start=1):
        # 0.25 cm per character, clamped to [2.5cm, 12cm]
        width_cm = max(2.5, min(chars * 0.25, 12.0))
        try:
            col_style = cast(
                Style,
                Style(
                    "table-column",
                    name=_make_style_name("col", name, suffix=str(c_idx)),
                    area="table-column",
                    width=f"{width_cm:.2f}cm",
                ),
            )
        except Exception:  # noqa: BLE001
            col_style = None
        col_style = _insert_automatic_style(doc, col_style)
        table.append(Column(style=col_style.name) if col_style is not None else Column())

    header = Row()
    for title in headers:
        cell = Cell(value=_xml_safe_text(title))
        if header_style is not None:
            cell.style = header_style.name
        header.append_cell(cell)
    table.append_row(header)

    for values in rows:
        row = Row()
        for value in values:
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                row.append_cell(Cell(value=value))
            else:
                row.append_cell(Cell(value=_xml_safe_text(value)))
        table.append_row(row)

    doc.body.append(table)
    return (name, len(headers), 1 + len(rows))


def build_spreadsheet(result: AnalysisResult) -> Document:
    """
    Build the ODS report document.

    Args:
        result:
            Finished analysis result.

    Returns:
        An odfdo spreadsheet document (not yet saved).
    """

    doc = Document("spreadsheet")

    # The template ships with a default empty sheet.
    for table in list(doc.body.tables):
        doc.body.delete(table)

    pos_pct, neg_pct, neu_pct = summary_percentages(result)
    summary_rows: list[list[Any]] = [
        [SENTIMENT_LABELS[POSITIVE], result.positive, round(pos_pct, 2)],
        [SENTIMENT_LABELS[NEGATIVE], result.negative, round(neg_pct, 2)],
        [SENTIMENT_LABELS[NEUTRAL], result.neutral, round(neu_pct, 2)],
        ["Total", result.total, 100.0 if result.total else 0.0],
    ]

    word_rows: list[list[Any]] = [
        [rank, word, count]
        for rank, (word, count) in enumerate(ranked_words(result.word_frequency), start=1)
    ]

    sheet_ranges = [
        _append_sheet(doc, "Summary", ["Sentiment", "Count", "Percent"], summary_rows),
        _append_sheet(doc, "Words", ["Rank", "Word", "Count"], word_rows),
    ]
    _enable_autofilter(doc, sheet_ranges)

    return doc


def write_spreadsheet(path: Path, result: AnalysisResult) -> None:
    """Build and save the ODS report, creating parent directories."""

    doc = build_spreadsheet(result)
    path.parent.mkdir(parents=True, exist_ok=True)
    doc.save(path)
