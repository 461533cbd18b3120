"""
Survey sentiment CLI package.

This package contains a small CLI tool that:
- reads survey responses from a CSV export,
- classifies each response as positive, negative or neutral from its choice field,
- counts the words used in the free-text reasons,
- writes console, HTML (word cloud / poster) and spreadsheet reports.
"""

from __future__ import annotations
