from __future__ import annotations

"""
Word cloud HTML action.

Runs the console analysis and writes a self-contained HTML page with the
sentiment bar chart and the word cloud.
"""

import argparse
from dataclasses import dataclass

from survey_sentiment.actions.analyze import run_console_analysis
from survey_sentiment.actions.base import add_input_argument, add_output_arguments, input_path, output_path
from survey_sentiment.cli_io import may_write
from survey_sentiment.config import SurveyConfig
from survey_sentiment.reports.html_report import render_wordcloud_html, write_report


@dataclass(frozen=True)
class WordcloudAction:
    """`wordcloud` subcommand."""

    name: str = "wordcloud"
    help: str = "Write the bar chart / word cloud HTML page"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        add_input_argument(parser)
        add_output_arguments(parser, what="HTML page")

    def run(self, args: argparse.Namespace, config: SurveyConfig | None) -> None:
        if config is None:
            raise RuntimeError("WordcloudAction requires a config, but none was provided")

        outfile = output_path(args, config.outputs.wordcloud)
        if not may_write(outfile, force=bool(getattr(args, "force", False))):
            return

        result = run_console_analysis(
            input_path(args, config),
            top_n=config.report.console_top_words,
        )

        write_report(outfile, render_wordcloud_html(result, config.report.wordcloud_top_words))
        print(f"HTML word cloud generated: {outfile}")
        print(f"\nAnalysis complete! Open '{outfile.name}' in your browser to see the visual word cloud.")
