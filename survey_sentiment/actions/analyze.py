# Survey Sentiment
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Console analysis action.

This action reads the survey CSV, prints one diagnostic line per response,
then prints the sentiment statistics and the ranked word list with `#` bars.
The `wordcloud` and `poster` actions start with the same console run.
"""

import argparse
from dataclasses import dataclass
from pathlib import Path

from survey_sentiment.actions.base import add_input_argument, input_path
from survey_sentiment.analyzer import AnalysisResult, SurveyAnalyzer
from survey_sentiment.config import SurveyConfig
from survey_sentiment.summary import format_sentiment_stats, format_word_bars


BANNER = "=== Sentiment Analysis & Word Cloud Generator ==="


def run_console_analysis(path: Path, *, top_n: int) -> AnalysisResult:
    """
    Analyze a survey file and print the console report.

    Args:
        path:
            Survey CSV file.
        top_n:
            Number of words listed with bars.

    Returns:
        The finished analysis result.
    """

    print(BANNER)
    print("Converting survey CSV data to word cloud...\n")
    print(f"Reading file: {path}")

    result = SurveyAnalyzer().analyze(path)

    print(format_sentiment_stats(result))
    print(format_word_bars(result.word_frequency, top_n))
    return result


@dataclass(frozen=True)
class AnalyzeAction:
    """
    `analyze` subcommand.

    Prints sentiment counts and word frequencies without writing any file.
    """

    name: str = "analyze"
    help: str = "Print sentiment statistics and top words"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register CLI arguments for the `analyze` subcommand.

        Args:
            parser:
                Subparser for this command.

        Returns:
            None
        """

        add_input_argument(parser)
        parser.add_argument(
            "--top",
            type=int,
            help="Number of words to list (default: report.console_top_words, 20)",
        )

    def run(self, args: argparse.Namespace, config: SurveyConfig | None) -> None:
        """
        Execute the console analysis.

        Args:
            args:
                Parsed args for the subcommand.
            config:
                Loaded configuration.

        Returns:
            None

        Raises:
            RuntimeError:
                If no configuration was provided.
        """

        if config is None:
            raise RuntimeError("AnalyzeAction requires a config, but none was provided")

        top_n = args.top if args.top is not None else config.report.console_top_words
        run_console_analysis(input_path(args, config), top_n=max(0, top_n))
