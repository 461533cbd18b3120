# Survey Sentiment
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Output writer action.

This action analyzes the survey without per-row diagnostics and writes a
`.ods` spreadsheet.

The output contains:
        - A summary sheet with the count and percentage of each sentiment.
        - A word sheet with every counted word, ranked by frequency.
"""

import argparse
from dataclasses import dataclass

from survey_sentiment.actions.base import add_input_argument, add_output_arguments, input_path, output_path
from survey_sentiment.analyzer import SurveyAnalyzer
from survey_sentiment.cli_io import may_write
from survey_sentiment.config import SurveyConfig
from survey_sentiment.reports.spreadsheet import write_spreadsheet


@dataclass(frozen=True)
class WriteOutputAction:
    """
    `write-output` subcommand.

    Writes the spreadsheet report for the configured survey file.
    """

    name: str = "write-output"
    help: str = "Write the spreadsheet report (.ods)"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register CLI arguments for the `write-output` subcommand.

        Args:
            parser:
                Subparser for this command.

        Returns:
            None
        """

        add_input_argument(parser)
        add_output_arguments(parser, what="spreadsheet")

    def run(self, args: argparse.Namespace, config: SurveyConfig | None) -> None:
        """
        Execute output writing.

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
            ConfigError:
                If the output exists and cannot be overwritten.
        """

        if config is None:
            raise RuntimeError("WriteOutputAction requires a config, but none was provided")

        outfile = output_path(args, config.outputs.spreadsheet)
        if not may_write(outfile, force=bool(getattr(args, "force", False))):
            return

        survey = input_path(args, config)
        print(f"Reading file: {survey}")
        result = SurveyAnalyzer().analyze(survey, quiet=True)
        print(f"Responses: {result.total}, distinct words: {len(result.word_frequency)}")

        print(f"Building ODS report: {outfile}")
        write_spreadsheet(outfile, result)
        print(f"Wrote ODS report: {outfile}")
