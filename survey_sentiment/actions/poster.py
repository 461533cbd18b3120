# Survey Sentiment
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Poster action.

Runs the console analysis and writes a printable A4 poster. The repository
URL for the QR code is taken from `--repo-url`, then from
`report.repository_url` in the config.
"""

import argparse
from dataclasses import dataclass

from survey_sentiment.actions.analyze import run_console_analysis
from survey_sentiment.actions.base import add_input_argument, add_output_arguments, input_path, output_path
from survey_sentiment.cli_io import may_write
from survey_sentiment.config import SurveyConfig
from survey_sentiment.reports.html_report import write_report
from survey_sentiment.reports.poster import render_poster_html


_PRINT_HINTS = "\n".join(
    [
        "",
        "To convert to PNG/JPG:",
        "1. Open the poster in your browser",
        "2. Press Ctrl+P (or Cmd+P on Mac)",
        "3. Choose 'Save as PDF' or use browser screenshot tools",
        "4. Or use online tools to convert the PDF to PNG/JPG",
    ]
)


@dataclass(frozen=True)
class PosterAction:
    """
    `poster` subcommand.

    Writes the printable poster including a QR code for the repository URL.
    """

    name: str = "poster"
    help: str = "Write the printable A4 poster HTML"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register CLI arguments for the `poster` subcommand.

        Args:
            parser:
                Subparser for this command.

        Returns:
            None
        """

        add_input_argument(parser)
        add_output_arguments(parser, what="poster")
        parser.add_argument(
            "--repo-url",
            help="Repository URL encoded in the QR code (default: report.repository_url)",
        )

    def run(self, args: argparse.Namespace, config: SurveyConfig | None) -> None:
        """
        Execute the poster writer.

        Args:
            args:
                Parsed args for the subcommand.
            config:
                Loaded configuration.

        Returns:
            None

        Raises:
            ConfigError:
                If the poster exists and cannot be overwritten.
        """

        if config is None:
            raise RuntimeError("PosterAction requires a config, but none was provided")

        outfile = output_path(args, config.outputs.poster)
        if not may_write(outfile, force=bool(getattr(args, "force", False))):
            return

        result = run_console_analysis(
            input_path(args, config),
            top_n=config.report.console_top_words,
        )

        repo_url = (getattr(args, "repo_url", None) or "").strip() or config.report.repository_url
        html = render_poster_html(result, repo_url, config.report.poster_top_words)
        write_report(outfile, html)
        print(f"Poster HTML generated: {outfile}")

        print("\n=== FILES GENERATED ===")
        print(f"{outfile.name} - A4 size poster (open and print to PDF or save as image)")
        print(_PRINT_HINTS)
