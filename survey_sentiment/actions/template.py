# Survey Sentiment
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Template configuration generator.

This action writes a ready-to-edit `survey.yaml` file into the current
directory (or a user-specified path).
"""

import argparse
from dataclasses import dataclass
from pathlib import Path

from survey_sentiment.config import ConfigError, SurveyConfig


@dataclass(frozen=True)
class TemplateAction:
    """
    `template` subcommand.

    This action does not require a YAML config because it produces one.
    """

    name: str = "template"
    help: str = "Write a template survey.yaml config"
    requires_config: bool = False

    _TEMPLATE_YAML: str = "\n".join(
        [
            "# Survey export to analyze (CSV, first line is the header).",
            "# Column 4 holds the answer (\"Iya, suka\" / \"Tidak suka\" / ...),",
            "# column 5 the free-text reason.",
            "input: survey_data.csv",
            "",
            "# Output files (relative to this file)",
            "outputs:",
            "  wordcloud: wordcloud.html",
            "  poster: poster.html",
            "  spreadsheet: results.ods",
            "",
            "# Report options (optional; defaults shown)",
            "report:",
            "  # Words listed with '#' bars on the console",
            "  console_top_words: 20",
            "  # Words shown in the HTML word cloud",
            "  wordcloud_top_words: 30",
            "  # Words shown on the poster",
            "  poster_top_words: 25",
            "  # URL encoded in the poster's QR code",
            "  repository_url: https://github.com/yourusername/sentiment-analysis",
            "",
        ]
    )

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register CLI arguments for the `template` subcommand.

        Args:
            parser:
                Subparser for this command.

        Returns:
            None
        """

        parser.add_argument(
            "path",
            nargs="?",
            default="survey.yaml",
            help="Destination path for the template (default: ./survey.yaml)",
        )
        parser.add_argument(
            "-f",
            "--force",
            action="store_true",
            help="Allow overwriting an existing file",
        )

    def run(self, args: argparse.Namespace, config: SurveyConfig | None) -> None:
        """
        Execute the template writer.

        Args:
            args:
                Parsed args for the subcommand.
            config:
                Unused for this action.

        Returns:
            None

        Raises:
            ConfigError:
                If the destination exists and `--force` is not set.
        """

        _ = config
        dest = Path(args.path)
        self._write_template(dest, force=bool(args.force))
        print(f"Wrote template config to: {dest}")

    def _write_template(self, dest: Path, *, force: bool) -> None:
        """
        Write a template YAML configuration file.

        Raises:
            ConfigError:
                If the destination exists and `force` is False.
            OSError:
                If the file cannot be written.
        """

        if dest.exists() and not force:
            raise ConfigError(f"Refusing to overwrite existing file: {dest} (use --force)")

        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(self._TEMPLATE_YAML, encoding="utf-8")
