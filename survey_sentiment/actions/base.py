from __future__ import annotations

"""
Shared action interface.

Actions implement a small protocol so the CLI can dynamically register arguments
and dispatch execution based on the selected subcommand.
"""

import argparse
from pathlib import Path
from typing import Protocol

from survey_sentiment.config import SurveyConfig


class Action(Protocol):
    """
    Interface for a CLI action (subcommand).

    Implementations are expected to:
    - Provide a `name` used as the subcommand.
    - Provide a short `help` string for `--help`.
    - Declare whether they require a loaded configuration.
    """

    name: str
    help: str
    requires_config: bool

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register action-specific CLI arguments.

        Args:
            parser:
                The subparser dedicated to this action.

        Returns:
            None
        """

    def run(self, args: argparse.Namespace, config: SurveyConfig | None) -> None:
        """
        Execute the action.

        Args:
            args:
                Parsed arguments for this subcommand.
            config:
                Loaded configuration, if `requires_config` is True.

        Returns:
            None
        """


def add_input_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-i",
        "--input",
        help="Survey CSV file (default: 'input' from survey.yaml, else ./survey_data.csv)",
    )


def add_output_arguments(parser: argparse.ArgumentParser, *, what: str) -> None:
    parser.add_argument(
        "-o",
        "--output",
        help=f"Destination for the {what} (default: taken from survey.yaml)",
    )
    parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Overwrite the output file if it already exists",
    )


def input_path(args: argparse.Namespace, config: SurveyConfig) -> Path:
    """Return the survey file, preferring `--input` over the config."""

    value = getattr(args, "input", None)
    return Path(value) if value else config.input


def output_path(args: argparse.Namespace, default: Path) -> Path:
    """Return the output file, preferring `--output` over the config."""

    value = getattr(args, "output", None)
    return Path(value) if value else default
