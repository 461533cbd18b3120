# Survey Sentiment
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Configuration loading and validation.

This module handles reading `survey.yaml`, validating its keys, and
normalizing paths so that actions can rely on a typed config object.

Every key is optional. Without a config file the built-in defaults apply and
relative paths are resolved against the current directory.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml


DEFAULT_CONFIG_NAME = "survey.yaml"
DEFAULT_INPUT = "survey_data.csv"
DEFAULT_REPOSITORY_URL = "https://github.com/yourusername/sentiment-analysis"


@dataclass(frozen=True)
class OutputPaths:
    """
    Output file locations.

    Attributes:
        wordcloud:
            Visualization HTML (bar chart + word cloud).
        poster:
            Printable poster HTML.
        spreadsheet:
            ODS report.
    """

    wordcloud: Path = Path("wordcloud.html")
    poster: Path = Path("poster.html")
    spreadsheet: Path = Path("results.ods")


@dataclass(frozen=True)
class ReportConfig:
    """
    Report rendering options.

    Attributes:
        console_top_words:
            Number of words listed in the console word bars.
        wordcloud_top_words:
            Number of words in the HTML word cloud.
        poster_top_words:
            Number of words on the poster.
        repository_url:
            URL encoded in the poster's QR code.
    """

    console_top_words: int = 20
    wordcloud_top_words: int = 30
    poster_top_words: int = 25
    repository_url: str = DEFAULT_REPOSITORY_URL


@dataclass(frozen=True)
class SurveyConfig:
    """
    Parsed configuration for a survey analysis run.

    Attributes:
        config_path:
            Path to the YAML config file, or None when running on defaults.
        base_dir:
            Directory that relative paths are resolved against.
        input:
            Survey CSV file.
        outputs:
            Output file locations (absolute).
        report:
            Report rendering options.
    """

    config_path: Path | None
    base_dir: Path
    input: Path
    outputs: OutputPaths = field(default_factory=OutputPaths)
    report: ReportConfig = field(default_factory=ReportConfig)


class ConfigError(RuntimeError):
    """
    Raised when the YAML configuration is missing, invalid, or cannot be parsed.
    """

    pass


def find_config_path(cli_path: str | None) -> tuple[Path, bool]:
    """
    Determine which YAML config file to use.

    Args:
        cli_path:
            Optional config path provided on the command line.

    Returns:
        Tuple of the resolved Path (not necessarily existing) and whether it
        was given explicitly.
    """

    if cli_path:
        return (Path(cli_path), True)

    return (Path.cwd() / DEFAULT_CONFIG_NAME, False)


def default_config(base_dir: Path | None = None) -> SurveyConfig:
    """Return the built-in configuration with paths resolved against `base_dir`."""

    base = (base_dir or Path.cwd()).resolve()
    defaults = OutputPaths()
    return SurveyConfig(
        config_path=None,
        base_dir=base,
        input=base / DEFAULT_INPUT,
        outputs=OutputPaths(
            wordcloud=base / defaults.wordcloud,
            poster=base / defaults.poster,
            spreadsheet=base / defaults.spreadsheet,
        ),
        report=ReportConfig(),
    )


def load_config(path: Path, *, required: bool = True) -> SurveyConfig:
    """
    Load and validate a `survey.yaml` configuration file.

    Args:
        path:
            Path to the YAML config file.
        required:
            If False, a missing file yields the default configuration
            (resolved against the file's directory).

    Returns:
        A validated SurveyConfig instance.

    Raises:
        ConfigError:
            If the file is missing (and required), unreadable, cannot be parsed
            as YAML, or contains invalid values.
    """

    if not path.exists():
        if not required:
            return default_config(path.parent)
        raise ConfigError(
            f"Config file not found: {path}. "
            "Use the 'template' command to create one or omit --config to use defaults."
        )
    if not path.is_file():
        raise ConfigError(f"Config path is not a file: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except Exception as exc:  # noqa: BLE001
        raise ConfigError(f"Failed to read YAML config: {path}: {exc}") from exc

    # An empty file is treated like a file full of comments.
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError("Config YAML must contain a mapping at the top level")

    unknown = sorted(set(raw) - {"input", "outputs", "report"})
    if unknown:
        raise ConfigError(f"Config contains unknown key(s): {', '.join(map(str, unknown))}")

    base_dir = path.parent.resolve()

    input_value = raw.get("input", DEFAULT_INPUT)
    if not isinstance(input_value, str) or not input_value.strip():
        raise ConfigError("'input' must be a non-empty string")

    return SurveyConfig(
        config_path=path.resolve(),
        base_dir=base_dir,
        input=(base_dir / input_value.strip()).resolve(),
        outputs=_parse_outputs(raw.get("outputs"), base_dir=base_dir),
        report=_parse_report(raw.get("report")),
    )


def _parse_outputs(value: Any, *, base_dir: Path) -> OutputPaths:
    """
    Parse and validate the optional `outputs` section.

    Args:
        value:
            Raw YAML value for the `outputs` key.
        base_dir:
            Directory relative paths are resolved against.

    Returns:
        An OutputPaths instance with absolute paths.

    Raises:
        ConfigError:
            If the section exists but is not valid.
    """

    if value is None:
        value = {}
    if not isinstance(value, dict):
        raise ConfigError("'outputs' must be a mapping if provided")

    defaults = OutputPaths()
    resolved: dict[str, Path] = {}
    for key in ("wordcloud", "poster", "spreadsheet"):
        entry = value.get(key, str(getattr(defaults, key)))
        if not isinstance(entry, str) or not entry.strip():
            raise ConfigError(f"outputs.{key} must be a non-empty string")
        resolved[key] = (base_dir / entry.strip()).resolve()

    return OutputPaths(**resolved)


def _parse_report(value: Any) -> ReportConfig:
    """
    Parse and validate the optional `report` section.

    Args:
        value:
            Raw YAML value for the `report` key.

    Returns:
        A ReportConfig instance (with defaults if section is missing).

    Raises:
        ConfigError:
            If the section exists but is not valid.
    """

    if value is None:
        return ReportConfig()

    if not isinstance(value, dict):
        raise ConfigError("'report' must be a mapping if provided")

    counts: dict[str, int] = {}
    for key in ("console_top_words", "wordcloud_top_words", "poster_top_words"):
        entry = value.get(key, getattr(ReportConfig, key))
        # bool is a subclass of int
        if not isinstance(entry, int) or isinstance(entry, bool):
            raise ConfigError(f"report.{key} must be an integer")
        if entry <= 0:
            raise ConfigError(f"report.{key} must be > 0")
        counts[key] = entry

    repository_url = value.get("repository_url", ReportConfig.repository_url)
    if not isinstance(repository_url, str) or not repository_url.strip():
        raise ConfigError("report.repository_url must be a non-empty string")

    return ReportConfig(repository_url=repository_url.strip(), **counts)
