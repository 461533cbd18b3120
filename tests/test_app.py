"""
Tests for the command line interface.
"""

import pytest

from survey_sentiment.app import build_parser, main


@pytest.fixture
def workdir(tmp_path, monkeypatch, survey_csv):
    """Run commands from the directory that holds survey_data.csv."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_analyze_uses_default_input(workdir, capsys):
    assert main(["analyze"]) == 0

    out = capsys.readouterr().out
    assert "=== Sentiment Analysis & Word Cloud Generator ===" in out
    assert "Total Responses: 4" in out
    assert "Positive (Suka): 2 (50%)" in out
    assert "praktis (2): ####" in out


def test_analyze_top(workdir, capsys):
    assert main(["analyze", "--top", "1"]) == 0

    out = capsys.readouterr().out
    assert "(Top 1 Words)" in out
    assert "cepat (1)" not in out


def test_analyze_missing_input_still_succeeds(workdir, capsys):
    assert main(["analyze", "-i", "missing.csv"]) == 0

    captured = capsys.readouterr()
    assert "Error: Could not open file missing.csv" in captured.err
    assert "Total Responses: 0" in captured.out


def test_wordcloud_writes_html(workdir, capsys):
    assert main(["wordcloud"]) == 0

    html = (workdir / "wordcloud.html").read_text(encoding="utf-8")
    assert "praktis (2)" in html
    assert "HTML word cloud generated" in capsys.readouterr().out


def test_wordcloud_refuses_to_overwrite(workdir, capsys):
    (workdir / "wordcloud.html").write_text("keep", encoding="utf-8")

    assert main(["wordcloud"]) == 2
    assert "--force" in capsys.readouterr().err
    assert (workdir / "wordcloud.html").read_text(encoding="utf-8") == "keep"


def test_wordcloud_force_overwrites(workdir):
    (workdir / "wordcloud.html").write_text("old", encoding="utf-8")

    assert main(["wordcloud", "--force"]) == 0
    assert "praktis" in (workdir / "wordcloud.html").read_text(encoding="utf-8")


def test_poster_with_repo_url(workdir, capsys):
    assert main(["poster", "-o", "print/poster.html", "--repo-url", "https://example.org/x"]) == 0

    html = (workdir / "print" / "poster.html").read_text(encoding="utf-8")
    assert "data=https%3A%2F%2Fexample.org%2Fx" in html
    assert "Data dianalisis dari 4 responden survey" in html
    assert "=== FILES GENERATED ===" in capsys.readouterr().out


def test_write_output(workdir, capsys):
    assert main(["write-output"]) == 0

    assert (workdir / "results.ods").exists()
    out = capsys.readouterr().out
    assert "Responses: 4, distinct words: 7" in out
    assert "Line 1 sentiment" not in out


def test_config_file_is_used(workdir, capsys):
    (workdir / "survey.yaml").write_text(
        "input: survey_data.csv\nreport:\n  console_top_words: 1\n",
        encoding="utf-8",
    )

    assert main(["analyze"]) == 0
    assert "(Top 1 Words)" in capsys.readouterr().out


def test_explicit_missing_config(workdir, capsys):
    assert main(["analyze", "--config", "absent.yaml"]) == 2
    assert capsys.readouterr().err.startswith("error: ")


def test_template(workdir, capsys):
    assert main(["template"]) == 0
    assert (workdir / "survey.yaml").exists()

    assert main(["template"]) == 2
    assert "Refusing to overwrite" in capsys.readouterr().err

    assert main(["template", "--force"]) == 0


def test_template_is_loadable(workdir, capsys):
    assert main(["template"]) == 0
    assert main(["analyze"]) == 0
    assert "Total Responses: 4" in capsys.readouterr().out
