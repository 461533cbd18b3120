"""
Tests for the survey analyzer.
"""

from pathlib import Path

import pytest

from survey_sentiment.analyzer import AnalysisResult, SurveyAnalyzer


@pytest.fixture
def analyzer():
    return SurveyAnalyzer()


def test_accumulate_skips_stop_words_and_short_tokens(analyzer):
    freq: dict[str, int] = {}
    analyzer.accumulate("ini ok enak", freq)
    assert freq == {"enak": 1}


def test_accumulate_adds_to_existing_counts(analyzer):
    freq = {"enak": 2}
    analyzer.accumulate("Enak, ENAK! praktis", freq)
    assert freq == {"enak": 4, "praktis": 1}


def test_accumulate_empty_text_is_noop(analyzer):
    freq: dict[str, int] = {}
    analyzer.accumulate("", freq)
    assert freq == {}


def test_accumulate_filters_after_normalization(analyzer):
    freq: dict[str, int] = {}
    # "Tidak!" normalizes to the stop word "tidak"; "a.b" to "ab" (too short)
    analyzer.accumulate("Tidak! a.b ribet...", freq)
    assert freq == {"ribet": 1}


@pytest.mark.parametrize("separator", ["\u00a0", "\x1f"])
def test_accumulate_joins_words_around_non_ascii_whitespace(analyzer, separator):
    freq: dict[str, int] = {}
    analyzer.accumulate(f"enak{separator}banget", freq)
    assert freq == {"enakbanget": 1}


def test_analyze_counts_sentiments(analyzer, survey_csv):
    result = analyzer.analyze(survey_csv, quiet=True)

    assert (result.positive, result.negative, result.neutral) == (2, 1, 1)
    assert result.total == 4


def test_analyze_word_frequency(analyzer, survey_csv):
    result = analyzer.analyze(survey_csv, quiet=True)

    assert dict(result.word_frequency) == {
        "praktis": 2,
        "cepat": 1,
        "mudah": 1,
        "ribet": 1,
        "sering": 1,
        "error": 1,
        "sekali": 1,
    }


def test_analyze_prints_diagnostics(analyzer, survey_csv, capsys):
    analyzer.analyze(survey_csv)

    out = capsys.readouterr().out
    assert "Line 1 sentiment: [Iya suka]" in out
    assert "Line 2 sentiment: [Tidak suka]" in out
    assert "Line 4 sentiment: [Iya, suka banget]" in out
    # the short row is read but not reported
    assert "Line 5" not in out
    assert "Processed 5 responses." in out


def test_analyze_quiet_prints_nothing(analyzer, survey_csv, capsys):
    analyzer.analyze(survey_csv, quiet=True)
    assert capsys.readouterr().out == ""


def test_missing_file_returns_empty_result(analyzer, tmp_path, capsys):
    result = analyzer.analyze(tmp_path / "missing.csv")

    assert result == AnalysisResult.empty()
    assert result.total == 0
    assert dict(result.word_frequency) == {}
    assert "Error: Could not open file" in capsys.readouterr().err


def test_header_only_file(analyzer, header_only_csv):
    result = analyzer.analyze(header_only_csv, quiet=True)

    assert result.total == 0
    assert len(result.word_frequency) == 0


def test_empty_file(analyzer, tmp_path):
    path = tmp_path / "blank.csv"
    path.write_text("", encoding="utf-8")

    assert analyzer.analyze(path, quiet=True) == AnalysisResult.empty()


def test_first_line_is_always_skipped(analyzer, tmp_path):
    path = tmp_path / "no_header.csv"
    path.write_text("1,2,3,Iya,enak\n1,2,3,Tidak suka,lama\n", encoding="utf-8")

    result = analyzer.analyze(path, quiet=True)
    assert (result.positive, result.negative, result.neutral) == (0, 1, 0)
    assert dict(result.word_frequency) == {"lama": 1}


def test_row_with_exactly_four_fields_has_no_reason(analyzer, tmp_path):
    path = tmp_path / "four.csv"
    path.write_text("h\n1,2,3,Iya\n", encoding="utf-8")

    result = analyzer.analyze(path, quiet=True)
    assert result.positive == 1
    assert len(result.word_frequency) == 0


def test_crlf_line_endings(analyzer, tmp_path):
    path = tmp_path / "crlf.csv"
    path.write_bytes(b"h\r\n1,2,3,Lumayan,bagus banget\r\n")

    result = analyzer.analyze(path, quiet=True)
    assert result.neutral == 1
    assert dict(result.word_frequency) == {"bagus": 1, "banget": 1}


def test_lone_carriage_return_stays_in_line(analyzer, tmp_path, capsys):
    path = tmp_path / "cr.csv"
    path.write_bytes(b"h\n1,2,3,Iya,enak\rbanget\n")

    result = analyzer.analyze(path)
    assert result.positive == 1
    assert dict(result.word_frequency) == {"enak": 1, "banget": 1}
    assert "Processed 1 responses." in capsys.readouterr().out


def test_invalid_utf8_does_not_abort(analyzer, tmp_path):
    path = tmp_path / "latin1.csv"
    path.write_bytes(b"h\n1,2,3,Iya,caf\xe9 enak\n")

    result = analyzer.analyze(path, quiet=True)
    assert result.positive == 1
    assert result.word_frequency["enak"] == 1


def test_counts_sum_to_processed_rows(analyzer, tmp_path):
    choices = ["Iya", "Tidak suka", "Suka", "Entahlah", "tidak", "iya dong"]
    lines = ["h"] + [f"1,2,3,{choice},alasan" for choice in choices]
    path = tmp_path / "many.csv"
    path.write_text("\n".join(lines), encoding="utf-8")

    result = analyzer.analyze(path, quiet=True)
    assert result.positive + result.negative + result.neutral == len(choices)
    assert (result.positive, result.negative, result.neutral) == (3, 1, 2)


def test_analysis_is_idempotent(analyzer, survey_csv):
    first = analyzer.analyze(survey_csv, quiet=True)
    second = analyzer.analyze(survey_csv, quiet=True)

    assert first == second
    assert dict(first.word_frequency) == dict(second.word_frequency)


def test_result_word_frequency_is_read_only(analyzer, survey_csv):
    result = analyzer.analyze(survey_csv, quiet=True)

    with pytest.raises(TypeError):
        result.word_frequency["new"] = 1  # type: ignore[index]


def test_accepts_string_path(analyzer, survey_csv):
    result = analyzer.analyze(str(survey_csv), quiet=True)
    assert result.total == 4


def test_result_count_by_label():
    result = AnalysisResult(positive=3, negative=1, neutral=2)
    assert result.count("positive") == 3
    assert result.count("negative") == 1
    assert result.count("neutral") == 2


def test_directory_path_is_reported(analyzer, tmp_path: Path, capsys):
    result = analyzer.analyze(tmp_path)
    assert result.total == 0
    assert str(tmp_path) in capsys.readouterr().err
