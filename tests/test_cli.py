"""Tests for the command-line interface."""

import json

import pytest
from reviewtags.cli import EXIT_NOT_FOUND, build_parser, main


@pytest.fixture
def lexicon_csv(tmp_path):
    path = tmp_path / "lexicon.csv"
    path.write_text("word,sentiment\ngreat,positive\nfriendly,positive\nslow,negative\nrude,negative\n",
                    encoding="utf-8")
    return path


class TestCli:
    """Test CLI commands end to end."""

    def test_analyze_writes_outputs(self, sample_csv, lexicon_csv, tmp_path, capsys):
        """Test analyze prints the report and writes HTML and JSON."""
        html_path = tmp_path / "report.html"
        json_path = tmp_path / "report.json"
        code = main(["analyze", str(sample_csv), "--lexicon", str(lexicon_csv),
                     "--html", str(html_path), "--out", str(json_path)])

        assert code == 0
        out = capsys.readouterr().out
        assert "Angel Oak Restaurant" in out
        assert "Highlights:" in out
        assert html_path.read_text(encoding="utf-8").startswith("<!DOCTYPE html>")

        data = json.loads(json_path.read_text(encoding="utf-8"))
        assert len(data["businesses"]) == 4
        assert data["metadata"]["export_timestamp"]

    def test_business_found(self, sample_csv, lexicon_csv, capsys):
        """Test a single business lookup."""
        code = main(["business", "husk", str(sample_csv), "--lexicon", str(lexicon_csv)])
        assert code == 0
        assert capsys.readouterr().out.startswith("Husk (3 reviews)")

    def test_business_not_found(self, sample_csv, lexicon_csv, capsys):
        """Test an unknown business exits with the not-found status."""
        code = main(["business", "Nowhere Diner", str(sample_csv), "--lexicon", str(lexicon_csv)])
        assert code == EXIT_NOT_FOUND
        assert "not found" in capsys.readouterr().out

    def test_words(self, sample_csv, lexicon_csv, capsys):
        """Test frequent word listing."""
        code = main(["words", str(sample_csv), "--lexicon", str(lexicon_csv), "--top", "2"])
        assert code == 0
        assert "Husk: " in capsys.readouterr().out

    def test_missing_input(self, tmp_path, lexicon_csv):
        """Test a missing input file fails with status 1."""
        assert main(["analyze", str(tmp_path / "missing.csv"), "--lexicon", str(lexicon_csv)]) == 1

    def test_no_command(self, capsys):
        """Test help is printed without a command."""
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out

    def test_parser_defaults(self):
        """Test input defaults to the configured dataset."""
        args = build_parser().parse_args(["analyze"])
        assert args.input.endswith("sample_reviews.csv")
        assert args.html is None
