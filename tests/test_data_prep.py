"""Tests for JSON export."""

import json
from datetime import datetime

from reviewtags import __version__
from reviewtags.core.models import AnalysisReport, AspectSentiment, Highlight
from reviewtags.utils.data_prep import export_to_json, prepare_export


class TestExport:
    """Test export payloads."""

    def test_prepare_export(self):
        """Test both result tables are serialized."""
        report = AnalysisReport(
            businesses=["Husk"],
            aspect_sentiments=[AspectSentiment("Husk", "food", 2, 1)],
            highlights=[Highlight("Husk", "cornbread skillet", 1.5)],
        )
        data = prepare_export(report, source="reviews.csv")
        assert data["source"] == "reviews.csv"
        assert data["aspect_sentiment"] == [
            {"business": "Husk", "aspect": "food", "net_sentiment": 2, "mentions": 1, "label": "positive"}
        ]
        assert data["highlights"] == [{"business": "Husk", "ngram": "cornbread skillet", "tf_idf": 1.5}]
        assert data["metadata"]["version"] == __version__

    def test_export_sets_timestamp(self, tmp_path):
        """Test the export timestamp is filled in."""
        data = prepare_export(AnalysisReport(businesses=[], aspect_sentiments=[], highlights=[]))
        path = tmp_path / "out.json"
        export_to_json(data, str(path))
        saved = json.loads(path.read_text(encoding="utf-8"))
        assert saved["metadata"]["export_timestamp"] is not None

    def test_export_uses_given_timestamp(self, tmp_path):
        """Test a caller-supplied export time is written as ISO text."""
        data = prepare_export(AnalysisReport(businesses=[], aspect_sentiments=[], highlights=[]))
        path = tmp_path / "out.json"
        export_to_json(data, str(path), timestamp=datetime(2024, 5, 1, 12, 30))
        saved = json.loads(path.read_text(encoding="utf-8"))
        assert saved["metadata"]["export_timestamp"] == "2024-05-01T12:30:00"
