"""Tests for review loading."""

import pandas as pd
import pytest
from reviewtags.core.models import Review
from reviewtags.services.loader import ReviewDataError, load_reviews, reviews_from_frame


class TestLoadReviews:
    """Test CSV loading and validation."""

    def test_sample_dataset(self, sample_csv):
        """Test the bundled sample loads in row order."""
        reviews = load_reviews(sample_csv)
        assert len(reviews) == 11
        assert reviews[0] == Review("r001", "Angel Oak Restaurant", reviews[0].text)
        assert reviews[0].text.startswith("The shrimp and grits")

    def test_missing_file(self, tmp_path):
        """Test a missing file fails before processing."""
        with pytest.raises(FileNotFoundError):
            load_reviews(tmp_path / "missing.csv")

    def test_missing_columns(self, tmp_path):
        """Test required columns are checked."""
        path = tmp_path / "reviews.csv"
        path.write_text("business,text\nA,good\n", encoding="utf-8")
        with pytest.raises(ReviewDataError):
            load_reviews(path)

    def test_custom_columns(self, tmp_path):
        """Test column names can be overridden and extras are ignored."""
        path = tmp_path / "reviews.csv"
        path.write_text("name,id,text,stars\nA,1,good food,5\n", encoding="utf-8")
        reviews = load_reviews(path, business_col="name", review_id_col="id", text_col="text")
        assert reviews == [Review("1", "A", "good food")]

    def test_duplicate_ids(self):
        """Test review ids must be unique."""
        df = pd.DataFrame({"business": ["A", "A"], "review_id": ["r1", "r1"], "review": ["x", "y"]})
        with pytest.raises(ReviewDataError):
            reviews_from_frame(df)

    def test_missing_text_is_empty(self):
        """Test missing review text becomes an empty string."""
        df = pd.DataFrame({"business": ["A"], "review_id": ["r1"], "review": [None]})
        assert reviews_from_frame(df) == [Review("r1", "A", "")]

    def test_review_data_error_is_value_error(self):
        """Test callers can catch ValueError."""
        assert issubclass(ReviewDataError, ValueError)
