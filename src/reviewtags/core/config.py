"""Configuration management for ReviewTags."""

from typing import List, Optional
from pydantic_settings import BaseSettings
from pydantic import Field

from .constants import AnalysisConstants, FileConstants


class Settings(BaseSettings):
    """Application settings."""

    # Logging
    log_level: str = Field("INFO", description="Logging level")

    # Inputs
    reviews_path: str = Field(FileConstants.DEFAULT_REVIEWS_PATH, description="CSV file with reviews")
    aspects_path: Optional[str] = Field(None, description="YAML aspect dictionary (built-in default when unset)")
    lexicon_path: Optional[str] = Field(None, description="CSV polarity lexicon (VADER-derived when unset)")

    # Analysis settings
    window_radius: int = Field(AnalysisConstants.WINDOW_RADIUS, description="Context window radius in tokens")
    ngram_sizes: List[int] = Field(list(AnalysisConstants.NGRAM_SIZES), description="Highlight phrase lengths")
    min_ngram_count: int = Field(AnalysisConstants.MIN_NGRAM_COUNT, description="Minimum phrase count per business")
    tfidf_top_n: int = Field(AnalysisConstants.TFIDF_TOP_N, description="Candidates kept after TF-IDF ranking")
    max_highlights: int = Field(AnalysisConstants.MAX_HIGHLIGHTS, description="Highlights selected per business")
    top_words: int = Field(AnalysisConstants.TOP_WORDS, description="Frequent words listed per business")
    extra_stopwords: List[str] = Field(default_factory=list, description="Stop words added to the built-in lists")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "REVIEWTAGS_"


# Global settings instance
settings = Settings()
