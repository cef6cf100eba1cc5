"""Core modules for ReviewTags."""

from .models import *
from .config import settings
from .aspect import *
from .sentiment import *

__all__ = [
    "settings",
    "Review",
    "Token",
    "ContextWindow",
    "WindowSentiment",
    "SentimentLabel",
    "AspectSentiment",
    "NGram",
    "Highlight",
    "WordCount",
    "AnalysisReport",
    "BusinessSummary",
    "AspectDictionary",
    "PolarityLexicon",
]
