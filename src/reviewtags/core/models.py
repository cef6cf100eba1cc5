"""Data models for ReviewTags."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class SentimentLabel(Enum):
    """Polarity of a window or an aspect."""
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"

    @classmethod
    def from_counts(cls, positive: int, negative: int) -> "SentimentLabel":
        """Majority label for a pair of polarity counts; ties are neutral."""
        if positive > negative:
            return cls.POSITIVE
        if negative > positive:
            return cls.NEGATIVE
        return cls.NEUTRAL


@dataclass(frozen=True)
class Review:
    """Represents a single review."""
    review_id: str
    business: str
    text: str


@dataclass(frozen=True)
class Token:
    """A cleaned word with a back-reference to its review."""
    business: str
    review_id: str
    word: str


@dataclass(frozen=True)
class ContextWindow:
    """A keyword occurrence and its surrounding tokens."""
    business: str
    review_id: str
    aspect: str
    keyword: str
    snippet: str
    position: int


@dataclass(frozen=True)
class WindowSentiment:
    """Polarity counts for one context window."""
    window: ContextWindow
    positive: int
    negative: int

    @property
    def label(self) -> SentimentLabel:
        return SentimentLabel.from_counts(self.positive, self.negative)


@dataclass
class AspectSentiment:
    """Net sentiment for one (business, aspect) pair."""
    business: str
    aspect: str
    net_sentiment: int
    mentions: int = 0

    @property
    def label(self) -> SentimentLabel:
        """Sign of the net sentiment."""
        return SentimentLabel.from_counts(max(self.net_sentiment, 0), max(-self.net_sentiment, 0))


@dataclass
class NGram:
    """A phrase counted within one business."""
    business: str
    ngram: str
    count: int
    tf_idf: float = 0.0

    @property
    def words(self) -> List[str]:
        return self.ngram.split()


@dataclass
class Highlight:
    """A phrase selected to represent a business."""
    business: str
    ngram: str
    tf_idf: float = 0.0


@dataclass
class WordCount:
    """Frequency of a cleaned word within one business."""
    business: str
    word: str
    count: int


@dataclass
class AnalysisReport:
    """Result tables of one pipeline run."""
    businesses: List[str]
    aspect_sentiments: List[AspectSentiment]
    highlights: List[Highlight]
    word_counts: List[WordCount] = field(default_factory=list)

    def sentiments_for(self, business: str) -> List[AspectSentiment]:
        return [s for s in self.aspect_sentiments if s.business == business]

    def highlights_for(self, business: str) -> List[Highlight]:
        return [h for h in self.highlights if h.business == business]

    def words_for(self, business: str) -> List[WordCount]:
        return [w for w in self.word_counts if w.business == business]


@dataclass
class BusinessSummary:
    """Lookup result for a single business."""
    business: str
    found: bool
    review_count: int = 0
    aspect_sentiments: List[AspectSentiment] = field(default_factory=list)
    highlights: List[Highlight] = field(default_factory=list)
    top_words: List[WordCount] = field(default_factory=list)
