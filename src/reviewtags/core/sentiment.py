"""Binary polarity lexicon used to score context windows."""

import logging
from pathlib import Path
from typing import Dict, Iterable, Mapping, Tuple, Union

import pandas as pd
from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer

from .models import SentimentLabel

logger = logging.getLogger(__name__)


class PolarityLexicon:
    """Read-only word -> positive/negative lookup."""

    def __init__(self, polarities: Mapping[str, SentimentLabel]):
        self._polarities: Dict[str, SentimentLabel] = {}
        for word, label in polarities.items():
            if label is SentimentLabel.NEUTRAL:
                continue
            self._polarities[word.lower()] = label

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "PolarityLexicon":
        """Build from plain strings, e.g. ``{"rude": "negative"}``."""
        return cls({word: SentimentLabel(str(value).lower()) for word, value in mapping.items()})

    @classmethod
    def from_vader(cls) -> "PolarityLexicon":
        """Binary lexicon from the VADER valence scores.

        Only single alphabetic entries are kept; emoticons and multi-word
        idioms cannot match a word token.
        """
        analyzer = SentimentIntensityAnalyzer()
        polarities = {}
        for word, valence in analyzer.lexicon.items():
            if not word.replace("'", "").isalpha():
                continue
            if valence > 0:
                polarities[word] = SentimentLabel.POSITIVE
            elif valence < 0:
                polarities[word] = SentimentLabel.NEGATIVE
        logger.info(f"Loaded {len(polarities)} polarity words from VADER lexicon")
        return cls(polarities)

    @classmethod
    def from_csv(cls, path: Union[str, Path]) -> "PolarityLexicon":
        """Two-column ``word,sentiment`` file (Bing lexicon layout)."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Lexicon file not found: {path}")
        df = pd.read_csv(path, dtype=str).dropna()
        missing = {"word", "sentiment"} - set(df.columns)
        if missing:
            raise ValueError(f"Lexicon {path} is missing columns: {sorted(missing)}")
        mapping = dict(zip(df["word"].str.strip(), df["sentiment"].str.strip()))
        logger.info(f"Loaded {len(mapping)} polarity words from {path}")
        return cls.from_mapping(mapping)

    def polarity(self, word: str) -> SentimentLabel:
        return self._polarities.get(word.lower(), SentimentLabel.NEUTRAL)

    def count(self, words: Iterable[str]) -> Tuple[int, int]:
        """Return (positive, negative) match counts for a word sequence."""
        positive = negative = 0
        for word in words:
            label = self._polarities.get(word)
            if label is SentimentLabel.POSITIVE:
                positive += 1
            elif label is SentimentLabel.NEGATIVE:
                negative += 1
        return positive, negative

    def __contains__(self, word: str) -> bool:
        return word.lower() in self._polarities

    def __len__(self) -> int:
        return len(self._polarities)


def load_lexicon(path=None) -> PolarityLexicon:
    """Lexicon from a CSV file, or the VADER-derived default."""
    if path:
        return PolarityLexicon.from_csv(path)
    return PolarityLexicon.from_vader()
