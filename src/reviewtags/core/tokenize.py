"""Tokenization and stop-word cleaning."""

import logging
import re
import unicodedata
from collections import Counter, defaultdict
from typing import Dict, FrozenSet, Iterable, List, Optional

import pandas as pd
from sklearn.feature_extraction.text import ENGLISH_STOP_WORDS

from .constants import DomainConstants
from .models import Review, Token, WordCount

logger = logging.getLogger(__name__)

# Unicode letters with optional inner apostrophes; digits and punctuation never form a token
WORD_RE = re.compile(r"[^\W\d_]+(?:'[^\W\d_]+)*")

CONTRACTION_SUFFIXES = ("'s", "'ve", "'m", "'re", "'ll", "'d", "n't")


def tokenize(text: str) -> List[str]:
    """Split text into lowercase word tokens."""
    if not text:
        return []
    text = unicodedata.normalize("NFC", text).lower().replace("’", "'")
    return WORD_RE.findall(text)


def build_stopwords(extra: Optional[Iterable[str]] = None,
                    location_terms: Optional[Iterable[str]] = None) -> FrozenSet[str]:
    """Standard English stop words, their contractions, and the city's location terms."""
    if location_terms is None:
        location_terms = DomainConstants.LOCATION_STOPWORDS
    words = set(ENGLISH_STOP_WORDS)
    words.update(w + suffix for w in ENGLISH_STOP_WORDS for suffix in CONTRACTION_SUFFIXES)
    words.update(DomainConstants.CONTRACTION_STOPWORDS)
    words.update(w.lower() for w in location_terms)
    if extra:
        words.update(w.lower() for w in extra)
    return frozenset(words)


def clean_tokens(reviews: Iterable[Review], stopwords: FrozenSet[str]) -> List[Token]:
    """Tokenize every review and drop stop words, keeping review order."""
    tokens = []
    for review in reviews:
        for word in tokenize(review.text):
            if word not in stopwords:
                tokens.append(Token(review.business, review.review_id, word))
    logger.debug(f"Kept {len(tokens)} tokens after stop-word removal")
    return tokens


def tokens_frame(tokens: Iterable[Token]) -> pd.DataFrame:
    """Table view of cleaned tokens."""
    return pd.DataFrame(
        [(t.business, t.review_id, t.word) for t in tokens],
        columns=["business", "review_id", "word"],
    )


def word_counts(tokens: Iterable[Token], top_n: int) -> List[WordCount]:
    """Most frequent cleaned words per business."""
    per_business: Dict[str, Counter] = defaultdict(Counter)
    for token in tokens:
        per_business[token.business][token.word] += 1

    rows = []
    for business in sorted(per_business):
        ranked = sorted(per_business[business].items(), key=lambda kv: (-kv[1], kv[0]))
        rows.extend(WordCount(business, word, count) for word, count in ranked[:top_n])
    return rows
