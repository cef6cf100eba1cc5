"""TF-IDF ranked n-gram highlights per business."""

import logging
from collections import Counter
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from .constants import AnalysisConstants
from .models import Highlight, NGram, Token

logger = logging.getLogger(__name__)


def build_documents(tokens: Iterable[Token]) -> Dict[str, List[str]]:
    """Concatenate each business's cleaned tokens in review order."""
    documents: Dict[str, List[str]] = {}
    for token in tokens:
        documents.setdefault(token.business, []).append(token.word)
    return documents


def generate_ngrams(words: Sequence[str], sizes: Sequence[int] = AnalysisConstants.NGRAM_SIZES) -> List[str]:
    """All contiguous phrases of the given sizes."""
    ngrams = []
    for n in sizes:
        if n <= 0:
            continue
        for i in range(len(words) - n + 1):
            ngrams.append(" ".join(words[i:i + n]))
    return ngrams


def count_ngrams(documents: Dict[str, List[str]],
                 sizes: Sequence[int] = AnalysisConstants.NGRAM_SIZES,
                 min_count: int = AnalysisConstants.MIN_NGRAM_COUNT) -> List[NGram]:
    """Per-business phrase counts, keeping phrases seen at least ``min_count`` times."""
    rows = []
    for business, words in documents.items():
        counts = Counter(generate_ngrams(words, sizes))
        rows.extend(
            NGram(business=business, ngram=ngram, count=count)
            for ngram, count in counts.items()
            if count >= min_count
        )
    return rows


def rank_tfidf(ngrams: Sequence[NGram], top_n: Optional[int] = AnalysisConstants.TFIDF_TOP_N,
               n_documents: Optional[int] = None) -> List[NGram]:
    """Score phrases by TF-IDF and keep the best ``top_n`` per business.

    Each business is one document. tf is the in-business count and
    idf = ln(n_documents / documents containing the phrase). When
    ``n_documents`` is not given, it is the number of businesses present
    in ``ngrams``.

    Rows come back grouped by business, best first. ``top_n=None`` keeps
    every phrase.
    """
    if not ngrams:
        return []

    df = pd.DataFrame(
        [(g.business, g.ngram, g.count) for g in ngrams],
        columns=["business", "ngram", "count"],
    )
    n_docs = n_documents or df["business"].nunique()
    doc_freq = df.groupby("ngram")["business"].nunique()
    df["tf_idf"] = df["count"] * np.log(n_docs / df["ngram"].map(doc_freq))

    df = df.sort_values(
        ["business", "tf_idf", "count", "ngram"],
        ascending=[True, False, False, True],
        kind="mergesort",
    )
    if top_n is not None:
        df = df.groupby("business", sort=False).head(top_n)
    return [
        NGram(business=business, ngram=ngram, count=int(count), tf_idf=float(score))
        for business, ngram, count, score in zip(df["business"], df["ngram"], df["count"], df["tf_idf"])
    ]


def filter_business_name(candidates: Iterable[NGram], business: str) -> List[NGram]:
    """Drop phrases sharing a word with the business's own name."""
    name_words = set(business.lower().split())
    return [c for c in candidates if not name_words.intersection(c.words)]


def select_diverse(candidates: Iterable[NGram],
                   limit: int = AnalysisConstants.MAX_HIGHLIGHTS) -> List[NGram]:
    """Greedy pick of word-disjoint phrases.

    Longer phrases go first, then higher TF-IDF. A phrase is accepted only
    if none of its words were used by an accepted phrase.
    """
    ordered = sorted(candidates, key=lambda c: (-len(c.words), -c.tf_idf))
    selected = []
    used_words = set()
    for candidate in ordered:
        if len(selected) >= limit:
            break
        words = set(candidate.words)
        if words & used_words:
            continue
        selected.append(candidate)
        used_words |= words
    return selected


def extract_highlights(tokens: Iterable[Token],
                       sizes: Sequence[int] = AnalysisConstants.NGRAM_SIZES,
                       min_count: int = AnalysisConstants.MIN_NGRAM_COUNT,
                       top_n: int = AnalysisConstants.TFIDF_TOP_N,
                       limit: int = AnalysisConstants.MAX_HIGHLIGHTS) -> Tuple[List[NGram], List[Highlight]]:
    """Run the full highlight pass.

    Returns the filtered n-gram table and the selected highlights.
    Businesses with no surviving phrases get no highlights but still
    count toward the TF-IDF document total.
    """
    documents = build_documents(tokens)
    ngrams = count_ngrams(documents, sizes, min_count)
    scored = rank_tfidf(ngrams, top_n=None, n_documents=len(documents))

    by_business: Dict[str, List[NGram]] = {}
    for ngram in scored:
        by_business.setdefault(ngram.business, []).append(ngram)

    highlights = []
    for business in documents:
        candidates = filter_business_name(by_business.get(business, [])[:top_n], business)
        for chosen in select_diverse(candidates, limit):
            highlights.append(Highlight(business=business, ngram=chosen.ngram, tf_idf=chosen.tf_idf))

    logger.info(f"Selected {len(highlights)} highlights across {len(documents)} businesses")
    return scored, highlights
