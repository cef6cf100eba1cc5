"""End-to-end analysis pipeline for ReviewTags."""

import logging
from typing import Iterable, List, Optional

from .core.aspect import AspectDictionary, load_aspect_dictionary
from .core.config import Settings, settings as default_settings
from .core.highlights import extract_highlights
from .core.models import AnalysisReport, BusinessSummary, Review
from .core.sentiment import PolarityLexicon, load_lexicon
from .core.tagging import tag_reviews
from .core.tokenize import build_stopwords, clean_tokens, word_counts

logger = logging.getLogger(__name__)


def run_pipeline(reviews: Iterable[Review],
                 dictionary: Optional[AspectDictionary] = None,
                 lexicon: Optional[PolarityLexicon] = None,
                 config: Optional[Settings] = None) -> AnalysisReport:
    """Tokenize, tag aspects and extract highlights for every business."""
    config = config or default_settings
    reviews = list(reviews)
    dictionary = dictionary or load_aspect_dictionary(config.aspects_path)
    lexicon = lexicon or load_lexicon(config.lexicon_path)

    businesses: List[str] = []
    for review in reviews:
        if review.business not in businesses:
            businesses.append(review.business)

    stopwords = build_stopwords(extra=config.extra_stopwords)
    tokens = clean_tokens(reviews, stopwords)

    sentiments = tag_reviews(reviews, dictionary, lexicon, radius=config.window_radius)
    _, highlights = extract_highlights(
        tokens,
        sizes=config.ngram_sizes,
        min_count=config.min_ngram_count,
        top_n=config.tfidf_top_n,
        limit=config.max_highlights,
    )

    logger.info(
        f"Analyzed {len(reviews)} reviews: {len(sentiments)} aspect rows, "
        f"{len(highlights)} highlights"
    )
    return AnalysisReport(
        businesses=businesses,
        aspect_sentiments=sentiments,
        highlights=highlights,
        word_counts=word_counts(tokens, config.top_words),
    )


def lookup_business(report: AnalysisReport, reviews: Iterable[Review], name: str) -> BusinessSummary:
    """Results for one business, matched case-insensitively.

    An unknown name gives ``found=False`` rather than an error.
    """
    wanted = name.strip().lower()
    match = next((b for b in report.businesses if b.lower() == wanted), None)
    if match is None:
        logger.warning(f"Business not found: {name}")
        return BusinessSummary(business=name, found=False)

    return BusinessSummary(
        business=match,
        found=True,
        review_count=sum(1 for r in reviews if r.business == match),
        aspect_sentiments=report.sentiments_for(match),
        highlights=report.highlights_for(match),
        top_words=report.words_for(match),
    )
