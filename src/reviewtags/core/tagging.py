"""Keyword-in-context aspect tagging and sentiment aggregation."""

import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Tuple

from .aspect import AspectDictionary
from .constants import AnalysisConstants
from .models import AspectSentiment, ContextWindow, Review, WindowSentiment
from .sentiment import PolarityLexicon
from .tokenize import tokenize

logger = logging.getLogger(__name__)


def extract_context_windows(review: Review, dictionary: AspectDictionary,
                            radius: int = AnalysisConstants.WINDOW_RADIUS) -> List[ContextWindow]:
    """One window per keyword occurrence in the review.

    Works on the unfiltered token stream so the window keeps stop words.
    Windows near either end of the review are truncated.
    """
    if radius < 0:
        raise ValueError("radius must be non-negative")

    tokens = tokenize(review.text)
    patterns = list(dictionary.patterns())
    windows = []
    for start in range(len(tokens)):
        for parts, aspect in patterns:
            end = start + len(parts)
            if tuple(tokens[start:end]) != parts:
                continue
            pre = tokens[max(0, start - radius):start]
            post = tokens[end:end + radius]
            windows.append(ContextWindow(
                business=review.business,
                review_id=review.review_id,
                aspect=aspect,
                keyword=" ".join(parts),
                snippet=" ".join(pre + list(parts) + post),
                position=start,
            ))
    return windows


def score_window(window: ContextWindow, lexicon: PolarityLexicon) -> WindowSentiment:
    """Count lexicon hits in a window snippet."""
    positive, negative = lexicon.count(tokenize(window.snippet))
    return WindowSentiment(window=window, positive=positive, negative=negative)


def aggregate_aspect_sentiment(scored: Iterable[WindowSentiment]) -> List[AspectSentiment]:
    """Sum raw polarity counts per (business, aspect).

    Counts are summed rather than majority-voted per window, so a single
    review dense with polarity words can dominate its aspect.
    """
    totals: Dict[Tuple[str, str], List[int]] = defaultdict(lambda: [0, 0])
    for ws in scored:
        entry = totals[(ws.window.business, ws.window.aspect)]
        entry[0] += ws.positive - ws.negative
        entry[1] += 1

    rows = [
        AspectSentiment(business=business, aspect=aspect, net_sentiment=net, mentions=mentions)
        for (business, aspect), (net, mentions) in totals.items()
    ]
    rows.sort(key=lambda r: (r.business, -r.net_sentiment, r.aspect))
    return rows


def tag_reviews(reviews: Iterable[Review], dictionary: AspectDictionary, lexicon: PolarityLexicon,
                radius: int = AnalysisConstants.WINDOW_RADIUS) -> List[AspectSentiment]:
    """Windows, window scores and the per-aspect rollup in one pass."""
    scored = []
    for review in reviews:
        for window in extract_context_windows(review, dictionary, radius):
            scored.append(score_window(window, lexicon))
    logger.info(f"Scored {len(scored)} context windows")
    return aggregate_aspect_sentiment(scored)
