"""Review dataset loading for ReviewTags."""

import logging
from pathlib import Path
from typing import List, Optional, Union

import pandas as pd

from ..core.constants import DomainConstants
from ..core.models import Review

logger = logging.getLogger(__name__)


class ReviewDataError(ValueError):
    """Raised when the review table cannot be used as input."""


def reviews_from_frame(df: pd.DataFrame,
                       business_col: str = DomainConstants.BUSINESS_COLUMN,
                       review_id_col: str = DomainConstants.REVIEW_ID_COLUMN,
                       text_col: str = DomainConstants.TEXT_COLUMN) -> List[Review]:
    """Convert a review table into ``Review`` records, in row order."""
    missing = [c for c in (business_col, review_id_col, text_col) if c not in df.columns]
    if missing:
        raise ReviewDataError(f"Review table is missing columns: {missing}")

    ids = df[review_id_col].astype(str)
    duplicated = ids[ids.duplicated()].unique().tolist()
    if duplicated:
        raise ReviewDataError(f"Duplicate review ids: {duplicated[:5]}")

    texts = df[text_col].fillna("").astype(str)
    businesses = df[business_col].fillna("").astype(str).str.strip()
    return [
        Review(review_id=rid, business=business, text=text)
        for rid, business, text in zip(ids, businesses, texts)
    ]


def load_reviews(path: Union[str, Path], business_col: Optional[str] = None,
                 review_id_col: Optional[str] = None, text_col: Optional[str] = None) -> List[Review]:
    """Read reviews from a CSV file.

    A missing file fails before anything is processed. Columns beyond the
    three required ones are ignored.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Reviews file not found: {path}")

    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    reviews = reviews_from_frame(
        df,
        business_col or DomainConstants.BUSINESS_COLUMN,
        review_id_col or DomainConstants.REVIEW_ID_COLUMN,
        text_col or DomainConstants.TEXT_COLUMN,
    )
    logger.info(f"Loaded {len(reviews)} reviews for {len({r.business for r in reviews})} businesses from {path}")
    return reviews
