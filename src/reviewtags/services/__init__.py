"""Services for ReviewTags."""

from .loader import load_reviews, reviews_from_frame, ReviewDataError

__all__ = [
    "load_reviews",
    "reviews_from_frame",
    "ReviewDataError",
]
