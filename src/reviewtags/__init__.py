"""ReviewTags - aspect sentiment tags and phrase highlights for restaurant reviews."""

__version__ = "1.0.0"
__author__ = "ReviewTags Team"

from .core.models import *
from .core.config import settings
from .pipeline import run_pipeline, lookup_business
from .services.loader import load_reviews, ReviewDataError

__all__ = [
    "settings",
    "run_pipeline",
    "lookup_business",
    "load_reviews",
    "ReviewDataError",
]
