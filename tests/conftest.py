"""Shared fixtures for ReviewTags tests."""

from pathlib import Path

import pytest

from reviewtags.core.aspect import AspectDictionary
from reviewtags.core.config import Settings
from reviewtags.core.models import Review
from reviewtags.core.sentiment import PolarityLexicon

SAMPLE_CSV = Path(__file__).resolve().parent.parent / "data" / "sample_reviews.csv"


@pytest.fixture
def sample_csv():
    return SAMPLE_CSV


@pytest.fixture
def dictionary():
    return AspectDictionary.default()


@pytest.fixture
def lexicon():
    return PolarityLexicon.from_mapping({
        "great": "positive",
        "friendly": "positive",
        "delicious": "positive",
        "amazing": "positive",
        "fair": "positive",
        "slow": "negative",
        "rude": "negative",
        "dirty": "negative",
        "overpriced": "negative",
    })


@pytest.fixture
def config():
    return Settings(_env_file=None)


@pytest.fixture
def reviews():
    return [
        Review("r1", "Test Cafe", "Rude and slow staff at Test Cafe."),
        Review("r2", "Test Cafe", "The fish tacos were delicious. Fish tacos again next week!"),
        Review("r3", "Taco Hut", "Great service, friendly staff and amazing fish tacos."),
        Review("r4", "Taco Hut", "Prices are fair. Great service every time."),
    ]
