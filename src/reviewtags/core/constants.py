"""Constants and configuration values for ReviewTags."""

# Analysis Constants
class AnalysisConstants:
    """Constants for the aspect tagger and highlight extractor."""

    # Aspect Tagging
    WINDOW_RADIUS = 3  # tokens kept on each side of a keyword

    # Highlight Extraction
    NGRAM_SIZES = (2, 3)  # phrase lengths considered as highlights
    MIN_NGRAM_COUNT = 2  # phrase must occur at least this often per business
    TFIDF_TOP_N = 30  # candidates kept per business after ranking
    MAX_HIGHLIGHTS = 3  # highlights selected per business

    # Word Frequencies
    TOP_WORDS = 10  # most frequent cleaned words listed per business

# Domain-Specific Constants
class DomainConstants:
    """Constants for the restaurant review domain."""

    # Aspect dictionary used when no YAML file is configured
    RESTAURANT_ASPECTS = {
        "service": ["service", "staff", "server", "waiter", "waitress", "bartender",
                    "host", "hostess", "manager"],
        "food": ["food", "meal", "dish", "flavor", "taste", "menu", "portion",
                 "dessert", "appetizer"],
        "price": ["price", "prices", "cost", "value", "bill", "expensive", "cheap",
                  "worth"],
        "environment": ["atmosphere", "ambience", "decor", "music", "patio", "view",
                        "seating", "parking", "place"],
    }

    # Location terms of the dataset's home city (Charleston, SC)
    LOCATION_STOPWORDS = [
        "charleston", "chs", "sc", "south", "carolina", "downtown", "king",
        "street", "st", "mount", "mt", "pleasant", "folly", "beach", "island",
        "summerville", "lowcountry",
    ]

    # Apostrophe forms of stop words; the tokenizer keeps them whole
    CONTRACTION_STOPWORDS = [
        "i'm", "i've", "i'd", "i'll", "it's", "it'd", "it'll", "that's",
        "there's", "here's", "what's", "who's", "where's", "when's", "why's",
        "how's", "let's", "he's", "she's", "he'd", "she'd", "he'll", "she'll",
        "you're", "you've", "you'd", "you'll", "we're", "we've", "we'd",
        "we'll", "they're", "they've", "they'd", "they'll", "y'all",
        "don't", "doesn't", "didn't", "isn't", "aren't", "wasn't", "weren't",
        "haven't", "hasn't", "hadn't", "can't", "couldn't", "won't",
        "wouldn't", "shouldn't", "mustn't", "shan't", "ain't",
    ]

    # Required columns of the review table
    BUSINESS_COLUMN = "business"
    REVIEW_ID_COLUMN = "review_id"
    TEXT_COLUMN = "review"

# File and Path Constants
class FileConstants:
    """Constants for file operations."""

    DEFAULT_REVIEWS_PATH = "data/sample_reviews.csv"  # bundled sample dataset
    DEFAULT_ASPECTS_PATH = "config/aspects/restaurant.yaml"
    CONFIG_FILE = ".env.example"  # configuration template file
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Presentation Constants
class ReportConstants:
    """Constants for report rendering."""

    POSITIVE_MARKER = "+"
    NEGATIVE_MARKER = "-"
    NEUTRAL_MARKER = "="

    POSITIVE_COLOR = "#2e7d32"
    NEGATIVE_COLOR = "#c62828"
    NEUTRAL_COLOR = "#757575"
