"""Basic usage examples for ReviewTags."""

from reviewtags import load_reviews, lookup_business, run_pipeline
from reviewtags.core.aspect import AspectDictionary
from reviewtags.core.sentiment import PolarityLexicon
from reviewtags.ui.report import format_business_summary, format_text_report


def example_full_report():
    """Example: tags and highlights for every restaurant in the sample."""
    print("🔍 Analyzing the bundled sample reviews")

    reviews = load_reviews("data/sample_reviews.csv")
    print(f"📊 Loaded {len(reviews)} reviews")

    report = run_pipeline(reviews)
    print(format_text_report(report))


def example_custom_dictionary():
    """Example: swapping the aspect dictionary and lexicon."""
    print("\n🔍 Analyzing with a custom dictionary")

    dictionary = AspectDictionary({
        "bbq": ["pork", "brisket", "ribs", "hog"],
        "sides": ["mac", "cornbread", "biscuits", "grits"],
        "service": ["staff", "line", "server"],
    })
    lexicon = PolarityLexicon.from_mapping({
        "fantastic": "positive",
        "tender": "positive",
        "dry": "negative",
        "long": "negative",
    })

    reviews = load_reviews("data/sample_reviews.csv")
    report = run_pipeline(reviews, dictionary=dictionary, lexicon=lexicon)

    summary = lookup_business(report, reviews, "Rodney Scott's BBQ")
    print(format_business_summary(summary))


if __name__ == "__main__":
    example_full_report()
    example_custom_dictionary()
