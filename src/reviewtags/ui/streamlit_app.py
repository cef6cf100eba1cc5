"""Simple Streamlit UI for ReviewTags."""

import logging

import pandas as pd
import streamlit as st

from reviewtags.core.aspect import load_aspect_dictionary
from reviewtags.core.config import settings
from reviewtags.core.sentiment import load_lexicon
from reviewtags.pipeline import lookup_business, run_pipeline
from reviewtags.services.loader import ReviewDataError, load_reviews, reviews_from_frame
from reviewtags.ui.report import format_tag

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@st.cache_resource
def _lexicon():
    return load_lexicon(settings.lexicon_path)


# Page configuration
st.set_page_config(
    page_title="ReviewTags — Restaurant Highlights",
    page_icon="🍽️",
    layout="wide"
)

st.title("🍽️ ReviewTags — Restaurant Highlights")
st.write("Aspect sentiment tags and phrase highlights from restaurant reviews.")

with st.sidebar:
    st.header("📂 Data")
    uploaded = st.file_uploader("Reviews CSV", type=["csv"])
    st.caption(f"Default: {settings.reviews_path}")

try:
    if uploaded is not None:
        reviews = reviews_from_frame(pd.read_csv(uploaded, dtype=str, keep_default_na=False))
    else:
        reviews = load_reviews(settings.reviews_path)
except (FileNotFoundError, ReviewDataError) as e:
    st.error(f"Could not load reviews: {e}")
    st.stop()

with st.spinner("Analyzing reviews..."):
    report = run_pipeline(
        reviews,
        dictionary=load_aspect_dictionary(settings.aspects_path),
        lexicon=_lexicon(),
        config=settings,
    )

st.caption(f"📊 {len(reviews)} reviews across {len(report.businesses)} businesses")

if not report.businesses:
    st.warning("No reviews found in this file.")
    st.stop()

selected = st.selectbox("Business", report.businesses)
summary = lookup_business(report, reviews, selected)

st.subheader(f"{summary.business} ({summary.review_count} reviews)")

st.markdown("**Aspects**")
if summary.aspect_sentiments:
    for sentiment in sorted(summary.aspect_sentiments, key=lambda s: -s.net_sentiment):
        icon = {"positive": "🟢", "negative": "🔴"}.get(sentiment.label.value, "⚪")
        st.write(f"{icon} {format_tag(sentiment)}")
else:
    st.write("No aspect mentions.")

st.markdown("**Highlights**")
for highlight in summary.highlights:
    st.write(f"• {highlight.ngram}")
if not summary.highlights:
    st.write("No highlights.")

if summary.top_words:
    st.markdown("**Top words**")
    st.bar_chart(pd.DataFrame(
        {"count": [w.count for w in summary.top_words]},
        index=[w.word for w in summary.top_words],
    ))
