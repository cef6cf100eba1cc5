"""Text and HTML rendering of analysis results."""

import html
from collections import defaultdict
from typing import Dict, Iterable, List

from ..core.constants import ReportConstants
from ..core.models import AnalysisReport, AspectSentiment, BusinessSummary, Highlight, SentimentLabel

_MARKERS = {
    SentimentLabel.POSITIVE: ReportConstants.POSITIVE_MARKER,
    SentimentLabel.NEGATIVE: ReportConstants.NEGATIVE_MARKER,
    SentimentLabel.NEUTRAL: ReportConstants.NEUTRAL_MARKER,
}

_COLORS = {
    SentimentLabel.POSITIVE: ReportConstants.POSITIVE_COLOR,
    SentimentLabel.NEGATIVE: ReportConstants.NEGATIVE_COLOR,
    SentimentLabel.NEUTRAL: ReportConstants.NEUTRAL_COLOR,
}


def _group(rows: Iterable, key=lambda r: r.business) -> Dict[str, List]:
    grouped = defaultdict(list)
    for row in rows:
        grouped[key(row)].append(row)
    return grouped


def _sorted_tags(rows: List[AspectSentiment]) -> List[AspectSentiment]:
    return sorted(rows, key=lambda r: (-r.net_sentiment, r.aspect))


def format_tag(sentiment: AspectSentiment) -> str:
    return f"[{_MARKERS[sentiment.label]}] {sentiment.aspect} ({sentiment.net_sentiment:+d})"


def format_tags(sentiments: Iterable[AspectSentiment]) -> Dict[str, str]:
    """One tag line per business, strongest aspect first."""
    return {
        business: "  ".join(format_tag(s) for s in _sorted_tags(rows))
        for business, rows in _group(sentiments).items()
    }


def format_highlights(highlights: Iterable[Highlight]) -> Dict[str, List[str]]:
    """Bulleted highlight phrases per business."""
    return {
        business: [f"  • {h.ngram}" for h in rows]
        for business, rows in _group(highlights).items()
    }


def format_text_report(report: AnalysisReport) -> str:
    tags = format_tags(report.aspect_sentiments)
    bullets = format_highlights(report.highlights)

    lines = []
    for business in report.businesses:
        lines.append(business)
        lines.append("-" * len(business))
        lines.append(f"Aspects: {tags.get(business, '(no aspect mentions)')}")
        lines.append("Highlights:")
        lines.extend(bullets.get(business, ["  (none)"]))
        lines.append("")
    return "\n".join(lines).rstrip() + "\n"


def format_business_summary(summary: BusinessSummary) -> str:
    if not summary.found:
        return f"Business '{summary.business}' not found."

    lines = [f"{summary.business} ({summary.review_count} reviews)"]
    if summary.aspect_sentiments:
        lines.append("Aspects: " + "  ".join(format_tag(s) for s in _sorted_tags(summary.aspect_sentiments)))
    else:
        lines.append("Aspects: (no aspect mentions)")
    lines.append("Highlights:")
    lines.extend([f"  • {h.ngram}" for h in summary.highlights] or ["  (none)"])
    if summary.top_words:
        lines.append("Top words: " + ", ".join(f"{w.word} ({w.count})" for w in summary.top_words))
    return "\n".join(lines)


def _html_tag(sentiment: AspectSentiment) -> str:
    color = _COLORS[sentiment.label]
    return (
        f'<span class="tag {sentiment.label.value}" style="background:{color}">'
        f"{html.escape(sentiment.aspect)} {sentiment.net_sentiment:+d}</span>"
    )


def render_html_report(report: AnalysisReport, title: str = "Restaurant Review Highlights") -> str:
    """Standalone HTML page with color-coded aspect tags."""
    tags = _group(report.aspect_sentiments)
    bullets = _group(report.highlights)

    sections = []
    for business in report.businesses:
        tag_html = " ".join(_html_tag(s) for s in _sorted_tags(tags.get(business, [])))
        items = "".join(f"<li>{html.escape(h.ngram)}</li>" for h in bullets.get(business, []))
        sections.append(
            "<section>"
            f"<h2>{html.escape(business)}</h2>"
            f'<div class="tags">{tag_html or "<em>no aspect mentions</em>"}</div>'
            f"<ul>{items or '<li><em>no highlights</em></li>'}</ul>"
            "</section>"
        )

    return (
        "<!DOCTYPE html>\n"
        "<html><head><meta charset=\"utf-8\">"
        f"<title>{html.escape(title)}</title>"
        "<style>"
        "body{font-family:sans-serif;max-width:60em;margin:auto}"
        ".tag{color:#fff;border-radius:4px;padding:2px 6px;margin-right:4px}"
        "</style></head><body>"
        f"<h1>{html.escape(title)}</h1>"
        + "".join(sections)
        + "</body></html>\n"
    )
