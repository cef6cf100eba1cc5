"""Report rendering for ReviewTags."""

from .report import format_text_report, render_html_report, format_business_summary

__all__ = [
    "format_text_report",
    "render_html_report",
    "format_business_summary",
]
