"""Data preparation for export."""

import json
from dataclasses import asdict
from datetime import datetime
from typing import Any, Dict, Optional

from .. import __version__
from ..core.models import AnalysisReport


def prepare_export(report: AnalysisReport, source: str = "") -> Dict[str, Any]:
    """Prepare the result tables for JSON export."""
    return {
        "source": source,
        "businesses": list(report.businesses),
        "aspect_sentiment": [
            {**asdict(row), "label": row.label.value} for row in report.aspect_sentiments
        ],
        "highlights": [asdict(row) for row in report.highlights],
        "top_words": [asdict(row) for row in report.word_counts],
        "metadata": {
            "export_timestamp": None,  # set by export_to_json
            "version": __version__,
        },
    }


def export_to_json(data: Dict[str, Any], filename: str, timestamp: Optional[datetime] = None) -> None:
    """Write an export dict to ``filename``, stamping the export time.

    ``timestamp`` defaults to now.
    """
    stamp = timestamp or datetime.now()
    data["metadata"]["export_timestamp"] = stamp.isoformat()

    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
