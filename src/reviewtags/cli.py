"""Command-line interface for ReviewTags."""

import argparse
import logging
import subprocess
import sys
from pathlib import Path

from .core.aspect import load_aspect_dictionary
from .core.config import settings
from .core.constants import FileConstants
from .core.sentiment import load_lexicon
from .pipeline import lookup_business, run_pipeline
from .services.loader import load_reviews
from .ui.report import format_business_summary, format_text_report, render_html_report
from .utils.data_prep import export_to_json, prepare_export

logger = logging.getLogger(__name__)

EXIT_NOT_FOUND = 2


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=FileConstants.LOG_FORMAT
    )


def _analyze(args):
    reviews = load_reviews(args.input)
    dictionary = load_aspect_dictionary(args.aspects or settings.aspects_path)
    lexicon = load_lexicon(args.lexicon or settings.lexicon_path)
    report = run_pipeline(reviews, dictionary=dictionary, lexicon=lexicon, config=settings)
    return reviews, report


def cmd_analyze(args):
    """Analyze command."""
    reviews, report = _analyze(args)

    print(format_text_report(report))

    if args.html:
        Path(args.html).write_text(render_html_report(report, title=args.title), encoding="utf-8")
        print(f"HTML report written to {args.html}")

    if args.out:
        export_to_json(prepare_export(report, source=str(args.input)), args.out)
        print(f"Results exported to {args.out}")
    return 0


def cmd_business(args):
    """Single business lookup."""
    reviews, report = _analyze(args)
    summary = lookup_business(report, reviews, args.name)
    print(format_business_summary(summary))
    return 0 if summary.found else EXIT_NOT_FOUND


def cmd_words(args):
    """Most frequent cleaned words per business."""
    reviews, report = _analyze(args)
    for business in report.businesses:
        words = report.words_for(business)[:args.top]
        print(f"{business}: " + ", ".join(f"{w.word} ({w.count})" for w in words))
    return 0


def cmd_ui(args):
    """UI command."""
    app_path = Path(__file__).parent / "ui" / "streamlit_app.py"

    if not app_path.exists():
        print(f"Streamlit app not found at {app_path}")
        return 1

    print("Launching ReviewTags UI...")
    try:
        subprocess.run([
            sys.executable, "-m", "streamlit", "run", str(app_path)
        ], check=True)
    except subprocess.CalledProcessError as e:
        print(f"Failed to launch UI: {e}")
        return 1
    except KeyboardInterrupt:
        print("\nUI stopped by user")
    return 0


def _add_input_args(parser):
    parser.add_argument('input', nargs='?', default=settings.reviews_path, help='CSV file with business, review_id, review columns')
    parser.add_argument('--aspects', help='YAML aspect dictionary')
    parser.add_argument('--lexicon', help='CSV polarity lexicon (word,sentiment)')


def build_parser():
    parser = argparse.ArgumentParser(description="ReviewTags - Restaurant review aspect tags and highlights")
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Analyze command
    analyze_parser = subparsers.add_parser('analyze', help='Analyze all businesses in a review file')
    _add_input_args(analyze_parser)
    analyze_parser.add_argument('--html', help='Write an HTML report to this file')
    analyze_parser.add_argument('--title', default='Restaurant Review Highlights', help='HTML report title')
    analyze_parser.add_argument('--out', help='Output JSON file')
    analyze_parser.set_defaults(func=cmd_analyze)

    # Business command
    business_parser = subparsers.add_parser('business', help='Show results for one business')
    business_parser.add_argument('name', help='Business name')
    _add_input_args(business_parser)
    business_parser.set_defaults(func=cmd_business)

    # Words command
    words_parser = subparsers.add_parser('words', help='Show frequent words per business')
    _add_input_args(words_parser)
    words_parser.add_argument('--top', type=int, default=settings.top_words, help='Words per business')
    words_parser.set_defaults(func=cmd_words)

    # UI command
    ui_parser = subparsers.add_parser('ui', help='Launch web UI')
    ui_parser.set_defaults(func=cmd_ui)

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_logging()

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        return 130
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Command failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
