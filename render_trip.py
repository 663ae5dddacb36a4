#!/usr/bin/env python3
"""CLI entry point for the Travel Flow activities timeline.

Usage:
    python render_trip.py --trip path/to/trip.json [--view list] [--output-dir output/]

Options:
    --trip PATH       Trip document (JSON, as stored for the trip)
    --view MODE       View to render: list, cards, calendar (default: config)
    --format FMT      Output format: timeline, json, html, all (default: all)
    --lang LANG       Label language: it, en (default: config)
    --search TEXT     Free-text search applied before rendering
    --category KEY    Show only these categories (repeatable)
    --month YYYY-MM   Month shown by the calendar view
    --output-dir DIR  Directory for output files (default: output/)
    --dry-run         Show stats without writing files
"""

import argparse
import sys
from pathlib import Path

from travel_flow.config import DEFAULT_LANG, DEFAULT_VIEW_MODE, OUTPUT_DIR, SUPPORTED_LANGS, VIEW_MODES
from travel_flow.normalize.records import TripLoadError
from travel_flow.output import format_timeline, to_json, write_html
from travel_flow.page import ActivitiesPage
from travel_flow.pipeline import run_pipeline
from travel_flow.views.calendar_view import CalendarViewState


def _month(value: str) -> CalendarViewState:
    try:
        year, month = (int(p) for p in value.split("-"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM, got {value!r}")
    if not 1 <= month <= 12:
        raise argparse.ArgumentTypeError(f"month out of range in {value!r}")
    return CalendarViewState(year, month)


def main():
    parser = argparse.ArgumentParser(
        description="Render a trip's bookings as a day-by-day activities timeline.",
    )
    parser.add_argument(
        "--trip",
        required=True,
        help="Path to the trip JSON document",
    )
    parser.add_argument(
        "--view",
        choices=list(VIEW_MODES),
        default=DEFAULT_VIEW_MODE if DEFAULT_VIEW_MODE in VIEW_MODES else "list",
        help="View mode for the HTML output",
    )
    parser.add_argument(
        "--format",
        choices=["timeline", "json", "html", "all"],
        default="all",
        help="Output format (timeline, json, html, all)",
    )
    parser.add_argument(
        "--lang",
        choices=list(SUPPORTED_LANGS),
        default=DEFAULT_LANG,
        help="Label language",
    )
    parser.add_argument(
        "--search",
        default="",
        help="Only show events matching this text",
    )
    parser.add_argument(
        "--category",
        action="append",
        default=[],
        help="Only show this category (repeatable)",
    )
    parser.add_argument(
        "--month",
        type=_month,
        default=None,
        help="Calendar month to show (YYYY-MM); defaults to the trip start",
    )
    parser.add_argument(
        "--output-dir",
        default=str(OUTPUT_DIR),
        help="Output directory",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show stats only, don't write files",
    )
    args = parser.parse_args()

    output_dir = Path(args.output_dir)

    try:
        trip, day_data, issues = run_pipeline(args.trip, lang=args.lang, verbose=True)
    except TripLoadError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    if args.dry_run:
        print(f"\nDry run complete. {len(day_data.all_dates)} days, "
              f"{len(day_data.all_events())} events, {len(issues)} issues.")
        return

    page = ActivitiesPage(trip, lang=args.lang, view_mode=args.view, day_data=day_data)
    if args.category:
        page.show_categories(args.category)
    if args.search:
        page.search(args.search)
    if args.month:
        page.show_month(args.month)

    output_dir.mkdir(parents=True, exist_ok=True)
    filtered = page.filters.apply(page.day_data)

    if args.format in ("timeline", "all"):
        timeline_text = format_timeline(filtered, trip, page.classifier)
        timeline_path = output_dir / "timeline.txt"
        timeline_path.write_text(timeline_text, encoding="utf-8")
        print(f"\nTimeline written to: {timeline_path}")
        # Also print to stdout
        print(timeline_text)

    if args.format in ("json", "all"):
        json_path = output_dir / "timeline.json"
        to_json(filtered, json_path, page.classifier)
        print(f"JSON written to: {json_path}")

    if args.format in ("html", "all"):
        html_path = output_dir / f"activities_{page.view_mode}.html"
        write_html(page.render(), html_path, title=trip.name or "Travel Flow", lang=args.lang)
        print(f"HTML written to: {html_path}")


if __name__ == "__main__":
    main()
