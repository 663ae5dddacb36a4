"""Orchestrates one trip load: read → build timeline → check categories."""

import sys
from pathlib import Path
from typing import List, Optional, Tuple, Union

from travel_flow.assemble.categories import DEFAULT_REGISTRY, CategoryRegistry, find_unknown_overrides
from travel_flow.assemble.timeline import TimelineBuilder
from travel_flow.config import DEFAULT_LANG
from travel_flow.models import BuildIssue, DayData, Trip
from travel_flow.normalize.records import load_trip


def run_pipeline(
    trip_path: Union[str, Path],
    lang: Optional[str] = None,
    verbose: bool = True,
    registry: CategoryRegistry = DEFAULT_REGISTRY,
) -> Tuple[Trip, DayData, List[BuildIssue]]:
    """Load a trip file and build its day-by-day timeline.

    Args:
        trip_path: Path to the trip JSON document.
        lang: UI language for labels. Defaults to config.
        verbose: Print progress and recovered issues to stderr.
        registry: Category table used for override checks.

    Returns:
        (trip, day_data, issues); issues covers malformed dates and
        unknown category overrides, none of which stop the build.

    Raises:
        TripLoadError: the file is unreadable or not a JSON object.
    """
    lang = lang or DEFAULT_LANG

    def log(msg):
        if verbose:
            print(msg, file=sys.stderr)

    # Step 1: Load
    log(f"Loading trip: {trip_path}")
    trip = load_trip(trip_path)
    log(f"  Flights: {len(trip.flights)}, hotels: {len(trip.hotels)}, activities: {len(trip.activities)}")

    # Step 2: Build timeline
    day_data = TimelineBuilder(lang=lang).build(trip)
    log(f"  Timeline: {len(day_data.all_dates)} days, {len(day_data.all_events())} events")

    # Step 3: Category overrides
    issues = list(day_data.issues) + find_unknown_overrides(trip, registry)
    for issue in issues:
        log(f"  WARNING [{issue.kind}] {issue.note}")

    return trip, day_data, issues
