"""Day-by-day timeline assembly: Trip → dated Events grouped per day."""

from datetime import date, timedelta
from typing import Dict, List, Optional, Tuple

from travel_flow.config import DEFAULT_LANG
from travel_flow.models import (
    Activity,
    BuildIssue,
    DayData,
    Event,
    EventType,
    Flight,
    Hotel,
    Trip,
    TYPE_PRIORITY,
)
from travel_flow.normalize.date_parser import (
    is_blank,
    iter_days,
    normalize_time,
    parse_date,
    to_iso,
)


class TimelineBuilder:
    """Expands a trip's bookings into a per-day event timeline.

    A builder is cheap; each ``build`` call works on fresh state and never
    touches the trip it is given.
    """

    def __init__(self, lang: str = DEFAULT_LANG):
        self.lang = lang
        self._issues: List[BuildIssue] = []

    # -----------------------------------------------------------------------
    # Step 0: dates
    # -----------------------------------------------------------------------

    def _date(self, raw, record_type: str, field_name: str, record_id: str = "") -> Optional[date]:
        """Parse a record date; unparseable values are recorded, not raised."""
        if is_blank(raw):
            return None
        parsed = parse_date(raw)
        if parsed is None:
            self._issues.append(BuildIssue(
                kind="malformed_date",
                record_type=record_type,
                field_name=field_name,
                raw=raw,
                record_id=record_id,
                note=f"Unparseable {field_name} {raw!r}, {record_type} left out of the timeline",
            ))
        return parsed

    # -----------------------------------------------------------------------
    # Step 1: records → events
    # -----------------------------------------------------------------------

    def _events_from_flight(self, flight: Flight) -> List[Event]:
        dep_date = self._date(flight.date, "flight", "date", flight.id)
        if not dep_date:
            return []
        return [Event(
            date=to_iso(dep_date),
            type=EventType.FLIGHT,
            data=flight,
            time=normalize_time(flight.departure_time),
        )]

    def _events_from_hotel(self, hotel: Hotel) -> List[Event]:
        events = []
        check_in = self._date(hotel.check_in.date, "hotel", "checkIn.date", hotel.id)
        check_out = self._date(hotel.check_out.date, "hotel", "checkOut.date", hotel.id)

        if check_in:
            events.append(Event(
                date=to_iso(check_in),
                type=EventType.HOTEL_CHECKIN,
                data=hotel,
                time=normalize_time(hotel.check_in.time),
            ))

        # One timeless STAY per night strictly between check-in and check-out
        if check_in and check_out:
            d = check_in + timedelta(days=1)
            while d < check_out:
                events.append(Event(
                    date=to_iso(d),
                    type=EventType.HOTEL_STAY,
                    data=hotel,
                    time=None,
                ))
                d += timedelta(days=1)

        if check_out:
            events.append(Event(
                date=to_iso(check_out),
                type=EventType.HOTEL_CHECKOUT,
                data=hotel,
                time=normalize_time(hotel.check_out.time),
            ))

        return events

    def _events_from_activity(self, activity: Activity) -> List[Event]:
        act_date = self._date(activity.date, "activity", "date", activity.id)
        if not act_date:
            return []
        return [Event(
            date=to_iso(act_date),
            type=EventType.ACTIVITY,
            data=activity,
            time=normalize_time(activity.start_time),
        )]

    def trip_to_events(self, trip: Trip) -> List[Event]:
        """Convert every booking of the trip into a flat list of Events."""
        events = []
        for flight in trip.flights:
            events.extend(self._events_from_flight(flight))
        for hotel in trip.hotels:
            events.extend(self._events_from_hotel(hotel))
        for activity in trip.activities:
            events.extend(self._events_from_activity(activity))
        return events

    # -----------------------------------------------------------------------
    # Step 2: trip span → all dates
    # -----------------------------------------------------------------------

    def _trip_span(self, trip: Trip) -> Tuple[Optional[date], Optional[date]]:
        start = self._date(trip.start_date, "trip", "startDate", trip.id)
        end = self._date(trip.end_date, "trip", "endDate", trip.id)
        return start, end

    # -----------------------------------------------------------------------
    # Step 3: group + sort
    # -----------------------------------------------------------------------

    def build(self, trip: Trip) -> DayData:
        """Full assembly: events → grouped by day → every trip day → sorted."""
        self._issues = []

        events = self.trip_to_events(trip)

        grouped: Dict[str, List[Event]] = {}
        for ev in events:
            grouped.setdefault(ev.date, []).append(ev)

        start, end = self._trip_span(trip)
        trip_days = [to_iso(d) for d in iter_days(start, end)] if start and end else []

        # ISO strings sort chronologically
        all_dates = sorted(set(trip_days) | set(grouped))

        for day in all_dates:
            if day in grouped:
                grouped[day] = sort_day_events(grouped[day])

        return DayData(
            all_dates=all_dates,
            grouped=grouped,
            issues=list(self._issues),
            lang=self.lang,
            trip_start=to_iso(start) if start else None,
            trip_end=to_iso(end) if end else None,
        )


def event_sort_key(ev: Event):
    """Timeless first, then by HH:MM, then by type priority."""
    has_time = ev.time is not None
    return (has_time, ev.time or "", TYPE_PRIORITY.get(ev.type, 99))


def sort_day_events(events: List[Event]) -> List[Event]:
    return sorted(events, key=event_sort_key)


def build_day_events(trip: Trip, lang: str = DEFAULT_LANG) -> DayData:
    """Build the grouped timeline for one trip load."""
    return TimelineBuilder(lang=lang).build(trip)
