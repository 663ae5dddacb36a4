"""Tests for travel_flow.assemble.timeline."""

import copy

from travel_flow.assemble.timeline import TimelineBuilder, build_day_events, sort_day_events
from travel_flow.models import (
    Activity,
    Airport,
    DateTimeSlot,
    Event,
    EventType,
    Flight,
    Hotel,
    Trip,
)


def _sample_trip(**overrides):
    data = dict(
        start_date="2026-06-16",
        end_date="2026-06-19",
        flights=[Flight(
            date="2026-06-16",
            departure_time="08:00",
            departure=Airport(code="FCO", city="Rome"),
            arrival=Airport(code="NRT", city="Tokyo"),
            id="f1",
        )],
        hotels=[Hotel(
            name="Hotel Tokyo",
            check_in=DateTimeSlot(date="2026-06-16", time="15:00"),
            check_out=DateTimeSlot(date="2026-06-19", time="11:00"),
            id="h1",
        )],
        activities=[],
    )
    data.update(overrides)
    return Trip(**data)


def _types(day_data, day):
    return [ev.type for ev in day_data.events_on(day)]


def test_rome_tokyo_trip_builds_expected_days():
    day_data = build_day_events(_sample_trip(), lang="en")

    assert day_data.all_dates == ["2026-06-16", "2026-06-17", "2026-06-18", "2026-06-19"]
    assert _types(day_data, "2026-06-16") == [EventType.FLIGHT, EventType.HOTEL_CHECKIN]
    assert _types(day_data, "2026-06-17") == [EventType.HOTEL_STAY]
    assert _types(day_data, "2026-06-18") == [EventType.HOTEL_STAY]
    assert _types(day_data, "2026-06-19") == [EventType.HOTEL_CHECKOUT]
    assert day_data.trip_start == "2026-06-16"
    assert day_data.trip_end == "2026-06-19"
    assert day_data.issues == []


def test_all_dates_cover_trip_span_without_bookings():
    trip = _sample_trip(start_date="2026-02-26", end_date="2026-03-02", flights=[], hotels=[])
    day_data = TimelineBuilder().build(trip)

    assert day_data.all_dates == [
        "2026-02-26", "2026-02-27", "2026-02-28", "2026-03-01", "2026-03-02",
    ]
    assert all(day_data.events_on(d) == [] for d in day_data.all_dates)


def test_events_outside_trip_span_extend_all_dates():
    trip = _sample_trip(activities=[Activity(name="Airport lounge", date="2026-06-15")])
    day_data = TimelineBuilder().build(trip)

    assert day_data.all_dates[0] == "2026-06-15"
    assert day_data.all_dates == sorted(day_data.all_dates)


def test_hotel_expansion_counts_and_stay_dates():
    for nights in range(0, 6):
        check_out = f"2026-06-{10 + nights:02d}"
        trip = Trip(hotels=[Hotel(
            name="Inn",
            check_in=DateTimeSlot(date="2026-06-10"),
            check_out=DateTimeSlot(date=check_out),
        )])
        events = TimelineBuilder().trip_to_events(trip)

        assert len(events) == 2 + max(0, nights - 1)
        stays = [ev for ev in events if ev.type == EventType.HOTEL_STAY]
        assert all(ev.date not in ("2026-06-10", check_out) for ev in stays)


def test_hotel_checkout_before_checkin_has_no_stays():
    trip = Trip(hotels=[Hotel(
        name="Backwards",
        check_in=DateTimeSlot(date="2026-06-12"),
        check_out=DateTimeSlot(date="2026-06-10"),
    )])
    events = TimelineBuilder().trip_to_events(trip)

    assert [ev.type for ev in events] == [EventType.HOTEL_CHECKIN, EventType.HOTEL_CHECKOUT]


def test_stay_days_cross_month_boundary():
    trip = Trip(hotels=[Hotel(
        name="Inn",
        check_in=DateTimeSlot(date="2026-01-30"),
        check_out=DateTimeSlot(date="2026-02-02"),
    )])
    events = TimelineBuilder().trip_to_events(trip)

    stays = [ev.date for ev in events if ev.type == EventType.HOTEL_STAY]
    assert stays == ["2026-01-31", "2026-02-01"]


def test_timeless_events_sort_before_timed():
    trip = Trip(
        hotels=[
            Hotel(name="Old", check_in=DateTimeSlot(date="2026-06-14"),
                  check_out=DateTimeSlot(date="2026-06-16", time="11:00")),
            Hotel(name="Long", check_in=DateTimeSlot(date="2026-06-15"),
                  check_out=DateTimeSlot(date="2026-06-18")),
        ],
        activities=[
            Activity(name="Lunch", date="2026-06-16", start_time="13:00"),
            Activity(name="Free time", date="2026-06-16"),
            Activity(name="Breakfast", date="2026-06-16", start_time="8:30"),
        ],
    )
    events = TimelineBuilder().build(trip).events_on("2026-06-16")

    times = [ev.time for ev in events]
    assert times == [None, None, "08:30", "11:00", "13:00"]
    # stay (3) before activity (4) among timeless events
    assert [ev.type for ev in events[:2]] == [EventType.HOTEL_STAY, EventType.ACTIVITY]


def test_checkout_sorts_before_flight_when_neither_has_time():
    hotel = Hotel(name="Inn")
    flight = Flight(date="2026-06-19")
    events = [
        Event(date="2026-06-19", type=EventType.FLIGHT, data=flight),
        Event(date="2026-06-19", type=EventType.HOTEL_CHECKOUT, data=hotel),
    ]

    assert [ev.type for ev in sort_day_events(events)] == [EventType.HOTEL_CHECKOUT, EventType.FLIGHT]


def test_same_time_ties_break_on_type_priority():
    hotel = Hotel(name="Inn")
    flight = Flight(date="2026-06-19")
    events = [
        Event(date="2026-06-19", type=EventType.HOTEL_CHECKIN, data=hotel, time="10:00"),
        Event(date="2026-06-19", type=EventType.FLIGHT, data=flight, time="10:00"),
        Event(date="2026-06-19", type=EventType.HOTEL_CHECKOUT, data=hotel, time="10:00"),
    ]

    assert [ev.type for ev in sort_day_events(events)] == [
        EventType.HOTEL_CHECKOUT, EventType.FLIGHT, EventType.HOTEL_CHECKIN,
    ]


def test_malformed_date_is_reported_and_skipped():
    trip = _sample_trip(activities=[
        Activity(name="Mystery tour", date="2026-13-45", id="a1"),
        Activity(name="Sumo", date="2026-06-17", id="a2"),
    ])
    day_data = TimelineBuilder().build(trip)

    names = [ev.data.name for ev in day_data.all_events() if ev.type == EventType.ACTIVITY]
    assert names == ["Sumo"]
    assert len(day_data.issues) == 1
    issue = day_data.issues[0]
    assert issue.kind == "malformed_date"
    assert issue.record_type == "activity"
    assert issue.record_id == "a1"
    assert issue.raw == "2026-13-45"


def test_partial_dates_are_reported_not_placed_on_today():
    trip = _sample_trip(end_date="2026-06-17", hotels=[], activities=[
        Activity(name="Check-in desk", date="10:30", id="a1"),
        Activity(name="Market", date="17", id="a2"),
        Activity(name="Festival", date="June", id="a3"),
    ])
    day_data = TimelineBuilder().build(trip)

    assert day_data.all_dates == ["2026-06-16", "2026-06-17"]
    assert [(i.kind, i.record_id) for i in day_data.issues] == [
        ("malformed_date", "a1"), ("malformed_date", "a2"), ("malformed_date", "a3"),
    ]


def test_blank_dates_are_skipped_silently():
    trip = _sample_trip(activities=[Activity(name="Someday", date="")], end_date="null")
    day_data = TimelineBuilder().build(trip)

    assert day_data.issues == []
    # no trip span: only the booked days remain
    assert day_data.all_dates == ["2026-06-16", "2026-06-17", "2026-06-18", "2026-06-19"]
    assert day_data.trip_end is None


def test_alternate_date_forms_are_accepted():
    trip = Trip(activities=[
        Activity(name="A", date="16JUN2026"),
        Activity(name="B", date="2026-06-17T09:00:00"),
    ])
    day_data = TimelineBuilder().build(trip)

    assert day_data.all_dates == ["2026-06-16", "2026-06-17"]
    assert day_data.events_on("2026-06-17")[0].time is None


def test_build_does_not_mutate_trip():
    trip = _sample_trip(activities=[
        Activity(name="Ramen", date="2026-06-17", start_time="19:00", category="bogus-key"),
        Activity(name="Broken", date="not a date"),
    ])
    before = copy.deepcopy(trip)

    TimelineBuilder().build(trip)

    assert trip == before


def test_events_reference_source_records():
    trip = _sample_trip()
    day_data = TimelineBuilder().build(trip)

    assert day_data.events_on("2026-06-16")[0].data is trip.flights[0]
    assert all(ev.data is trip.hotels[0] for ev in day_data.events_on("2026-06-17"))


def test_builder_can_be_reused():
    builder = TimelineBuilder()
    first = builder.build(_sample_trip(activities=[Activity(name="X", date="2026-02-30")]))
    second = builder.build(_sample_trip())

    assert len(first.issues) == 1
    assert second.issues == []
