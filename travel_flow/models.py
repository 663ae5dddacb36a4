"""Data models for the trip timeline engine."""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union


class EventType(str, Enum):
    FLIGHT = "flight"
    HOTEL_CHECKIN = "hotel-checkin"
    HOTEL_STAY = "hotel-stay"
    HOTEL_CHECKOUT = "hotel-checkout"
    ACTIVITY = "activity"

    @property
    def is_hotel(self) -> bool:
        return self.value.startswith("hotel")


# Tie-break among events that share the same time (or have none)
TYPE_PRIORITY = {
    EventType.HOTEL_CHECKOUT: 0,
    EventType.FLIGHT: 1,
    EventType.HOTEL_CHECKIN: 2,
    EventType.HOTEL_STAY: 3,
    EventType.ACTIVITY: 4,
}


@dataclass
class Airport:
    code: str = ""
    city: str = ""
    airport: str = ""
    terminal: str = ""


@dataclass
class Flight:
    date: str = ""  # departure date, as stored
    departure_time: str = ""
    arrival_time: str = ""
    arrival_next_day: bool = False
    departure: Airport = field(default_factory=Airport)
    arrival: Airport = field(default_factory=Airport)
    flight_number: str = ""
    airline: str = ""
    booking_reference: str = ""
    duration: str = ""  # "HH:MM"
    passenger: str = ""
    id: str = ""


@dataclass
class HotelAddress:
    full_address: str = ""
    city: str = ""
    country: str = ""

    def display(self) -> str:
        return self.full_address or self.city


@dataclass
class DateTimeSlot:
    date: str = ""
    time: str = ""


@dataclass
class Hotel:
    name: str = ""
    check_in: DateTimeSlot = field(default_factory=DateTimeSlot)
    check_out: DateTimeSlot = field(default_factory=DateTimeSlot)
    address: HotelAddress = field(default_factory=HotelAddress)
    nights: Optional[int] = None
    booking_reference: str = ""
    id: str = ""


@dataclass
class Activity:
    name: str = ""
    date: str = ""
    start_time: str = ""
    end_time: str = ""
    description: str = ""
    address: str = ""
    category: Optional[str] = None  # explicit override, one of the registry keys
    id: str = ""


@dataclass
class Trip:
    start_date: str = ""
    end_date: str = ""
    flights: List[Flight] = field(default_factory=list)
    hotels: List[Hotel] = field(default_factory=list)
    activities: List[Activity] = field(default_factory=list)
    name: str = ""
    id: str = ""

    @property
    def is_empty(self) -> bool:
        return not (self.flights or self.hotels or self.activities)


Record = Union[Flight, Hotel, Activity]


@dataclass
class Event:
    """A dated occurrence derived from a booking record.

    ``data`` is the source record itself, so edits to the booking show up
    without rebuilding the timeline.
    """
    date: str  # ISO YYYY-MM-DD
    type: EventType
    data: Record = field(repr=False)
    time: Optional[str] = None  # HH:MM, None for timeless events


@dataclass
class DayBucket:
    date: str
    events: List[Event] = field(default_factory=list)


@dataclass
class BuildIssue:
    """A problem recovered while building the timeline."""
    kind: str  # "malformed_date", "unknown_category"
    record_type: str  # "trip", "flight", "hotel", "activity"
    field_name: str
    raw: Any = None
    record_id: str = ""
    note: str = ""


@dataclass
class DayData:
    all_dates: List[str] = field(default_factory=list)
    grouped: Dict[str, List[Event]] = field(default_factory=dict)
    issues: List[BuildIssue] = field(default_factory=list)
    lang: str = "it"
    trip_start: Optional[str] = None  # ISO bounds of the nominal trip span
    trip_end: Optional[str] = None

    def events_on(self, day: str) -> List[Event]:
        return self.grouped.get(day, [])

    def buckets(self) -> List[DayBucket]:
        return [DayBucket(date=d, events=list(self.events_on(d))) for d in self.all_dates]

    def all_events(self) -> List[Event]:
        return [ev for d in self.all_dates for ev in self.events_on(d)]
