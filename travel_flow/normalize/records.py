"""Convert the stored trip document (camelCase JSON) into typed records."""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

from travel_flow.models import (
    Activity,
    Airport,
    DateTimeSlot,
    Flight,
    Hotel,
    HotelAddress,
    Trip,
)


class TripLoadError(ValueError):
    """The trip document could not be read or is not a JSON object."""


def _str(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _airport(raw: Optional[Dict]) -> Airport:
    raw = raw if isinstance(raw, dict) else {}
    return Airport(
        code=_str(raw.get("code")),
        city=_str(raw.get("city")),
        airport=_str(raw.get("airport")),
        terminal=_str(raw.get("terminal")),
    )


def _slot(raw: Optional[Dict]) -> DateTimeSlot:
    raw = raw if isinstance(raw, dict) else {}
    return DateTimeSlot(date=_str(raw.get("date")), time=_str(raw.get("time")))


def _address(raw: Union[str, Dict, None]) -> HotelAddress:
    if isinstance(raw, str):
        return HotelAddress(full_address=raw.strip())
    raw = raw if isinstance(raw, dict) else {}
    return HotelAddress(
        full_address=_str(raw.get("fullAddress")),
        city=_str(raw.get("city")),
        country=_str(raw.get("country")),
    )


def flight_from_dict(raw: Dict[str, Any]) -> Flight:
    passenger = raw.get("passenger") or {}
    return Flight(
        date=_str(raw.get("date")),
        departure_time=_str(raw.get("departureTime")),
        arrival_time=_str(raw.get("arrivalTime")),
        arrival_next_day=bool(raw.get("arrivalNextDay")),
        departure=_airport(raw.get("departure")),
        arrival=_airport(raw.get("arrival")),
        flight_number=_str(raw.get("flightNumber")),
        airline=_str(raw.get("airline")),
        booking_reference=_str(raw.get("bookingReference")),
        duration=_str(raw.get("duration")),
        passenger=_str(passenger.get("name") if isinstance(passenger, dict) else passenger),
        id=_str(raw.get("id")),
    )


def hotel_from_dict(raw: Dict[str, Any]) -> Hotel:
    nights = raw.get("nights")
    return Hotel(
        name=_str(raw.get("name")),
        check_in=_slot(raw.get("checkIn")),
        check_out=_slot(raw.get("checkOut")),
        address=_address(raw.get("address")),
        nights=nights if isinstance(nights, int) else None,
        booking_reference=_str(raw.get("confirmationNumber") or raw.get("bookingReference")),
        id=_str(raw.get("id")),
    )


def activity_from_dict(raw: Dict[str, Any]) -> Activity:
    return Activity(
        name=_str(raw.get("name")),
        date=_str(raw.get("date")),
        start_time=_str(raw.get("startTime")),
        end_time=_str(raw.get("endTime")),
        description=_str(raw.get("description")),
        address=_str(raw.get("address")),
        category=_str(raw.get("category")) or None,
        id=_str(raw.get("id")),
    )


def trip_from_dict(raw: Dict[str, Any]) -> Trip:
    """Build a Trip from the stored document. Non-object entries are skipped."""
    if not isinstance(raw, dict):
        raise TripLoadError(f"Trip document must be a JSON object, got {type(raw).__name__}")

    return Trip(
        start_date=_str(raw.get("startDate")),
        end_date=_str(raw.get("endDate")),
        flights=[flight_from_dict(f) for f in raw.get("flights") or [] if isinstance(f, dict)],
        hotels=[hotel_from_dict(h) for h in raw.get("hotels") or [] if isinstance(h, dict)],
        activities=[activity_from_dict(a) for a in raw.get("activities") or [] if isinstance(a, dict)],
        name=_title(raw.get("title") or raw.get("name")),
        id=_str(raw.get("id")),
    )


def _title(raw: Union[str, Dict, None]) -> str:
    # Titles are stored per language: {"it": "...", "en": "..."}
    if isinstance(raw, dict):
        return _str(raw.get("en") or raw.get("it") or next(iter(raw.values()), ""))
    return _str(raw)


def load_trip(path: Union[str, Path]) -> Trip:
    """Read a trip JSON file. Documents wrapped as {"tripData": {...}} are unwrapped."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as e:
        raise TripLoadError(f"Cannot read trip file {path}: {e}") from e

    if isinstance(data, dict) and isinstance(data.get("tripData"), dict):
        data = data["tripData"]
    return trip_from_dict(data)
