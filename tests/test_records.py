"""Tests for loading the stored trip document."""

import json

import pytest

from travel_flow.normalize.records import TripLoadError, load_trip, trip_from_dict


def _sample_doc(**overrides):
    data = {
        "id": "trip-1",
        "title": {"it": "Giappone", "en": "Japan"},
        "startDate": "2026-06-16",
        "endDate": "2026-06-19",
        "flights": [{
            "id": "f1",
            "date": "2026-06-16",
            "departureTime": "08:00",
            "arrivalTime": "06:30",
            "arrivalNextDay": True,
            "departure": {"code": "FCO", "city": "Rome", "terminal": "3"},
            "arrival": {"code": "NRT", "city": "Tokyo"},
            "flightNumber": "AZ784",
            "duration": "13:30",
            "passenger": {"name": "Mario Rossi"},
        }],
        "hotels": [{
            "id": "h1",
            "name": "Hotel Tokyo",
            "checkIn": {"date": "2026-06-16", "time": "15:00"},
            "checkOut": {"date": "2026-06-19", "time": "11:00"},
            "address": {"fullAddress": "1-1 Marunouchi", "city": "Tokyo", "country": "Japan"},
            "nights": 3,
            "confirmationNumber": "ABC123",
        }],
        "activities": [{
            "id": "a1",
            "name": "Sumo",
            "date": "2026-06-17",
            "startTime": "13:00",
            "category": "attrazione",
        }],
    }
    data.update(overrides)
    return data


def test_trip_from_dict_maps_camel_case_fields():
    trip = trip_from_dict(_sample_doc())

    assert trip.name == "Japan"
    assert (trip.start_date, trip.end_date) == ("2026-06-16", "2026-06-19")

    flight = trip.flights[0]
    assert flight.departure.city == "Rome"
    assert flight.departure.terminal == "3"
    assert flight.arrival_next_day is True
    assert flight.passenger == "Mario Rossi"

    hotel = trip.hotels[0]
    assert hotel.check_in.time == "15:00"
    assert hotel.address.city == "Tokyo"
    assert hotel.nights == 3
    assert hotel.booking_reference == "ABC123"

    assert trip.activities[0].category == "attrazione"


def test_string_address_and_missing_sections():
    trip = trip_from_dict(_sample_doc(
        hotels=[{"name": "Inn", "address": " Via Roma 1 "}],
        flights=None,
        activities=["garbage", {"name": "Walk"}],
    ))

    assert trip.hotels[0].address.full_address == "Via Roma 1"
    assert trip.hotels[0].address.display() == "Via Roma 1"
    assert trip.flights == []
    assert [a.name for a in trip.activities] == ["Walk"]
    assert trip.activities[0].category is None


def test_non_object_document_is_rejected():
    with pytest.raises(TripLoadError):
        trip_from_dict(["not", "a", "trip"])


def test_load_trip_unwraps_trip_data(tmp_path):
    path = tmp_path / "trip.json"
    path.write_text(json.dumps({"tripData": _sample_doc()}), encoding="utf-8")

    trip = load_trip(path)

    assert trip.id == "trip-1"
    assert len(trip.hotels) == 1


def test_load_trip_errors(tmp_path):
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")

    with pytest.raises(TripLoadError):
        load_trip(broken)
    with pytest.raises(TripLoadError):
        load_trip(tmp_path / "missing.json")
