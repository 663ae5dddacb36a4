"""Tests for text, JSON and HTML output."""

import json

from travel_flow.assemble.timeline import TimelineBuilder
from travel_flow.models import Activity, Airport, DateTimeSlot, Flight, Hotel, Trip
from travel_flow.output import day_data_to_dict, format_timeline, render_html, to_json, write_html
from travel_flow.page import ActivitiesPage


def _sample_trip(**overrides):
    data = dict(
        name="Japan",
        start_date="2026-06-16",
        end_date="2026-06-19",
        flights=[Flight(
            date="2026-06-16",
            departure_time="08:00",
            departure=Airport(city="Rome"),
            arrival=Airport(city="Tokyo"),
            id="f1",
        )],
        hotels=[Hotel(
            name="Hotel Tokyo",
            check_in=DateTimeSlot(date="2026-06-16", time="15:00"),
            check_out=DateTimeSlot(date="2026-06-19", time="11:00"),
            id="h1",
        )],
    )
    data.update(overrides)
    return Trip(**data)


def test_format_timeline_lists_days_and_totals():
    trip = _sample_trip()
    text = format_timeline(TimelineBuilder(lang="en").build(trip), trip)

    assert "JAPAN" in text
    assert "[Flight] Flight from Rome → Tokyo" in text
    assert "Hotel Tokyo - Check-out" in text
    assert "16 JUN, TUE" in text
    assert "Total: 4 days, 5 events" in text


def test_format_timeline_reports_issues_and_empty_days():
    trip = _sample_trip(hotels=[], activities=[Activity(name="Lost", date="2026-99-99")])
    text = format_timeline(TimelineBuilder(lang="en").build(trip), trip)

    assert "    —" in text
    assert "⚠ Unparseable date '2026-99-99'" in text


def test_day_data_to_dict():
    data = day_data_to_dict(TimelineBuilder(lang="en").build(_sample_trip()))

    assert data["allDates"][0] == "2026-06-16"
    first_day = data["days"][0]["events"]
    assert [e["type"] for e in first_day] == ["flight", "hotel-checkin"]
    assert first_day[0]["category"] == "flight"
    assert first_day[0]["recordId"] == "f1"
    assert data["summary"] == {"total_days": 4, "total_events": 5, "categories": ["flight", "hotel"]}


def test_to_json_writes_file(tmp_path):
    path = tmp_path / "out" / "timeline.json"
    to_json(TimelineBuilder().build(_sample_trip()), path)

    assert json.loads(path.read_text(encoding="utf-8"))["summary"]["total_days"] == 4


def test_render_html_list_escapes_text():
    trip = _sample_trip(activities=[Activity(name="<b>Sumo</b>", date="2026-06-17")])
    html = render_html(ActivitiesPage(trip, lang="en").render(), title="Japan", lang="en")

    assert html.startswith("<!DOCTYPE html>")
    assert "Hotel Tokyo - Check-in" in html
    assert "&lt;b&gt;Sumo&lt;/b&gt;" in html
    assert "<b>Sumo</b>" not in html
    assert 'class="filters"' in html


def test_render_html_cards_and_calendar():
    trip = _sample_trip()
    page = ActivitiesPage(trip, lang="en", view_mode="cards")
    assert "card--flight" in render_html(page.render())

    page.set_view_mode("calendar")
    html = render_html(page.render())
    assert 'class="calendar"' in html
    assert 'class="in-trip"' in html
    assert "June 2026" in html


def test_render_html_page_chrome_is_localised():
    page = ActivitiesPage(_sample_trip(), lang="it", view_mode="calendar")
    page.search("tokyo")
    html = render_html(page.render(), title="Giappone", lang="it")

    assert "Attività" in html
    assert 'placeholder="Cerca attività..."' in html
    assert 'value="tokyo"' in html
    assert '<span class="view active">Vista calendario</span>' in html
    assert "Vista elenco" in html and "Vista schede" in html
    assert 'title="Mese precedente"' in html
    assert 'title="Mese successivo"' in html


def test_write_html_empty_state(tmp_path):
    path = tmp_path / "activities.html"
    write_html(ActivitiesPage(Trip(), lang="en").render(), path, lang="en")

    assert "No activities" in path.read_text(encoding="utf-8")
