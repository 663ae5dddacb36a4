"""Pieces shared by the list, card and calendar views."""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from travel_flow.i18n import month_short, t, weekday_short
from travel_flow.models import Event, EventType


@dataclass
class DayHeader:
    date: str
    day_number: int
    month_short: str
    weekday_short: str


def day_header(day: str, lang: str) -> DayHeader:
    d = date.fromisoformat(day)
    return DayHeader(
        date=day,
        day_number=d.day,
        month_short=month_short(d, lang),
        weekday_short=weekday_short(d, lang),
    )


def hotel_status(event: Event, lang: str) -> str:
    if event.type == EventType.HOTEL_CHECKIN:
        return t("check_in", lang)
    if event.type == EventType.HOTEL_CHECKOUT:
        return t("check_out", lang)
    return t("stay", lang)


def flight_route(event: Event):
    """(departure, arrival) display names: city, else airport code."""
    f = event.data
    return (f.departure.city or f.departure.code, f.arrival.city or f.arrival.code)


def event_text(event: Event, lang: str) -> str:
    """One-line label used by the list view and the text timeline."""
    d = event.data
    if event.type == EventType.FLIGHT:
        dep, arr = flight_route(event)
        return f"{t('flight_from', lang)} {dep} → {arr}"
    if event.type.is_hotel:
        return f"{d.name or t('hotel', lang)} - {hotel_status(event, lang)}"
    if d.description:
        return f"{d.name} - {d.description}"
    return d.name


def time_label(event: Event) -> str:
    """Start time, with arrival for flights and end time for activities."""
    label = event.time or ""
    if not label:
        return ""
    d = event.data
    if event.type == EventType.FLIGHT and d.arrival_time:
        label += f" → {d.arrival_time}"
        if d.arrival_next_day:
            label += " +1"
    elif event.type == EventType.ACTIVITY and d.end_time:
        label += f" – {d.end_time}"
    return label


def format_duration(duration: str, lang: str) -> Optional[str]:
    """Format "HH:MM" as "2h 35m" ("2h 35min" in Italian). None when unparseable."""
    try:
        hours, minutes = (int(p) for p in duration.split(":")[:2])
    except (ValueError, AttributeError):
        return None
    minute_unit = "min" if lang == "it" else "m"
    if hours == 0:
        return f"{minutes}{minute_unit}"
    if minutes == 0:
        return f"{hours}h"
    return f"{hours}h {minutes}{minute_unit}"


def truncate(text: str, limit: int) -> str:
    if len(text) > limit:
        return text[:limit] + "…"
    return text
