"""Card view: a horizontal row of cards per day."""

from dataclasses import dataclass, field
from typing import List, Optional, Union

from travel_flow.assemble.categories import EventClassifier
from travel_flow.config import CARD_DESCRIPTION_MAX_CHARS
from travel_flow.i18n import t
from travel_flow.models import DayData, Event, EventType
from travel_flow.views.common import (
    DayHeader,
    day_header,
    flight_route,
    format_duration,
    hotel_status,
    truncate,
)


@dataclass
class FlightCard:
    category: str
    color: str
    time: str
    title: str  # departure city
    arrival: str
    arrival_time: str = ""
    route: str = ""
    badge: str = ""  # flight number
    subtitle: str = ""  # departure airport
    detail: str = ""  # terminal
    duration: str = ""
    record_id: str = ""
    kind: str = "flight"


@dataclass
class HotelCard:
    category: str
    color: str
    status: str
    status_icon: str
    time: str  # check-in/out time, else the status text
    title: str
    subtitle: str = ""  # city
    address: str = ""
    record_id: str = ""
    kind: str = "hotel"


@dataclass
class ActivityCard:
    category: str
    color: str
    icon: str
    time: str
    title: str
    subtitle: str = ""  # description, truncated
    record_id: str = ""
    kind: str = "activity"


Card = Union[FlightCard, HotelCard, ActivityCard]


@dataclass
class CardDay:
    header: DayHeader
    cards: List[Card] = field(default_factory=list)


_STATUS_ICONS = {
    EventType.HOTEL_CHECKIN: "login",
    EventType.HOTEL_CHECKOUT: "logout",
    EventType.HOTEL_STAY: "bed",
}


def _flight_card(ev: Event, color: str, lang: str) -> FlightCard:
    f = ev.data
    dep, arr = flight_route(ev)
    arrival_time = f.arrival_time
    if arrival_time and f.arrival_next_day:
        arrival_time += " +1"
    return FlightCard(
        category="flight",
        color=color,
        time=f.departure_time,
        title=dep,
        arrival=arr,
        arrival_time=arrival_time,
        route=f"{dep} → {arr}",
        badge=f.flight_number,
        subtitle=f.departure.airport,
        detail=f"{t('terminal', lang)} {f.departure.terminal}" if f.departure.terminal else "",
        duration=format_duration(f.duration, lang) or "",
        record_id=f.id,
    )


def _hotel_card(ev: Event, color: str, lang: str) -> HotelCard:
    h = ev.data
    status = hotel_status(ev, lang)
    return HotelCard(
        category="hotel",
        color=color,
        status=status,
        status_icon=_STATUS_ICONS[ev.type],
        time=ev.time or status,
        title=h.name or t("hotel", lang),
        subtitle=h.address.city,
        address=h.address.display(),
        record_id=h.id,
    )


def _activity_card(ev: Event, category: str, color: str, icon: str) -> ActivityCard:
    a = ev.data
    time_range = ""
    if ev.time:
        time_range = ev.time
        if a.end_time:
            time_range += f" – {a.end_time}"
    return ActivityCard(
        category=category,
        color=color,
        icon=icon,
        time=time_range,
        title=a.name,
        subtitle=truncate(a.description, CARD_DESCRIPTION_MAX_CHARS),
        record_id=a.id,
    )


def event_card(ev: Event, classifier: EventClassifier, lang: str) -> Card:
    cat = classifier.category_for(ev)
    if ev.type == EventType.FLIGHT:
        return _flight_card(ev, cat.color, lang)
    if ev.type.is_hotel:
        return _hotel_card(ev, cat.color, lang)
    return _activity_card(ev, cat.key, cat.color, cat.icon)


def render_cards(day_data: DayData, classifier: Optional[EventClassifier] = None) -> List[CardDay]:
    classifier = classifier or EventClassifier()
    lang = day_data.lang
    return [
        CardDay(
            header=day_header(day, lang),
            cards=[event_card(ev, classifier, lang) for ev in day_data.events_on(day)],
        )
        for day in day_data.all_dates
    ]
