"""Calendar view: Monday-first month grid with per-day event indicators."""

import calendar
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from travel_flow.assemble.categories import EventClassifier
from travel_flow.i18n import month_name, weekday_headers
from travel_flow.models import DayData, EventType
from travel_flow.normalize.date_parser import parse_date
from travel_flow.views.common import flight_route, hotel_status


@dataclass(frozen=True)
class CalendarViewState:
    year: int
    month: int  # 1-12

    def next(self) -> "CalendarViewState":
        if self.month == 12:
            return CalendarViewState(self.year + 1, 1)
        return CalendarViewState(self.year, self.month + 1)

    def prev(self) -> "CalendarViewState":
        if self.month == 1:
            return CalendarViewState(self.year - 1, 12)
        return CalendarViewState(self.year, self.month - 1)


@dataclass
class CalendarIndicator:
    category: str
    color: str
    icon: str
    label: str
    time: str = ""


@dataclass
class CalendarCell:
    date: str
    day_number: int
    in_trip: bool = False
    indicators: List[CalendarIndicator] = field(default_factory=list)


@dataclass
class CalendarMonth:
    state: CalendarViewState
    title: str
    weekday_headers: List[str]
    weeks: List[List[Optional[CalendarCell]]]  # 7 cells per week, None = padding


def initial_state(day_data: DayData, today: Optional[date] = None) -> CalendarViewState:
    """Month of the trip start; else of the first dated event; else today's."""
    first = day_data.trip_start or (day_data.all_dates[0] if day_data.all_dates else None)
    d = parse_date(first) if first else None
    if d is None:
        d = today or date.today()
    return CalendarViewState(d.year, d.month)


def _in_trip(day: str, day_data: DayData) -> bool:
    if day_data.trip_start and day_data.trip_end:
        return day_data.trip_start <= day <= day_data.trip_end
    if day_data.all_dates:
        return day_data.all_dates[0] <= day <= day_data.all_dates[-1]
    return False


def _indicator_label(ev, lang: str) -> str:
    d = ev.data
    if ev.type == EventType.FLIGHT:
        dep, arr = flight_route(ev)
        return f"{dep} → {arr}"
    if ev.type.is_hotel:
        if ev.type == EventType.HOTEL_STAY:
            return d.name
        return f"{hotel_status(ev, lang)} {d.name}".strip()
    return d.name


def render_calendar(
    day_data: DayData,
    state: CalendarViewState,
    classifier: Optional[EventClassifier] = None,
) -> CalendarMonth:
    classifier = classifier or EventClassifier()
    lang = day_data.lang

    weeks = []
    # monthdayscalendar pads with 0 and always returns full 7-day weeks
    for week in calendar.Calendar(firstweekday=calendar.MONDAY).monthdayscalendar(state.year, state.month):
        row = []
        for day_number in week:
            if day_number == 0:
                row.append(None)
                continue
            iso = date(state.year, state.month, day_number).isoformat()
            indicators = []
            for ev in day_data.events_on(iso):
                cat = classifier.category_for(ev)
                indicators.append(CalendarIndicator(
                    category=cat.key,
                    color=cat.color,
                    icon=cat.icon,
                    label=_indicator_label(ev, lang),
                    time=ev.time or "",
                ))
            row.append(CalendarCell(
                date=iso,
                day_number=day_number,
                in_trip=_in_trip(iso, day_data),
                indicators=indicators,
            ))
        weeks.append(row)

    return CalendarMonth(
        state=state,
        title=f"{month_name(state.month, lang).capitalize()} {state.year}",
        weekday_headers=weekday_headers(lang),
        weeks=weeks,
    )
