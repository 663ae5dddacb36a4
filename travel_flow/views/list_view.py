"""List view: one row per event, grouped under a header per day."""

from dataclasses import dataclass, field
from typing import List, Optional

from travel_flow.assemble.categories import EventClassifier
from travel_flow.models import DayData, EventType
from travel_flow.views.common import DayHeader, day_header, event_text, time_label


@dataclass
class ListRow:
    event_type: EventType
    category: str
    icon: str
    color: str
    text: str
    time_label: str = ""
    record_id: str = ""


@dataclass
class ListDay:
    header: DayHeader
    rows: List[ListRow] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.rows


def render_list(day_data: DayData, classifier: Optional[EventClassifier] = None) -> List[ListDay]:
    classifier = classifier or EventClassifier()
    lang = day_data.lang
    days = []
    for day in day_data.all_dates:
        rows = []
        for ev in day_data.events_on(day):
            cat = classifier.category_for(ev)
            rows.append(ListRow(
                event_type=ev.type,
                category=cat.key,
                icon=cat.icon,
                color=cat.color,
                text=event_text(ev, lang),
                time_label=time_label(ev),
                record_id=ev.data.id,
            ))
        days.append(ListDay(header=day_header(day, lang), rows=rows))
    return days
