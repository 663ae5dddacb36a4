"""Category filtering and free-text search over a built timeline."""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Set

from travel_flow.assemble.categories import DEFAULT_REGISTRY, EventClassifier
from travel_flow.models import DayData, Event, EventType


@dataclass
class FilterState:
    active_categories: Set[str] = field(default_factory=lambda: set(DEFAULT_REGISTRY.order))
    search_query: str = ""


def _contains(value, q: str) -> bool:
    return isinstance(value, str) and q in value.lower()


def matches_search(event: Event, query: str) -> bool:
    """Case-insensitive substring match on the text fields of the event's record."""
    if not query:
        return True
    q = query.lower()
    d = event.data

    if event.type == EventType.FLIGHT:
        parts = [
            d.departure.city, d.departure.code, d.arrival.city, d.arrival.code,
            d.airline, d.flight_number,
        ]
    elif event.type.is_hotel:
        parts = [d.name, d.address.full_address, d.address.city]
    else:
        parts = [d.name, d.description, d.address]

    return any(_contains(p, q) for p in parts)


class FilterController:
    """Holds the filter/search state of one activities view."""

    def __init__(
        self,
        classifier: Optional[EventClassifier] = None,
        state: Optional[FilterState] = None,
    ):
        self.classifier = classifier or EventClassifier()
        self.state = state or FilterState(active_categories=set(self.classifier.registry.order))
        self.present_categories: Set[str] = set()

    # --- state changes ---

    def reset(self, day_data: DayData):
        """Activate exactly the categories present in the data and clear the query."""
        self.present_categories = self.classifier.present_categories(day_data)
        self.state = FilterState(active_categories=set(self.present_categories))

    def toggle_category(self, key: str):
        active = self.state.active_categories
        if key in active:
            active.discard(key)
        else:
            active.add(key)

    def toggle_all(self):
        """One button: re-select everything when nothing is active, otherwise clear."""
        if not self.state.active_categories:
            self.state.active_categories = set(self.present_categories or self.classifier.registry.order)
        else:
            self.state.active_categories = set()

    def set_search(self, query: str):
        self.state.search_query = (query or "").strip()

    def clear_search(self):
        self.state.search_query = ""

    # --- queries ---

    @property
    def toggle_all_selects(self) -> bool:
        """True when the toggle-all button currently reads "Select all"."""
        return not self.state.active_categories

    @property
    def show_filter_panel(self) -> bool:
        return len(self.present_categories) > 1

    def panel_categories(self) -> List[str]:
        return self.classifier.ordered(self.present_categories)

    def keep(self, event: Event) -> bool:
        return (
            self.classifier.classify(event) in self.state.active_categories
            and matches_search(event, self.state.search_query)
        )

    def apply(self, day_data: DayData) -> DayData:
        """Return a filtered copy; every date stays, possibly with no events."""
        filtered = {
            day: [ev for ev in day_data.events_on(day) if self.keep(ev)]
            for day in day_data.all_dates
        }
        return DayData(
            all_dates=list(day_data.all_dates),
            grouped=filtered,
            issues=list(day_data.issues),
            lang=day_data.lang,
            trip_start=day_data.trip_start,
            trip_end=day_data.trip_end,
        )


def filter_day_data(
    day_data: DayData,
    categories: Iterable[str],
    query: str = "",
    classifier: Optional[EventClassifier] = None,
) -> DayData:
    controller = FilterController(
        classifier=classifier,
        state=FilterState(active_categories=set(categories), search_query=(query or "").strip()),
    )
    return controller.apply(day_data)
