"""Activities tab: one trip's cached timeline, filter state, view mode and month."""

from dataclasses import dataclass, field
from typing import List, Optional, Union

from travel_flow.assemble.categories import DEFAULT_REGISTRY, CategoryRegistry, EventClassifier
from travel_flow.assemble.filters import FilterController
from travel_flow.assemble.timeline import TimelineBuilder
from travel_flow.config import DEFAULT_LANG, DEFAULT_VIEW_MODE, VIEW_MODES
from travel_flow.i18n import t
from travel_flow.models import DayData, Trip
from travel_flow.views.calendar_view import CalendarMonth, CalendarViewState, initial_state, render_calendar
from travel_flow.views.card_view import CardDay, render_cards
from travel_flow.views.list_view import ListDay, render_list


@dataclass
class EmptyState:
    title: str
    text: str


@dataclass
class FilterPill:
    key: str
    label: str
    icon: str
    active: bool
    gradient: tuple


@dataclass
class FilterPanel:
    title: str
    toggle_all_label: str
    pills: List[FilterPill] = field(default_factory=list)


@dataclass
class PageView:
    view_mode: str
    search_query: str
    filter_panel: Optional[FilterPanel]
    content: Union[List[ListDay], List[CardDay], CalendarMonth]


def _view_mode(mode: Optional[str]) -> str:
    return mode if mode in VIEW_MODES else "list"


class ActivitiesPage:
    """What the application shell renders for a trip's activities tab.

    The timeline is built once per trip load; every interaction below only
    re-filters and re-renders.
    """

    def __init__(
        self,
        trip: Trip,
        lang: str = DEFAULT_LANG,
        view_mode: str = DEFAULT_VIEW_MODE,
        registry: CategoryRegistry = DEFAULT_REGISTRY,
        builder: Optional[TimelineBuilder] = None,
        day_data: Optional[DayData] = None,
    ):
        self.lang = lang
        self.view_mode = _view_mode(view_mode)
        self.classifier = EventClassifier(registry)
        self.builder = builder or TimelineBuilder(lang=lang)
        self.filters = FilterController(classifier=self.classifier)
        self.calendar_state: Optional[CalendarViewState] = None
        self.trip = trip
        self._day_data: Optional[DayData] = None
        if day_data is not None:
            self._seed(day_data)

    @property
    def day_data(self) -> DayData:
        self._ensure_built()
        return self._day_data

    def reload(self, trip: Trip):
        """New trip data from the store: drop the cached timeline."""
        self.trip = trip
        self._day_data = None

    def _seed(self, day_data: DayData):
        # Filter and calendar state start from what the timeline contains
        self._day_data = day_data
        self.filters.reset(day_data)
        self.calendar_state = initial_state(day_data)

    def _ensure_built(self):
        if self._day_data is None:
            self._seed(self.builder.build(self.trip))

    # --- interactions ---

    def set_view_mode(self, mode: str):
        self.view_mode = _view_mode(mode)

    def toggle_category(self, key: str):
        self._ensure_built()
        self.filters.toggle_category(key)

    def toggle_all(self):
        self._ensure_built()
        self.filters.toggle_all()

    def search(self, query: str):
        self._ensure_built()
        self.filters.set_search(query)

    def clear_search(self):
        self.filters.clear_search()

    def show_categories(self, keys):
        self._ensure_built()
        self.filters.state.active_categories = set(keys)

    def show_month(self, state: CalendarViewState):
        self._ensure_built()
        self.calendar_state = state

    def next_month(self):
        self._ensure_built()
        self.calendar_state = self.calendar_state.next()

    def prev_month(self):
        self._ensure_built()
        self.calendar_state = self.calendar_state.prev()

    # --- rendering ---

    def filter_panel(self) -> Optional[FilterPanel]:
        if not self.filters.show_filter_panel:
            return None
        registry = self.classifier.registry
        active = self.filters.state.active_categories
        pills = []
        for key in self.filters.panel_categories():
            cat = registry.get(key)
            pills.append(FilterPill(
                key=key,
                label=cat.label(self.lang),
                icon=cat.icon,
                active=key in active,
                gradient=cat.gradient,
            ))
        toggle_key = "select_all" if self.filters.toggle_all_selects else "deselect_all"
        return FilterPanel(
            title=t("filter_by_type", self.lang),
            toggle_all_label=t(toggle_key, self.lang),
            pills=pills,
        )

    def render(self) -> Union[EmptyState, PageView]:
        if self.trip.is_empty:
            return EmptyState(
                title=t("no_activities", self.lang),
                text=t("no_activities_text", self.lang),
            )

        filtered = self.filters.apply(self.day_data)
        if self.view_mode == "cards":
            content = render_cards(filtered, self.classifier)
        elif self.view_mode == "calendar":
            content = render_calendar(filtered, self.calendar_state, self.classifier)
        else:
            content = render_list(filtered, self.classifier)

        return PageView(
            view_mode=self.view_mode,
            search_query=self.filters.state.search_query,
            filter_panel=self.filter_panel(),
            content=content,
        )
