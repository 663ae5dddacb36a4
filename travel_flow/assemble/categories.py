"""Activity categories: static registry, keyword tables and event classification."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Set, Tuple

from travel_flow.models import BuildIssue, DayData, Event, EventType, Trip


@dataclass(frozen=True)
class Category:
    key: str
    labels: Mapping[str, str] = field(hash=False)  # lang → label
    icon: str  # Material Symbols name
    color: str
    gradient: Tuple[str, str]
    gradient_hover: Tuple[str, str]

    def label(self, lang: str) -> str:
        return self.labels.get(lang) or self.labels.get("en") or self.key


def _category(key, label_it, label_en, icon, color, gradient, gradient_hover) -> Category:
    return Category(
        key=key,
        labels=MappingProxyType({"it": label_it, "en": label_en}),
        icon=icon,
        color=color,
        gradient=gradient,
        gradient_hover=gradient_hover,
    )


RESTAURANT = "restaurant"
FLIGHT = "flight"
HOTEL = "hotel"
MUSEUM = "museum"
ATTRACTION = "attraction"
TRAIN = "train"
PLACE = "place"

_CATEGORIES = (
    _category(RESTAURANT, "Ristorante", "Restaurant", "restaurant", "#f59e0b",
              ("#fbbf24", "#f97316"), ("#f59e0b", "#ea580c")),
    _category(FLIGHT, "Volo", "Flight", "flight", "#2563eb",
              ("#3b82f6", "#4f46e5"), ("#2563eb", "#4338ca")),
    _category(HOTEL, "Hotel", "Hotel", "bed", "#10b981",
              ("#34d399", "#14b8a6"), ("#10b981", "#0d9488")),
    _category(MUSEUM, "Museo", "Museum", "museum", "#a855f7",
              ("#c084fc", "#a855f7"), ("#a855f7", "#9333ea")),
    _category(ATTRACTION, "Attrazione", "Attraction", "photo_camera", "#ec4899",
              ("#f472b6", "#ec4899"), ("#ec4899", "#db2777")),
    _category(TRAIN, "Treno", "Train", "train", "#ef4444",
              ("#f87171", "#ef4444"), ("#ef4444", "#dc2626")),
    _category(PLACE, "Luogo", "Place", "location_on", "#06b6d4",
              ("#22d3ee", "#06b6d4"), ("#06b6d4", "#0891b2")),
)

# Keys stored by older app versions
_LEGACY_KEYS = {
    "ristorante": RESTAURANT,
    "volo": FLIGHT,
    "museo": MUSEUM,
    "attrazione": ATTRACTION,
    "treno": TRAIN,
    "luogo": PLACE,
}

# Checked in this order, first match wins. Leading/trailing spaces
# approximate word boundaries ("bar " must not hit "barbecue").
CATEGORY_KEYWORDS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    (RESTAURANT, (
        "ristorante", "restaurant", "trattoria", "pizzeria", "osteria",
        "ramen", "sushi", "bar ", "café", "cafe", "bistro", "food", "cibo",
        "pranzo", "cena", "colazione", "taverna", "pub", "gelateria",
        "pasticceria", "bakery", "brunch", "lunch", "dinner", "breakfast",
        "izakaya", "tapas", "street food",
    )),
    (MUSEUM, (
        "museo", "museum", "gallery", "galleria", "mostra", "exhibition",
        "pinacoteca", "art ", "arte ",
    )),
    (ATTRACTION, (
        "tempio", "temple", "chiesa", "church", "parco", "park",
        "giardino", "garden", "castello", "castle", "torre", "tower",
        "ponte", "bridge", "piazza", "square", "shrine", "palazzo",
        "zoo", "acquario", "aquarium", "monument", "monumento", "santuario",
        "basilica", "cattedrale", "cathedral", "fortezza", "fortress",
        "arena", "colosseo", "rovina", "ruins", "spiaggia", "beach",
        "viewpoint", "belvedere", "panorama", "market", "mercato",
    )),
    (TRAIN, (
        "treno", "train", "shinkansen", "ferrovia", "railway", "stazione",
        "station", "eurostar", "italo", "trenitalia", "tgv", "bullet train",
    )),
)


@dataclass(frozen=True)
class CategoryRegistry:
    """Immutable category table. Build once, pass it where it is needed."""
    categories: Tuple[Category, ...] = _CATEGORIES
    keywords: Tuple[Tuple[str, Tuple[str, ...]], ...] = CATEGORY_KEYWORDS
    default_key: str = PLACE
    aliases: Mapping[str, str] = field(default_factory=lambda: MappingProxyType(dict(_LEGACY_KEYS)), hash=False)

    @property
    def order(self) -> List[str]:
        return [c.key for c in self.categories]

    def get(self, key: str) -> Category:
        for c in self.categories:
            if c.key == key:
                return c
        return self.get(self.default_key)

    def resolve(self, key: Optional[str]) -> Optional[str]:
        """Return the canonical key for a stored category, or None if unknown."""
        if not key:
            return None
        key = key.strip().lower()
        key = self.aliases.get(key, key)
        return key if key in self.order else None

    def label(self, key: str, lang: str) -> str:
        return self.get(key).label(lang)


DEFAULT_REGISTRY = CategoryRegistry()


def detect_category(name: str, description: str, registry: CategoryRegistry = DEFAULT_REGISTRY) -> str:
    """Keyword heuristic on name + description; falls back to the default key."""
    text = " " + f"{name or ''} {description or ''}".lower() + " "
    for key, words in registry.keywords:
        for word in words:
            if word in text:
                return key
    return registry.default_key


class EventClassifier:
    def __init__(self, registry: CategoryRegistry = DEFAULT_REGISTRY):
        self.registry = registry

    def classify(self, event: Event) -> str:
        if event.type == EventType.FLIGHT:
            return FLIGHT
        if event.type.is_hotel:
            return HOTEL
        if event.type == EventType.ACTIVITY:
            explicit = self.registry.resolve(getattr(event.data, "category", None))
            if explicit:
                return explicit
            return detect_category(event.data.name, event.data.description, self.registry)
        return self.registry.default_key

    def category_for(self, event: Event) -> Category:
        return self.registry.get(self.classify(event))

    def present_categories(self, day_data: DayData) -> Set[str]:
        return {self.classify(ev) for ev in day_data.all_events()}

    def ordered(self, keys: Iterable[str]) -> List[str]:
        keys = set(keys)
        return [k for k in self.registry.order if k in keys]


def find_unknown_overrides(trip: Trip, registry: CategoryRegistry = DEFAULT_REGISTRY) -> List[BuildIssue]:
    """Activities whose stored category is not a known key (classified heuristically instead)."""
    issues = []
    for act in trip.activities:
        if act.category and not registry.resolve(act.category):
            issues.append(BuildIssue(
                kind="unknown_category",
                record_type="activity",
                field_name="category",
                raw=act.category,
                record_id=act.id,
                note=f"Unknown category {act.category!r} on {act.name!r}, using keyword detection",
            ))
    return issues


_default_classifier = EventClassifier()


def event_to_category_key(event: Event) -> str:
    return _default_classifier.classify(event)


def get_category_for_event(event: Event) -> Category:
    return _default_classifier.category_for(event)
