"""UI strings and calendar names for the supported languages."""

from datetime import date

from travel_flow.config import DEFAULT_LANG

STRINGS = {
    "en": {
        "flight_from": "Flight from",
        "check_in": "Check-in",
        "check_out": "Check-out",
        "stay": "Stay",
        "hotel": "Hotel",
        "terminal": "Terminal",
        "activities": "Activities",
        "no_activities": "No activities",
        "no_activities_text": "Add a booking to see your activities here",
        "filter_by_type": "Filter by type:",
        "deselect_all": "Deselect all",
        "select_all": "Select all",
        "search_placeholder": "Search activities...",
        "view_list": "List view",
        "view_cards": "Card view",
        "view_calendar": "Calendar view",
        "prev_month": "Previous month",
        "next_month": "Next month",
    },
    "it": {
        "flight_from": "Volo da",
        "check_in": "Check-in",
        "check_out": "Check-out",
        "stay": "Soggiorno",
        "hotel": "Hotel",
        "terminal": "Terminal",
        "activities": "Attività",
        "no_activities": "Nessuna attività",
        "no_activities_text": "Aggiungi una prenotazione per vedere le tue attività",
        "filter_by_type": "Filtra per tipo:",
        "deselect_all": "Deseleziona tutti",
        "select_all": "Seleziona tutti",
        "search_placeholder": "Cerca attività...",
        "view_list": "Vista elenco",
        "view_cards": "Vista schede",
        "view_calendar": "Vista calendario",
        "prev_month": "Mese precedente",
        "next_month": "Mese successivo",
    },
}

MONTHS = {
    "en": ["January", "February", "March", "April", "May", "June", "July",
           "August", "September", "October", "November", "December"],
    "it": ["gennaio", "febbraio", "marzo", "aprile", "maggio", "giugno", "luglio",
           "agosto", "settembre", "ottobre", "novembre", "dicembre"],
}

# Monday first, matching date.weekday()
WEEKDAYS = {
    "en": ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"],
    "it": ["lun", "mar", "mer", "gio", "ven", "sab", "dom"],
}


def _lang(lang: str) -> str:
    return lang if lang in STRINGS else DEFAULT_LANG


def t(key: str, lang: str = DEFAULT_LANG) -> str:
    """Translate a UI key; unknown keys come back unchanged."""
    return STRINGS[_lang(lang)].get(key) or STRINGS["en"].get(key, key)


def month_name(month: int, lang: str = DEFAULT_LANG) -> str:
    return MONTHS[_lang(lang)][month - 1]


def month_short(d: date, lang: str = DEFAULT_LANG) -> str:
    """Upper-case three-letter month, e.g. "GIU" / "JUN"."""
    return month_name(d.month, lang)[:3].upper()


def weekday_short(d: date, lang: str = DEFAULT_LANG) -> str:
    return WEEKDAYS[_lang(lang)][d.weekday()].upper()


def weekday_headers(lang: str = DEFAULT_LANG):
    return list(WEEKDAYS[_lang(lang)])
