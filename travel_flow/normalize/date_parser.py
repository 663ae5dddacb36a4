"""Date parsing and calendar-day helpers for booking records."""

import re
from datetime import date, datetime, timedelta
from typing import Iterator, Optional

from dateutil import parser as dateutil_parser

_EMPTY_VALUES = ("null", "none", "undefined", "")

# Fallback defaults for dateutil; every field differs between the two
_DEFAULT_A = datetime(2000, 1, 1)
_DEFAULT_B = datetime(2001, 2, 2)


def is_blank(raw) -> bool:
    return raw is None or (isinstance(raw, str) and raw.strip().lower() in _EMPTY_VALUES)


def parse_date(raw) -> Optional[date]:
    """Parse a booking date, returning a date or None.

    Handles:
      - YYYY-MM-DD (what the extractor and the editor store)
      - YYYY-MM-DDTHH:MM[:SS] (date part only, no timezone shift)
      - DDMONYY / DDMONYYYY (e.g. 16JUN26, 16JUN2026)
      - anything else dateutil parses without fuzzing, as long as the
        string itself names the year, month and day
    """
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if is_blank(raw) or not isinstance(raw, str):
        return None

    raw = raw.strip()

    # 1. YYYY-MM-DD, optionally followed by a time part
    m = re.match(r'^(\d{4})-(\d{2})-(\d{2})(?:[T ].*)?$', raw)
    if m:
        try:
            return date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
        except ValueError:
            return None

    # 2. DDMONYY / DDMONYYYY
    m = re.match(r'^(\d{2})([A-Z]{3})(\d{2,4})$', raw, re.I)
    if m:
        day, mon, year = m.groups()
        year = year if len(year) == 4 else f"20{year}"
        try:
            return datetime.strptime(f"{day}{mon.upper()}{year}", "%d%b%Y").date()
        except ValueError:
            return None

    # 3. dateutil, non-fuzzy. Year, month and day must all come from the
    # string: parse against two unrelated defaults and require agreement.
    try:
        first = dateutil_parser.parse(raw, default=_DEFAULT_A).date()
        second = dateutil_parser.parse(raw, default=_DEFAULT_B).date()
    except (ValueError, OverflowError):
        return None
    if first != second:
        return None  # year-less or day-less, can't guess
    return first


def to_iso(d: date) -> str:
    return d.isoformat()


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every calendar day from start to end, both inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def normalize_time(raw) -> Optional[str]:
    """Return an HH:MM string, or None for missing times."""
    if is_blank(raw) or not isinstance(raw, str):
        return None
    raw = raw.strip()
    m = re.match(r'^(\d{1,2}):(\d{2})', raw)
    if m:
        return f"{int(m.group(1)):02d}:{m.group(2)}"
    return raw
