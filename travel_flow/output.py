"""Output formatters: human-readable timeline, JSON, and HTML page."""

import json
from html import escape
from pathlib import Path
from typing import List, Optional, Union

from travel_flow.assemble.categories import EventClassifier
from travel_flow.i18n import t
from travel_flow.models import DayData, Event, Trip
from travel_flow.page import EmptyState, FilterPanel, PageView
from travel_flow.views.calendar_view import CalendarMonth
from travel_flow.views.card_view import CardDay, FlightCard, HotelCard
from travel_flow.views.common import day_header, event_text, time_label
from travel_flow.views.list_view import ListDay


# ---------------------------------------------------------------------------
# Human-readable timeline
# ---------------------------------------------------------------------------

def format_timeline(day_data: DayData, trip: Optional[Trip] = None,
                    classifier: Optional[EventClassifier] = None) -> str:
    """Produce a human-readable day-by-day itinerary."""
    classifier = classifier or EventClassifier()
    lang = day_data.lang
    title = trip.name if trip and trip.name else "Travel Flow"

    lines = []
    lines.append("=" * 72)
    lines.append(f"  {title.upper()} — Day-by-Day Timeline")
    lines.append("=" * 72)

    if not day_data.all_dates:
        lines.append(f"\n  {t('no_activities', lang)}")

    current_month = None
    for day in day_data.all_dates:
        header = day_header(day, lang)
        if day[:7] != current_month:
            current_month = day[:7]
            lines.append(f"\n--- {current_month} {'─' * 62}")

        lines.append(f"\n  {header.day_number:>2} {header.month_short}, {header.weekday_short}")
        events = day_data.events_on(day)
        if not events:
            lines.append("    —")
        for ev in events:
            cat = classifier.category_for(ev)
            when = time_label(ev)
            when_str = f"{when:<16}" if when else " " * 16
            lines.append(f"    {when_str}[{cat.label(lang)}] {event_text(ev, lang)}")

    for issue in day_data.issues:
        lines.append(f"\n  ⚠ {issue.note}")

    total = len(day_data.all_events())
    lines.append(f"\n{'=' * 72}")
    lines.append(f"  Total: {len(day_data.all_dates)} days, {total} events")
    lines.append("=" * 72)

    return "\n".join(lines)


# ---------------------------------------------------------------------------
# JSON output
# ---------------------------------------------------------------------------

def _event_to_dict(ev: Event, classifier: EventClassifier) -> dict:
    return {
        "date": ev.date,
        "time": ev.time,
        "type": ev.type.value,
        "category": classifier.classify(ev),
        "label": event_text(ev, "en"),
        "recordId": ev.data.id,
    }


def day_data_to_dict(day_data: DayData, classifier: Optional[EventClassifier] = None) -> dict:
    classifier = classifier or EventClassifier()
    return {
        "allDates": list(day_data.all_dates),
        "days": [
            {
                "date": b.date,
                "events": [_event_to_dict(ev, classifier) for ev in b.events],
            }
            for b in day_data.buckets()
        ],
        "issues": [
            {
                "kind": i.kind,
                "recordType": i.record_type,
                "field": i.field_name,
                "raw": i.raw,
                "recordId": i.record_id,
            }
            for i in day_data.issues
        ],
        "summary": {
            "total_days": len(day_data.all_dates),
            "total_events": len(day_data.all_events()),
            "categories": classifier.ordered(classifier.present_categories(day_data)),
        },
    }


def to_json(day_data: DayData, path: Path, classifier: Optional[EventClassifier] = None):
    """Write the grouped timeline as JSON."""
    path.parent.mkdir(parents=True, exist_ok=True)
    data = day_data_to_dict(day_data, classifier)
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")


# ---------------------------------------------------------------------------
# HTML page
# ---------------------------------------------------------------------------

def _day_head(header) -> str:
    return (
        f'<div class="day-header"><div class="day-number">{header.day_number}</div>'
        f'<div class="day-meta">{escape(header.weekday_short)}, {escape(header.month_short)}</div></div>'
    )


def _list_html(days: List[ListDay]) -> str:
    out = []
    for day in days:
        rows = "".join(
            f'<div class="item" style="--cat-color: {r.color}">'
            f'<span class="material-symbols-outlined" style="color: {r.color}">{escape(r.icon)}</span>'
            + (f'<span class="item-time">{escape(r.time_label)}</span>' if r.time_label else "")
            + f'<span class="item-text">{escape(r.text)}</span></div>'
            for r in day.rows
        )
        if day.is_empty:
            rows = '<div class="item item--empty">&mdash;</div>'
        out.append(f'<div class="day">{_day_head(day.header)}<div class="list">{rows}</div></div>')
    return "\n".join(out)


def _card_html(card) -> str:
    if isinstance(card, FlightCard):
        badge = f'<span class="badge">{escape(card.badge)}</span>' if card.badge else ""
        body = "".join(
            f'<span class="{cls}">{escape(v)}</span>'
            for cls, v in (("title", card.title), ("subtitle", card.subtitle), ("detail", card.detail),
                           ("detail", card.duration))
            if v
        )
        footer = f'{escape(card.arrival)} {escape(card.arrival_time)}'.strip()
        head = f'{escape(card.time)}{badge}'
    elif isinstance(card, HotelCard):
        body = f'<span class="title">{escape(card.title)}</span>'
        if card.subtitle:
            body += f'<span class="subtitle">{escape(card.subtitle)}</span>'
        footer = escape(card.address)
        head = f'<span class="material-symbols-outlined">{card.status_icon}</span>{escape(card.time)}'
    else:
        body = f'<span class="title">{escape(card.title)}</span>'
        if card.subtitle:
            body += f'<span class="subtitle">{escape(card.subtitle)}</span>'
        footer = ""
        head = escape(card.time)
    return (
        f'<div class="card card--{card.kind}" style="border-color: {card.color}">'
        f'<div class="card-head" style="background: {card.color}">{head}</div>'
        f'<div class="card-body">{body}</div><div class="card-foot">{footer}</div></div>'
    )


def _cards_html(days: List[CardDay]) -> str:
    return "\n".join(
        f'<div class="day day--cards">{_day_head(day.header)}'
        f'<div class="card-row">{"".join(_card_html(c) for c in day.cards)}</div></div>'
        for day in days
    )


def _calendar_html(month: CalendarMonth, lang: str) -> str:
    head = "".join(f"<th>{escape(w)}</th>" for w in month.weekday_headers)
    rows = []
    for week in month.weeks:
        cells = []
        for cell in week:
            if cell is None:
                cells.append('<td class="pad"></td>')
                continue
            marks = "".join(
                f'<div class="mark" style="border-left-color: {i.color}">'
                f'{escape(i.time)} {escape(i.label)}</div>'
                for i in cell.indicators
            )
            cls = "in-trip" if cell.in_trip else ""
            cells.append(f'<td class="{cls}"><div class="num">{cell.day_number}</div>{marks}</td>')
        rows.append(f"<tr>{''.join(cells)}</tr>")
    return (
        f'<div class="month-nav">'
        f'<span class="nav" title="{escape(t("prev_month", lang))}">&lsaquo;</span>'
        f'<h2 class="month-title">{escape(month.title)}</h2>'
        f'<span class="nav" title="{escape(t("next_month", lang))}">&rsaquo;</span></div>'
        f'<table class="calendar"><thead><tr>{head}</tr></thead><tbody>{"".join(rows)}</tbody></table>'
    )


def _filter_html(panel: Optional[FilterPanel]) -> str:
    if panel is None:
        return ""
    pills = "".join(
        f'<span class="pill{" active" if p.active else ""}" '
        f'style="{"background: linear-gradient(135deg, %s, %s)" % p.gradient if p.active else ""}">'
        f'{escape(p.label)}</span>'
        for p in panel.pills
    )
    return (
        f'<div class="filters"><span class="filter-title">{escape(panel.title)}</span>'
        f'<span class="toggle-all">{escape(panel.toggle_all_label)}</span>{pills}</div>'
    )


_VIEW_LABELS = (("list", "view_list"), ("cards", "view_cards"), ("calendar", "view_calendar"))


def _view_switch_html(active: str, lang: str) -> str:
    links = "".join(
        f'<span class="view{" active" if mode == active else ""}">{escape(t(key, lang))}</span>'
        for mode, key in _VIEW_LABELS
    )
    return f'<div class="views">{links}</div>'


def render_html(view: Union[PageView, EmptyState], title: str = "Travel Flow", lang: str = "it") -> str:
    """Map a page structure onto a standalone HTML document."""
    if isinstance(view, EmptyState):
        body = (
            f'<div class="empty-state"><h3>{escape(view.title)}</h3>'
            f'<p>{escape(view.text)}</p></div>'
        )
    else:
        if view.view_mode == "cards":
            content = _cards_html(view.content)
        elif view.view_mode == "calendar":
            content = _calendar_html(view.content, lang)
        else:
            content = _list_html(view.content)
        search = (
            f'<input class="search" type="search" value="{escape(view.search_query)}" '
            f'placeholder="{escape(t("search_placeholder", lang))}">'
        )
        body = f"{_view_switch_html(view.view_mode, lang)}{search}{_filter_html(view.filter_panel)}\n{content}"

    return f"""<!DOCTYPE html>
<html lang="{lang}">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{escape(title)}</title>
<link rel="stylesheet" href="https://fonts.googleapis.com/css2?family=Material+Symbols+Outlined" />
<style>
  * {{ margin: 0; padding: 0; box-sizing: border-box; }}
  body {{
    font-family: "Helvetica Neue", Arial, sans-serif;
    color: #222;
    background: #fff;
    padding: 32px 40px;
    max-width: 1000px;
    margin: 0 auto;
  }}
  h1 {{ font-size: 22px; font-weight: 600; margin-bottom: 18px; }}
  .day {{ display: flex; gap: 16px; padding: 12px 0; border-bottom: 1px solid #e0e0e0; }}
  .day-header {{ width: 72px; text-align: center; }}
  .day-number {{ font-size: 26px; font-weight: 700; }}
  .day-meta {{ font-size: 12px; color: #666; }}
  .list {{ flex: 1; }}
  .item {{ display: flex; gap: 10px; align-items: center; padding: 4px 0; border-left: 3px solid var(--cat-color, #ccc); padding-left: 8px; margin-bottom: 4px; }}
  .item--empty {{ color: #aaa; border-left-color: #eee; }}
  .item-time {{ color: #666; font-size: 13px; min-width: 110px; }}
  .card-row {{ display: flex; gap: 12px; overflow-x: auto; }}
  .card {{ width: 200px; min-height: 140px; border: 1px solid #ddd; border-radius: 10px; overflow: hidden; }}
  .card-head {{ color: #fff; padding: 6px 10px; font-size: 13px; display: flex; gap: 6px; align-items: center; }}
  .card-body, .card-foot {{ padding: 6px 10px; display: flex; flex-direction: column; font-size: 13px; }}
  .title {{ font-weight: 600; }}
  .subtitle, .detail, .card-foot {{ color: #666; }}
  .badge {{ margin-left: auto; background: rgba(255,255,255,0.25); border-radius: 8px; padding: 0 6px; }}
  .filters {{ display: flex; flex-wrap: wrap; gap: 6px; align-items: center; margin-bottom: 14px; font-size: 13px; }}
  .pill {{ padding: 4px 12px; border-radius: 20px; border: 1px solid #ccc; color: #666; }}
  .pill.active {{ color: #fff; border-color: transparent; }}
  .toggle-all {{ text-decoration: underline; color: #2c3e50; margin-right: 8px; }}
  .calendar {{ width: 100%; border-collapse: collapse; table-layout: fixed; }}
  .calendar th {{ font-size: 12px; text-transform: uppercase; color: #666; padding: 6px; }}
  .calendar td {{ vertical-align: top; height: 90px; border: 1px solid #eee; padding: 4px; font-size: 11px; }}
  .calendar td.in-trip {{ background: #eff6ff; }}
  .calendar td.pad {{ background: #fafafa; }}
  .mark {{ border-left: 3px solid #ccc; padding-left: 4px; margin-top: 2px; white-space: nowrap; overflow: hidden; text-overflow: ellipsis; }}
  .month-title {{ font-size: 18px; text-transform: capitalize; }}
  .month-nav {{ display: flex; gap: 12px; align-items: center; margin-bottom: 8px; }}
  .nav {{ font-size: 20px; color: #666; }}
  .section {{ font-size: 13px; color: #666; margin: -12px 0 16px; text-transform: uppercase; }}
  .views {{ display: flex; gap: 8px; margin-bottom: 10px; font-size: 13px; }}
  .view {{ padding: 4px 10px; border-radius: 6px; color: #666; }}
  .view.active {{ background: #2c3e50; color: #fff; }}
  .search {{ width: 100%; padding: 6px 10px; border: 1px solid #ccc; border-radius: 6px; margin-bottom: 10px; }}
  .empty-state {{ text-align: center; color: #666; padding: 60px 0; }}
  @media print {{
    body {{ padding: 20px; }}
  }}
</style>
</head>
<body>
  <h1>{escape(title)}</h1>
  <p class="section">{escape(t("activities", lang))}</p>
{body}
</body>
</html>"""


def write_html(view: Union[PageView, EmptyState], path: Path, title: str = "Travel Flow", lang: str = "it"):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_html(view, title=title, lang=lang), encoding="utf-8")
