"""
modules/planning/opening_hours.py
----------------------------------
Opening-hours parsing and the open-at-time predicate.

Dataset hours are free text ("7:00 AM - 6:00 PM", "24 Hours", "Sunrise to
sunset", ...).  Anything that does not yield two "H:MM AM|PM" tokens becomes
the UNPARSED sentinel, which every caller treats as always open so that bad
source data never blocks scheduling.

Examples:
  "24 Hours"             → ALWAYS_OPEN
  "7:00 AM - 6:00 PM"    → RANGE(420, 1080)
  "10:00 PM - 2:00 AM"   → RANGE(1320, 1560)   (close wrapped past midnight)
  "Morning only"         → UNPARSED
"""

from __future__ import annotations

import re

from tourguide.schemas.itinerary import ALWAYS_OPEN, UNPARSED, OpeningWindow, WindowKind
from tourguide.schemas.place import Place

_MINUTES_PER_DAY: int = 24 * 60

_ALWAYS_OPEN_MARKERS: tuple[str, ...] = ("24 hours", "24/7")
_TIME_TOKEN = re.compile(r"(\d{1,2}):(\d{2})\s*(AM|PM)", re.IGNORECASE)


def _to_minutes(hour: int, minute: int, period: str) -> int:
    """12-hour clock → minutes since midnight (12 AM → 0, 12 PM → 12:00)."""
    period = period.upper()
    if period == "PM" and hour != 12:
        hour += 12
    elif period == "AM" and hour == 12:
        hour = 0
    return hour * 60 + minute


def parse_opening_hours(opening: str) -> OpeningWindow:
    """Parse a free-text hours string.  Never raises."""
    text = (opening or "").lower()
    if any(marker in text for marker in _ALWAYS_OPEN_MARKERS):
        return ALWAYS_OPEN

    tokens = _TIME_TOKEN.findall(opening or "")
    if len(tokens) < 2:
        return UNPARSED

    (oh, om, op), (ch, cm, cp) = tokens[0], tokens[1]
    open_minute  = _to_minutes(int(oh), int(om), op)
    close_minute = _to_minutes(int(ch), int(cm), cp)
    if close_minute < open_minute:
        close_minute += _MINUTES_PER_DAY

    return OpeningWindow(
        kind=WindowKind.RANGE,
        open_minute=open_minute,
        close_minute=close_minute,
    )


def is_open_at(window: OpeningWindow, current_minute: int) -> bool:
    """
    True if *window* is open at *current_minute* (minutes since midnight).

    The clock is folded into a single day first, so a running clock that has
    passed midnight is checked against the next morning's hours.
    """
    if not window.is_range:
        return True
    current = current_minute % _MINUTES_PER_DAY
    if window.wraps_midnight:
        return current >= window.open_minute or current <= window.close_minute - _MINUTES_PER_DAY
    return window.open_minute <= current <= window.close_minute


def is_place_open(place: Place, current_hour: int, current_minute: int = 0) -> bool:
    """Open-at-time predicate for a Place."""
    return is_open_at(parse_opening_hours(place.opening), current_hour * 60 + current_minute)
