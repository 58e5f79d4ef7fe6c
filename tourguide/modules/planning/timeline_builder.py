"""
modules/planning/timeline_builder.py
-------------------------------------
Turns one day's places into time-stamped activities.

For each place, in smart order:
  1. t_cur += travel time from the previous place (0 for the first).
  2. If the place is closed at t_cur and its parsed opening time is later
     today, wait until it opens.  Otherwise keep going (fail-open: a closed
     place is never dropped and the clock never moves backwards).
  3. start = t_cur;  t_cur += category visit duration;  end = t_cur.

Activities come out strictly time-ordered and non-overlapping.
"""

from __future__ import annotations

import logging
from typing import Sequence

from tourguide import config
from tourguide.modules.planning.opening_hours import is_open_at, parse_opening_hours
from tourguide.modules.planning.place_sequencer import PlaceBucketingStrategy, smart_order_places
from tourguide.modules.planning.travel_time import (
    FixedDistanceEstimator,
    TravelMode,
    TravelTimeEstimator,
)
from tourguide.schemas.itinerary import ScheduledActivity
from tourguide.schemas.place import Place

logger = logging.getLogger(__name__)


# Visit duration per dataset category (minutes)
CATEGORY_VISIT_DURATION: dict[str, int] = {
    "beaches":     120,
    "temples":      60,
    "parks":        90,
    "restaurants":  90,
    "pubs":        180,
    "shopping":    120,
    "photoshoot":   60,
    "theatres":    180,
    "hotels":        0,   # check-in, not a visit
}
_DEFAULT_VISIT_DURATION: int = 90


# ── Module-level time helpers ─────────────────────────────────────────────────

def format_time(minutes: int) -> str:
    """Minutes since midnight → "H:MM AM/PM" (wraps past midnight)."""
    hour = (minutes // 60) % 24
    minute = minutes % 60
    period = "PM" if hour >= 12 else "AM"
    if hour > 12:
        hour12 = hour - 12
    elif hour == 0:
        hour12 = 12
    else:
        hour12 = hour
    return f"{hour12}:{minute:02d} {period}"


def format_duration(minutes: int) -> str:
    """45 → "45 minutes", 60 → "1 hour", 120 → "2 hours", 90 → "1h 30m"."""
    if minutes < 60:
        return f"{minutes} minutes"
    hours, rem = divmod(minutes, 60)
    if rem:
        return f"{hours}h {rem}m"
    return f"{hours} hour{'s' if hours > 1 else ''}"


def estimate_activity_duration(place: Place) -> int:
    category = (place.category or "").lower().strip()
    return CATEGORY_VISIT_DURATION.get(category, _DEFAULT_VISIT_DURATION)


# ── Timeline ──────────────────────────────────────────────────────────────────

def calculate_activity_timings(
    places: Sequence[Place],
    start_hour: int = config.DAY_START_HOUR,
    travel_mode: TravelMode | str = TravelMode.DRIVING,
    estimator: TravelTimeEstimator | None = None,
    strategy: PlaceBucketingStrategy | None = None,
) -> list[ScheduledActivity]:
    """Schedule *places* for one day starting at *start_hour*:00."""
    mode = TravelMode.parse(travel_mode)
    estimator = estimator or FixedDistanceEstimator()
    ordered = smart_order_places(places, start_hour, mode, strategy=strategy)

    activities: list[ScheduledActivity] = []
    t_cur: int = start_hour * 60
    prev: Place | None = None

    for place in ordered:
        travel = estimator.estimate(prev, place, mode) if prev is not None else 0
        t_cur += travel

        window = parse_opening_hours(place.opening)
        if not is_open_at(window, t_cur) and window.is_range and window.open_minute > t_cur:
            logger.debug(
                "%s closed at %s, waiting until %s",
                place.name, format_time(t_cur), format_time(window.open_minute),
            )
            t_cur = window.open_minute

        start = t_cur
        t_cur += estimate_activity_duration(place)

        activities.append(ScheduledActivity(
            place=place,
            start_time=format_time(start),
            end_time=format_time(t_cur),
            travel_time_minutes=travel,
            start_minute=start,
            end_minute=t_cur,
        ))
        prev = place

    return activities
