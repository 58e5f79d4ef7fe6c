"""
modules/planning/itinerary_assembler.py
----------------------------------------
Deterministic multi-day itinerary assembly.

This is the engine's primary contract: it runs whenever the enrichment
provider is absent or its output is rejected, and its output shape is the
same either way.

Each day d ∈ [1, total_days]:
  1. Take a contiguous slice of the candidate list
     (places_per_day = max(2, ceil(n / total_days))).
  2. Build the timed activity list (the timeline smart-orders the slice).
  3. Cost each activity from its entry fee, or a share of the daily
     allowance when the fee text carries no amount.
  4. Attach lunch / dinner suggestions from the dining subset.
  5. total_cost = Σ activity costs + incidental buffer.

estimated_cost = min(Σ day totals, total_budget).
"""

from __future__ import annotations

import logging
import math
import re
from datetime import date, timedelta
from typing import Sequence

from tourguide import config
from tourguide.modules.observability.logger import StructuredLogger, event_log
from tourguide.modules.planning.meal_recommender import dining_places, get_meal_recommendation
from tourguide.modules.planning.place_sequencer import PlaceBucketingStrategy
from tourguide.modules.planning.timeline_builder import (
    calculate_activity_timings,
    format_duration,
)
from tourguide.modules.planning.travel_time import TravelMode, TravelTimeEstimator
from tourguide.schemas.itinerary import Activity, DayItinerary, ScheduledActivity, TripItinerary
from tourguide.schemas.place import Place

logger = logging.getLogger(__name__)


# ── Heuristic constants (fractions of the per-day allowance) ─────────────────
_MIN_PLACES_PER_DAY:       int   = 2
_FIRST_ACTIVITY_SHARE:     float = 0.40   # fee-less first stop of the day
_LATER_ACTIVITY_SHARE:     float = 0.30   # fee-less later stops
_INCIDENTALS_SHARE:        float = 0.30   # per-day buffer on top of activities
_DESCRIPTION_MAX_CHARS:    int   = 100

FALLBACK_DINING_SUGGESTIONS: tuple[str, ...] = ("Local Restaurant", "Street Food")

_FEE_AMOUNT = re.compile(r"(\d[\d,]*)")


# ── Input coercion ────────────────────────────────────────────────────────────

def coerce_date(value: date | str) -> date:
    """Accept a date or an ISO-8601 string (a time part, if any, is ignored)."""
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value).strip()[:10])


def coerce_budget(value: float | int | str | None) -> float:
    """Budget as a non-negative float; unreadable values become 0."""
    try:
        budget = float(value)
    except (TypeError, ValueError):
        logger.warning("Unreadable budget %r, treating as 0", value)
        return 0.0
    if not math.isfinite(budget) or budget < 0:
        logger.warning("Budget %r out of range, treating as 0", value)
        return 0.0
    return budget


def count_trip_days(start: date, end: date) -> int:
    """Inclusive day count; a reversed range still yields a one-day trip."""
    return max((end - start).days + 1, 1)


# ── Costing ───────────────────────────────────────────────────────────────────

def parse_entry_fee(entry_fee: str) -> int | None:
    """
    Amount embedded in free-text fee data, 0 for "free", None when unknown.

      "₹50"            → 50
      "Rs. 1,200"      → 1200
      "Free"           → 0
      "Varies"         → None
    """
    text = entry_fee or ""
    m = _FEE_AMOUNT.search(text)
    if m:
        return int(m.group(1).replace(",", ""))
    if "free" in text.lower():
        return 0
    return None


def _activity_cost(place: Place, index: int, cost_per_day: int) -> int:
    fee = parse_entry_fee(place.entry_fee)
    if fee is not None:
        return fee
    share = _FIRST_ACTIVITY_SHARE if index == 0 else _LATER_ACTIVITY_SHARE
    return math.floor(cost_per_day * share)


def _to_activity(
    scheduled: ScheduledActivity,
    index: int,
    cost_per_day: int,
    default_category: str,
) -> Activity:
    place = scheduled.place
    return Activity(
        time=scheduled.start_time,
        place=place.name,
        description=place.description[:_DESCRIPTION_MAX_CHARS],
        duration=format_duration(scheduled.end_minute - scheduled.start_minute),
        cost=_activity_cost(place, index, cost_per_day),
        map_url=place.map_url,
        category=place.category or default_category,
        travel_time=scheduled.travel_time_minutes,
    )


# ── Dining ────────────────────────────────────────────────────────────────────

def dining_suggestions_for(restaurants: Sequence[Place]) -> list[str]:
    """Best open place at lunch and at dinner; generic fallbacks if none."""
    suggestions: list[str] = []
    for hour, label in ((config.LUNCH_HOUR, "Lunch"), (config.DINNER_HOUR, "Dinner")):
        rec = get_meal_recommendation(hour, restaurants)
        if rec.places:
            suggestions.append(f"{rec.places[0].name} ({label})")
    return suggestions or list(FALLBACK_DINING_SUGGESTIONS)


# ── Public entry point ────────────────────────────────────────────────────────

def build_summary(total_days: int, categories: Sequence[str], num_places: int) -> str:
    interests = ", ".join(categories) if categories else "local highlights"
    return (
        f"A {total_days}-day trip to {config.DESTINATION_NAME} exploring {interests}. "
        f"This itinerary includes {num_places} places with real opening hours, "
        f"travel times, and smart scheduling."
    )


def build_itinerary(
    start_date: date | str,
    end_date: date | str,
    budget: float | int | str,
    categories: Sequence[str],
    travel_mode: TravelMode | str,
    candidate_places: Sequence[Place],
    *,
    start_hour: int = config.DAY_START_HOUR,
    estimator: TravelTimeEstimator | None = None,
    strategy: PlaceBucketingStrategy | None = None,
    events: StructuredLogger | None = None,
) -> TripItinerary:
    """
    Build a TripItinerary from candidate places already filtered to the
    requested categories.

    Raises ValueError only for date strings that are not ISO-8601; every
    data-quality problem in the places themselves degrades to a default.
    """
    events = events or event_log
    start, end = coerce_date(start_date), coerce_date(end_date)
    total_budget = coerce_budget(budget)
    mode = TravelMode.parse(travel_mode)
    places = list(candidate_places)

    total_days = count_trip_days(start, end)
    cost_per_day = math.floor(total_budget / total_days)
    places_per_day = max(_MIN_PLACES_PER_DAY, math.ceil(len(places) / total_days))
    restaurants = dining_places(places)
    default_category = categories[0] if categories else "general"

    with events.timed(f"trip_{start.isoformat()}", "build_itinerary") as perf:
        days: list[DayItinerary] = []
        for i in range(total_days):
            day_slice = places[i * places_per_day:(i + 1) * places_per_day]
            timeline = calculate_activity_timings(
                day_slice, start_hour, mode, estimator=estimator, strategy=strategy,
            )
            activities = [
                _to_activity(s, idx, cost_per_day, default_category)
                for idx, s in enumerate(timeline)
            ]
            day_cost = sum(a.cost for a in activities)
            if activities:
                day_cost += math.floor(cost_per_day * _INCIDENTALS_SHARE)

            days.append(DayItinerary(
                day=i + 1,
                date=(start + timedelta(days=i)).isoformat(),
                activities=activities,
                total_cost=day_cost,
                dining_suggestions=dining_suggestions_for(restaurants),
            ))

        raw_cost = sum(d.total_cost for d in days)
        estimated_cost = min(raw_cost, total_budget)
        if raw_cost > total_budget:
            logger.info("Estimated cost %s clamped to budget %s", raw_cost, total_budget)
        perf.update({"days": total_days, "places": len(places), "estimated_cost": estimated_cost})

    return TripItinerary(
        start_date=start.isoformat(),
        end_date=end.isoformat(),
        total_days=total_days,
        total_budget=total_budget,
        estimated_cost=estimated_cost,
        days=days,
        summary=build_summary(total_days, categories, len(places)),
    )
