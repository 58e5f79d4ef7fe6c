"""
modules/planning/place_sequencer.py
------------------------------------
"Smart order": greedy time-of-day grouping of a day's places.

Each place is assigned to a bucket from its opening window, buckets are
sorted by rating (best first, stable), then concatenated in bucket order:

    morning → afternoon → evening → any-time

Default bucket rules (hours derived from the parsed window; an overnight
close hour is > 23):
  ALWAYS_OPEN / UNPARSED           → any-time
  opens ≤ 08 and closes ≤ 14       → morning    (temples, early parks)
  opens ≥ 14 and closes ≤ 20       → afternoon
  opens ≥ 17 or closes ≥ 20        → evening    (restaurants, pubs)
  otherwise                        → any-time

The rule table sits behind PlaceBucketingStrategy so alternative orderings
can be swapped in without touching the timeline builder.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol, Sequence

from tourguide import config
from tourguide.modules.planning.opening_hours import parse_opening_hours
from tourguide.modules.planning.travel_time import TravelMode
from tourguide.schemas.itinerary import OpeningWindow
from tourguide.schemas.place import Place


class TimeOfDayBucket(str, Enum):
    # Declaration order is visit order.
    MORNING   = "morning"
    AFTERNOON = "afternoon"
    EVENING   = "evening"
    ANY_TIME  = "any_time"


class PlaceBucketingStrategy(Protocol):
    def bucket_for(self, window: OpeningWindow) -> TimeOfDayBucket:
        ...


class OpeningHoursBucketing:
    """Default threshold table (see module docstring)."""

    def __init__(
        self,
        morning_open_max: int = 8,
        morning_close_max: int = 14,
        afternoon_open_min: int = 14,
        afternoon_close_max: int = 20,
        evening_open_min: int = 17,
        evening_close_min: int = 20,
    ) -> None:
        self.morning_open_max    = morning_open_max
        self.morning_close_max   = morning_close_max
        self.afternoon_open_min  = afternoon_open_min
        self.afternoon_close_max = afternoon_close_max
        self.evening_open_min    = evening_open_min
        self.evening_close_min   = evening_close_min

    def bucket_for(self, window: OpeningWindow) -> TimeOfDayBucket:
        if not window.is_range:
            return TimeOfDayBucket.ANY_TIME

        open_hour, close_hour = window.open_hour, window.close_hour
        if open_hour <= self.morning_open_max and close_hour <= self.morning_close_max:
            return TimeOfDayBucket.MORNING
        if open_hour >= self.afternoon_open_min and close_hour <= self.afternoon_close_max:
            return TimeOfDayBucket.AFTERNOON
        if open_hour >= self.evening_open_min or close_hour >= self.evening_close_min:
            return TimeOfDayBucket.EVENING
        return TimeOfDayBucket.ANY_TIME


DEFAULT_BUCKETING = OpeningHoursBucketing()


def smart_order_places(
    places: Sequence[Place],
    start_hour: int = config.DAY_START_HOUR,
    travel_mode: TravelMode | str = TravelMode.DRIVING,
    strategy: PlaceBucketingStrategy | None = None,
) -> list[Place]:
    """
    Return *places* re-ordered for a single day.

    The output is a permutation of the input.  start_hour and travel_mode
    are accepted for call-site symmetry with the timeline builder; the
    default strategy does not weight by either yet.
    """
    strategy = strategy or DEFAULT_BUCKETING
    buckets: dict[TimeOfDayBucket, list[Place]] = {b: [] for b in TimeOfDayBucket}

    for place in places:
        window = parse_opening_hours(place.opening)
        buckets[strategy.bucket_for(window)].append(place)

    ordered: list[Place] = []
    for bucket in TimeOfDayBucket:
        ordered.extend(sorted(buckets[bucket], key=lambda p: p.rating, reverse=True))
    return ordered
