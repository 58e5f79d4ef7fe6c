"""modules/planning — deterministic day scheduling and itinerary assembly."""

from tourguide.modules.planning.opening_hours import is_open_at, is_place_open, parse_opening_hours
from tourguide.modules.planning.travel_time import (
    FixedDistanceEstimator,
    TravelMode,
    TravelTimeEstimator,
    estimate_travel_time,
)
from tourguide.modules.planning.meal_recommender import (
    MealRecommendation,
    MealType,
    get_meal_recommendation,
    is_dining_place,
)
from tourguide.modules.planning.place_sequencer import (
    OpeningHoursBucketing,
    PlaceBucketingStrategy,
    TimeOfDayBucket,
    smart_order_places,
)
from tourguide.modules.planning.timeline_builder import calculate_activity_timings
from tourguide.modules.planning.itinerary_assembler import build_itinerary

__all__ = [
    "is_open_at",
    "is_place_open",
    "parse_opening_hours",
    "FixedDistanceEstimator",
    "TravelMode",
    "TravelTimeEstimator",
    "estimate_travel_time",
    "MealRecommendation",
    "MealType",
    "get_meal_recommendation",
    "is_dining_place",
    "OpeningHoursBucketing",
    "PlaceBucketingStrategy",
    "TimeOfDayBucket",
    "smart_order_places",
    "calculate_activity_timings",
    "build_itinerary",
]
