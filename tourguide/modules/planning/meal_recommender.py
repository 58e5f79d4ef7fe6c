"""
modules/planning/meal_recommender.py
-------------------------------------
Meal-slot classification and dining suggestions.

The meal slot depends only on the hour:
  breakfast  06:00–09:59
  lunch      10:00–14:59
  snack      15:00–17:59
  dinner     otherwise
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from tourguide.modules.planning.opening_hours import is_place_open
from tourguide.schemas.place import Place

_MAX_SUGGESTIONS: int = 3
_DINING_CATEGORY: str = "restaurants"
_DINING_NAME_HINTS: tuple[str, ...] = ("restaurant", "cafe")


class MealType(str, Enum):
    BREAKFAST = "breakfast"
    LUNCH     = "lunch"
    SNACK     = "snack"
    DINNER    = "dinner"


@dataclass
class MealRecommendation:
    meal_type: MealType
    places: list[Place] = field(default_factory=list)


def meal_type_for_hour(hour: int) -> MealType:
    if 6 <= hour < 10:
        return MealType.BREAKFAST
    if 10 <= hour < 15:
        return MealType.LUNCH
    if 15 <= hour < 18:
        return MealType.SNACK
    return MealType.DINNER


def is_dining_place(place: Place) -> bool:
    """Restaurants dataset entries, plus anything named like a restaurant or cafe."""
    if place.category == _DINING_CATEGORY:
        return True
    name = place.name.lower()
    return any(hint in name for hint in _DINING_NAME_HINTS)


def dining_places(places: Iterable[Place]) -> list[Place]:
    return [p for p in places if is_dining_place(p)]


def get_meal_recommendation(hour: int, restaurants: Iterable[Place]) -> MealRecommendation:
    """Top open dining places at *hour*:00, best rated first (ties keep input order)."""
    open_now = [r for r in restaurants if is_place_open(r, hour)]
    ranked = sorted(open_now, key=lambda r: r.rating, reverse=True)
    return MealRecommendation(
        meal_type=meal_type_for_hour(hour),
        places=ranked[:_MAX_SUGGESTIONS],
    )
