"""
tourguide
---------
Trip-itinerary scheduling engine for the city tourism guide.

    from tourguide import build_itinerary, generate_trip_itinerary

    itinerary = build_itinerary("2024-02-10", "2024-02-11", 6000,
                                ["beaches", "temples"], "Driving", places)
"""

from tourguide.modules.planning import build_itinerary
from tourguide.itinerary_generator import generate_trip_itinerary, plan_trip
from tourguide.schemas import Place, TripItinerary, ser_itinerary

__all__ = [
    "build_itinerary",
    "generate_trip_itinerary",
    "plan_trip",
    "Place",
    "TripItinerary",
    "ser_itinerary",
]
