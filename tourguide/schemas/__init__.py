"""schemas — Place input record and itinerary output structures."""

from tourguide.schemas.place import Place
from tourguide.schemas.itinerary import (
    ALWAYS_OPEN,
    UNPARSED,
    Activity,
    DayItinerary,
    OpeningWindow,
    ScheduledActivity,
    TripItinerary,
    WindowKind,
)
from tourguide.schemas.serialisers import ser_itinerary

__all__ = [
    "Place",
    "ALWAYS_OPEN",
    "UNPARSED",
    "Activity",
    "DayItinerary",
    "OpeningWindow",
    "ScheduledActivity",
    "TripItinerary",
    "WindowKind",
    "ser_itinerary",
]
