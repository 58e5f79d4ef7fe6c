"""
modules/planning/travel_time.py
--------------------------------
Travel-time estimation between two places.

The datasets carry no coordinates (only opaque map links), so the default
estimator assumes a constant hop distance and a per-mode average speed.
Callers depend only on the TravelTimeEstimator protocol, so a geocoded or
distance-matrix implementation can be dropped in without touching the
timeline builder or the assembler.

Config knob (config.py):
  ASSUMED_INTER_PLACE_DISTANCE_KM -- hop distance used by the default estimator (3.0)
"""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Protocol, Union

from tourguide import config
from tourguide.schemas.place import Place

logger = logging.getLogger(__name__)


class TravelMode(str, Enum):
    DRIVING          = "Driving"
    WALKING          = "Walking"
    PUBLIC_TRANSPORT = "Public Transport"

    @classmethod
    def parse(cls, value: Union["TravelMode", str, None]) -> "TravelMode":
        """Lenient lookup by value or name; unknown modes fall back to DRIVING."""
        if isinstance(value, cls):
            return value
        raw = (value or "").strip()
        for mode in cls:
            if raw.lower() in (mode.value.lower(), mode.name.lower()):
                return mode
        logger.warning("Unknown travel mode %r, assuming %s", value, cls.DRIVING.value)
        return cls.DRIVING


# Average door-to-door speeds (km/h)
TRAVEL_SPEEDS_KMH: dict[TravelMode, float] = {
    TravelMode.DRIVING:          30.0,
    TravelMode.WALKING:           5.0,
    TravelMode.PUBLIC_TRANSPORT: 20.0,
}


class TravelTimeEstimator(Protocol):
    """Anything that can estimate whole minutes between two places."""

    def estimate(self, origin: Place, destination: Place, mode: TravelMode) -> int:
        ...


class FixedDistanceEstimator:
    """
    Coarse estimator: ceil(distance / speed * 60) with a constant distance.
    Every hop costs the same for a given mode (Driving 6, Public Transport 9,
    Walking 36 minutes at the default 3 km).
    """

    def __init__(
        self,
        distance_km: float | None = None,
        speeds_kmh: dict[TravelMode, float] | None = None,
    ) -> None:
        self.distance_km = (
            config.ASSUMED_INTER_PLACE_DISTANCE_KM if distance_km is None else distance_km
        )
        self.speeds_kmh = dict(speeds_kmh or TRAVEL_SPEEDS_KMH)

    def estimate(self, origin: Place, destination: Place, mode: TravelMode) -> int:
        speed = self.speeds_kmh.get(mode) or self.speeds_kmh[TravelMode.DRIVING]
        return math.ceil(self.distance_km * 60 / speed)


def estimate_travel_time(
    origin: Place,
    destination: Place,
    travel_mode: TravelMode | str = TravelMode.DRIVING,
) -> int:
    """Module-level shortcut using the default estimator."""
    return FixedDistanceEstimator().estimate(origin, destination, TravelMode.parse(travel_mode))
