"""
modules/enrichment/request.py
------------------------------
Normalised trip parameters handed to an enrichment provider.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Sequence

from tourguide.modules.planning.itinerary_assembler import (
    coerce_budget,
    coerce_date,
    count_trip_days,
)
from tourguide.modules.planning.travel_time import TravelMode
from tourguide.schemas.place import Place


@dataclass(frozen=True)
class TripRequest:
    start_date: date
    end_date: date
    total_days: int
    total_budget: float
    categories: tuple[str, ...] = ()
    travel_mode: TravelMode = TravelMode.DRIVING
    candidates: tuple[Place, ...] = field(default=(), repr=False)

    @classmethod
    def build(
        cls,
        start_date: date | str,
        end_date: date | str,
        budget: float | int | str,
        categories: Sequence[str],
        travel_mode: TravelMode | str,
        candidates: Sequence[Place],
    ) -> "TripRequest":
        start, end = coerce_date(start_date), coerce_date(end_date)
        return cls(
            start_date=start,
            end_date=end,
            total_days=count_trip_days(start, end),
            total_budget=coerce_budget(budget),
            categories=tuple(categories),
            travel_mode=TravelMode.parse(travel_mode),
            candidates=tuple(candidates),
        )
