"""
itinerary_generator.py
----------------------
Dual-path trip planning entry points.

  generate_trip_itinerary()  — try the enrichment provider (if any), fall
                               through to the deterministic assembler on None.
  plan_trip()                — same, loading candidates from the datasets.

Callers cannot tell which path produced the result; both return a
TripItinerary of the same shape.
"""

from __future__ import annotations

from datetime import date
from typing import Sequence

from tourguide.modules.enrichment.provider import EnrichmentProvider
from tourguide.modules.enrichment.request import TripRequest
from tourguide.modules.observability.logger import EventType, StructuredLogger, event_log
from tourguide.modules.planning.itinerary_assembler import build_itinerary
from tourguide.modules.planning.travel_time import TravelMode
from tourguide.modules.tool_usage.place_tool import PlaceTool, resolve_interest_categories
from tourguide.schemas.itinerary import TripItinerary
from tourguide.schemas.place import Place


def generate_trip_itinerary(
    start_date: date | str,
    end_date: date | str,
    budget: float | int | str,
    categories: Sequence[str],
    travel_mode: TravelMode | str,
    candidate_places: Sequence[Place],
    provider: EnrichmentProvider | None = None,
    events: StructuredLogger | None = None,
) -> TripItinerary:
    events = events or event_log
    request = TripRequest.build(
        start_date, end_date, budget, categories, travel_mode, candidate_places,
    )

    itinerary = provider.propose(request) if provider is not None else None
    path = "enriched" if itinerary is not None else "deterministic"
    if itinerary is None:
        itinerary = build_itinerary(
            request.start_date,
            request.end_date,
            request.total_budget,
            request.categories,
            request.travel_mode,
            request.candidates,
            events=events,
        )

    events.log(f"trip_{request.start_date.isoformat()}", EventType.ENRICHMENT, {
        "path": path,
        "provider": type(provider).__name__ if provider is not None else None,
        "total_days": itinerary.total_days,
        "estimated_cost": itinerary.estimated_cost,
    })
    return itinerary


def plan_trip(
    start_date: date | str,
    end_date: date | str,
    budget: float | int | str,
    interests: Sequence[str],
    travel_mode: TravelMode | str,
    place_tool: PlaceTool | None = None,
    provider: EnrichmentProvider | None = None,
) -> TripItinerary:
    """Load candidates for *interests* from the datasets, then plan."""
    place_tool = place_tool or PlaceTool()
    candidates = place_tool.candidates_for(interests)
    return generate_trip_itinerary(
        start_date,
        end_date,
        budget,
        resolve_interest_categories(interests),
        travel_mode,
        candidates,
        provider=provider,
    )
