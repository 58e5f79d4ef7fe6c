"""
modules/enrichment/response.py
-------------------------------
Parsing and shape validation of a generated itinerary.

The model replies in free text that may wrap a JSON object in a ```json
fence.  The reply is accepted only if it validates as a whole:

  summary         non-empty string
  days            exactly total_days entries, each with day/date/activities/
                  totalCost (diningSuggestions optional)
  estimatedCost   number in [0, total_budget]

Anything else returns None and the caller falls back to the deterministic
assembler.  No partially valid plan is ever used.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from tourguide.modules.enrichment.request import TripRequest
from tourguide.schemas.itinerary import Activity, DayItinerary, TripItinerary

logger = logging.getLogger(__name__)

_CODE_FENCE = re.compile(r"```(?:json)?[ \t]*\n(.*?)\n?[ \t]*```", re.DOTALL | re.IGNORECASE)


# ── Response schema ────────────────────────────────────────────────────────────

class GeneratedActivity(BaseModel):
    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    time: str
    place: str = Field(..., min_length=1)
    description: str = ""
    duration: str = ""
    cost: float = Field(0, ge=0)
    map_url: str = Field("", alias="mapUrl")
    category: str = ""
    travel_time: Optional[int] = Field(None, ge=0, alias="travelTime")


class GeneratedDay(BaseModel):
    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    day: int = Field(..., ge=1)
    date: str
    activities: list[GeneratedActivity]
    total_cost: float = Field(..., ge=0, alias="totalCost")
    dining_suggestions: list[str] = Field(default_factory=list, alias="diningSuggestions")


class GeneratedPlan(BaseModel):
    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    summary: str = Field(..., min_length=1)
    days: list[GeneratedDay]
    estimated_cost: float = Field(..., ge=0, alias="estimatedCost")


# ── Parsing ────────────────────────────────────────────────────────────────────

def strip_code_fences(text: str) -> str:
    """Return the body of the first fenced block, or *text* unchanged."""
    m = _CODE_FENCE.search(text)
    return (m.group(1) if m else text).strip()


def _to_trip_itinerary(plan: GeneratedPlan, request: TripRequest) -> TripItinerary:
    days = [
        DayItinerary(
            day=d.day,
            date=d.date,
            activities=[
                Activity(
                    time=a.time,
                    place=a.place,
                    description=a.description,
                    duration=a.duration,
                    cost=round(a.cost),
                    map_url=a.map_url,
                    category=a.category,
                    travel_time=a.travel_time,
                )
                for a in d.activities
            ],
            total_cost=round(d.total_cost),
            dining_suggestions=list(d.dining_suggestions),
        )
        for d in plan.days
    ]
    return TripItinerary(
        start_date=request.start_date.isoformat(),
        end_date=request.end_date.isoformat(),
        total_days=request.total_days,
        total_budget=request.total_budget,
        estimated_cost=plan.estimated_cost,
        days=days,
        summary=plan.summary,
    )


def parse_generated_plan(text: str | None, request: TripRequest) -> Optional[TripItinerary]:
    """All-or-nothing conversion of a model reply into a TripItinerary."""
    if not text or not text.strip():
        logger.info("Empty generated plan")
        return None

    try:
        data = json.loads(strip_code_fences(text))
        plan = GeneratedPlan.model_validate(data)
    except json.JSONDecodeError as exc:
        logger.warning("Generated plan is not JSON: %s", exc)
        return None
    except ValidationError as exc:
        logger.warning("Generated plan failed validation (%d errors)", exc.error_count())
        return None

    if len(plan.days) != request.total_days:
        logger.warning(
            "Generated plan has %d days, expected %d", len(plan.days), request.total_days,
        )
        return None
    if plan.estimated_cost > request.total_budget:
        logger.warning(
            "Generated plan costs %s, over budget %s", plan.estimated_cost, request.total_budget,
        )
        return None

    return _to_trip_itinerary(plan, request)
