"""modules/enrichment — optional generative itinerary provider."""

from tourguide.modules.enrichment.request import TripRequest
from tourguide.modules.enrichment.provider import EnrichmentProvider, GeminiEnrichmentProvider
from tourguide.modules.enrichment.prompts import build_itinerary_prompt, get_weather_hint
from tourguide.modules.enrichment.response import (
    GeneratedPlan,
    parse_generated_plan,
    strip_code_fences,
)

__all__ = [
    "TripRequest",
    "EnrichmentProvider",
    "GeminiEnrichmentProvider",
    "build_itinerary_prompt",
    "get_weather_hint",
    "GeneratedPlan",
    "parse_generated_plan",
    "strip_code_fences",
]
