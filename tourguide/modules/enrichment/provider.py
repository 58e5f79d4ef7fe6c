"""
modules/enrichment/provider.py
-------------------------------
Enrichment providers: optional sources of a richer itinerary.

A provider returns a complete TripItinerary or None.  It never raises for
collaborator problems (network errors, quota, empty or malformed replies);
those are logged and reported as None so the caller can fall through to the
deterministic assembler.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from tourguide.llm import get_llm_client
from tourguide.modules.enrichment.prompts import build_itinerary_prompt
from tourguide.modules.enrichment.request import TripRequest
from tourguide.modules.enrichment.response import parse_generated_plan
from tourguide.schemas.itinerary import TripItinerary

logger = logging.getLogger(__name__)


class LLMClient(Protocol):
    def complete(self, prompt: str) -> str:
        ...


class EnrichmentProvider(Protocol):
    def propose(self, request: TripRequest) -> Optional[TripItinerary]:
        ...


class GeminiEnrichmentProvider:
    """Asks the generative-text service for a full plan."""

    def __init__(self, llm_client: LLMClient | None = None) -> None:
        self.llm_client = llm_client or get_llm_client()

    def propose(self, request: TripRequest) -> Optional[TripItinerary]:
        prompt = build_itinerary_prompt(request)
        try:
            reply = self.llm_client.complete(prompt)
        except Exception as exc:  # collaborator boundary: any failure means "no plan"
            logger.warning("Itinerary generation request failed: %s", exc, exc_info=True)
            return None
        return parse_generated_plan(reply, request)
