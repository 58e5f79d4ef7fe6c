"""
schemas/place.py
----------------
Place record consumed by the planning engine.

Places come from the static per-category datasets and are never mutated by
the engine.  `rating` is only ever compared against other ratings; it is not
validated against a fixed scale.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Place:
    """A single point-of-interest from a category dataset."""
    id: str = ""
    name: str = ""
    category: str = ""                 # dataset key, e.g. "beaches" | "restaurants"
    description: str = ""
    opening: str = ""                  # free text, e.g. "7:00 AM - 6:00 PM" | "24 Hours"
    entry_fee: str = "Free"            # free text, may embed an amount
    rating: float = 0.0
    map_url: str = ""
    phone: Optional[str] = None
    image: str = ""
