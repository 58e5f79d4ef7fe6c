"""
modules/tool_usage/place_tool.py
---------------------------------
Loads Place records from the static per-category JSON datasets.

Layout:  <PLACE_DATA_DIR>/<category_key>.json, each a JSON array of objects.
Dataset exports are inconsistent about field names, so each record is
normalised before it reaches the engine:

  opening     ← opening | opening_time              (default "")
  entry_fee   ← entryFee | entry_fee                (default "Free")
  map_url     ← mapUrl | maps_url                   (default "")
  image       ← image | cover_image                 (default "")
  rating      ← rating                              (default 0)
  category    ← the dataset key the record was loaded from

A missing or unreadable dataset yields an empty list; scheduling an empty
category is valid.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, Iterable

from tourguide import config
from tourguide.schemas.place import Place

logger = logging.getLogger(__name__)


# ── UI label → dataset key ────────────────────────────────────────────────────
_CATEGORY_KEYS: dict[str, str] = {
    "dining":            "restaurants",
    "beaches":           "beaches",
    "temples":           "temples",
    "parks":             "parks",
    "hotels":            "hotels",
    "hotels & resorts":  "hotels",
    "pubs":              "pubs",
    "pubs & nightlife":  "pubs",
    "shopping":          "shopping",
    "photoshoot":        "photoshoot",
    "photoshoot spots":  "photoshoot",
    "theatres":          "theatres",
    "theaters":          "theatres",
    "religious":         "temples",
    "hindu temples":     "hindu-temples",
    "churches":          "churches",
    "mosques":           "mosques",
    "jain temples":      "jain-temples",
    "buddhist temples":  "buddhist-temples",
    "adventure":         "adventure",
    "trekking":          "trekking",
    "cycling":           "cycling",
    "boating":           "boating",
    "kayaking":          "kayaking",
    "surfing":           "surfing",
    "famous places":     "famous-places",
}

# Trip-planner interest chips that name a different dataset
_INTEREST_ALIASES: dict[str, str] = {
    "food":      "restaurants",
    "nightlife": "pubs",
}


def get_category_key(label: str) -> str:
    """Map a UI category label to its dataset key; unknown labels are squashed."""
    normalized = (label or "").lower().strip()
    if normalized in _CATEGORY_KEYS:
        return _CATEGORY_KEYS[normalized]
    return re.sub(r"\s+", "", normalized)


def resolve_interest_categories(interests: Iterable[str]) -> list[str]:
    """Trip interests → unique dataset keys, first occurrence order."""
    keys: list[str] = []
    for interest in interests:
        key = _INTEREST_ALIASES.get(interest.lower().strip()) or get_category_key(interest)
        if key and key not in keys:
            keys.append(key)
    return keys


def _slug_id(category: str, name: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "_", " ".join(name.split()).lower())
    return f"{category}_{slug}"[:50]


def _first(item: dict[str, Any], *keys: str, default: Any = "") -> Any:
    for k in keys:
        value = item.get(k)
        if value not in (None, ""):
            return value
    return default


def record_to_place(item: dict[str, Any], category: str) -> Place:
    name = str(_first(item, "name"))
    try:
        rating = float(_first(item, "rating", default=0) or 0)
    except (TypeError, ValueError):
        rating = 0.0
    phone = _first(item, "phone", default=None)
    return Place(
        id=str(_first(item, "id") or _slug_id(category, name)),
        name=name,
        category=category,
        description=str(_first(item, "description")),
        opening=str(_first(item, "opening", "opening_time")),
        entry_fee=str(_first(item, "entryFee", "entry_fee", default="Free")),
        rating=rating,
        map_url=str(_first(item, "mapUrl", "maps_url")),
        phone=str(phone) if phone is not None else None,
        image=str(_first(item, "image", "cover_image")),
    )


class PlaceTool:
    """Reads category datasets from a directory of JSON files."""

    def __init__(self, data_dir: Path | str | None = None) -> None:
        self.data_dir = Path(data_dir or config.PLACE_DATA_DIR)

    def fetch(self, category: str) -> list[Place]:
        """Places for a UI label or dataset key."""
        key = get_category_key(category)
        path = self.data_dir / f"{key}.json"
        if not path.exists():
            logger.info("No dataset for category %r at %s", key, path)
            return []
        try:
            with open(path, encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Could not read dataset %s: %s", path, exc)
            return []
        if not isinstance(data, list):
            logger.warning("Dataset %s is not a JSON array", path)
            return []
        return [record_to_place(item, key) for item in data if isinstance(item, dict)]

    def candidates_for(self, interests: Iterable[str]) -> list[Place]:
        """Flattened candidate list for the requested trip interests."""
        places: list[Place] = []
        for key in resolve_interest_categories(interests):
            places.extend(self.fetch(key))
        return places
