"""
schemas/itinerary.py
--------------------
Dataclass definitions for the derived scheduling structures and the output
itinerary.

Time values are minutes unless named otherwise.  Costs are whole currency
units (config.CURRENCY_SYMBOL).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from tourguide.schemas.place import Place


class WindowKind(str, Enum):
    """Which variant an OpeningWindow holds."""
    ALWAYS_OPEN = "always_open"   # "24 Hours" / "24/7"
    UNPARSED    = "unparsed"      # fail-open: treated as always open
    RANGE       = "range"


@dataclass(frozen=True)
class OpeningWindow:
    """
    Normalised opening hours derived from a Place's free-text `opening`.

    For RANGE windows both values are minutes since midnight; close_minute
    exceeds 1440 when the window wraps past midnight, so close > open always
    holds once normalised.
    """
    kind: WindowKind = WindowKind.UNPARSED
    open_minute: Optional[int] = None
    close_minute: Optional[int] = None

    @property
    def is_open_24_hours(self) -> bool:
        return self.kind is WindowKind.ALWAYS_OPEN

    @property
    def is_unparsed(self) -> bool:
        return self.kind is WindowKind.UNPARSED

    @property
    def is_range(self) -> bool:
        return self.kind is WindowKind.RANGE

    @property
    def wraps_midnight(self) -> bool:
        return self.is_range and self.close_minute > 24 * 60

    @property
    def open_hour(self) -> Optional[int]:
        return self.open_minute // 60 if self.is_range else None

    @property
    def close_hour(self) -> Optional[int]:
        """Hour of closing; may exceed 23 for overnight windows."""
        return self.close_minute // 60 if self.is_range else None


ALWAYS_OPEN = OpeningWindow(kind=WindowKind.ALWAYS_OPEN)
UNPARSED    = OpeningWindow(kind=WindowKind.UNPARSED)


@dataclass(frozen=True)
class ScheduledActivity:
    """
    One timed visit produced by the timeline builder.

    start_minute / end_minute are the running clock in minutes since the
    day's midnight (may pass 1440 on long days); start_time / end_time are
    the same values rendered as "H:MM AM/PM".
    """
    place: Place
    start_time: str
    end_time: str
    travel_time_minutes: int = 0
    start_minute: int = 0
    end_minute: int = 0


@dataclass
class Activity:
    """A single stop as presented in a DayItinerary."""
    time: str = ""
    place: str = ""
    description: str = ""
    duration: str = ""
    cost: int = 0
    map_url: str = ""
    category: str = ""
    travel_time: Optional[int] = None   # minutes from the previous stop


@dataclass
class DayItinerary:
    """One calendar day of the trip."""
    day: int = 0                        # 1-based
    date: str = ""                      # ISO-8601 date
    activities: list[Activity] = field(default_factory=list)
    total_cost: int = 0
    dining_suggestions: list[str] = field(default_factory=list)


@dataclass
class TripItinerary:
    """
    Top-level output of the planning engine.

    estimated_cost never exceeds total_budget.  The same shape is returned
    whether the plan came from the enrichment provider or the deterministic
    assembler.
    """
    start_date: str = ""
    end_date: str = ""
    total_days: int = 0
    total_budget: float = 0.0
    estimated_cost: float = 0.0
    days: list[DayItinerary] = field(default_factory=list)
    summary: str = ""
