"""
schemas/serialisers.py
----------------------
Render itinerary dataclasses into the camelCase JSON shape consumed by the
app screens and stored in the user's trip history.
"""

from __future__ import annotations

from tourguide.schemas.itinerary import Activity, DayItinerary, TripItinerary


def ser_activity(a: Activity) -> dict:
    out = {
        "time":        a.time,
        "place":       a.place,
        "description": a.description,
        "duration":    a.duration,
        "cost":        a.cost,
        "mapUrl":      a.map_url,
        "category":    a.category,
    }
    if a.travel_time is not None:
        out["travelTime"] = a.travel_time
    return out


def ser_day(d: DayItinerary) -> dict:
    return {
        "day":               d.day,
        "date":              d.date,
        "activities":        [ser_activity(a) for a in d.activities],
        "totalCost":         d.total_cost,
        "diningSuggestions": list(d.dining_suggestions),
    }


def ser_itinerary(it: TripItinerary) -> dict:
    return {
        "startDate":     it.start_date,
        "endDate":       it.end_date,
        "totalDays":     it.total_days,
        "totalBudget":   it.total_budget,
        "estimatedCost": it.estimated_cost,
        "days":          [ser_day(d) for d in it.days],
        "summary":       it.summary,
    }
