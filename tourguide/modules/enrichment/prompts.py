"""
modules/enrichment/prompts.py
------------------------------
Prompt text for the generative itinerary request.
"""

from __future__ import annotations

from datetime import datetime

from tourguide import config
from tourguide.modules.enrichment.request import TripRequest
from tourguide.modules.planning.meal_recommender import dining_places
from tourguide.modules.planning.opening_hours import is_place_open
from tourguide.modules.planning.place_sequencer import smart_order_places
from tourguide.modules.planning.travel_time import TravelMode

# Typical hop times quoted to the model, per travel mode
_TRAVEL_TIME_HINTS: dict[TravelMode, str] = {
    TravelMode.DRIVING:          "15-30 minutes",
    TravelMode.WALKING:          "10-20 minutes",
    TravelMode.PUBLIC_TRANSPORT: "20-40 minutes",
}


def get_weather_hint(now: datetime | None = None) -> str:
    """Stubbed weather line by hour band; no weather API is wired in."""
    hour = (now or datetime.now()).hour
    if 6 <= hour < 12:
        return "Morning: Clear skies, 28°C, perfect for outdoor activities"
    if 12 <= hour < 18:
        return "Afternoon: Partly cloudy, 32°C, bring sunscreen"
    if 18 <= hour < 22:
        return "Evening: Clear, 26°C, great for sunset views"
    return "Night: Clear, 24°C, pleasant for night walks"


def build_itinerary_prompt(request: TripRequest, now: datetime | None = None) -> str:
    destination = config.DESTINATION_NAME
    currency = config.CURRENCY_SYMBOL
    budget = f"{currency}{request.total_budget:,.0f}"
    ordered = smart_order_places(request.candidates, config.DAY_START_HOUR, request.travel_mode)

    place_lines = []
    for p in ordered:
        noon = "(Open at noon)" if is_place_open(p, 12) else "(Closed at noon)"
        place_lines.append(
            f"- {p.name} ({p.rating}⭐): {p.description}\n"
            f"  Opening Hours: {p.opening} {noon}\n"
            f"  Entry Fee: {p.entry_fee}\n"
            f"  Location: {p.map_url}"
        )
    restaurant_lines = [
        f"- {r.name} ({r.rating}⭐): {r.opening}, {r.entry_fee}"
        for r in dining_places(request.candidates)
    ]
    start = request.start_date.isoformat()

    return f"""You are a travel assistant for {destination}. Create a detailed day-wise itinerary using REAL data.

Trip Details:
- Start Date: {start}
- End Date: {request.end_date.isoformat()}
- Duration: {request.total_days} days
- Budget: {budget}
- Interests: {', '.join(request.categories)}
- Travel Mode: {request.travel_mode.value}
- Weather: {get_weather_hint(now)}

Available Places in {destination} (with REAL opening hours and locations):
{chr(10).join(place_lines) or "- none"}

IMPORTANT: Use REAL opening hours to schedule activities. Consider:
1. Places that open early (6-8 AM) should be scheduled in the morning
2. Places that open late (after 5 PM) should be scheduled in the evening
3. Include travel time between places ({_TRAVEL_TIME_HINTS[request.travel_mode]} average in {destination})
4. Lunch should be scheduled around 12:30 PM - 1:30 PM
5. Dinner should be scheduled around 7:00 PM - 8:30 PM

Available Restaurants for meals:
{chr(10).join(restaurant_lines) or "- none"}

Return ONLY a JSON object with exactly {request.total_days} entries in "days":
{{
  "summary": "Brief overview of the trip",
  "days": [
    {{
      "day": 1,
      "date": "{start}",
      "activities": [
        {{
          "time": "9:00 AM",
          "place": "Place Name",
          "description": "What to do",
          "duration": "2 hours",
          "cost": 500,
          "mapUrl": "https://maps.google.com/?q=...",
          "category": "beaches",
          "travelTime": 0
        }}
      ],
      "totalCost": 2000,
      "diningSuggestions": ["Restaurant 1 (Lunch)", "Restaurant 2 (Dinner)"]
    }}
  ],
  "estimatedCost": 10000
}}

Make sure:
- Total estimated cost is within budget of {budget}
- Activities respect opening hours
- Travel time is included between activities
- Meal times are realistic (lunch 12-2 PM, dinner 7-9 PM)"""
