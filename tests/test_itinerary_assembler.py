"""Deterministic multi-day itinerary assembly."""

from datetime import date

import pytest

from conftest import make_place
from tourguide.modules.planning.itinerary_assembler import (
    FALLBACK_DINING_SUGGESTIONS,
    build_itinerary,
    coerce_budget,
    count_trip_days,
    dining_suggestions_for,
    parse_entry_fee,
)
from tourguide.modules.planning.place_sequencer import TimeOfDayBucket

CATEGORIES = ["beaches", "temples", "restaurants"]


# ── Day count / inputs ────────────────────────────────────────────────────────

def test_single_day_trip():
    it = build_itinerary("2024-02-10", "2024-02-10", 1000, CATEGORIES, "Driving", [])
    assert it.total_days == 1
    assert len(it.days) == 1


def test_three_day_span_is_inclusive():
    it = build_itinerary("2024-02-10", "2024-02-12", 3000, CATEGORIES, "Driving", [])
    assert it.total_days == 3
    assert [d.date for d in it.days] == ["2024-02-10", "2024-02-11", "2024-02-12"]
    assert [d.day for d in it.days] == [1, 2, 3]


def test_reversed_range_still_plans_one_day():
    assert count_trip_days(date(2024, 2, 12), date(2024, 2, 10)) == 1


def test_date_objects_and_datetime_strings_are_accepted():
    it = build_itinerary(date(2024, 2, 28), "2024-03-01T00:00:00Z", 900, CATEGORIES, "Walking", [])
    assert it.total_days == 3
    assert it.days[-1].date == "2024-03-01"


@pytest.mark.parametrize("raw, budget", [
    (6000, 6000.0), ("4500", 4500.0), ("lots", 0.0), (None, 0.0), (-50, 0.0),
    (float("inf"), 0.0), ("inf", 0.0), (float("nan"), 0.0),
])
def test_budget_coercion(raw, budget):
    assert coerce_budget(raw) == budget


# ── Costing ───────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("fee, amount", [
    ("₹50", 50),
    ("Rs. 1,200 per person", 1200),
    ("₹500 for two", 500),
    ("Free", 0),
    ("Free entry", 0),
    ("free", 0),
    ("Varies", None),
    ("", None),
])
def test_parse_entry_fee(fee, amount):
    assert parse_entry_fee(fee) == amount


def test_fee_less_activities_use_a_share_of_the_daily_allowance():
    places = [
        make_place("Gallery A", "theatres", "24 Hours", 4.9, "Ask at counter"),
        make_place("Gallery B", "theatres", "24 Hours", 4.5, "Ask at counter"),
    ]
    it = build_itinerary("2024-02-10", "2024-02-10", 1000, ["theatres"], "Driving", places)
    (day,) = it.days
    assert [a.cost for a in day.activities] == [400, 300]
    assert day.total_cost == 400 + 300 + 300


# ── Dining ────────────────────────────────────────────────────────────────────

def test_dining_fallback_when_nothing_is_open():
    late = make_place("Midnight Diner", "restaurants", "11:00 PM - 4:00 AM")
    assert dining_suggestions_for([late]) == list(FALLBACK_DINING_SUGGESTIONS)
    assert dining_suggestions_for([]) == ["Local Restaurant", "Street Food"]


def test_lunch_only_suggestion():
    lunch_spot = make_place("Tiffin Room", "restaurants", "11:00 AM - 3:00 PM", 4.0)
    assert dining_suggestions_for([lunch_spot]) == ["Tiffin Room (Lunch)"]


# ── End to end ────────────────────────────────────────────────────────────────

def test_two_day_trip(trip_places):
    it = build_itinerary("2024-02-10", "2024-02-11", 6000, CATEGORIES, "Driving", trip_places)

    assert it.total_days == 2
    assert len(it.days) == 2
    assert it.total_budget == 6000
    assert it.start_date == "2024-02-10" and it.end_date == "2024-02-11"

    day1, day2 = it.days
    assert [a.place for a in day1.activities] == [
        "Manakula Vinayagar Temple", "Paradise Beach", "Le Cafe",
    ]
    assert [a.time for a in day1.activities] == ["9:00 AM", "10:06 AM", "12:12 PM"]
    assert [a.duration for a in day1.activities] == ["1 hour", "2 hours", "1h 30m"]
    assert [a.cost for a in day1.activities] == [0, 200, 500]
    assert day1.total_cost == 700 + 900

    assert [a.place for a in day2.activities] == [
        "Sri Aurobindo Ashram", "Villa Shanti Restaurant", "Promenade Beach",
    ]
    # Villa Shanti opens at noon, so the day waits for it
    assert [a.time for a in day2.activities] == ["9:00 AM", "12:00 PM", "1:36 PM"]
    assert [a.cost for a in day2.activities] == [0, 900, 0]
    assert day2.total_cost == 900 + 900

    for day in it.days:
        assert day.dining_suggestions == [
            "Villa Shanti Restaurant (Lunch)", "Villa Shanti Restaurant (Dinner)",
        ]

    assert it.estimated_cost == 3400
    assert it.estimated_cost <= 6000
    assert "2-day trip" in it.summary
    assert "beaches, temples, restaurants" in it.summary


def test_activity_fields_carry_place_details(trip_places):
    it = build_itinerary("2024-02-10", "2024-02-11", 6000, CATEGORIES, "Driving", trip_places)
    first = it.days[0].activities[0]
    assert first.map_url.startswith("https://maps.google.com/")
    assert first.category == "temples"
    assert first.travel_time == 0
    assert it.days[0].activities[1].travel_time == 6


def test_long_descriptions_are_truncated():
    place = make_place("Talkative Park", "parks", description="x" * 250)
    it = build_itinerary("2024-02-10", "2024-02-10", 100, ["parks"], "Driving", [place])
    assert len(it.days[0].activities[0].description) == 100


def test_at_least_two_places_per_day():
    places = [make_place(f"Park {i}", "parks") for i in range(3)]
    it = build_itinerary("2024-02-10", "2024-02-12", 3000, ["parks"], "Driving", places)
    assert [len(d.activities) for d in it.days] == [2, 1, 0]


def test_empty_candidates():
    it = build_itinerary("2024-02-10", "2024-02-11", 6000, CATEGORIES, "Driving", [])
    assert len(it.days) == 2
    for day in it.days:
        assert day.activities == []
        assert day.dining_suggestions == ["Local Restaurant", "Street Food"]
        assert day.total_cost == 0
    assert it.estimated_cost == 0


@pytest.mark.parametrize("budget", [0, 1, 99, 500, 2500, 6000, 100000])
def test_estimated_cost_never_exceeds_budget(budget, trip_places):
    pricey = trip_places + [
        make_place("Boat Tour", "beaches", "24 Hours", 4.0, "₹2500"),
        make_place("Heritage Walk", "temples", "24 Hours", 4.0, "Donation"),
    ]
    it = build_itinerary("2024-02-10", "2024-02-12", budget, CATEGORIES, "Walking", pricey)
    assert it.estimated_cost <= budget
    assert it.estimated_cost >= 0


def test_zero_budget_still_schedules(trip_places):
    it = build_itinerary("2024-02-10", "2024-02-11", 0, CATEGORIES, "Driving", trip_places)
    assert sum(len(d.activities) for d in it.days) == len(trip_places)
    assert it.estimated_cost == 0


def test_infinite_budget_is_treated_as_zero(trip_places):
    it = build_itinerary(
        "2024-02-10", "2024-02-11", float("inf"), CATEGORIES, "Driving", trip_places,
    )
    assert it.total_budget == 0
    assert it.estimated_cost == 0
    assert sum(len(d.activities) for d in it.days) == len(trip_places)


def test_custom_ordering_strategy_reaches_each_day(trip_places):
    class AllAnyTime:
        def bucket_for(self, window):
            return TimeOfDayBucket.ANY_TIME

    it = build_itinerary(
        "2024-02-10", "2024-02-11", 6000, CATEGORIES, "Driving", trip_places,
        strategy=AllAnyTime(),
    )
    assert [a.place for a in it.days[0].activities] == [
        "Manakula Vinayagar Temple", "Paradise Beach", "Le Cafe",
    ]
    assert [a.place for a in it.days[1].activities] == [
        "Promenade Beach", "Sri Aurobindo Ashram", "Villa Shanti Restaurant",
    ]
