"""Activity timeline construction for a single day."""

import pytest

from conftest import make_place
from tourguide.modules.planning.timeline_builder import (
    calculate_activity_timings,
    estimate_activity_duration,
    format_duration,
    format_time,
)
from tourguide.modules.planning.travel_time import TravelMode


@pytest.mark.parametrize("minutes, text", [
    (0, "12:00 AM"),
    (9 * 60, "9:00 AM"),
    (9 * 60 + 6, "9:06 AM"),
    (12 * 60, "12:00 PM"),
    (13 * 60 + 42, "1:42 PM"),
    (23 * 60 + 59, "11:59 PM"),
    (25 * 60, "1:00 AM"),
])
def test_format_time(minutes, text):
    assert format_time(minutes) == text


@pytest.mark.parametrize("minutes, text", [
    (0, "0 minutes"),
    (45, "45 minutes"),
    (60, "1 hour"),
    (90, "1h 30m"),
    (120, "2 hours"),
    (185, "3h 5m"),
])
def test_format_duration(minutes, text):
    assert format_duration(minutes) == text


@pytest.mark.parametrize("category, minutes", [
    ("beaches", 120), ("temples", 60), ("parks", 90), ("restaurants", 90),
    ("pubs", 180), ("shopping", 120), ("photoshoot", 60), ("theatres", 180),
    ("hotels", 0), ("Beaches", 120), ("museums", 90), ("", 90),
])
def test_category_durations(category, minutes):
    assert estimate_activity_duration(make_place("X", category)) == minutes


def test_empty_day():
    assert calculate_activity_timings([]) == []


def test_first_activity_starts_at_start_hour_without_travel():
    beach = make_place("Beach", "beaches")
    (only,) = calculate_activity_timings([beach], start_hour=9)
    assert (only.start_time, only.end_time) == ("9:00 AM", "11:00 AM")
    assert only.travel_time_minutes == 0


def test_travel_time_is_added_between_places(promenade_beach, le_cafe):
    first, second = calculate_activity_timings(
        [promenade_beach, le_cafe], start_hour=9, travel_mode=TravelMode.WALKING,
    )
    assert first.place == promenade_beach
    assert (first.start_time, first.end_time) == ("9:00 AM", "11:00 AM")
    assert second.travel_time_minutes == 36
    assert (second.start_time, second.end_time) == ("11:36 AM", "1:06 PM")


def test_waits_for_a_place_that_opens_later():
    pub = make_place("Night Owl", "pubs", "6:00 PM - 2:00 AM")
    (visit,) = calculate_activity_timings([pub], start_hour=9)
    assert visit.start_time == "6:00 PM"
    assert visit.end_time == "9:00 PM"


def test_does_not_rewind_for_a_place_that_already_closed():
    early = make_place("Dawn Market", "shopping", "5:00 AM - 7:00 AM")
    (visit,) = calculate_activity_timings([early], start_hour=9)
    assert visit.start_time == "9:00 AM"
    assert visit.start_minute == 9 * 60


def test_hotel_check_in_takes_no_time():
    hotel = make_place("Seaside Hotel", "hotels")
    (visit,) = calculate_activity_timings([hotel])
    assert visit.start_minute == visit.end_minute


def test_day_is_sequenced_before_timing(
    paradise_beach, manakula_temple, le_cafe,
):
    timeline = calculate_activity_timings(
        [paradise_beach, manakula_temple, le_cafe], start_hour=9, travel_mode="Driving",
    )
    assert [a.place.name for a in timeline] == [
        "Manakula Vinayagar Temple", "Paradise Beach", "Le Cafe",
    ]
    assert [(a.start_time, a.end_time) for a in timeline] == [
        ("9:00 AM", "10:00 AM"),
        ("10:06 AM", "12:06 PM"),
        ("12:12 PM", "1:42 PM"),
    ]
    assert [a.travel_time_minutes for a in timeline] == [0, 6, 6]


@pytest.mark.parametrize("mode", list(TravelMode))
def test_activities_never_overlap(mode, trip_places):
    extra = [
        make_place("Night Pub", "pubs", "10:00 PM - 2:00 AM", 4.1),
        make_place("Matinee", "theatres", "2:00 PM - 6:00 PM", 3.9),
        make_place("Check-in", "hotels", "24 Hours", 3.0),
        make_place("Mystery Spot", "photoshoot", "whenever", 4.9),
    ]
    timeline = calculate_activity_timings(trip_places + extra, start_hour=8, travel_mode=mode)
    assert len(timeline) == len(trip_places) + len(extra)
    for prev, cur in zip(timeline, timeline[1:]):
        assert cur.start_minute >= prev.end_minute
        assert cur.start_minute >= prev.start_minute
    for act in timeline:
        assert act.end_minute >= act.start_minute


def test_custom_estimator_is_used(promenade_beach, le_cafe):
    class FlatTwenty:
        def estimate(self, origin, destination, mode):
            return 20

    _, second = calculate_activity_timings(
        [promenade_beach, le_cafe], start_hour=10, estimator=FlatTwenty(),
    )
    assert second.travel_time_minutes == 20
    assert second.start_time == "12:20 PM"
