"""Shared place fixtures for the planning engine tests."""

import pytest

from tourguide.schemas.place import Place


def make_place(
    name: str,
    category: str = "beaches",
    opening: str = "24 Hours",
    rating: float = 4.0,
    entry_fee: str = "Free",
    description: str = "",
) -> Place:
    return Place(
        id=f"{category}_{name.lower().replace(' ', '_')}",
        name=name,
        category=category,
        description=description or f"{name} description",
        opening=opening,
        entry_fee=entry_fee,
        rating=rating,
        map_url=f"https://maps.google.com/?q={name.replace(' ', '+')}",
    )


@pytest.fixture
def paradise_beach():
    return make_place("Paradise Beach", "beaches", "6:00 AM - 6:00 PM", 4.5, "₹200")


@pytest.fixture
def promenade_beach():
    return make_place("Promenade Beach", "beaches", "24 Hours", 4.7, "Free")


@pytest.fixture
def manakula_temple():
    return make_place("Manakula Vinayagar Temple", "temples", "5:45 AM - 12:30 PM", 4.8, "Free")


@pytest.fixture
def ashram():
    return make_place("Sri Aurobindo Ashram", "temples", "8:00 AM - 12:00 PM", 4.6, "Free")


@pytest.fixture
def le_cafe():
    return make_place("Le Cafe", "restaurants", "24 Hours", 4.2, "₹500 for two")


@pytest.fixture
def villa_shanti():
    return make_place("Villa Shanti Restaurant", "restaurants", "12:00 PM - 11:00 PM", 4.4, "Varies")


@pytest.fixture
def trip_places(paradise_beach, manakula_temple, le_cafe, promenade_beach, ashram, villa_shanti):
    """Six beach/temple/restaurant candidates, in dataset order."""
    return [paradise_beach, manakula_temple, le_cafe, promenade_beach, ashram, villa_shanti]
