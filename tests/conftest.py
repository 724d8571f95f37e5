"""
Pytest configuration and shared fixtures.
"""

import pytest

from partymatch.models.inputs import MatchRequest, PackageAttributes, UserPreferences


@pytest.fixture
def party_preferences() -> UserPreferences:
    """Provide preferences for a lively party with a nightlife vibe."""
    return UserPreferences(
        gathering_size="party",
        energy_level="high_energy",
        vibe_preferences=["nightlife"],
    )


@pytest.fixture
def night_out_package() -> PackageAttributes:
    """Provide a package that fits the party preferences exactly."""
    return PackageAttributes(
        id="pkg-night-out",
        name="Night Out",
        ideal_gathering_sizes=["party"],
        ideal_energy_levels=["high_energy"],
        ideal_vibes=["Nightlife", "Chill"],
        rating=4.5,
        review_count=120,
    )


@pytest.fixture
def spa_package() -> PackageAttributes:
    """Provide a quiet package far from the party preferences."""
    return PackageAttributes(
        id="pkg-spa",
        name="Spa Day",
        ideal_gathering_sizes=["intimate"],
        ideal_energy_levels=["low_key"],
        ideal_vibes=["Wellness"],
        rating=4.9,
        review_count=40,
    )


@pytest.fixture
def example_request() -> MatchRequest:
    """Provide the bundled example request."""
    return MatchRequest.example()
