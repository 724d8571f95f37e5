"""
Input models for package matching.

These models describe the packages on offer (who each package is designed
for) and the preferences a user stated for their event.
"""

from enum import Enum
from typing import Annotated, Optional

from pydantic import AliasChoices, BaseModel, BeforeValidator, Field


class OrdinalScale(str, Enum):
    """A category tag that sits on an ordered proximity scale."""

    @property
    def position(self) -> int:
        """Index of this category on its scale."""
        return list(type(self)).index(self)

    def distance(self, other: "OrdinalScale") -> int:
        """Number of steps between two categories on the same scale."""
        if type(other) is not type(self):
            raise TypeError(f"Cannot compare {type(self).__name__} with {type(other).__name__}")
        return abs(self.position - other.position)


class GatheringSize(OrdinalScale):
    """How many people the event is for, smallest first."""
    INTIMATE = "intimate"
    SMALL_GROUP = "small_group"
    PARTY = "party"
    LARGE = "large"


class EnergyLevel(OrdinalScale):
    """How lively the event should be, calmest first."""
    LOW_KEY = "low_key"
    MODERATE = "moderate"
    HIGH_ENERGY = "high_energy"


class PackageTier(str, Enum):
    """Commercial tier of a package."""
    ESSENTIAL = "essential"
    CLASSIC = "classic"
    GRAND = "grand"


def _none_to_empty(value):
    """Backend rows store missing tag lists as null."""
    return [] if value is None else value


TagList = Annotated[list[str], BeforeValidator(_none_to_empty)]


class MatchWeights(BaseModel):
    """
    Maximum points each category contributes to a match score.

    The defaults add up to 100. Custom weights are allowed but the total
    score is always clamped to [0, 100].
    """
    gathering: float = Field(default=40.0, ge=0.0, description="Points for gathering size fit")
    energy: float = Field(default=30.0, ge=0.0, description="Points for energy level fit")
    vibe: float = Field(default=30.0, ge=0.0, description="Points for vibe overlap")

    model_config = {"frozen": True}

    @property
    def total(self) -> float:
        """Sum of all category weights."""
        return self.gathering + self.energy + self.vibe


class PackageAttributes(BaseModel):
    """
    A bookable package and the audience it is designed for.

    Only the ideal-audience lists and the quality signals (rating, review
    count) take part in scoring. The identity and price fields are carried
    through so callers get their package back after ranking.
    """

    # Identity
    id: Optional[str] = Field(default=None, description="Package identifier")
    name: Optional[str] = Field(default=None, description="Display name")
    tier: Optional[PackageTier] = Field(default=None, description="Commercial tier")

    # Ideal audience
    ideal_gathering_sizes: TagList = Field(
        default_factory=list,
        validation_alias=AliasChoices("ideal_gathering_sizes", "ideal_gathering_size"),
        description="Gathering size tags the package suits",
    )
    ideal_energy_levels: TagList = Field(
        default_factory=list,
        validation_alias=AliasChoices("ideal_energy_levels", "ideal_energy_level"),
        description="Energy level tags the package suits",
    )
    ideal_vibes: TagList = Field(
        default_factory=list,
        validation_alias=AliasChoices("ideal_vibes", "ideal_vibe"),
        description="Free-form vibe tags, e.g. 'nightlife'",
    )

    # Quality signals
    rating: float = Field(default=0.0, ge=0.0, description="Average review rating")
    review_count: int = Field(default=0, ge=0, description="Number of reviews")

    # Pricing
    base_price_cents: Optional[int] = Field(default=None, ge=0, description="Base price in cents")
    price_per_person_cents: Optional[int] = Field(
        default=None, ge=0, description="Price per participant in cents"
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "id": "pkg-berlin-classic",
                "name": "Berlin Night Out",
                "tier": "classic",
                "ideal_gathering_sizes": ["small_group", "party"],
                "ideal_energy_levels": ["high_energy"],
                "ideal_vibes": ["Nightlife", "Food"],
                "rating": 4.6,
                "review_count": 128,
                "base_price_cents": 89000,
                "price_per_person_cents": 8900,
            }
        },
    }


class UserPreferences(BaseModel):
    """
    Preferences a user stated for their event.

    Every field is optional. An absent field simply contributes nothing to
    the match score.
    """
    gathering_size: Optional[str] = Field(default=None, description="Preferred gathering size tag")
    energy_level: Optional[str] = Field(default=None, description="Preferred energy level tag")
    vibe_preferences: TagList = Field(default_factory=list, description="Preferred vibe tags")

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "gathering_size": "party",
                "energy_level": "high_energy",
                "vibe_preferences": ["nightlife"],
            }
        },
    }


class MatchRequest(BaseModel):
    """A set of candidate packages and the preferences to rank them by."""
    preferences: Optional[UserPreferences] = Field(
        default=None,
        description="User preferences; omitted means no preferences",
    )
    packages: list[PackageAttributes] = Field(
        default_factory=list,
        description="Candidate packages",
    )

    @classmethod
    def example(cls) -> "MatchRequest":
        """A small Berlin bachelor-party example."""
        return cls(
            preferences=UserPreferences(
                gathering_size="party",
                energy_level="high_energy",
                vibe_preferences=["nightlife", "food"],
            ),
            packages=[
                PackageAttributes(
                    id="pkg-berlin-essential",
                    name="Berlin Essentials",
                    tier=PackageTier.ESSENTIAL,
                    ideal_gathering_sizes=["small_group"],
                    ideal_energy_levels=["moderate"],
                    ideal_vibes=["Culture", "Food"],
                    rating=4.2,
                    review_count=64,
                    base_price_cents=49000,
                    price_per_person_cents=4900,
                ),
                PackageAttributes(
                    id="pkg-berlin-classic",
                    name="Berlin Night Out",
                    tier=PackageTier.CLASSIC,
                    ideal_gathering_sizes=["small_group", "party"],
                    ideal_energy_levels=["high_energy"],
                    ideal_vibes=["Nightlife", "Food"],
                    rating=4.6,
                    review_count=128,
                    base_price_cents=89000,
                    price_per_person_cents=8900,
                ),
                PackageAttributes(
                    id="pkg-berlin-grand",
                    name="Berlin Spa Retreat",
                    tier=PackageTier.GRAND,
                    ideal_gathering_sizes=["intimate"],
                    ideal_energy_levels=["low_key"],
                    ideal_vibes=["Wellness"],
                    rating=4.9,
                    review_count=41,
                    base_price_cents=149000,
                    price_per_person_cents=14900,
                ),
            ],
        )
