"""
Scoring system for event packages.

Scores how well a package's ideal audience fits a user's preferences:
- Gathering size (ordinal scale, partial credit for neighbours)
- Energy level (ordinal scale, partial credit for direct neighbours only)
- Vibes (free-form tags, fuzzy matched)
"""

import logging
import math
from typing import Optional, Sequence, Type

from partymatch.models.inputs import (
    EnergyLevel,
    GatheringSize,
    MatchWeights,
    OrdinalScale,
    PackageAttributes,
    UserPreferences,
)
from partymatch.models.outputs import MatchScoreBreakdown
from partymatch.scoring.fuzzy import fuzzy_match, normalize_tag

logger = logging.getLogger(__name__)

BEST_MATCH_THRESHOLD = 70
MAX_SCORE = 100

# Share of a category weight awarded by distance on its scale.
# Distances not listed earn nothing.
GATHERING_PROXIMITY_CREDIT = {1: 0.6, 2: 0.3}
ENERGY_PROXIMITY_CREDIT = {1: 0.6}

# Vibe score blend
VIBE_COVERAGE_FACTOR = 0.7  # share of preferred vibes matched at all
VIBE_QUALITY_FACTOR = 0.3  # average strength of the best matches

DEFAULT_WEIGHTS = MatchWeights()


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up."""
    return int(math.floor(value + 0.5))


def clamp_score(value: float) -> int:
    """Clamp a score to [0, 100]."""
    return int(max(0, min(MAX_SCORE, value)))


def is_best_match_score(score: float) -> bool:
    """Whether a score is high enough for a best-match badge."""
    return score >= BEST_MATCH_THRESHOLD


def _find_on_scale(scale: Type[OrdinalScale], tag: str) -> Optional[OrdinalScale]:
    normalized = normalize_tag(tag)
    for member in scale:
        if normalize_tag(member.value) == normalized:
            return member
    return None


def _score_category(
    package_tags: Sequence[str],
    preferred: Optional[str],
    scale: Type[OrdinalScale],
    weight: float,
    proximity_credit: dict[int, float],
) -> float:
    """
    Score one ordinal category.

    Full weight for an exact tag, otherwise partial credit from the first
    package tag (in order) that sits close enough on the scale.
    """
    if not package_tags or not preferred:
        return 0.0

    target = normalize_tag(preferred)
    if any(normalize_tag(tag) == target for tag in package_tags):
        return weight

    preferred_level = _find_on_scale(scale, preferred)
    if preferred_level is None:
        return 0.0

    for tag in package_tags:
        level = _find_on_scale(scale, tag)
        if level is None:
            continue
        credit = proximity_credit.get(preferred_level.distance(level))
        if credit is not None:
            return weight * credit

    return 0.0


def calculate_gathering_score(
    package_sizes: Sequence[str],
    preferred_size: Optional[str],
    weight: float = DEFAULT_WEIGHTS.gathering,
) -> float:
    """
    Score gathering size fit.

    Exact match earns the full weight, one step away on
    intimate < small_group < party < large earns 60%, two steps 30%.
    """
    return _score_category(
        package_sizes, preferred_size, GatheringSize, weight, GATHERING_PROXIMITY_CREDIT
    )


def calculate_energy_score(
    package_levels: Sequence[str],
    preferred_level: Optional[str],
    weight: float = DEFAULT_WEIGHTS.energy,
) -> float:
    """
    Score energy level fit.

    Exact match earns the full weight, a direct neighbour on
    low_key < moderate < high_energy earns 60%. Opposite ends earn nothing.
    """
    return _score_category(
        package_levels, preferred_level, EnergyLevel, weight, ENERGY_PROXIMITY_CREDIT
    )


def calculate_vibe_score(
    package_vibes: Sequence[str],
    preferred_vibes: Sequence[str],
    weight: float = DEFAULT_WEIGHTS.vibe,
) -> int:
    """
    Score vibe overlap using fuzzy matching.

    Each preferred vibe is matched against its closest package vibe. The
    result blends how many preferred vibes matched at all (70%) with how
    strong those matches were on average (30%).
    """
    if not package_vibes or not preferred_vibes:
        return 0

    matched: set[str] = set()
    total_quality = 0.0

    for vibe in preferred_vibes:
        best = max(fuzzy_match(vibe, candidate) for candidate in package_vibes)
        total_quality += best
        if best > 0:
            matched.add(vibe)

    count = len(preferred_vibes)
    match_percentage = len(matched) / count
    average_quality = total_quality / count

    blended = VIBE_COVERAGE_FACTOR * match_percentage + VIBE_QUALITY_FACTOR * average_quality
    return round_half_up(blended * weight)


class PackageScorer:
    """
    Scores packages against user preferences.

    Scoring Philosophy:
    - Each category earns points up to its weight
    - Category points are rounded, then summed
    - The total is clamped to [0, 100]
    """

    def __init__(self, weights: Optional[MatchWeights] = None):
        """
        Initialize scorer with category weights.

        Args:
            weights: Maximum points per category (defaults 40/30/30)
        """
        self.weights = weights or DEFAULT_WEIGHTS

    def breakdown(
        self,
        package: PackageAttributes,
        preferences: Optional[UserPreferences] = None,
    ) -> MatchScoreBreakdown:
        """
        Score a package and keep the per-category points.

        Args:
            package: Package to score
            preferences: User preferences; None counts as no preferences

        Returns:
            Breakdown with rounded components and the clamped total
        """
        prefs = preferences or UserPreferences()

        gathering = round_half_up(
            calculate_gathering_score(
                package.ideal_gathering_sizes, prefs.gathering_size, self.weights.gathering
            )
        )
        energy = round_half_up(
            calculate_energy_score(
                package.ideal_energy_levels, prefs.energy_level, self.weights.energy
            )
        )
        vibe = calculate_vibe_score(
            package.ideal_vibes, prefs.vibe_preferences, self.weights.vibe
        )

        total = clamp_score(gathering + energy + vibe)

        logger.debug(
            "Scored package %s: gathering=%d energy=%d vibe=%d total=%d",
            package.id or package.name or "<unnamed>",
            gathering,
            energy,
            vibe,
            total,
        )

        return MatchScoreBreakdown(
            gathering_score=gathering,
            energy_score=energy,
            vibe_score=vibe,
            total_score=total,
        )

    def score(
        self,
        package: PackageAttributes,
        preferences: Optional[UserPreferences] = None,
    ) -> int:
        """Score a package, 0-100."""
        return self.breakdown(package, preferences).total_score


def calculate_package_score(
    package: PackageAttributes,
    preferences: Optional[UserPreferences] = None,
) -> int:
    """Match score (0-100) of one package using the default weights."""
    return PackageScorer().score(package, preferences)


def calculate_match_breakdown(
    package: PackageAttributes,
    preferences: Optional[UserPreferences] = None,
) -> MatchScoreBreakdown:
    """Per-category breakdown of a package's match score."""
    return PackageScorer().breakdown(package, preferences)
