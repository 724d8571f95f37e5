"""
Scoring system for event packages.

Scores a package's ideal audience against a user's stated preferences.
"""

from partymatch.scoring.fuzzy import fuzzy_match, normalize_tag
from partymatch.scoring.scorer import (
    BEST_MATCH_THRESHOLD,
    PackageScorer,
    calculate_energy_score,
    calculate_gathering_score,
    calculate_match_breakdown,
    calculate_package_score,
    calculate_vibe_score,
    is_best_match_score,
)

__all__ = [
    "BEST_MATCH_THRESHOLD",
    "PackageScorer",
    "calculate_energy_score",
    "calculate_gathering_score",
    "calculate_match_breakdown",
    "calculate_package_score",
    "calculate_vibe_score",
    "fuzzy_match",
    "is_best_match_score",
    "normalize_tag",
]
