"""
Package Matcher (partymatch)

Scores and ranks bookable event packages against the preferences a user
gave for their event (gathering size, energy level, vibes) and picks out a
best match.

Usage:
    python -m partymatch make-example
    python -m partymatch score --input example_input.json
    python -m partymatch rank --input example_input.json
    python -m partymatch serve --port 8000
"""

__version__ = "0.1.0"
__author__ = "Package Matching Project"

from partymatch.models.inputs import (
    EnergyLevel,
    GatheringSize,
    MatchRequest,
    MatchWeights,
    PackageAttributes,
    UserPreferences,
)
from partymatch.models.outputs import MatchScoreBreakdown, RankingResult, ScoredPackage
from partymatch.scoring.scorer import (
    BEST_MATCH_THRESHOLD,
    PackageScorer,
    calculate_match_breakdown,
    calculate_package_score,
    is_best_match_score,
)
from partymatch.ranking.ranker import PackageRanker, rank_packages

__all__ = [
    "EnergyLevel",
    "GatheringSize",
    "MatchRequest",
    "MatchWeights",
    "PackageAttributes",
    "UserPreferences",
    "MatchScoreBreakdown",
    "RankingResult",
    "ScoredPackage",
    "BEST_MATCH_THRESHOLD",
    "PackageScorer",
    "calculate_match_breakdown",
    "calculate_package_score",
    "is_best_match_score",
    "PackageRanker",
    "rank_packages",
]
