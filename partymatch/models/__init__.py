"""
Pydantic models for package matching inputs and outputs.
"""

from partymatch.models.inputs import (
    EnergyLevel,
    GatheringSize,
    MatchRequest,
    MatchWeights,
    PackageAttributes,
    PackageTier,
    UserPreferences,
)
from partymatch.models.outputs import (
    MatchScoreBreakdown,
    RankingResult,
    ScoredPackage,
)

__all__ = [
    "EnergyLevel",
    "GatheringSize",
    "MatchRequest",
    "MatchWeights",
    "PackageAttributes",
    "PackageTier",
    "UserPreferences",
    "MatchScoreBreakdown",
    "RankingResult",
    "ScoredPackage",
]
