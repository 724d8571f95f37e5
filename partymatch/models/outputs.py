"""
Output models for package matching.

These models define the scored and ranked packages returned by the matcher.
"""

from typing import Optional

from pydantic import BaseModel, Field

from partymatch.models.inputs import PackageAttributes


class MatchScoreBreakdown(BaseModel):
    """
    Breakdown of a match score into its category components.

    Components are rounded points; they add up to the total before it is
    clamped to [0, 100].
    """
    gathering_score: int = Field(..., ge=0, description="Points for gathering size fit")
    energy_score: int = Field(..., ge=0, description="Points for energy level fit")
    vibe_score: int = Field(..., ge=0, description="Points for vibe overlap")
    total_score: int = Field(..., ge=0, le=100, description="Clamped overall score")

    model_config = {"frozen": True}


class ScoredPackage(PackageAttributes):
    """A package with its match score attached."""
    match_score: int = Field(..., ge=0, le=100, description="Match score (0-100)")
    is_best_match: bool = Field(default=False, description="Whether this is the best match")

    @classmethod
    def from_package(cls, package: PackageAttributes, match_score: int) -> "ScoredPackage":
        """Attach a score to a package without touching the original."""
        data = package.model_dump(exclude={"match_score", "is_best_match"})
        return cls(**data, match_score=match_score)


class RankingResult(BaseModel):
    """
    Packages ranked against one set of preferences.
    """
    packages: list[ScoredPackage] = Field(
        default_factory=list,
        description="Packages sorted by match score, then rating (best first)",
    )
    best_match: Optional[ScoredPackage] = Field(
        default=None,
        description="Top package, only when it reaches the best-match threshold",
    )
    has_best_match: bool = Field(default=False, description="Whether a best match was found")
    average_score: int = Field(default=0, ge=0, le=100, description="Mean match score, rounded")

    model_config = {"frozen": True}

    @property
    def top_score(self) -> int:
        """Highest match score, 0 when nothing was ranked."""
        return self.packages[0].match_score if self.packages else 0

    def above(self, min_score: int) -> list[ScoredPackage]:
        """Return the ranked packages scoring at least `min_score`."""
        return [p for p in self.packages if p.match_score >= min_score]
