"""
Package ranking.

Scores a collection of packages against one set of preferences, sorts them
and picks out the best match.
"""

import logging
from typing import Optional, Sequence

from partymatch.models.inputs import PackageAttributes, UserPreferences
from partymatch.models.outputs import RankingResult, ScoredPackage
from partymatch.scoring.scorer import PackageScorer, is_best_match_score, round_half_up

logger = logging.getLogger(__name__)


class PackageRanker:
    """
    Ranks packages for one set of preferences.

    Packages are ordered by match score, then rating, both descending. Only
    the top package can be the best match, and only when its score reaches
    the best-match threshold. Ties with the top score are never flagged.
    """

    def __init__(self, scorer: Optional[PackageScorer] = None):
        """
        Initialize ranker.

        Args:
            scorer: Scorer to use (default weights if not given)
        """
        self.scorer = scorer or PackageScorer()

    def score_packages(
        self,
        packages: Sequence[PackageAttributes],
        preferences: Optional[UserPreferences] = None,
    ) -> list[ScoredPackage]:
        """
        Score and sort packages.

        Returns:
            List of ScoredPackage objects, best first, none flagged
        """
        scored = [
            ScoredPackage.from_package(package, self.scorer.score(package, preferences))
            for package in packages
        ]
        scored.sort(key=lambda p: (p.match_score, p.rating), reverse=True)
        return scored

    def rank(
        self,
        packages: Sequence[PackageAttributes],
        preferences: Optional[UserPreferences] = None,
    ) -> RankingResult:
        """
        Rank packages and summarize the result.

        Args:
            packages: Candidate packages (may be empty)
            preferences: User preferences; None counts as no preferences

        Returns:
            RankingResult with sorted packages, best match and average score
        """
        scored = self.score_packages(packages, preferences)

        best_match = None
        if scored and is_best_match_score(scored[0].match_score):
            best_match = scored[0].model_copy(update={"is_best_match": True})
            scored[0] = best_match

        average_score = 0
        if scored:
            average_score = round_half_up(sum(p.match_score for p in scored) / len(scored))

        logger.info(
            "Ranked %d packages: top=%d average=%d best_match=%s",
            len(scored),
            scored[0].match_score if scored else 0,
            average_score,
            best_match.id or best_match.name if best_match else None,
        )

        return RankingResult(
            packages=scored,
            best_match=best_match,
            has_best_match=best_match is not None,
            average_score=average_score,
        )


def rank_packages(
    packages: Sequence[PackageAttributes],
    preferences: Optional[UserPreferences] = None,
) -> RankingResult:
    """Rank packages against preferences using the default weights."""
    return PackageRanker().rank(packages, preferences)
