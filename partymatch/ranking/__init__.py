"""
Ranking and best-match selection for scored packages.
"""

from partymatch.ranking.ranker import PackageRanker, rank_packages

__all__ = ["PackageRanker", "rank_packages"]
