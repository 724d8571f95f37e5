"""
FastAPI server for the package matcher.

Provides REST API endpoints for scoring and ranking packages.
"""

from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from partymatch import __version__
from partymatch.models.inputs import (
    EnergyLevel,
    GatheringSize,
    MatchRequest,
    PackageAttributes,
    UserPreferences,
)
from partymatch.models.outputs import MatchScoreBreakdown, RankingResult
from partymatch.ranking.ranker import PackageRanker
from partymatch.scoring.scorer import BEST_MATCH_THRESHOLD, PackageScorer, is_best_match_score

# Create FastAPI app
app = FastAPI(
    title="Package Matcher API",
    description="""
    Scores and ranks event packages against a user's gathering size,
    energy level and vibe preferences.
    """,
    version=__version__,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

scorer = PackageScorer()
ranker = PackageRanker(scorer)


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str


class ScoreRequest(BaseModel):
    """Request body for scoring a single package."""
    package: PackageAttributes
    preferences: Optional[UserPreferences] = None


class ScoreResponse(BaseModel):
    """Match score of a single package."""
    match_score: int = Field(..., ge=0, le=100)
    meets_best_match_threshold: bool


@app.get("/health", response_model=HealthResponse, tags=["System"])
async def health_check():
    """Check if the API is running."""
    return HealthResponse(status="healthy", version=__version__)


@app.get("/example", response_model=MatchRequest, tags=["Reference"])
async def get_example():
    """Get an example ranking request."""
    return MatchRequest.example()


@app.get("/categories", tags=["Reference"])
async def list_categories():
    """Get the ordered gathering size and energy level scales."""
    return {
        "gathering_sizes": [g.value for g in GatheringSize],
        "energy_levels": [e.value for e in EnergyLevel],
        "best_match_threshold": BEST_MATCH_THRESHOLD,
    }


@app.post("/score", response_model=ScoreResponse, tags=["Scoring"])
async def score(request: ScoreRequest):
    """Score one package against preferences (0-100)."""
    try:
        match_score = scorer.score(request.package, request.preferences)
        return ScoreResponse(
            match_score=match_score,
            meets_best_match_threshold=is_best_match_score(match_score),
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Internal error: {str(e)}")


@app.post("/breakdown", response_model=MatchScoreBreakdown, tags=["Scoring"])
async def breakdown(request: ScoreRequest):
    """Score one package and return the per-category points."""
    try:
        return scorer.breakdown(request.package, request.preferences)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Internal error: {str(e)}")


@app.post("/rank", response_model=RankingResult, tags=["Ranking"])
async def rank(request: MatchRequest):
    """
    Rank packages against preferences.

    Returns packages sorted by match score then rating, the best match (if
    the top package reaches the threshold) and the average score.
    """
    try:
        return ranker.rank(request.packages, request.preferences)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Internal error: {str(e)}")
