"""
app/api/recommendation_controller.py

Handles incoming requests to GET /recommendations/.

This layer is responsible only for HTTP concerns:
  - Reading the query-string parameters (q, limit, category).
  - Delegating the ranking to RecommendationService.
  - Translating service-level errors into appropriate HTTP responses
    without leaking internal error detail.

Responses:
  200  Ranking completed.  Body contains the recommended listings ordered
       from most to least relevant.  An empty list means no active
       listing matched the filters.
  400  The q parameter was missing or contained only whitespace.
  503  The embedding model is unavailable, an input could not be encoded,
       or the catalog could not be read.  Body carries an empty
       recommendation list and a generic message.
  500  An unexpected error occurred while ranking.
"""

from typing import Optional

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.constants import QUERY_REQUIRED_MESSAGE, SEARCH_UNAVAILABLE_MESSAGE
from app.core.exceptions import (
    AppBaseException,
    CatalogError,
    EmbeddingError,
    EmptyQueryError,
)
from app.core.logger import get_logger
from app.models.recommendation_models import RecommendationResponse
from app.services.recommendation_service import recommendation_service

logger = get_logger(__name__)

router = APIRouter(prefix="/recommendations", tags=["Recommendations"])


# ── Helpers ────────────────────────────────────────────────────────────────────

def _err(message: str, status: int = 400) -> JSONResponse:
    """Return a JSON error response with the standard error shape."""
    return JSONResponse(status_code=status, content={"error": message})


def _unavailable(status: int = 503) -> JSONResponse:
    """Generic failure: empty result set plus a message safe to show users."""
    return JSONResponse(
        status_code=status,
        content={"error": SEARCH_UNAVAILABLE_MESSAGE, "recommendations": []},
    )


# ── Endpoint ───────────────────────────────────────────────────────────────────

@router.get("/", response_model=RecommendationResponse, summary="Recommend services for a query")
async def recommend(
    q: str = Query(default="", description="Free-text description of the service wanted."),
    limit: int = Query(
        default=settings.recommend_default_limit,
        ge=1,
        le=settings.recommend_max_limit,
        description="Max recommendations to return.",
    ),
    category: Optional[str] = Query(default=None, description="Only rank this category."),
) -> JSONResponse:
    """
    Ranks every active service listing by semantic similarity between the
    query and the listing's name, description, category and tags, and
    returns the best ``limit`` of them.
    """
    logger.info("Recommendation request received — query: '%s'", q[:120])

    try:
        result: RecommendationResponse = await recommendation_service.recommend(
            q, limit=limit, category=category
        )

    except EmptyQueryError as exc:
        logger.warning("Empty query rejected: %s", exc)
        return _err(QUERY_REQUIRED_MESSAGE)

    except (EmbeddingError, CatalogError) as exc:
        logger.error("Recommendations unavailable: %s", exc)
        return _unavailable()

    except AppBaseException as exc:
        logger.exception("Recommendation pipeline error: %s", exc)
        return _unavailable(status=500)

    except Exception as exc:  # noqa: BLE001
        logger.exception("Unexpected error during recommendation: %s", exc)
        return _unavailable(status=500)

    logger.info("Recommendation complete — %d result(s) returned.", len(result.recommendations))
    return JSONResponse(status_code=200, content=result.model_dump())
