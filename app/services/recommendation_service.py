"""
app/services/recommendation_service.py

Orchestrates the service recommendation pipeline:

    query string
      └─ CatalogAdapter.list_active()   → [ServiceListing]
           └─ ServiceListing.document    → [str]
                └─ RankingEngine.rank()  → [float]   (index-aligned)
                     └─ top_n()          → best `limit` listings
                          └─ Map → RecommendationResponse

Same constructor-injection pattern as the rest of the services layer.
"""

from __future__ import annotations

from typing import List, Optional, Set

from app.catalog.base import CatalogAdapter, CatalogFilter, ServiceListing
from app.catalog.memory_catalog import InMemoryCatalog
from app.core.config import settings
from app.core.constants import RELEVANCE_SCORE_DECIMALS
from app.core.exceptions import (
    AppBaseException,
    CatalogError,
    EmptyQueryError,
    RecommendationError,
)
from app.core.logger import get_logger
from app.embedder.provider import get_embedder
from app.models.recommendation_models import (
    ProviderSummary,
    Recommendation,
    RecommendationResponse,
)
from app.ranking.engine import RankingEngine, top_n

logger = get_logger(__name__)


class RecommendationService:
    """
    Ranks active catalog listings against a free-text query.

    Policies:
    - **Blank query**: rejected with EmptyQueryError before anything is
      embedded.
    - **Duplicate listing ids** from the catalog: the first occurrence
      wins, later ones are dropped and logged.
    - **Failures**: embedding and dimension errors propagate unchanged as
      a single failure; there are no partial results.
    - **Ties**: listings with equal scores keep catalog order.
    """

    def __init__(
        self,
        catalog: CatalogAdapter | None = None,
        engine: RankingEngine | None = None,
    ) -> None:
        self._catalog: CatalogAdapter = catalog if catalog is not None else InMemoryCatalog()
        self._engine: RankingEngine = engine if engine is not None else RankingEngine(get_embedder())

    @property
    def catalog(self) -> CatalogAdapter:
        return self._catalog

    # ── Public API ─────────────────────────────────────────────────────────────

    async def recommend(
        self,
        query: str,
        limit: Optional[int] = None,
        category: Optional[str] = None,
    ) -> RecommendationResponse:
        """
        Rank listings by semantic relevance to ``query``.

        Args:
            query    : The user's free-text query. Must not be blank.
            limit    : Max recommendations. Defaults to
                       ``settings.recommend_default_limit``.
            category : Optional category restriction passed to the catalog.

        Returns:
            RecommendationResponse, highest relevance first.

        Raises:
            EmptyQueryError      : The query string was blank.
            EmbeddingError       : The model was unavailable or an input failed.
            DimensionMismatchError : Embeddings of different sizes were mixed.
            CatalogError         : The catalog could not be read.
            RecommendationError  : Any other failure in the pipeline.
        """
        # ── 1. Validate ────────────────────────────────────────────────────────
        clean_query = (query or "").strip()
        if not clean_query:
            raise EmptyQueryError("Query must not be empty.")

        n = limit if limit is not None else settings.recommend_default_limit
        n = max(1, min(n, settings.recommend_max_limit))
        logger.debug(
            "Recommending — query: '%s', limit: %d, category: %s",
            clean_query[:120],
            n,
            category,
        )

        # ── 2. Load candidates ─────────────────────────────────────────────────
        try:
            listings = self._catalog.list_active(CatalogFilter(category=category))
        except CatalogError:
            raise
        except Exception as exc:
            raise CatalogError(f"Catalog read failed: {exc}") from exc

        listings = _drop_duplicate_ids(listings)
        if not listings:
            logger.info("No active listings to rank for query '%s'.", clean_query[:80])
            return RecommendationResponse(recommendations=[])

        # ── 3. Score ───────────────────────────────────────────────────────────
        documents = [listing.document for listing in listings]
        try:
            scores = await self._engine.rank(clean_query, documents)
        except AppBaseException:
            raise
        except Exception as exc:
            raise RecommendationError(f"Ranking failed: {exc}") from exc

        # ── 4. Order, truncate, map ────────────────────────────────────────────
        ranked = top_n(listings, scores, n)
        recommendations: List[Recommendation] = [
            _to_recommendation(listing, score) for listing, score in ranked
        ]

        logger.info(
            "Recommendations complete — query: '%s', %d of %d listing(s) returned.",
            clean_query[:80],
            len(recommendations),
            len(listings),
        )
        return RecommendationResponse(recommendations=recommendations)


# ── Helpers ────────────────────────────────────────────────────────────────────

def _drop_duplicate_ids(listings: List[ServiceListing]) -> List[ServiceListing]:
    seen: Set[str] = set()
    unique: List[ServiceListing] = []
    for listing in listings:
        if listing.id in seen:
            logger.warning("Duplicate listing id '%s' in catalog — keeping the first.", listing.id)
            continue
        seen.add(listing.id)
        unique.append(listing)
    return unique


def _to_recommendation(listing: ServiceListing, score: float) -> Recommendation:
    clamped = min(max(score, 0.0), 1.0)
    return Recommendation(
        id=listing.id,
        name=listing.name,
        description=listing.description,
        category=listing.category,
        price=listing.price,
        duration=listing.duration,
        location=listing.location,
        rating=listing.rating,
        review_count=listing.review_count,
        tags=list(listing.tags),
        provider=ProviderSummary(name=listing.provider_name),
        relevance_score=round(score, RELEVANCE_SCORE_DECIMALS),
        match_percentage=round(clamped * 100),
    )


# ── Module-level singleton ─────────────────────────────────────────────────────
# Controllers import these instances. Tests construct RecommendationService
# directly with injected fakes.

catalog = InMemoryCatalog()
recommendation_service = RecommendationService(catalog=catalog)
