"""
app/services/listing_service.py

Registers and lists service listings in the catalog that the
recommendation service ranks over.
"""

from __future__ import annotations

from typing import List, Optional

from app.catalog.base import CatalogAdapter, CatalogFilter
from app.core.logger import get_logger
from app.models.listing_models import (
    ListingCreate,
    ListingSummary,
    ListingsResponse,
    RegisterListingsResponse,
)
from app.services.recommendation_service import catalog as shared_catalog

logger = get_logger(__name__)


class ListingService:
    """Thin write/read layer over a CatalogAdapter."""

    def __init__(self, catalog: CatalogAdapter | None = None) -> None:
        self._catalog: CatalogAdapter = catalog if catalog is not None else shared_catalog

    def register(self, listings: List[ListingCreate]) -> RegisterListingsResponse:
        """
        Add or replace listings.

        A later entry with the same id in one request replaces an earlier
        one, matching the catalog's upsert semantics.
        """
        if not listings:
            return RegisterListingsResponse(message="No service listings provided.", ids=[])

        self._catalog.upsert([item.to_listing() for item in listings])

        ids: List[str] = []
        for item in listings:
            if item.id not in ids:
                ids.append(item.id)

        logger.info("Registered %d service listing(s).", len(ids))
        return RegisterListingsResponse(
            message=f"Registered {len(ids)} service listing(s).",
            ids=ids,
        )

    def list_active(self, category: Optional[str] = None) -> ListingsResponse:
        listings = self._catalog.list_active(CatalogFilter(category=category))
        return ListingsResponse(
            services=[
                ListingSummary(
                    id=listing.id,
                    name=listing.name,
                    category=listing.category,
                    tags=list(listing.tags),
                    provider_name=listing.provider_name,
                    is_active=listing.is_active,
                )
                for listing in listings
            ]
        )


# ── Module-level singleton ─────────────────────────────────────────────────────

listing_service = ListingService()
