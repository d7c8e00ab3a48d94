"""
app/catalog/base.py

Abstract interface for the listing catalog.

Design goals:
  - The recommendation service depends only on this interface; the real
    marketplace database sits behind a concrete adapter.
  - ServiceListing is the shared vocabulary between catalog, ranking and
    the HTTP layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional


# ── Shared data-transfer objects ──────────────────────────────────────────────

@dataclass
class ServiceListing:
    """
    One bookable service offered on the marketplace.

    Attributes:
        id            : Stable listing identifier.
        name          : Short title, e.g. "Deep House Cleaning".
        description   : Free-text description written by the provider.
        category      : Marketplace category, e.g. "cleaning".
        tags          : Provider-chosen keywords.
        price         : Price in the marketplace currency.
        duration      : Expected duration in minutes.
        location      : Where the service is offered.
        rating        : Average review rating (0 when unrated).
        review_count  : Number of reviews behind ``rating``.
        provider_name : Display name of the provider; blank when the
                        provider account no longer exists.
        is_active     : Inactive listings are never recommended.
    """

    id: str
    name: str
    description: str
    category: str
    tags: List[str] = field(default_factory=list)
    price: float = 0.0
    duration: int = 0
    location: str = ""
    rating: float = 0.0
    review_count: int = 0
    provider_name: str = ""
    is_active: bool = True

    @property
    def document(self) -> str:
        """Text compared against queries: name, description, category and tags."""
        return " ".join([self.name, self.description, self.category, *self.tags])


@dataclass
class CatalogFilter:
    """Optional narrowing applied by ``CatalogAdapter.list_active``."""

    category: Optional[str] = None


# ── Abstract base ──────────────────────────────────────────────────────────────

class CatalogAdapter(ABC):
    """
    Contract every catalog backend must fulfil.

    The ranking pipeline only ever reads through ``list_active``; the
    write methods exist for registration endpoints and tests.
    """

    @abstractmethod
    def list_active(self, filter: CatalogFilter | None = None) -> List[ServiceListing]:
        """
        Return the listings currently eligible for recommendation.

        Args:
            filter: Optional category restriction.

        Returns:
            Listings in catalog order.

        Raises:
            CatalogError: If the backend cannot be read.
        """

    @abstractmethod
    def upsert(self, listings: List[ServiceListing]) -> None:
        """Add listings, overwriting any existing listing with the same id."""

    @abstractmethod
    def get(self, listing_id: str) -> Optional[ServiceListing]:
        """Return one listing by id, or None."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every listing."""
