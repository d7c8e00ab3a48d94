"""
app/catalog/memory_catalog.py

In-process implementation of the CatalogAdapter interface.

Listings live in an insertion-ordered dict keyed by id, guarded by a lock
so registration requests and ranking requests can run side by side. The
catalog can be seeded from a JSON file at construction time, which is how
deployments without the marketplace database get their listings.
"""

from __future__ import annotations

import json
import threading
from pathlib import Path
from typing import Dict, List, Optional

from app.catalog.base import CatalogAdapter, CatalogFilter, ServiceListing
from app.core.config import settings
from app.core.exceptions import CatalogError
from app.core.logger import get_logger

logger = get_logger(__name__)


class InMemoryCatalog(CatalogAdapter):
    """
    CatalogAdapter backed by a dict.

    Ids are unique: upserting an existing id replaces the listing but
    keeps its original position in catalog order.
    """

    def __init__(
        self,
        seed_file: str | None = None,
        max_candidates: int | None = None,
    ) -> None:
        """
        Args:
            seed_file      : Optional path to a JSON array of listing objects.
                             Defaults to ``settings.catalog_seed_file``.
            max_candidates : Upper bound on listings returned by ``list_active``.
                             Defaults to ``settings.catalog_max_candidates``.
        """
        self._listings: Dict[str, ServiceListing] = {}
        self._lock = threading.Lock()
        self._max_candidates: int = max_candidates or settings.catalog_max_candidates

        path = seed_file if seed_file is not None else settings.catalog_seed_file
        if path:
            self.upsert(load_listings(path))

    # ── CatalogAdapter interface ───────────────────────────────────────────────

    def list_active(self, filter: CatalogFilter | None = None) -> List[ServiceListing]:
        category = (filter.category or "").strip().lower() if filter else ""

        with self._lock:
            snapshot = list(self._listings.values())

        active = [
            listing
            for listing in snapshot
            if listing.is_active
            and listing.provider_name.strip()
            and (not category or listing.category.lower() == category)
        ]

        if len(active) > self._max_candidates:
            logger.debug(
                "Catalog has %d eligible listing(s); capping at %d.",
                len(active),
                self._max_candidates,
            )
            active = active[: self._max_candidates]
        return active

    def upsert(self, listings: List[ServiceListing]) -> None:
        if not listings:
            return
        with self._lock:
            for listing in listings:
                self._listings[listing.id] = listing
        logger.debug("Upserted %d listing(s); catalog size %d.", len(listings), len(self))

    def get(self, listing_id: str) -> Optional[ServiceListing]:
        with self._lock:
            return self._listings.get(listing_id)

    def clear(self) -> None:
        with self._lock:
            count = len(self._listings)
            self._listings.clear()
        logger.info("Cleared %d listing(s) from the catalog.", count)

    def __len__(self) -> int:
        return len(self._listings)


def load_listings(path: str) -> List[ServiceListing]:
    """
    Read a JSON array of listing objects from ``path``.

    Keys match the ServiceListing fields; unknown keys are ignored.

    Raises:
        CatalogError: The file is missing, not JSON, or a record is invalid.
    """
    seed_path = Path(path)
    if not seed_path.is_file():
        raise CatalogError(f"Catalog seed file not found: '{path}'")

    try:
        records = json.loads(seed_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise CatalogError(f"Catalog seed file '{path}' could not be read: {exc}") from exc

    if not isinstance(records, list):
        raise CatalogError(f"Catalog seed file '{path}' must contain a JSON array.")

    known = set(ServiceListing.__dataclass_fields__)
    listings: List[ServiceListing] = []
    for position, record in enumerate(records):
        if not isinstance(record, dict):
            raise CatalogError(f"Record {position} in '{path}' is not an object.")
        try:
            listings.append(
                ServiceListing(**{k: v for k, v in record.items() if k in known})
            )
        except TypeError as exc:
            raise CatalogError(f"Record {position} in '{path}' is invalid: {exc}") from exc

    logger.info("Loaded %d listing(s) from '%s'.", len(listings), path)
    return listings
