"""app/catalog/__init__.py — public API of the catalog package."""

from app.catalog.base import CatalogAdapter, CatalogFilter, ServiceListing
from app.catalog.memory_catalog import InMemoryCatalog, load_listings

__all__ = [
    "CatalogAdapter",
    "CatalogFilter",
    "ServiceListing",
    "InMemoryCatalog",
    "load_listings",
]
