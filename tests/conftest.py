"""
tests/conftest.py

Shared pytest fixtures available to all test modules.

Fixtures defined here are auto-discovered by pytest — no import needed.
"""

import pytest
from fastapi.testclient import TestClient

from app.catalog.base import ServiceListing
from app.main import app


# ── Core client fixture ────────────────────────────────────────────────────────

@pytest.fixture(scope="session")
def client() -> TestClient:
    """
    A synchronous TestClient wrapping the FastAPI app.

    session-scoped so the app is instantiated once per test run.
    The lifespan context (startup/shutdown events) is entered automatically.
    """
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c


# ── Sample catalog fixtures ────────────────────────────────────────────────────

@pytest.fixture
def sample_listings() -> list[ServiceListing]:
    """A small, realistic catalog: two cleaning services and one car service."""
    return [
        ServiceListing(
            id="svc-clean",
            name="House Cleaning",
            description="Professional house cleaning service",
            category="cleaning",
            tags=["home", "deep-clean"],
            price=100.0,
            duration=120,
            location="Springfield",
            rating=4.8,
            review_count=25,
            provider_name="Clean Pro",
        ),
        ServiceListing(
            id="svc-laundry",
            name="Laundry Service",
            description="Professional laundry and ironing",
            category="cleaning",
            tags=["clothes"],
            price=50.0,
            duration=60,
            location="Springfield",
            rating=4.5,
            review_count=15,
            provider_name="Laundry Expert",
        ),
        ServiceListing(
            id="svc-oil",
            name="Oil Change",
            description="Car oil change",
            category="automotive",
            tags=["car"],
            price=40.0,
            duration=30,
            location="Shelbyville",
            rating=4.1,
            review_count=9,
            provider_name="Quick Lube",
        ),
    ]
