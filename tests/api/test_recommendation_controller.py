"""
tests/api/test_recommendation_controller.py

Endpoint tests for GET /recommendations/.

The controller's service is swapped for one wired to an in-memory catalog
and a keyword-counting fake embedder, so no model is loaded.
"""

from __future__ import annotations

from typing import List
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from app.api import recommendation_controller
from app.catalog.memory_catalog import InMemoryCatalog
from app.core.constants import QUERY_REQUIRED_MESSAGE, SEARCH_UNAVAILABLE_MESSAGE
from app.core.exceptions import (
    CatalogError,
    DimensionMismatchError,
    EncodingError,
    ModelUnavailableError,
)
from app.embedder.base import Embedder
from app.ranking.engine import RankingEngine
from app.services.recommendation_service import RecommendationService

VOCABULARY = ["clean", "laundry", "car", "oil"]


class KeywordEmbedder(Embedder):
    """One dimension per vocabulary word, plus a constant bias dimension."""

    def embed(self, text: str) -> List[float]:
        lowered = text.lower()
        return [float(lowered.count(word)) for word in VOCABULARY] + [0.1]


@pytest.fixture
def service(monkeypatch, sample_listings) -> RecommendationService:
    catalog = InMemoryCatalog(max_candidates=100)
    catalog.upsert(sample_listings)
    svc = RecommendationService(catalog=catalog, engine=RankingEngine(KeywordEmbedder()))
    monkeypatch.setattr(recommendation_controller, "recommendation_service", svc)
    return svc


@pytest.fixture
def failing_service(monkeypatch) -> MagicMock:
    svc = MagicMock()
    svc.recommend = AsyncMock()
    monkeypatch.setattr(recommendation_controller, "recommendation_service", svc)
    return svc


class TestRecommendationsEndpoint:

    def test_returns_ranked_recommendations(self, client: TestClient, service) -> None:
        response = client.get("/recommendations/", params={"q": "house cleaning"})

        assert response.status_code == 200
        recs = response.json()["recommendations"]
        assert recs[0]["id"] == "svc-clean"
        assert recs[-1]["id"] == "svc-oil"
        scores = [r["relevance_score"] for r in recs]
        assert scores == sorted(scores, reverse=True)

    def test_response_item_shape(self, client: TestClient, service) -> None:
        item = client.get("/recommendations/", params={"q": "cleaning"}).json()["recommendations"][0]

        for key in ("id", "name", "description", "category", "price", "duration",
                    "location", "rating", "review_count", "tags", "provider",
                    "relevance_score", "match_percentage"):
            assert key in item
        assert item["provider"] == {"name": "Clean Pro"}
        assert 0 <= item["match_percentage"] <= 100

    def test_limit_truncates(self, client: TestClient, service) -> None:
        recs = client.get(
            "/recommendations/", params={"q": "cleaning", "limit": 2}
        ).json()["recommendations"]

        assert [r["id"] for r in recs] == ["svc-clean", "svc-laundry"]

    def test_category_filter(self, client: TestClient, service) -> None:
        recs = client.get(
            "/recommendations/", params={"q": "cleaning", "category": "automotive"}
        ).json()["recommendations"]

        assert [r["id"] for r in recs] == ["svc-oil"]

    def test_no_matching_listings_returns_empty_list(self, client: TestClient, service) -> None:
        response = client.get("/recommendations/", params={"q": "cleaning", "category": "pets"})

        assert response.status_code == 200
        assert response.json() == {"recommendations": []}

    @pytest.mark.parametrize("params", [{}, {"q": ""}, {"q": "   "}])
    def test_missing_or_blank_query_returns_400(self, client: TestClient, service, params) -> None:
        response = client.get("/recommendations/", params=params)

        assert response.status_code == 400
        assert response.json() == {"error": QUERY_REQUIRED_MESSAGE}

    @pytest.mark.parametrize("limit", [0, -1, 101])
    def test_out_of_range_limit_is_rejected(self, client: TestClient, service, limit) -> None:
        response = client.get("/recommendations/", params={"q": "cleaning", "limit": limit})

        assert response.status_code == 422

    @pytest.mark.parametrize(
        "error",
        [ModelUnavailableError("weights missing"), EncodingError("bad input"), CatalogError("db down")],
    )
    def test_unavailable_errors_return_503_without_detail(
        self, client: TestClient, failing_service, error
    ) -> None:
        failing_service.recommend.side_effect = error

        response = client.get("/recommendations/", params={"q": "cleaning"})

        assert response.status_code == 503
        body = response.json()
        assert body == {"error": SEARCH_UNAVAILABLE_MESSAGE, "recommendations": []}
        assert str(error) not in response.text

    def test_dimension_mismatch_returns_500(self, client: TestClient, failing_service) -> None:
        failing_service.recommend.side_effect = DimensionMismatchError("384 vs 768")

        response = client.get("/recommendations/", params={"q": "cleaning"})

        assert response.status_code == 500
        assert response.json()["recommendations"] == []
        assert "384" not in response.text

    def test_unexpected_error_returns_500(self, client: TestClient, failing_service) -> None:
        failing_service.recommend.side_effect = RuntimeError("kaboom")

        response = client.get("/recommendations/", params={"q": "cleaning"})

        assert response.status_code == 500
        assert "kaboom" not in response.text
