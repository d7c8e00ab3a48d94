"""
app/models/recommendation_models.py

Pydantic DTOs for the recommendation flow.
The request arrives as query-string parameters, so only the response
shape is defined here.
"""

from typing import List

from pydantic import BaseModel


class ProviderSummary(BaseModel):
    """Public provider details shown next to a recommendation."""

    name: str


class Recommendation(BaseModel):
    """
    A single ranked listing.

        {
            "id": "svc-1",
            "name": "Deep House Cleaning",
            ...
            "provider": {"name": "Clean Pro"},
            "relevance_score": 0.62,
            "match_percentage": 62
        }

    ``relevance_score`` is the raw cosine similarity rounded for display and
    may be slightly negative; ``match_percentage`` is clamped to 0..100.
    """

    id: str
    name: str
    description: str
    category: str
    price: float
    duration: int
    location: str
    rating: float
    review_count: int
    tags: List[str]
    provider: ProviderSummary
    relevance_score: float
    match_percentage: int


class RecommendationResponse(BaseModel):
    """
    Successful response for GET /recommendations/.

        { "recommendations": [ <Recommendation>, ... ] }
    """

    recommendations: List[Recommendation]
