"""app/ranking/__init__.py — public API of the ranking package."""

from app.ranking.engine import RankingEngine, top_n
from app.ranking.similarity import cosine_similarity

__all__ = [
    "RankingEngine",
    "cosine_similarity",
    "top_n",
]
