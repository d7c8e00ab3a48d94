"""
app/ranking/engine.py

Scores candidate documents against a query:

    query string
      └─ Embedder.embed()            → [float]        (once)
    documents
      └─ Embedder.embed() per doc    → [float]        (bounded fan-out)
           └─ cosine_similarity()    → score per doc, in input order

The embedder is injected so tests can substitute a fake provider; the
module-level wiring in the services layer passes the shared model.
"""

from __future__ import annotations

import asyncio
from typing import List, Optional, Sequence, Tuple, TypeVar

from app.core.config import settings
from app.core.exceptions import EmptyQueryError
from app.core.logger import get_logger
from app.embedder.base import Embedder
from app.ranking.similarity import cosine_similarity

logger = get_logger(__name__)

T = TypeVar("T")


class RankingEngine:
    """
    Turns one query and N documents into N relevance scores.

    Document embeddings are produced concurrently, at most
    ``max_concurrency`` at a time, each in a worker thread because model
    inference is blocking. Every task is tagged with its input index and
    writes its score into that slot, so the output order never depends on
    completion order.

    Failure policy: the first embedding failure fails the whole call and
    cancels the documents still pending. There is no partial result.
    """

    def __init__(self, embedder: Embedder, max_concurrency: int | None = None) -> None:
        self._embedder = embedder
        self._max_concurrency: int = max_concurrency or settings.embed_concurrency
        if self._max_concurrency < 1:
            raise ValueError(
                f"max_concurrency must be at least 1, got {self._max_concurrency}."
            )

    @property
    def embedder(self) -> Embedder:
        return self._embedder

    # ── Public API ─────────────────────────────────────────────────────────────

    async def rank(self, query: str, documents: Sequence[str]) -> List[float]:
        """
        Score every document against ``query``.

        Args:
            query     : Free-text query. Must not be blank.
            documents : Candidate document strings.

        Returns:
            One unclamped cosine score per document, index-aligned with
            ``documents``.

        Raises:
            EmptyQueryError        : ``query`` is blank. Nothing is embedded.
            ModelUnavailableError  : The model could not be loaded.
            EncodingError          : The query or a document failed to embed.
            DimensionMismatchError : Embeddings of different lengths were compared.
        """
        if not query or not query.strip():
            raise EmptyQueryError("Query must not be empty.")

        if not documents:
            return []

        query_vector = await asyncio.to_thread(self._embedder.embed, query)

        scores: List[Optional[float]] = [None] * len(documents)
        semaphore = asyncio.Semaphore(self._max_concurrency)

        async def score_document(index: int, document: str) -> None:
            async with semaphore:
                vector = await asyncio.to_thread(self._embedder.embed, document)
            scores[index] = cosine_similarity(query_vector, vector)

        tasks = [
            asyncio.ensure_future(score_document(i, doc))
            for i, doc in enumerate(documents)
        ]
        try:
            await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        logger.debug("Scored %d document(s) against query '%s'.", len(documents), query[:80])
        return [score for score in scores if score is not None]


def top_n(candidates: Sequence[T], scores: Sequence[float], limit: int) -> List[Tuple[T, float]]:
    """
    Pair candidates with their scores, order by descending score and keep
    the first ``limit``.

    The sort is stable: candidates with exactly equal scores keep their
    original relative order.
    """
    if len(candidates) != len(scores):
        raise ValueError(
            f"Got {len(scores)} score(s) for {len(candidates)} candidate(s)."
        )
    if limit < 1:
        return []
    paired = list(zip(candidates, scores))
    paired.sort(key=lambda pair: pair[1], reverse=True)
    return paired[:limit]
