"""
app/embedder/provider.py

Process-wide accessor for the shared embedding model.

Loading sentence-transformers weights is expensive, so the application
builds exactly one embedder and hands it to every service that needs
one. Services receive it through their constructor; only the wiring
code at the bottom of each service module calls ``get_embedder``.
"""

from __future__ import annotations

import threading
from typing import Optional

from app.core.config import settings
from app.core.logger import get_logger
from app.embedder.base import Embedder
from app.embedder.cached_embedder import CachedEmbedder
from app.embedder.sentence_transformer_embedder import SentenceTransformerEmbedder

logger = get_logger(__name__)

_embedder: Optional[Embedder] = None
_embedder_lock = threading.Lock()


def _build_embedder() -> Embedder:
    base = SentenceTransformerEmbedder()
    if settings.embedding_cache_size > 0:
        logger.info(
            "Embedding cache enabled — up to %d vector(s).", settings.embedding_cache_size
        )
        return CachedEmbedder(base, max_entries=settings.embedding_cache_size)
    return base


def get_embedder() -> Embedder:
    """Return the shared embedder, constructing it once on first use."""
    global _embedder
    if _embedder is None:
        with _embedder_lock:
            if _embedder is None:
                _embedder = _build_embedder()
    return _embedder
