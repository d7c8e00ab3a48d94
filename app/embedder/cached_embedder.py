"""
app/embedder/cached_embedder.py

Content-hash keyed LRU cache in front of another Embedder.

Every recommendation request re-embeds the whole active catalog, and most
listings do not change between requests. Caching by the SHA-256 of the
text skips the model call for documents seen before without changing the
vectors that come back: a hit returns exactly what the wrapped embedder
produced for that text.
"""

from __future__ import annotations

import hashlib
import threading
from collections import OrderedDict
from typing import List

from app.core.logger import get_logger
from app.embedder.base import Embedder

logger = get_logger(__name__)


class CachedEmbedder(Embedder):
    """
    Wraps an Embedder with a bounded, thread-safe LRU cache.

    Failures are never cached; the next call for the same text retries
    the wrapped embedder.
    """

    def __init__(self, inner: Embedder, max_entries: int = 1024) -> None:
        if max_entries < 1:
            raise ValueError(f"max_entries must be at least 1, got {max_entries}.")
        self._inner = inner
        self._max_entries = max_entries
        self._entries: "OrderedDict[str, List[float]]" = OrderedDict()
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    @property
    def inner(self) -> Embedder:
        return self._inner

    def __len__(self) -> int:
        return len(self._entries)

    @staticmethod
    def _key(text: str) -> str:
        return hashlib.sha256(text.encode("utf-8")).hexdigest()

    def embed(self, text: str) -> List[float]:
        key = self._key(text)
        with self._lock:
            cached = self._entries.get(key)
            if cached is not None:
                self._entries.move_to_end(key)
                self.hits += 1
                return list(cached)
            self.misses += 1

        # Encode outside the lock so concurrent misses do not serialise.
        vector = self._inner.embed(text)

        with self._lock:
            self._entries[key] = list(vector)
            self._entries.move_to_end(key)
            while len(self._entries) > self._max_entries:
                self._entries.popitem(last=False)
        return vector

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0
        logger.debug("Embedding cache cleared.")
