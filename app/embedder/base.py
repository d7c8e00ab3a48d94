"""
app/embedder/base.py

Abstract interface for the embedding layer.

Design goals:
  - The ranking engine depends only on this interface, never on
    sentence_transformers, so tests can substitute a fake provider.
  - ``embed`` is the single-string primitive the engine fans out over;
    ``embed_texts`` and ``embed_query`` are convenience entry points
    built on top of it.
  - Every vector produced by one instance has the same length.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List


class Embedder(ABC):
    """
    Contract every embedding backend must fulfil.

    Implementations must be safe to call from several worker threads at
    once after initialisation, since the ranking engine offloads document
    embeddings to threads concurrently.
    """

    @abstractmethod
    def embed(self, text: str) -> List[float]:
        """
        Encode a single string into a unit-length embedding vector.

        Args:
            text: Any string, including the empty string.

        Returns:
            A flat float vector of the provider's fixed dimension.

        Raises:
            ModelUnavailableError: The underlying model could not be loaded.
            EncodingError:         This particular input could not be encoded.
        """

    def embed_texts(self, texts: List[str]) -> List[List[float]]:
        """Encode several strings, preserving order. Returns [] for []."""
        return [self.embed(text) for text in texts]

    def embed_query(self, text: str) -> List[float]:
        """Encode a search query. Same vector space as the documents."""
        return self.embed(text)
