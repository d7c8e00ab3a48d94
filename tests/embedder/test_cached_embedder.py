"""
tests/embedder/test_cached_embedder.py

Tests for CachedEmbedder.

The wrapped embedder is a MagicMock so call counts can be asserted.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from app.core.exceptions import EncodingError
from app.embedder.cached_embedder import CachedEmbedder


def _inner(vector: list[float] | None = None) -> MagicMock:
    inner = MagicMock()
    inner.embed.side_effect = lambda text: list(vector or [float(len(text)), 1.0])
    return inner


class TestCachedEmbedder:

    def test_second_call_is_served_from_cache(self) -> None:
        inner = _inner()
        cached = CachedEmbedder(inner, max_entries=10)

        first = cached.embed("house cleaning")
        second = cached.embed("house cleaning")

        assert first == second
        inner.embed.assert_called_once_with("house cleaning")
        assert cached.hits == 1
        assert cached.misses == 1

    def test_cached_value_matches_uncached_value(self) -> None:
        """The cache must never change the vectors that come back."""
        inner = _inner()
        cached = CachedEmbedder(inner)

        assert cached.embed("abc") == inner.embed.side_effect("abc")
        assert cached.embed("abc") == inner.embed.side_effect("abc")

    def test_returned_vectors_are_copies(self) -> None:
        cached = CachedEmbedder(_inner())
        vec = cached.embed("abc")
        vec.append(99.0)

        assert cached.embed("abc") == [3.0, 1.0]

    def test_least_recently_used_entry_is_evicted(self) -> None:
        inner = _inner()
        cached = CachedEmbedder(inner, max_entries=2)

        cached.embed("a")
        cached.embed("b")
        cached.embed("a")      # refresh "a"
        cached.embed("c")      # evicts "b"

        assert len(cached) == 2
        inner.embed.reset_mock()
        cached.embed("a")
        inner.embed.assert_not_called()
        cached.embed("b")
        inner.embed.assert_called_once_with("b")

    def test_failures_are_not_cached(self) -> None:
        inner = MagicMock()
        inner.embed.side_effect = [EncodingError("boom"), [1.0, 0.0]]
        cached = CachedEmbedder(inner)

        with pytest.raises(EncodingError):
            cached.embed("text")
        assert cached.embed("text") == [1.0, 0.0]
        assert inner.embed.call_count == 2

    def test_embed_texts_uses_cache_per_item(self) -> None:
        inner = _inner()
        cached = CachedEmbedder(inner)

        result = cached.embed_texts(["x", "yy", "x"])

        assert result == [[1.0, 1.0], [2.0, 1.0], [1.0, 1.0]]
        assert inner.embed.call_count == 2

    def test_clear_empties_cache(self) -> None:
        cached = CachedEmbedder(_inner())
        cached.embed("a")
        cached.clear()

        assert len(cached) == 0
        assert cached.hits == 0

    def test_invalid_size_raises(self) -> None:
        with pytest.raises(ValueError, match="max_entries"):
            CachedEmbedder(_inner(), max_entries=0)
