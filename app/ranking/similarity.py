"""
app/ranking/similarity.py

Cosine similarity between two embedding vectors.

Pure, side-effect-free arithmetic. Vectors from one embedder always share
a length, so a length mismatch means outputs of two different models were
mixed and is reported as DimensionMismatchError rather than guessed at.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from app.core.exceptions import DimensionMismatchError


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Return ``dot(a, b) / (|a| * |b|)``.

    Zero-norm policy: if either vector has zero length (norm 0), the
    result is ``0.0``.

    Raises:
        DimensionMismatchError: ``len(a) != len(b)``.
    """
    if len(a) != len(b):
        raise DimensionMismatchError(
            f"Cannot compare embeddings of length {len(a)} and {len(b)}."
        )

    va = np.asarray(a, dtype=np.float64)
    vb = np.asarray(b, dtype=np.float64)

    norm_a = float(np.linalg.norm(va))
    norm_b = float(np.linalg.norm(vb))
    if norm_a == 0.0 or norm_b == 0.0:
        return 0.0

    return float(np.dot(va, vb) / (norm_a * norm_b))
