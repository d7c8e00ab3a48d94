"""
app/core/exceptions.py

Custom exception hierarchy for the application.

Raising typed exceptions from services lets controllers catch specific
cases and return the correct HTTP status code without leaking internals.
"""


class AppBaseException(Exception):
    """Root exception — catch-all for any application-level error."""


# ── Embedding exceptions ───────────────────────────────────────────────────────

class EmbeddingError(AppBaseException):
    """Raised when the embedding model fails to produce vectors."""


class ModelUnavailableError(EmbeddingError):
    """Raised when the embedding model cannot be loaded or reached."""


class EncodingError(EmbeddingError):
    """Raised when a specific input string cannot be embedded."""


# ── Ranking exceptions ─────────────────────────────────────────────────────────

class RankingError(AppBaseException):
    """Raised when scoring candidates against a query fails."""


class DimensionMismatchError(RankingError):
    """Raised when two embeddings of different length are compared."""


# ── Catalog exceptions ─────────────────────────────────────────────────────────

class CatalogError(AppBaseException):
    """Raised when the listing catalog cannot be read or loaded."""


# ── Recommendation exceptions ──────────────────────────────────────────────────

class EmptyQueryError(AppBaseException):
    """Raised when an empty or whitespace-only query is submitted."""


class RecommendationError(AppBaseException):
    """Raised when the recommendation pipeline fails unexpectedly."""
