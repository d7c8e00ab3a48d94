"""
app/embedder/sentence_transformer_embedder.py

SentenceTransformer implementation of the Embedder interface.

The model is loaded lazily on first use so the FastAPI startup event
remains fast even on cold starts. Loading happens at most once per
instance: concurrent first requests wait on a lock instead of each
loading their own copy of the weights.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, List, Optional

from app.core.config import settings
from app.core.exceptions import EncodingError, ModelUnavailableError
from app.core.logger import get_logger
from app.embedder.base import Embedder

if TYPE_CHECKING:
    from sentence_transformers import SentenceTransformer as _ST

logger = get_logger(__name__)


class SentenceTransformerEmbedder(Embedder):
    """
    Embedder backed by a HuggingFace sentence-transformers model.

    The model is loaded on the first embed call (lazy initialisation).
    Once loaded it is treated as read-only and shared by every request.

    Default model: ``all-MiniLM-L6-v2``
      - Dimension : 384
      - Speed     : very fast (CPU-friendly)
      - Output    : L2-normalised, so cosine similarity is a dot product
    """

    def __init__(self, model_name: str | None = None, batch_size: int | None = None) -> None:
        """
        Args:
            model_name : HuggingFace model identifier.
                         Defaults to ``settings.embedding_model``.
            batch_size : Batch size used by ``embed_texts``.
                         Defaults to ``settings.embedding_batch_size``.
        """
        self._model_name: str = model_name or settings.embedding_model
        self._batch_size: int = batch_size or settings.embedding_batch_size
        self._model: Optional[_ST] = None  # loaded on first use
        self._load_lock = threading.Lock()

    @property
    def model_name(self) -> str:
        return self._model_name

    @property
    def is_loaded(self) -> bool:
        return self._model is not None

    @property
    def dimension(self) -> int:
        """Embedding length. Loads the model if it is not loaded yet."""
        return int(self._get_model().get_sentence_embedding_dimension())

    # ── Lazy loader ────────────────────────────────────────────────────────────

    def _get_model(self) -> _ST:
        """Return the loaded model, initialising it on first call."""
        model = self._model
        if model is not None:
            return model

        with self._load_lock:
            # Another thread may have finished loading while we waited.
            if self._model is None:
                self._model = self._load_model()
            return self._model

    def _load_model(self) -> _ST:
        logger.info("Loading embedding model '%s' …", self._model_name)
        try:
            import transformers
            from sentence_transformers import SentenceTransformer

            # Hide the harmless checkpoint LOAD REPORT emitted on cold start.
            transformers.logging.set_verbosity_error()

            model = SentenceTransformer(self._model_name)
        except Exception as exc:
            raise ModelUnavailableError(
                f"Failed to load embedding model '{self._model_name}': {exc}"
            ) from exc

        logger.info(
            "Model '%s' loaded — embedding dimension: %d",
            self._model_name,
            model.get_sentence_embedding_dimension(),
        )
        return model

    # ── Embedder interface ─────────────────────────────────────────────────────

    def embed(self, text: str) -> List[float]:
        """Encode a single string into a normalised vector."""
        return self._encode([text])[0]

    def embed_texts(self, texts: List[str]) -> List[List[float]]:
        """Batch-encode texts in one model call. Returns [] for empty input."""
        if not texts:
            return []
        return self._encode(texts)

    def _encode(self, texts: List[str]) -> List[List[float]]:
        model = self._get_model()
        try:
            vectors = model.encode(
                texts,
                batch_size=self._batch_size,
                show_progress_bar=False,
                convert_to_numpy=True,
                normalize_embeddings=True,
            )
        except Exception as exc:
            preview = texts[0][:60] if len(texts) == 1 else f"{len(texts)} texts"
            raise EncodingError(f"Could not embed '{preview}': {exc}") from exc
        return [v.tolist() for v in vectors]
