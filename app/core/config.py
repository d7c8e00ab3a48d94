"""
app/core/config.py

Centralised configuration loaded from environment variables.
Use a .env file locally; Docker Compose injects these at runtime.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # ── Application ────────────────────────────────────────────────────────────
    app_name: str = "Local Services Recommendation API"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # ── Embedder ───────────────────────────────────────────────────────────────
    embedding_model: str = "all-MiniLM-L6-v2"
    embedding_batch_size: int = 32
    embedding_cache_size: int = 1024   # 0 disables the embedding cache

    # ── Ranking ────────────────────────────────────────────────────────────────
    embed_concurrency: int = 4         # max in-flight document embeddings per request

    # ── Recommendations ────────────────────────────────────────────────────────
    recommend_default_limit: int = 10
    recommend_max_limit: int = 100

    # ── Catalog ────────────────────────────────────────────────────────────────
    catalog_max_candidates: int = 100
    catalog_seed_file: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


# Single shared instance; import this everywhere.
settings = Settings()
