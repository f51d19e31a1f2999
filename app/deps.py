import logging
import os
from functools import lru_cache

from app.seed import load_seed
from app.store import ArticleStore, InMemoryArticleStore, PostgresArticleStore

logger = logging.getLogger("finshots")

STORE_BACKENDS = ("memory", "postgres")


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def default_page_size() -> int:
    return int(os.getenv("DEFAULT_PAGE_SIZE", "12"))


@lru_cache()
def get_store() -> ArticleStore:
    """Process-wide article store, chosen by ARTICLE_STORE (memory or postgres)."""
    backend = os.getenv("ARTICLE_STORE", "memory").strip().lower()
    if backend not in STORE_BACKENDS:
        raise RuntimeError(f"ARTICLE_STORE must be one of {STORE_BACKENDS}, got {backend!r}")

    if backend == "postgres":
        store = PostgresArticleStore()
        store.ensure_schema()
    else:
        store = InMemoryArticleStore()

    if _env_flag("SEED_ON_STARTUP", "true"):
        load_seed(store)

    logger.info("article store ready backend=%s", backend)
    return store
