from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from app.deps import get_store
from app.main import app
from app.seed import seed_articles
from app.store import InMemoryArticleStore
from tests.factories import make_article


@pytest.fixture
def seeded_store():
    return InMemoryArticleStore(seed_articles())


@pytest.fixture
def many_store():
    """Twenty-five articles, one hour apart, alternating Economy/Fintech."""
    base = datetime(2025, 1, 1, tzinfo=timezone.utc)
    return InMemoryArticleStore(
        make_article(
            id=str(i),
            title=f"Article {i}",
            category="Economy" if i % 2 else "Fintech",
            published_at=base + timedelta(hours=i),
        )
        for i in range(1, 26)
    )


@pytest.fixture
def client(seeded_store):
    app.dependency_overrides[get_store] = lambda: seeded_store
    yield TestClient(app)
    app.dependency_overrides.clear()
