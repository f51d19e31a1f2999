"""HTTP tests against a seeded in-memory store."""

from unittest.mock import MagicMock

import psycopg

from app.deps import get_store
from app.main import app


class TestListArticles:
    def test_default_listing(self, client):
        resp = client.get("/api/articles")

        assert resp.status_code == 200
        data = resp.json()
        assert set(data) == {"articles", "currentPage", "totalPages", "totalArticles"}
        assert data["currentPage"] == 1
        assert data["totalPages"] == 1
        assert data["totalArticles"] == 5
        assert [a["id"] for a in data["articles"]] == ["1", "2", "3", "4", "5"]

    def test_article_fields_are_camel_case(self, client):
        article = client.get("/api/articles", params={"limit": 1}).json()["articles"][0]

        assert set(article) == {
            "id", "title", "summary", "body", "author", "category", "publishedAt", "imageUrl",
        }
        assert article["publishedAt"].startswith("2025-06-12T10:00:00")

    def test_category_filter(self, client):
        data = client.get("/api/articles", params={"category": "economy", "limit": 10}).json()

        assert [a["category"] for a in data["articles"]] == ["Economy"]
        assert data["totalPages"] == 1

    def test_search_term(self, client):
        data = client.get("/api/articles", params={"searchTerm": "upi", "limit": 3}).json()

        assert data["totalArticles"] == 1
        assert data["articles"][0]["id"] == "3"

    def test_empty_search_term(self, client):
        data = client.get("/api/articles", params={"searchTerm": ""}).json()

        assert data["totalArticles"] == 5

    def test_paging(self, client):
        data = client.get("/api/articles", params={"page": 2, "limit": 2}).json()

        assert [a["id"] for a in data["articles"]] == ["3", "4"]
        assert data["totalPages"] == 3
        assert data["totalArticles"] == 5

    def test_page_past_end(self, client):
        data = client.get("/api/articles", params={"page": 10, "limit": 2}).json()

        assert data["articles"] == []
        assert data["totalArticles"] == 5

    def test_non_positive_page_is_first(self, client):
        data = client.get("/api/articles", params={"page": 0, "limit": 2}).json()

        assert data["currentPage"] == 1

    def test_archive_filter(self, client):
        data = client.get("/api/articles", params={"year": 2025, "month": 6}).json()
        assert data["totalArticles"] == 5

        data = client.get("/api/articles", params={"year": 2024, "month": 6}).json()
        assert data["totalArticles"] == 0

    def test_zero_limit_is_400(self, client):
        resp = client.get("/api/articles", params={"limit": 0})

        assert resp.status_code == 400
        assert "page size" in resp.json()["detail"]

    def test_year_without_month_is_400(self, client):
        assert client.get("/api/articles", params={"year": 2025}).status_code == 400

    def test_malformed_month_is_400(self, client):
        assert client.get("/api/articles", params={"year": 2025, "month": "june"}).status_code == 400

    def test_default_page_size_from_env(self, client, monkeypatch):
        monkeypatch.setenv("DEFAULT_PAGE_SIZE", "2")

        data = client.get("/api/articles").json()

        assert len(data["articles"]) == 2
        assert data["totalPages"] == 3


class TestSingleArticle:
    def test_found(self, client):
        resp = client.get("/api/articles/4")

        assert resp.status_code == 200
        assert resp.json()["title"] == "Understanding Gold Bonds vs. Physical Gold: Which is Better?"

    def test_missing(self, client):
        resp = client.get("/api/articles/99")

        assert resp.status_code == 404
        assert resp.json() == {"detail": "Article not found"}


class TestArchiveDates:
    def test_seed(self, client):
        resp = client.get("/api/articles/archive-dates")

        assert resp.status_code == 200
        assert resp.json() == [{"year": 2025, "month": 6, "label": "June 2025"}]

    def test_reflects_new_article(self, client):
        client.post("/api/admin/articles", json={
            "title": "Budget 2024 recap",
            "summary": "s",
            "body": "b",
            "author": "a",
            "category": "Economy",
            "publishedAt": "2024-02-01T10:00:00Z",
        })

        labels = [d["label"] for d in client.get("/api/articles/archive-dates").json()]

        assert labels == ["June 2025", "February 2024"]


NEW_ARTICLE = {
    "title": "Why the rupee fell this week",
    "summary": "A quick explainer on currency moves.",
    "body": "<p>The rupee slipped against the dollar.</p>",
    "author": "Finshots Team",
    "category": "Economy",
    "imageUrl": "https://example.com/rupee.png",
}


class TestAdmin:
    def test_list_all_without_paging(self, client):
        data = client.get("/api/admin/articles").json()

        assert isinstance(data, list)
        assert [a["id"] for a in data] == ["1", "2", "3", "4", "5"]

    def test_create(self, client):
        resp = client.post("/api/admin/articles", json=NEW_ARTICLE)

        assert resp.status_code == 201
        created = resp.json()
        assert created["id"] == "6"
        assert created["imageUrl"] == NEW_ARTICLE["imageUrl"]
        assert created["publishedAt"]
        assert client.get("/api/articles/6").json()["title"] == NEW_ARTICLE["title"]

    def test_created_article_is_newest(self, client):
        client.post("/api/admin/articles", json=NEW_ARTICLE)

        data = client.get("/api/articles", params={"limit": 1}).json()

        assert data["articles"][0]["id"] == "6"
        assert data["totalArticles"] == 6

    def test_create_missing_field(self, client):
        body = {k: v for k, v in NEW_ARTICLE.items() if k != "title"}

        assert client.post("/api/admin/articles", json=body).status_code == 400

    def test_create_blank_field(self, client):
        resp = client.post("/api/admin/articles", json=NEW_ARTICLE | {"author": " "})

        assert resp.status_code == 400
        assert "author" in resp.json()["detail"]

    def test_create_bad_timestamp(self, client):
        resp = client.post("/api/admin/articles", json=NEW_ARTICLE | {"publishedAt": "yesterday"})

        assert resp.status_code == 400

    def test_create_duplicate_id(self, client):
        resp = client.post("/api/admin/articles", json=NEW_ARTICLE | {"id": "1"})

        assert resp.status_code == 400

    def test_update(self, client):
        resp = client.put("/api/admin/articles/2", json={"category": "Venture"})

        assert resp.status_code == 200
        assert resp.json()["category"] == "Venture"
        assert resp.json()["title"].startswith("Startup Funding Slowdown")

    def test_update_full_form_ignores_id(self, client):
        form = client.get("/api/articles/2").json() | {"id": "200", "title": "Edited"}

        resp = client.put("/api/admin/articles/2", json=form)

        assert resp.json()["id"] == "2"
        assert resp.json()["title"] == "Edited"

    def test_update_missing(self, client):
        assert client.put("/api/admin/articles/77", json={"title": "x"}).status_code == 404

    def test_delete(self, client):
        resp = client.delete("/api/admin/articles/5")

        assert resp.status_code == 200
        assert resp.json()["id"] == "5"
        assert client.get("/api/articles/5").status_code == 404
        assert client.get("/api/articles").json()["totalArticles"] == 4

    def test_delete_missing(self, client):
        resp = client.delete("/api/admin/articles/nope")

        assert resp.status_code == 404
        assert client.get("/api/articles").json()["totalArticles"] == 5


class TestService:
    def test_root(self, client):
        assert "Welcome" in client.get("/").json()["message"]

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}

    def test_request_id_echoed(self, client):
        resp = client.get("/health", headers={"x-request-id": "abc-123"})

        assert resp.headers["x-request-id"] == "abc-123"

    def test_cache_headers(self, client):
        assert client.get("/api/articles").headers["Cache-Control"] == "no-cache"
        assert client.get("/api/articles/1").headers["Cache-Control"] == "no-cache"
        assert client.get("/api/admin/articles").headers["Cache-Control"] == "no-store"

    def test_storage_failure_is_500(self, client):
        broken = MagicMock()
        broken.query_all.side_effect = psycopg.OperationalError("connection refused")
        app.dependency_overrides[get_store] = lambda: broken

        resp = client.get("/api/articles")

        assert resp.status_code == 500
        assert resp.json() == {"detail": "Storage unavailable"}


class TestUnusualIds:
    def test_superscript_digit_id_does_not_break_listing(self, client):
        resp = client.post("/api/admin/articles", json=NEW_ARTICLE | {"id": "²"})
        assert resp.status_code == 201

        listing = client.get("/api/articles", params={"limit": 10})
        admin_listing = client.get("/api/admin/articles")
        created = client.post("/api/admin/articles", json=NEW_ARTICLE)

        assert listing.status_code == 200
        assert listing.json()["totalArticles"] == 6
        assert admin_listing.status_code == 200
        assert created.status_code == 201
        assert created.json()["id"] == "6"

    def test_overlong_id_is_400(self, client):
        resp = client.post("/api/admin/articles", json=NEW_ARTICLE | {"id": "9" * 65})

        assert resp.status_code == 400

    def test_blank_id_is_400(self, client):
        resp = client.post("/api/admin/articles", json=NEW_ARTICLE | {"id": "  "})

        assert resp.status_code == 400
        assert client.get("/api/articles").json()["totalArticles"] == 5


class TestHealthDb:
    def test_misconfigured_store_is_logged(self, client, monkeypatch, caplog):
        monkeypatch.setenv("ARTICLE_STORE", "sqlite")
        get_store.cache_clear()
        try:
            resp = client.get("/health/db")
        finally:
            get_store.cache_clear()

        assert resp.status_code == 200
        assert resp.json()["status"] == "degraded"
        assert "store health check failed" in caplog.text
