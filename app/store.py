import logging
import threading
from abc import ABC, abstractmethod
from datetime import datetime, timezone

from psycopg import sql

from app.db import get_conn
from app.errors import NotFound, ValidationError
from app.models import Article, ArticleCreate, is_numeric_id

logger = logging.getLogger("finshots.store")

REQUIRED_FIELDS = ("title", "summary", "body", "author", "category")
EDITABLE_FIELDS = REQUIRED_FIELDS + ("published_at", "image_url")


def _check_required(fields: dict) -> None:
    missing = [
        name for name in REQUIRED_FIELDS
        if name in fields and (fields[name] is None or not str(fields[name]).strip())
    ]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")


def _new_record(article: ArticleCreate) -> dict:
    fields = article.model_dump()
    _check_required(fields)
    if fields["id"] is not None and not fields["id"].strip():
        raise ValidationError("id must not be blank")
    fields["published_at"] = fields["published_at"] or datetime.now(timezone.utc)
    fields["image_url"] = fields["image_url"] or ""
    return fields


def _clean_update(fields: dict) -> dict:
    fields = {k: v for k, v in fields.items() if k in EDITABLE_FIELDS}
    _check_required(fields)
    if "published_at" in fields and fields["published_at"] is None:
        raise ValidationError("publishedAt must be a valid timestamp")
    if "image_url" in fields and fields["image_url"] is None:
        fields["image_url"] = ""
    return fields


def next_numeric_id(ids) -> str:
    numeric = [int(i) for i in ids if is_numeric_id(i)]
    return str(max(numeric, default=0) + 1)


class ArticleStore(ABC):
    """Custody of the article collection.

    Mutations are visible to the next read in the same process. Concurrent
    writes to the same id are serialised but last write wins.
    """

    @abstractmethod
    def insert(self, article: ArticleCreate) -> Article:
        ...

    @abstractmethod
    def update(self, article_id: str, fields: dict) -> Article:
        ...

    @abstractmethod
    def delete(self, article_id: str) -> bool:
        ...

    @abstractmethod
    def find_by_id(self, article_id: str) -> Article:
        ...

    @abstractmethod
    def query_all(self) -> list[Article]:
        ...

    def is_empty(self) -> bool:
        return not self.query_all()


class InMemoryArticleStore(ArticleStore):
    def __init__(self, articles=()):
        self._lock = threading.RLock()
        self._articles: dict[str, Article] = {}
        for a in articles:
            self.insert(a)

    def insert(self, article: ArticleCreate) -> Article:
        fields = _new_record(article)
        with self._lock:
            if fields["id"] is None:
                fields["id"] = next_numeric_id(self._articles)
            elif fields["id"] in self._articles:
                raise ValidationError(f"Duplicate article id: {fields['id']}")
            created = Article(**fields)
            self._articles[created.id] = created
        logger.info("inserted article id=%s", created.id)
        return created

    def update(self, article_id: str, fields: dict) -> Article:
        fields = _clean_update(fields)
        with self._lock:
            current = self._articles.get(article_id)
            if current is None:
                raise NotFound(article_id)
            updated = Article(**(current.model_dump() | fields))
            self._articles[article_id] = updated
        logger.info("updated article id=%s fields=%s", article_id, sorted(fields))
        return updated

    def delete(self, article_id: str) -> bool:
        with self._lock:
            removed = self._articles.pop(article_id, None) is not None
        if removed:
            logger.info("deleted article id=%s", article_id)
        else:
            logger.debug("delete miss id=%s", article_id)
        return removed

    def find_by_id(self, article_id: str) -> Article:
        with self._lock:
            article = self._articles.get(article_id)
        if article is None:
            logger.debug("lookup miss id=%s", article_id)
            raise NotFound(article_id)
        return article

    def query_all(self) -> list[Article]:
        with self._lock:
            return list(self._articles.values())


COLUMNS = ("id", "title", "summary", "body", "author", "category", "published_at", "image_url")

SCHEMA = """
create table if not exists public.articles (
    id text primary key,
    title text not null,
    summary text not null,
    body text not null,
    author text not null,
    category text not null,
    published_at timestamptz not null,
    image_url text not null default ''
)
"""


class PostgresArticleStore(ArticleStore):
    """Articles in `public.articles`. Connection errors propagate as psycopg.Error."""

    def __init__(self, connect=get_conn):
        self._connect = connect

    def ensure_schema(self) -> None:
        with self._connect() as conn:
            conn.execute(SCHEMA)

    def insert(self, article: ArticleCreate) -> Article:
        fields = _new_record(article)
        with self._connect() as conn:
            # serialise id assignment against concurrent inserts
            conn.execute("lock table public.articles in share row exclusive mode")
            if fields["id"] is None:
                rows = conn.execute(
                    "select id from public.articles where id ~ '^[0-9]+$'"
                ).fetchall()
                fields["id"] = next_numeric_id(r["id"] for r in rows)
            else:
                exists = conn.execute(
                    "select 1 from public.articles where id = %(id)s",
                    {"id": fields["id"]},
                ).fetchone()
                if exists:
                    raise ValidationError(f"Duplicate article id: {fields['id']}")

            row = conn.execute(
                """
                insert into public.articles
                  (id, title, summary, body, author, category, published_at, image_url)
                values
                  (%(id)s, %(title)s, %(summary)s, %(body)s, %(author)s, %(category)s,
                   %(published_at)s, %(image_url)s)
                returning id, title, summary, body, author, category, published_at, image_url
                """,
                fields,
            ).fetchone()
        logger.info("inserted article id=%s", row["id"])
        return Article(**row)

    def update(self, article_id: str, fields: dict) -> Article:
        fields = _clean_update(fields)
        with self._connect() as conn:
            if fields:
                assignments = sql.SQL(", ").join(
                    sql.SQL("{} = {}").format(sql.Identifier(name), sql.Placeholder(name))
                    for name in fields
                )
                query = sql.SQL(
                    "update public.articles set {} where id = {} returning {}"
                ).format(
                    assignments,
                    sql.Placeholder("article_id"),
                    sql.SQL(", ").join(map(sql.Identifier, COLUMNS)),
                )
            else:
                query = sql.SQL("select {} from public.articles where id = {}").format(
                    sql.SQL(", ").join(map(sql.Identifier, COLUMNS)),
                    sql.Placeholder("article_id"),
                )
            row = conn.execute(query, fields | {"article_id": article_id}).fetchone()
        if not row:
            raise NotFound(article_id)
        logger.info("updated article id=%s fields=%s", article_id, sorted(fields))
        return Article(**row)

    def delete(self, article_id: str) -> bool:
        with self._connect() as conn:
            cur = conn.execute(
                "delete from public.articles where id = %(id)s",
                {"id": article_id},
            )
            removed = cur.rowcount > 0
        if removed:
            logger.info("deleted article id=%s", article_id)
        else:
            logger.debug("delete miss id=%s", article_id)
        return removed

    def find_by_id(self, article_id: str) -> Article:
        with self._connect() as conn:
            row = conn.execute(
                """
                select id, title, summary, body, author, category, published_at, image_url
                from public.articles
                where id = %(id)s
                """,
                {"id": article_id},
            ).fetchone()
        if not row:
            logger.debug("lookup miss id=%s", article_id)
            raise NotFound(article_id)
        return Article(**row)

    def query_all(self) -> list[Article]:
        with self._connect() as conn:
            rows = conn.execute(
                """
                select id, title, summary, body, author, category, published_at, image_url
                from public.articles
                """
            ).fetchall()
        return [Article(**r) for r in rows]

    def is_empty(self) -> bool:
        with self._connect() as conn:
            row = conn.execute("select exists(select 1 from public.articles) as found").fetchone()
        return not row["found"]
