import re
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


MAX_ID_LENGTH = 64
NUMERIC_ID = re.compile(r"[0-9]+")


def is_numeric_id(article_id: str) -> bool:
    # ASCII digits only; int() rejects some str.isdigit() characters such as "²"
    return len(article_id) <= MAX_ID_LENGTH and NUMERIC_ID.fullmatch(article_id) is not None


def to_utc(value: datetime | None) -> datetime | None:
    # naive timestamps are taken to be UTC
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Article(CamelModel):
    id: str
    title: str
    summary: str
    body: str
    author: str
    category: str
    published_at: datetime
    image_url: str = ""

    @field_validator("published_at")
    @classmethod
    def published_at_utc(cls, v):
        return to_utc(v)


class ArticleCreate(CamelModel):
    """Body of an admin create. `id` is optional and normally assigned by the store."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    id: str | None = Field(default=None, max_length=MAX_ID_LENGTH)
    title: str
    summary: str
    body: str
    author: str
    category: str
    published_at: datetime | None = None
    image_url: str | None = None

    @field_validator("published_at")
    @classmethod
    def published_at_utc(cls, v):
        return to_utc(v)


class ArticleUpdate(CamelModel):
    """Partial update. Unknown keys (including `id`) are dropped."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    title: str | None = None
    summary: str | None = None
    body: str | None = None
    author: str | None = None
    category: str | None = None
    published_at: datetime | None = None
    image_url: str | None = None

    @field_validator("published_at")
    @classmethod
    def published_at_utc(cls, v):
        return to_utc(v)


class ArticlePage(CamelModel):
    articles: list[Article]
    current_page: int
    total_pages: int
    total_articles: int


class ArchiveDate(BaseModel):
    year: int
    month: int
    label: str
