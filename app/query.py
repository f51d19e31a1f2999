"""
Filtering, ordering and paging of the article collection.

Everything here is a pure function of (articles, criteria): nothing mutates
the records it is given. Search is a boolean case-insensitive substring test
on title or summary. There is no relevance ranking.
"""
import math
from dataclasses import dataclass
from datetime import timezone

from app.errors import InvalidArgument
from app.models import ArchiveDate, Article, ArticlePage, is_numeric_id

# fixed English labels so output does not depend on the process locale
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


@dataclass(frozen=True)
class Criteria:
    category: str | None = None
    search_term: str | None = None
    year: int | None = None
    month: int | None = None

    def validate(self) -> None:
        if (self.year is None) != (self.month is None):
            raise InvalidArgument("year and month must be supplied together")
        if self.month is not None and not 1 <= self.month <= 12:
            raise InvalidArgument(f"month must be between 1 and 12, got {self.month}")
        if self.year is not None and self.year < 1:
            raise InvalidArgument(f"year must be positive, got {self.year}")


def _utc(article: Article):
    return article.published_at.astimezone(timezone.utc)


def _id_key(article_id: str):
    # numeric ids compare as numbers and rank above non-numeric ones
    if is_numeric_id(article_id):
        return (1, int(article_id), "")
    return (0, 0, article_id)


def sort_key(article: Article):
    return (_utc(article), _id_key(article.id))


def matches_category(article: Article, category: str | None) -> bool:
    if not category:
        return True
    return article.category.casefold() == category.casefold()


def matches_search(article: Article, term: str | None) -> bool:
    # blank terms impose no constraint
    if term is None or not term.strip():
        return True
    needle = term.casefold()
    return needle in article.title.casefold() or needle in article.summary.casefold()


def matches_period(article: Article, year: int | None, month: int | None) -> bool:
    if year is None or month is None:
        return True
    published = _utc(article)
    return published.year == year and published.month == month


def filter_articles(articles, criteria: Criteria) -> list[Article]:
    criteria.validate()
    out = [a for a in articles if matches_category(a, criteria.category)]
    out = [a for a in out if matches_search(a, criteria.search_term)]
    out = [a for a in out if matches_period(a, criteria.year, criteria.month)]
    return out


def newest_first(articles) -> list[Article]:
    """Sort by publish time descending, ties broken by id descending."""
    return sorted(articles, key=sort_key, reverse=True)


def query(articles, criteria: Criteria, page: int | None, page_size: int | None) -> ArticlePage:
    """
    Filter, sort and slice `articles`.

    `page` below 1 (or missing) is treated as 1. `page_size` has no default
    here; each call site picks its own. Pages past the end come back empty
    with the totals intact.
    """
    if page_size is None or page_size <= 0:
        raise InvalidArgument(f"page size must be a positive integer, got {page_size}")
    if page is None or page < 1:
        page = 1

    ordered = newest_first(filter_articles(articles, criteria))
    total = len(ordered)
    total_pages = max(1, math.ceil(total / page_size))

    start = (page - 1) * page_size
    return ArticlePage(
        articles=ordered[start:start + page_size],
        current_page=page,
        total_pages=total_pages,
        total_articles=total,
    )


def archive_dates(articles) -> list[ArchiveDate]:
    """Distinct (year, month) pairs in UTC, newest first, labelled like "June 2025"."""
    pairs = {(_utc(a).year, _utc(a).month) for a in articles}
    return [
        ArchiveDate(year=y, month=m, label=f"{MONTH_NAMES[m - 1]} {y}")
        for y, m in sorted(pairs, reverse=True)
    ]
