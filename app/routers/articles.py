from fastapi import APIRouter, Depends, HTTPException, Query

from app.deps import default_page_size, get_store
from app.errors import InvalidArgument, NotFound
from app.models import ArchiveDate, Article, ArticlePage
from app.query import Criteria, archive_dates, query
from app.store import ArticleStore

router = APIRouter()

@router.get("/articles", response_model=ArticlePage)
def list_articles(
    category: str | None = Query(default=None),
    search_term: str | None = Query(default=None, alias="searchTerm"),
    year: int | None = Query(default=None),
    month: int | None = Query(default=None),
    page: int | None = Query(default=None),
    # None -> DEFAULT_PAGE_SIZE; an explicit value <= 0 is rejected
    limit: int | None = Query(default=None),
    store: ArticleStore = Depends(get_store),
):
    criteria = Criteria(category=category, search_term=search_term, year=year, month=month)
    page_size = default_page_size() if limit is None else limit

    try:
        return query(store.query_all(), criteria, page, page_size)
    except InvalidArgument as e:
        raise HTTPException(status_code=400, detail=str(e))


# declared before /articles/{article_id} so the path is not read as an id
@router.get("/articles/archive-dates", response_model=list[ArchiveDate])
def list_archive_dates(store: ArticleStore = Depends(get_store)):
    return archive_dates(store.query_all())


@router.get("/articles/{article_id}", response_model=Article)
def get_article(article_id: str, store: ArticleStore = Depends(get_store)):
    try:
        return store.find_by_id(article_id)
    except NotFound:
        raise HTTPException(status_code=404, detail="Article not found")
