from fastapi import APIRouter, Depends, HTTPException

from app.deps import get_store
from app.errors import NotFound, ValidationError
from app.models import Article, ArticleCreate, ArticleUpdate
from app.query import newest_first
from app.store import ArticleStore

router = APIRouter()

@router.get("/admin/articles", response_model=list[Article])
def admin_list_articles(store: ArticleStore = Depends(get_store)):
    """Every article, newest first, without paging."""
    return newest_first(store.query_all())


@router.post("/admin/articles", response_model=Article, status_code=201)
def admin_create_article(body: ArticleCreate, store: ArticleStore = Depends(get_store)):
    try:
        return store.insert(body)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.put("/admin/articles/{article_id}", response_model=Article)
def admin_update_article(
    article_id: str,
    body: ArticleUpdate,
    store: ArticleStore = Depends(get_store),
):
    try:
        return store.update(article_id, body.model_dump(exclude_unset=True))
    except NotFound:
        raise HTTPException(status_code=404, detail="Article not found")
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/admin/articles/{article_id}")
def admin_delete_article(article_id: str, store: ArticleStore = Depends(get_store)):
    if not store.delete(article_id):
        raise HTTPException(status_code=404, detail="Article not found")
    return {"message": "Article deleted successfully", "id": article_id}
