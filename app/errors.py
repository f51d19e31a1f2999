class ArticleError(Exception):
    """Base class for request-scoped article errors."""


class NotFound(ArticleError):
    def __init__(self, article_id: str):
        super().__init__(f"Article not found: {article_id}")
        self.article_id = article_id


class ValidationError(ArticleError):
    """Missing required field, bad timestamp or duplicate id."""


class InvalidArgument(ArticleError):
    """Bad paging or filter parameter."""
