"""Request schemas for API endpoints."""
from api.models.article import Article


class ArticleSubmitRequest(Article):
    """JSON body of POST /articles."""

    def to_article(self) -> Article:
        """Convert to the stored article record."""
        return Article(**self.model_dump())
