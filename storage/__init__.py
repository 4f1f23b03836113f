# Storage module
from .article_store import ArticleStore, ARTICLES_FILE

__all__ = ["ArticleStore", "ARTICLES_FILE"]
