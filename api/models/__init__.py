# Models module
from .article import Article

__all__ = ["Article"]
