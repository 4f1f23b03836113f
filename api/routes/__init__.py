# Routes module
from .pages import router as pages_router
from .articles import router as articles_router
from .feed import router as feed_router

__all__ = ["pages_router", "articles_router", "feed_router"]
