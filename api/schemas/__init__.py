# Schemas module
from .requests import ArticleSubmitRequest
from .responses import ArticleSubmitResponse, ErrorResponse, HealthResponse

__all__ = [
    "ArticleSubmitRequest",
    "ArticleSubmitResponse",
    "ErrorResponse",
    "HealthResponse"
]
