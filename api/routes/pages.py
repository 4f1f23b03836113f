"""HTML page routes."""
from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse

from api.dependencies import get_content_service
from api.services.content import ContentService


router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse)
async def homepage(content: ContentService = Depends(get_content_service)):
    """Homepage with the latest article preview."""
    return HTMLResponse(await content.homepage())


@router.get("/articles", response_class=HTMLResponse)
async def list_articles(
    index: int = Query(default=0, ge=0, le=65535, description="Zero-based page index"),
    content: ContentService = Depends(get_content_service)
):
    """Paginated article list, ten previews per page."""
    return HTMLResponse(await content.article_list_page(index))


@router.get("/articles/{article_id}", response_class=HTMLResponse)
async def get_article(
    article_id: str,
    content: ContentService = Depends(get_content_service)
):
    """Single article rendered from its markup body."""
    return HTMLResponse(await content.article_page(article_id))
