"""Article submission route."""
import logging

from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_store, require_admin
from api.schemas.requests import ArticleSubmitRequest
from api.schemas.responses import ArticleSubmitResponse
from shared.exceptions import BlogError, SerializeError
from storage.article_store import ArticleStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["articles"])


@router.post(
    "/articles",
    response_model=ArticleSubmitResponse,
    status_code=status.HTTP_201_CREATED
)
async def submit_article(
    request: ArticleSubmitRequest,
    username: str = Depends(require_admin),
    store: ArticleStore = Depends(get_store)
):
    """
    Submit a new article.

    - Requires the admin HTTP Basic credentials
    - Appends the record to the article list as-is
    - Duplicate ids and malformed dates are not rejected
    """
    article = request.to_article()

    try:
        await store.append(article)
    except SerializeError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except BlogError as e:
        logger.error(f"Failed to store article {article.article_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to store article"
        )

    logger.info(f"Article {article.article_id} submitted by {username}")
    return ArticleSubmitResponse(article_id=article.article_id)
