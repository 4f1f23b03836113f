"""RSS feed route."""
from fastapi import APIRouter, Depends
from fastapi.responses import Response

from api.dependencies import get_content_service
from api.services.content import ContentService


router = APIRouter(tags=["feed"])


@router.get("/feed")
async def get_feed(content: ContentService = Depends(get_content_service)):
    """RSS 2.0 feed of the ten newest articles."""
    return Response(
        content=await content.feed(),
        media_type="text/xml; charset=utf-8"
    )
