from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import List, Optional

from app.db.storage import Storage, get_storage
from app.domains.content.schemas import PostResponse
from app.domains.content.services import PostService

router = APIRouter(prefix="/api/search", tags=["search"])


@router.get("", response_model=List[PostResponse])
async def search_posts(
    q: Optional[str] = Query(None, description="Substring to look for (case-insensitive)"),
    storage: Storage = Depends(get_storage)
):
    """Поиск постов по подстроке"""
    if not q:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Search query is required"
        )

    post_service = PostService(storage.posts)
    return [PostResponse.model_validate(post) for post in post_service.search_posts(q)]
