from fastapi import APIRouter, Depends, status
from typing import List

from app.core.errors import NotFoundError
from app.db.storage import Storage, get_storage
from app.domains.content.schemas import PostCreate, PostResponse
from app.domains.content.services import PostService

router = APIRouter(prefix="/api/posts", tags=["posts"])


@router.get("", response_model=List[PostResponse])
async def get_posts(storage: Storage = Depends(get_storage)):
    """Все посты, новые первыми"""
    post_service = PostService(storage.posts)
    return [PostResponse.model_validate(post) for post in post_service.get_all_posts()]


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    post_data: PostCreate,
    storage: Storage = Depends(get_storage)
):
    """Создание нового поста"""
    post_service = PostService(storage.posts)
    post = post_service.create_post(post_data)
    return PostResponse.model_validate(post)


@router.get("/category/{category}", response_model=List[PostResponse])
async def get_posts_by_category(
    category: str,
    storage: Storage = Depends(get_storage)
):
    """Посты категории"""
    post_service = PostService(storage.posts)
    posts = post_service.get_posts_by_category(category)
    return [PostResponse.model_validate(post) for post in posts]


@router.get("/{slug}/related", response_model=List[PostResponse])
async def get_related_posts(
    slug: str,
    storage: Storage = Depends(get_storage)
):
    """Другие посты той же категории"""
    post_service = PostService(storage.posts)

    post = post_service.get_post(slug)
    if not post:
        raise NotFoundError("Post not found")

    return [PostResponse.model_validate(p) for p in post_service.get_related_posts(post)]


@router.get("/{slug}", response_model=PostResponse)
async def get_post(
    slug: str,
    storage: Storage = Depends(get_storage)
):
    """Получение поста по slug"""
    post_service = PostService(storage.posts)

    post = post_service.get_post(slug)
    if not post:
        raise NotFoundError("Post not found")

    return PostResponse.model_validate(post)
