from fastapi import APIRouter, Depends

from app.db.storage import Storage, get_storage

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(storage: Storage = Depends(get_storage)):
    """Проверка состояния сервиса"""
    return {
        "status": "ok",
        "posts": storage.posts.count(),
        "categories": storage.categories.count()
    }
