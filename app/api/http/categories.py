from fastapi import APIRouter, Depends
from typing import List

from app.core.errors import NotFoundError
from app.db.storage import Storage, get_storage
from app.domains.content.schemas import CategoryResponse
from app.domains.content.services import CategoryService

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("", response_model=List[CategoryResponse])
async def get_categories(storage: Storage = Depends(get_storage)):
    """Все категории по алфавиту"""
    category_service = CategoryService(storage.categories)
    return [CategoryResponse.model_validate(c) for c in category_service.get_all_categories()]


@router.get("/{slug}", response_model=CategoryResponse)
async def get_category(
    slug: str,
    storage: Storage = Depends(get_storage)
):
    """Получение категории по slug"""
    category_service = CategoryService(storage.categories)

    category = category_service.get_category(slug)
    if not category:
        raise NotFoundError("Category not found")

    return CategoryResponse.model_validate(category)
