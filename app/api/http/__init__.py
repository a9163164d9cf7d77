from app.api.http.health import router as health_router
from app.api.http.posts import router as posts_router
from app.api.http.search import router as search_router
from app.api.http.categories import router as categories_router
from app.api.http.notes import router as notes_router

__all__ = [
    "health_router",
    "posts_router",
    "search_router",
    "categories_router",
    "notes_router"
]
