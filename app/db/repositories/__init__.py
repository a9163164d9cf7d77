from app.db.repositories.base import InMemoryRepository
from app.db.repositories.post_repository import PostRepository
from app.db.repositories.category_repository import CategoryRepository
from app.db.repositories.note_repository import NoteRepository
from app.db.repositories.user_repository import UserRepository

__all__ = [
    "InMemoryRepository",
    "PostRepository",
    "CategoryRepository",
    "NoteRepository",
    "UserRepository"
]
