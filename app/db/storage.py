"""
Хранилище контента в памяти процесса.

Создается один раз при старте приложения и передается в обработчики через
зависимость ``get_storage``. Посты загружаются из каталога при создании,
категории заполняются стандартным набором.
"""
import logging
from pathlib import Path
from typing import Iterable, Optional

from fastapi import Request

from app.db.repositories import CategoryRepository, NoteRepository, PostRepository, UserRepository
from app.domains.content.entities import Category, DEFAULT_CATEGORIES, Post
from app.domains.content.loader import load_posts

logger = logging.getLogger(__name__)


class Storage:
    """Единый источник данных: посты, категории, заметки, пользователи"""

    def __init__(self):
        self.posts = PostRepository()
        self.categories = CategoryRepository()
        self.notes = NoteRepository()
        self.users = UserRepository()

    def seed_categories(self, categories: Iterable[dict] = DEFAULT_CATEGORIES) -> None:
        """Заполнение стандартными категориями"""
        for data in categories:
            self.categories.create(Category.create_category(**data))

    def add_posts(self, posts: Iterable[Post]) -> None:
        for post in posts:
            self.posts.create(post)

    @classmethod
    def initialize(
        cls,
        posts_dir: Optional[Path] = None,
        extension: str = ".mdx",
        seed: bool = True
    ) -> "Storage":
        """Создание хранилища: категории из сида и посты из каталога"""
        storage = cls()
        if seed:
            storage.seed_categories()
        if posts_dir is not None:
            storage.add_posts(load_posts(posts_dir, extension))
        logger.info(
            f"Storage initialized with {storage.posts.count()} posts "
            f"and {storage.categories.count()} categories"
        )
        return storage


def get_storage(request: Request) -> Storage:
    """Зависимость FastAPI: хранилище текущего приложения"""
    return request.app.state.storage
