import logging
from typing import List, Optional

from app.core.errors import ValidationFailed
from app.db.repositories.category_repository import CategoryRepository
from app.db.repositories.post_repository import PostRepository
from app.domains.content.entities import Category, Post
from app.domains.content.schemas import CategoryCreate, PostCreate

logger = logging.getLogger(__name__)

RELATED_POSTS_LIMIT = 2


class PostService:
    """Сервис для работы с постами"""

    def __init__(self, post_repository: PostRepository):
        self.post_repository = post_repository

    def get_all_posts(self) -> List[Post]:
        """Все посты, новые первыми"""
        return self.post_repository.get_all()

    def get_post(self, slug: str) -> Optional[Post]:
        """Получение поста по slug"""
        return self.post_repository.get_by_slug(slug)

    def get_posts_by_category(self, category: str) -> List[Post]:
        """Посты категории (без учета регистра)"""
        return self.post_repository.get_by_category(category)

    def search_posts(self, query: str) -> List[Post]:
        """Поиск по подстроке; пустой результат не ошибка"""
        return self.post_repository.search(query)

    def create_post(self, post_data: PostCreate) -> Post:
        """Создание поста: slug из заголовка, дата публикации - текущая"""
        post = Post.create_post(
            title=post_data.title,
            description=post_data.description,
            content=post_data.content,
            category=post_data.category,
            tags=post_data.tags,
            read_time=post_data.read_time,
            featured_image=post_data.featured_image
        )
        if self.post_repository.get_by_slug(post.slug):
            logger.warning(f"Post slug {post.slug!r} is already taken, lookups return the first match")
        self.post_repository.create(post)
        logger.info(f"Created post {post.slug} ({post.id})")
        return post

    def get_related_posts(self, post: Post, limit: int = RELATED_POSTS_LIMIT) -> List[Post]:
        """Другие посты той же категории"""
        related = [
            p for p in self.post_repository.get_all()
            if p.id != post.id and p.category == post.category
        ]
        return related[:limit]


class CategoryService:
    """Сервис для работы с категориями"""

    def __init__(self, category_repository: CategoryRepository):
        self.category_repository = category_repository

    def get_all_categories(self) -> List[Category]:
        """Все категории по алфавиту"""
        return self.category_repository.get_all()

    def get_category(self, slug: str) -> Optional[Category]:
        """Получение категории по slug"""
        return self.category_repository.get_by_slug(slug)

    def create_category(self, category_data: CategoryCreate) -> Category:
        """Создание категории"""
        if self.category_repository.get_by_slug(category_data.slug):
            raise ValidationFailed(
                f"Category with slug {category_data.slug!r} already exists",
                [{"field": "slug", "message": "already exists"}]
            )
        if self.category_repository.get_by_name(category_data.name):
            raise ValidationFailed(
                f"Category {category_data.name!r} already exists",
                [{"field": "name", "message": "already exists"}]
            )

        category = Category.create_category(
            name=category_data.name,
            slug=category_data.slug,
            description=category_data.description,
            color=category_data.color,
            post_count=category_data.post_count
        )
        return self.category_repository.create(category)
