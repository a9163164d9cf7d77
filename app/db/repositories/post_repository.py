from typing import List, Optional, TYPE_CHECKING

from app.db.repositories.base import InMemoryRepository

if TYPE_CHECKING:
    from app.domains.content.entities import Post


def newest_first(posts: List["Post"]) -> List["Post"]:
    """Сортировка по дате публикации по убыванию, равные даты в порядке вставки"""
    return sorted(posts, key=lambda post: post.published_at, reverse=True)


class PostRepository(InMemoryRepository["Post"]):
    """Репозиторий постов"""

    def create(self, post: "Post") -> "Post":
        """Сохранение нового поста (уникальность slug не проверяется)"""
        return self.add(post)

    def get_by_slug(self, slug: str) -> Optional["Post"]:
        """Получение поста по slug"""
        return self.find(lambda post: post.slug == slug)

    def get_all(self) -> List["Post"]:
        """Все посты, новые первыми"""
        return newest_first(self.all())

    def get_by_category(self, category: str) -> List["Post"]:
        """Посты категории без учета регистра, новые первыми"""
        return newest_first(self.filter(lambda post: post.in_category(category)))

    def search(self, query: str) -> List["Post"]:
        """Поиск подстроки по заголовку, описанию, тексту и тегам"""
        from app.domains.content.search import filter_posts

        return newest_first(filter_posts(self.all(), query))
