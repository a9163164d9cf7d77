from typing import List, Optional, TYPE_CHECKING

from app.db.repositories.base import InMemoryRepository

if TYPE_CHECKING:
    from app.domains.content.entities import Category


class CategoryRepository(InMemoryRepository["Category"]):
    """Репозиторий категорий"""

    def create(self, category: "Category") -> "Category":
        """Сохранение новой категории"""
        return self.add(category)

    def get_by_slug(self, slug: str) -> Optional["Category"]:
        """Получение категории по slug"""
        return self.find(lambda category: category.slug == slug)

    def get_by_name(self, name: str) -> Optional["Category"]:
        """Получение категории по имени"""
        return self.find(lambda category: category.name == name)

    def get_all(self) -> List["Category"]:
        """Все категории по алфавиту"""
        return sorted(self.all(), key=lambda category: category.name.casefold())
