from typing import Optional, TYPE_CHECKING

from app.db.repositories.base import InMemoryRepository

if TYPE_CHECKING:
    from app.domains.identity.entities import User


class UserRepository(InMemoryRepository["User"]):
    """Репозиторий пользователей"""

    def create(self, user: "User") -> "User":
        """Сохранение нового пользователя"""
        return self.add(user)

    def get_by_id(self, user_id: str) -> Optional["User"]:
        """Получение пользователя по id"""
        return self.get(user_id)

    def get_by_username(self, username: str) -> Optional["User"]:
        """Получение пользователя по username"""
        return self.find(lambda user: user.username == username)
