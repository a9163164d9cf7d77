from typing import Optional

from app.db.repositories.user_repository import UserRepository
from app.domains.identity.entities import User
from app.domains.identity.schemas import UserCreate


class IdentityService:
    """Сервис для работы с пользователями"""

    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    def get_user(self, user_id: str) -> Optional[User]:
        """Получение пользователя по id"""
        return self.user_repository.get_by_id(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        """Получение пользователя по username"""
        return self.user_repository.get_by_username(username)

    def create_user(self, user_data: UserCreate) -> User:
        """Создание пользователя"""
        user = User.create_user(username=user_data.username, password=user_data.password)
        return self.user_repository.create(user)
