import uuid


class User:
    """Сущность пользователя (в операциях контента не участвует)"""

    def __init__(self, id: str, username: str, password: str):
        self.id = id
        self.username = username
        self.password = password

    @classmethod
    def create_user(cls, username: str, password: str) -> "User":
        """Создание нового пользователя"""
        return cls(id=str(uuid.uuid4()), username=username, password=password)

    def __eq__(self, other) -> bool:
        if not isinstance(other, User):
            return False
        return self.id == other.id

    def __repr__(self) -> str:
        return f"User(id={self.id}, username={self.username})"
