from typing import Any, Dict, List, Optional


class ContentError(Exception):
    """Базовая ошибка контентного хранилища"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ContentError):
    """Сущность не найдена по slug или id"""

    status_code = 404


class ValidationFailed(ContentError):
    """Некорректные входные данные (с деталями по полям)"""

    status_code = 400

    def __init__(self, message: str = "Validation error", errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.errors = errors or []


class DocumentLoadError(ContentError):
    """Ошибка разбора отдельного файла поста"""

    def __init__(self, path: str, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
