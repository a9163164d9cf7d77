from app.domains.identity.entities import User
from app.domains.identity.schemas import UserCreate
from app.domains.identity.services import IdentityService

__all__ = ["User", "UserCreate", "IdentityService"]
