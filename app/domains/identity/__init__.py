from app.domains.identity.entities import User
from app.domains.identity.errors import IdentityError, InvalidCredentials, NotAuthenticated
from app.domains.identity.repository import UserRepository
from app.domains.identity.schemas import UserLogin
from app.domains.identity.services import IdentityService

__all__ = [
    "User",
    "IdentityError", "InvalidCredentials", "NotAuthenticated",
    "UserRepository", "UserLogin",
    "IdentityService"
]
