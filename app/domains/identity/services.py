import logging

from app.domains.identity.entities import User
from app.domains.identity.errors import InvalidCredentials
from app.domains.identity.repository import UserRepository
from app.domains.identity.schemas import UserLogin

logger = logging.getLogger(__name__)


class IdentityService:
    """Сервис для аутентификации пользователей"""

    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    def authenticate(self, username: str, password: str) -> bool:
        """Проверка пары имя/пароль"""
        if username.strip() == "":
            return False

        user = self.user_repository.get_by_username(username)
        if not user:
            return False

        return user.authenticate(password)

    def login_user(self, login_data: UserLogin) -> User:
        """Вход пользователя; InvalidCredentials при неверных данных"""
        if not self.authenticate(login_data.username, login_data.password):
            logger.warning(f"Failed login attempt for {login_data.username!r}")
            raise InvalidCredentials()

        logger.info(f"User {login_data.username} logged in")
        return User(username=login_data.username, password=login_data.password)
