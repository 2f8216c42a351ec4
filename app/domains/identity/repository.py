from abc import ABC, abstractmethod
from typing import Optional

from app.domains.identity.entities import User


class UserRepository(ABC):
    """Источник учетных данных пользователей"""

    @abstractmethod
    def get_by_username(self, username: str) -> Optional[User]:
        ...
