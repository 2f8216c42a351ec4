import logging
from pathlib import Path
from typing import Dict, Optional

import yaml

from app.domains.identity.entities import User
from app.domains.identity.repository import UserRepository

logger = logging.getLogger(__name__)


class YamlUserRepository(UserRepository):
    """Учетные данные из YAML-файла вида `username: password`"""

    def __init__(self, path: Path):
        self.path = Path(path)

    def _load(self) -> Dict[str, str]:
        if not self.path.is_file():
            logger.warning(f"Credentials file {self.path} not found, no users available")
            return {}

        with self.path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Credentials file {self.path} must contain a mapping")

        # Пользователь без пароля не может войти
        return {
            str(username): str(password)
            for username, password in data.items()
            if password is not None
        }

    def get_by_username(self, username: str) -> Optional[User]:
        password = self._load().get(username)
        if password is None:
            return None
        return User(username=username, password=password)
