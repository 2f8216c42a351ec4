from typing import Any, MutableMapping, Optional

from fastapi import Request

USERNAME_KEY = "username"
ERROR_KEY = "error"
SUCCESS_KEY = "success"


class SessionManager:
    """Состояние клиента в cookie-сессии: пользователь и одноразовые сообщения"""

    def __init__(self, session: MutableMapping[str, Any]):
        self.session = session

    @property
    def username(self) -> Optional[str]:
        return self.session.get(USERNAME_KEY)

    def is_authenticated(self) -> bool:
        return bool(self.session.get(USERNAME_KEY))

    def sign_in(self, username: str) -> None:
        self.session[USERNAME_KEY] = username

    def sign_out(self) -> None:
        self.session.pop(USERNAME_KEY, None)

    def set_error(self, message: str) -> None:
        self.session[ERROR_KEY] = message

    def set_success(self, message: str) -> None:
        self.session[SUCCESS_KEY] = message

    def pop_error(self) -> Optional[str]:
        """Сообщение об ошибке; после чтения удаляется"""
        return self.session.pop(ERROR_KEY, None)

    def pop_success(self) -> Optional[str]:
        """Сообщение об успехе; после чтения удаляется"""
        return self.session.pop(SUCCESS_KEY, None)


def get_session_manager(request: Request) -> SessionManager:
    return SessionManager(request.session)
