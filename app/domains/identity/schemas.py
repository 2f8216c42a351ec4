from pydantic import BaseModel


class UserLogin(BaseModel):
    """Схема для входа пользователя"""
    username: str = ""
    password: str = ""
