from dataclasses import dataclass


@dataclass
class User:
    """Сущность пользователя домена Identity"""
    username: str
    # Пароль хранится открытым текстом в файле учетных данных
    password: str

    def authenticate(self, password: str) -> bool:
        """Проверка пароля пользователя (точное совпадение)"""
        return self.password == password
