class IdentityError(Exception):
    """Базовая ошибка домена Identity; str(exc) - сообщение для пользователя"""


class InvalidCredentials(IdentityError):
    def __init__(self):
        super().__init__("Invalid credentials")


class NotAuthenticated(IdentityError):
    def __init__(self):
        super().__init__("You must be signed in to do that.")
