class DocumentError(Exception):
    """Базовая ошибка домена Documents; str(exc) - сообщение для пользователя"""


class DocumentNotFound(DocumentError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"{name} does not exist!")


class DocumentAlreadyExists(DocumentError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"{name} already exist!")


class EmptyDocumentName(DocumentError):
    def __init__(self):
        super().__init__("Sorry, you must enter a file name")


class UnsupportedExtension(DocumentError):
    def __init__(self, name: str):
        self.name = name
        super().__init__("Sorry that extension is not supported yet!")


class InvalidDocumentName(DocumentError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Sorry, {name} is not a valid file name")


class UnsupportedFormat(DocumentError):
    def __init__(self, extension: str):
        self.extension = extension
        super().__init__(
            f"Sorry, the {extension} file format is not supported yet, check back again soon!"
        )
