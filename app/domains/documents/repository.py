from abc import ABC, abstractmethod
from typing import List


class DocumentRepository(ABC):
    """Хранилище документов: имя файла -> содержимое"""

    @abstractmethod
    def list(self) -> List[str]:
        ...

    @abstractmethod
    def exists(self, name: str) -> bool:
        ...

    @abstractmethod
    def read(self, name: str) -> bytes:
        ...

    @abstractmethod
    def write(self, name: str, content: bytes) -> None:
        ...

    @abstractmethod
    def delete(self, name: str) -> None:
        ...
