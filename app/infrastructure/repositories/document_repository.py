import logging
from pathlib import Path
from typing import List

from app.domains.documents.errors import DocumentNotFound, InvalidDocumentName
from app.domains.documents.repository import DocumentRepository

logger = logging.getLogger(__name__)


class FileDocumentRepository(DocumentRepository):
    """Документы как плоские файлы в одном каталоге"""

    def __init__(self, root: Path):
        self.root = Path(root)

    def _path(self, name: str) -> Path:
        # Только имя файла внутри каталога, без выхода за его пределы
        if not name or name in (".", "..") or "/" in name or "\\" in name:
            raise InvalidDocumentName(name)
        return self.root / name

    def list(self) -> List[str]:
        if not self.root.is_dir():
            return []
        return sorted(
            path.name
            for path in self.root.iterdir()
            if path.is_file() and not path.name.startswith(".")
        )

    def exists(self, name: str) -> bool:
        try:
            return self._path(name).is_file()
        except InvalidDocumentName:
            return False

    def read(self, name: str) -> bytes:
        path = self._path(name)
        if not path.is_file():
            raise DocumentNotFound(name)
        return path.read_bytes()

    def write(self, name: str, content: bytes) -> None:
        path = self._path(name)
        self.root.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        logger.info(f"Wrote {len(content)} bytes to {path}")

    def delete(self, name: str) -> None:
        path = self._path(name)
        path.unlink(missing_ok=True)
        logger.info(f"Deleted {path}")
