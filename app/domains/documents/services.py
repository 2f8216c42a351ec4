import logging
from typing import List

from app.domains.documents.entities import (
    SUPPORTED_EXTENSIONS, Document, RenderedDocument, extension_of
)
from app.domains.documents.errors import (
    DocumentAlreadyExists, DocumentNotFound, EmptyDocumentName,
    InvalidDocumentName, UnsupportedExtension
)
from app.domains.documents.schemas import DocumentCreate, DocumentEditForm, DocumentUpdate
from app.domains.documents.repository import DocumentRepository

logger = logging.getLogger(__name__)


class DocumentService:
    """Сервис для работы с документами"""

    def __init__(self, repository: DocumentRepository):
        self.repository = repository

    def list_documents(self) -> List[str]:
        """Имена всех документов хранилища"""
        return self.repository.list()

    def get_document(self, name: str) -> Document:
        """Получение документа по имени"""
        if not self.repository.exists(name):
            raise DocumentNotFound(name)
        return Document(name=name, content=self.repository.read(name))

    def create_document(self, document_data: DocumentCreate) -> Document:
        """Создание нового пустого документа"""
        name = document_data.file_name

        # Порядок проверок определяет текст ошибки
        if self.repository.exists(name):
            raise DocumentAlreadyExists(name)
        if name == "":
            raise EmptyDocumentName()
        if extension_of(name) not in SUPPORTED_EXTENSIONS:
            raise UnsupportedExtension(name)
        if "/" in name or "\\" in name:
            raise InvalidDocumentName(name)

        document = Document(name=name)
        self.repository.write(document.name, document.content)
        logger.info(f"Created document {name}")
        return document

    def view_document(self, name: str) -> RenderedDocument:
        """Документ в представлении для просмотра"""
        document = self.get_document(name)
        return document.format.render_for_display(document.content)

    def load_for_edit(self, name: str) -> DocumentEditForm:
        """Исходный текст документа для формы редактирования"""
        document = self.get_document(name)
        raw = document.format.render_for_edit(document.content)
        return DocumentEditForm(
            name=document.name,
            extension=document.extension[1:],
            content=Document(name=document.name, content=raw).text(),
        )

    def update_document(self, name: str, update_data: DocumentUpdate) -> Document:
        """Полная замена содержимого документа"""
        document = Document(name=name, content=update_data.content.encode("utf-8"))
        self.repository.write(document.name, document.content)
        logger.info(f"Updated document {name}")
        return document

    def delete_document(self, name: str) -> None:
        """Удаление документа"""
        self.repository.delete(name)
        logger.info(f"Deleted document {name}")
