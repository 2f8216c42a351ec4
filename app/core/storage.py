from app.core.config import settings
from app.domains.documents.repository import DocumentRepository
from app.domains.identity.repository import UserRepository
from app.infrastructure.repositories.document_repository import FileDocumentRepository
from app.infrastructure.repositories.user_repository import YamlUserRepository


# Функции для dependency injection в FastAPI
def get_document_repository() -> DocumentRepository:
    return FileDocumentRepository(settings.data_path)


def get_user_repository() -> UserRepository:
    return YamlUserRepository(settings.users_path)
