from app.domains.documents.entities import (
    Document, DocumentFormat, Markdown, PlainText, RenderedDocument, Unsupported,
    render_for_display, render_for_edit
)
from app.domains.documents.errors import (
    DocumentAlreadyExists, DocumentError, DocumentNotFound, EmptyDocumentName,
    InvalidDocumentName, UnsupportedExtension, UnsupportedFormat
)
from app.domains.documents.repository import DocumentRepository
from app.domains.documents.schemas import DocumentCreate, DocumentEditForm, DocumentUpdate
from app.domains.documents.services import DocumentService

__all__ = [
    "Document", "DocumentFormat", "Markdown", "PlainText", "RenderedDocument",
    "Unsupported", "render_for_display", "render_for_edit",
    "DocumentError", "DocumentNotFound", "DocumentAlreadyExists",
    "EmptyDocumentName", "InvalidDocumentName", "UnsupportedExtension",
    "UnsupportedFormat",
    "DocumentCreate", "DocumentEditForm", "DocumentUpdate",
    "DocumentRepository", "DocumentService"
]
