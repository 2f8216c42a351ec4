import logging
from typing import Optional

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import RedirectResponse, Response

from app.core.auth import require_signed_in
from app.core.session import SessionManager, get_session_manager
from app.core.storage import get_document_repository
from app.core.templates import render_page
from app.domains.documents.errors import DocumentError
from app.domains.documents.repository import DocumentRepository
from app.domains.documents.schemas import DocumentCreate, DocumentUpdate
from app.domains.documents.services import DocumentService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["documents"], dependencies=[Depends(require_signed_in)])

INDEX_URL = "/"


def get_document_service(
    repository: DocumentRepository = Depends(get_document_repository)
) -> DocumentService:
    return DocumentService(repository)


def redirect_to_index() -> RedirectResponse:
    return RedirectResponse(INDEX_URL, status_code=status.HTTP_302_FOUND)


@router.get("/")
async def list_documents(
    request: Request,
    document_service: DocumentService = Depends(get_document_service)
):
    """Список документов"""
    return render_page(request, "index.html", {"files": document_service.list_documents()})


@router.get("/new")
async def new_document_form(request: Request):
    """Форма создания документа"""
    return render_page(request, "new.html")


@router.post("/new")
async def create_document(
    request: Request,
    file_name: str = Form(""),
    document_service: DocumentService = Depends(get_document_service),
    session: SessionManager = Depends(get_session_manager)
):
    """Создание нового документа"""
    try:
        document = document_service.create_document(DocumentCreate(file_name=file_name))
    except DocumentError as e:
        logger.warning(f"Rejected document name {file_name!r}: {e}")
        session.set_error(str(e))
        return render_page(
            request, "new.html", status_code=422
        )

    session.set_success(f"{document.name} has been created!")
    return redirect_to_index()


@router.get("/{filename}")
async def view_document(
    filename: str,
    document_service: DocumentService = Depends(get_document_service),
    session: SessionManager = Depends(get_session_manager)
):
    """Просмотр документа в зависимости от его формата"""
    try:
        rendered = document_service.view_document(filename)
    except DocumentError as e:
        session.set_error(str(e))
        return redirect_to_index()

    return Response(content=rendered.body, media_type=rendered.media_type)


@router.get("/{filename}/edit")
async def edit_document_form(
    request: Request,
    filename: str,
    document_service: DocumentService = Depends(get_document_service),
    session: SessionManager = Depends(get_session_manager)
):
    """Форма редактирования с исходным текстом документа"""
    try:
        form = document_service.load_for_edit(filename)
    except DocumentError as e:
        session.set_error(str(e))
        return redirect_to_index()

    # Сообщение выставляется уже при открытии формы, а не при сохранении
    session.set_success(f"The {filename} has been edited!")
    return render_page(request, "edit.html", {"document": form})


@router.post("/{filename}/edit")
async def update_document(
    filename: str,
    content: str = Form(""),
    document_service: DocumentService = Depends(get_document_service),
    session: SessionManager = Depends(get_session_manager)
):
    """Сохранение нового содержимого документа"""
    try:
        document_service.update_document(filename, DocumentUpdate(content=content))
    except DocumentError as e:
        session.set_error(str(e))
        return redirect_to_index()

    session.set_success(f"The {filename} has been updated!")
    return redirect_to_index()


@router.post("/{filename}/delete")
async def delete_document(
    filename: str,
    delete: Optional[str] = Form(None),
    document_service: DocumentService = Depends(get_document_service),
    session: SessionManager = Depends(get_session_manager)
):
    """Удаление документа при наличии подтверждения"""
    if delete is not None:
        try:
            document_service.delete_document(filename)
        except DocumentError as e:
            session.set_error(str(e))
            return redirect_to_index()
        session.set_success(f"The {filename} document has been deleted!")

    return redirect_to_index()
