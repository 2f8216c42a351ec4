from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.templating import Jinja2Templates

from app.core.config import BASE_DIR
from app.core.session import SessionManager

templates = Jinja2Templates(directory=str(BASE_DIR / "app" / "templates"))


def render_page(
    request: Request,
    name: str,
    context: Optional[Dict[str, Any]] = None,
    status_code: int = 200,
):
    """Рендер страницы; одноразовые сообщения забираются из сессии"""
    session = SessionManager(request.session)
    page_context = {
        "username": session.username,
        "error": session.pop_error(),
        "success": session.pop_success(),
    }
    page_context.update(context or {})
    return templates.TemplateResponse(request, name, page_context, status_code=status_code)
