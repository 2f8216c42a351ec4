from fastapi import Depends, Request
from fastapi.responses import RedirectResponse

from app.core.session import SessionManager, get_session_manager
from app.domains.identity.errors import NotAuthenticated

LOGIN_URL = "/users/login"


async def require_signed_in(session: SessionManager = Depends(get_session_manager)) -> str:
    """Зависимость: имя вошедшего пользователя, иначе NotAuthenticated"""
    if not session.is_authenticated():
        raise NotAuthenticated()
    return session.username


async def not_authenticated_handler(request: Request, exc: NotAuthenticated):
    SessionManager(request.session).set_error(str(exc))
    return RedirectResponse(LOGIN_URL, status_code=302)
