import logging

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import RedirectResponse

from app.core.auth import LOGIN_URL
from app.core.session import SessionManager, get_session_manager
from app.core.storage import get_user_repository
from app.core.templates import render_page
from app.domains.identity.errors import InvalidCredentials
from app.domains.identity.repository import UserRepository
from app.domains.identity.schemas import UserLogin
from app.domains.identity.services import IdentityService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["authentication"])


def get_identity_service(
    user_repository: UserRepository = Depends(get_user_repository)
) -> IdentityService:
    return IdentityService(user_repository)


@router.get("/login")
async def login_form(request: Request):
    """Страница входа"""
    return render_page(request, "login.html", {"form_username": ""})


@router.post("/login")
async def login(
    request: Request,
    username: str = Form(""),
    password: str = Form(""),
    identity_service: IdentityService = Depends(get_identity_service),
    session: SessionManager = Depends(get_session_manager)
):
    """Вход пользователя"""
    login_data = UserLogin(username=username, password=password)

    try:
        user = identity_service.login_user(login_data)
    except InvalidCredentials as e:
        session.set_error(str(e))
        return render_page(
            request,
            "login.html",
            {"form_username": login_data.username},
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    session.set_success(f"Successfully logged in as {user.username}")
    session.sign_in(user.username)
    return RedirectResponse("/", status_code=status.HTTP_302_FOUND)


@router.post("/logout")
async def logout(session: SessionManager = Depends(get_session_manager)):
    """Выход пользователя"""
    if session.is_authenticated():
        logger.info(f"User {session.username} logged out")
        session.sign_out()
        session.set_success("You've been logged out")

    return RedirectResponse(LOGIN_URL, status_code=status.HTTP_302_FOUND)
