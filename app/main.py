import logging

from fastapi import FastAPI
from starlette.middleware.sessions import SessionMiddleware

from app.api.http.auth import router as auth_router
from app.api.http.documents import router as documents_router
from app.core.auth import not_authenticated_handler
from app.core.config import settings
from app.domains.identity.errors import NotAuthenticated

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="FlatCMS",
    description="Управление текстовыми и markdown-документами в каталоге на диске",
    version="1.0.0"
)

# Подпись cookie-сессии: пользователь и одноразовые сообщения хранятся у клиента
app.add_middleware(SessionMiddleware, secret_key=settings.session_secret)

app.add_exception_handler(NotAuthenticated, not_authenticated_handler)

# Роутер авторизации подключается первым: /users/... не должны попадать в /{filename}
app.include_router(auth_router)
app.include_router(documents_router)

logger.info(f"Serving documents from {settings.data_path} ({settings.app_env})")
