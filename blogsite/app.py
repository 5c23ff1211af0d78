"""App declaration and initialization."""
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from starlette import status
from starlette.responses import JSONResponse

from blogsite.config import Settings, settings
from blogsite.core.container import Container
from blogsite.core.err_msgs import VALIDATION_FAILED
from blogsite.middlewares import LocaleRedirectMiddleware
from blogsite.routes import VIEW_MODULES, init_routes


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Открыть подключение к базе на старте и закрыть при остановке."""
    database = app.state.container.db()
    await database.connect()
    try:
        yield
    finally:
        await database.disconnect()


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Ошибки валидации запроса отдаются со статусом 400."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": VALIDATION_FAILED,
            "errors": jsonable_encoder(exc.errors()),
        },
    )


def init_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Инициализация приложения."""
    app_settings = app_settings or settings

    container = Container()
    container.config.from_dict(app_settings.model_dump())
    container.wire(modules=VIEW_MODULES)

    app = FastAPI(title="Blog", lifespan=lifespan)
    app.state.container = container
    app.state.settings = app_settings

    # middlewares
    app.add_middleware(
        LocaleRedirectMiddleware,
        default_locale=app_settings.DEFAULT_LOCALE.value,
        cookie_name=app_settings.LOCALE_COOKIE,
    )
    app.add_exception_handler(
        RequestValidationError, validation_exception_handler
    )

    init_routes(app)

    return app


application = init_app()
