"""Модуль с инициализацией роутов."""

from fastapi import APIRouter, FastAPI

from blogsite.rest.views import blog, public

VIEW_MODULES = (blog, public)


def init_routes(app: FastAPI) -> None:
    """Инициализация роутов."""
    main_router = APIRouter()
    main_router.include_router(blog.router, tags=["blog api"])
    main_router.include_router(public.router, tags=["blog"])
    app.include_router(main_router)
