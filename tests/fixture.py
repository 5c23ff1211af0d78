"""Модуль с фикстурами."""
from typing import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from dependency_injector import providers
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from blogsite.config import Settings, load_settings
from blogsite.db import Database
from blogsite.services.blog import BlogService
from tests.utils import migrate

API_KEY = "secret-test-key"


@pytest.fixture()
def app_settings(tmp_path) -> Settings:
    """Настройки с отдельной базой для каждого теста."""
    return load_settings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'blog.db'}",
        BLOG_API_KEY=API_KEY,
        GS_ENVIRONMENT="test",
        _env_file=None,
    )


@pytest_asyncio.fixture()
async def database(app_settings: Settings) -> AsyncGenerator[Database, None]:
    """Инициализация подключения к мигрированной бд."""
    db = Database(app_settings.DATABASE_URL)
    await migrate(db)
    await db.connect()
    yield db
    await db.disconnect()


@pytest.fixture()
def blog_service(database: Database) -> BlogService:
    """Сервис блога поверх тестовой бд."""
    return BlogService(database)


@pytest.fixture()
def app(app_settings: Settings, database: Database) -> Generator:
    """Инициализация приложения."""
    from blogsite.app import init_app

    app = init_app(app_settings)
    app.state.container.db.override(providers.Object(database))
    yield app
    app.state.container.db.reset_override()


@pytest_asyncio.fixture()
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Создание тестового асинхронного клиента."""
    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport, base_url="http://test"
    ) as client:
        yield client


@pytest.fixture()
def auth_headers() -> dict:
    """Заголовки с ключом API."""
    return {"x-api-key": API_KEY}
