"""Модуль с подключением к базе."""
from loguru import logger
from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)


class Database:
    """Клиент реляционного хранилища.

    Создается один раз при старте приложения, открывается через
    :meth:`connect` и закрывается через :meth:`disconnect`.
    """

    def __init__(self, url: str, echo: bool = False) -> None:
        """Создать движок и фабрику сессий."""
        connect_args = {}
        if make_url(url).drivername == "postgresql+asyncpg":
            connect_args = {"server_settings": {"jit": "off"}}

        self.engine: AsyncEngine = create_async_engine(
            url, echo=echo, connect_args=connect_args
        )
        self.session_factory = async_sessionmaker(
            self.engine,
            expire_on_commit=False,
            class_=AsyncSession,
        )

    def session(self) -> AsyncSession:
        """Получить новую сессию."""
        return self.session_factory()

    async def connect(self) -> None:
        """Проверить доступность базы."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        logger.info(
            "Database connected: {}",
            self.engine.url.render_as_string(hide_password=True),
        )

    async def disconnect(self) -> None:
        """Закрыть пул соединений."""
        await self.engine.dispose()
        logger.info("Database disconnected")
