"""Модуль с инструментами для тестов."""
from typing import Optional

from alembic.command import upgrade
from alembic.config import Config
from sqlalchemy.engine import Connection

from blogsite.config import settings
from blogsite.db import Database

ALEMBIC_SECTION = "migrations"


def alembic_config_from_url(db_url: Optional[str] = None) -> Config:
    """Подготовка конфига алембика для тестов."""
    config = Config(file_=settings.ALEMBIC_PATH, ini_section=ALEMBIC_SECTION)
    if db_url:
        config.set_main_option("sqlalchemy.url", db_url)
    return config


def _upgrade(connection: Connection, config: Config) -> None:
    """Применить миграции на переданном соединении."""
    config.attributes["connection"] = connection
    upgrade(config, "head")


async def migrate(database: Database) -> None:
    """Накатить миграции на тестовую базу."""
    config = alembic_config_from_url(
        database.engine.url.render_as_string(hide_password=False)
    )
    async with database.engine.begin() as conn:
        await conn.run_sync(_upgrade, config)
