"""Модуль с настройками проекта."""
import os
from typing import Any

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from blogsite.core.constants import LOCALE_COOKIE_NAME, Language
from blogsite.exceptions import ConfigurationError

ASYNC_PG_SCHEMA = "postgresql+asyncpg://"
PLAIN_PG_SCHEMAS = ("postgres://", "postgresql://")


class Settings(BaseSettings):
    """Класс настроек."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    BASE_DIR: str = os.path.dirname(
        os.path.dirname(os.path.abspath(__file__))
    )
    ALEMBIC_PATH: str = os.path.join(BASE_DIR, "migrations.ini")
    GS_ENVIRONMENT: str = "dev"
    GS_LISTEN: str = "http://0.0.0.0:8080"

    # Database settings
    DATABASE_URL: str
    DB_ECHO: bool = False

    # Shared secret for write operations of the blog API
    BLOG_API_KEY: str

    # Localization
    DEFAULT_LOCALE: Language = Language.EN
    LOCALE_COOKIE: str = LOCALE_COOKIE_NAME

    @field_validator("DATABASE_URL", "BLOG_API_KEY")
    @classmethod
    def check_not_empty(cls, v: str) -> str:
        """Обязательные значения не могут быть пустыми."""
        if not v or not v.strip():
            raise ValueError("must not be empty")
        return v.strip()

    @field_validator("DATABASE_URL")
    @classmethod
    def use_async_driver(cls, v: str) -> str:
        """Привести ссылку на postgres к асинхронному драйверу."""
        for schema in PLAIN_PG_SCHEMAS:
            if v.startswith(schema):
                return ASYNC_PG_SCHEMA + v[len(schema):]
        return v


def load_settings(**overrides: Any) -> Settings:
    """Загрузить настройки или упасть с понятной ошибкой конфигурации."""
    try:
        return Settings(**overrides)
    except ValidationError as exc:
        fields = sorted(
            {str(error["loc"][0]) for error in exc.errors() if error["loc"]}
        )
        raise ConfigurationError(
            f"Invalid or missing configuration: {', '.join(fields)}"
        ) from exc


settings = load_settings()
