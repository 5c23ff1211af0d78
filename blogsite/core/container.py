"""Контейнер зависимостей проекта."""
from dependency_injector import containers, providers

from blogsite.db import Database
from blogsite.services.blog import BlogService


class Container(containers.DeclarativeContainer):
    """Основной контейнер с зависимостями."""

    config = providers.Configuration()

    db = providers.Singleton(
        Database,
        url=config.DATABASE_URL,
        echo=config.DB_ECHO,
    )

    blog_service = providers.Factory(BlogService, database=db)
