"""Сервис для управления постами блога."""
from typing import Any, Dict, List, Optional
from uuid import UUID

from loguru import logger
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from blogsite.core.err_msgs import EMPTY_REQUEST, SLUG_NOT_GENERATED
from blogsite.core.utils import generate_slug, utcnow
from blogsite.db import Database
from blogsite.exceptions import (
    BlogServiceError,
    PostNotFoundError,
    PostValidationError,
    SlugConflictError,
)
from blogsite.tables.blog_post import BlogPost


class BlogService:
    """Сервис для управления постами блога.

    Ошибки хранилища логируются и превращаются в исключения из
    :mod:`blogsite.exceptions`, наружу они не выходят.
    """

    def __init__(self, database: Database) -> None:
        """Конструктор сервиса."""
        self.database = database

    @staticmethod
    def generate_slug(title: str) -> str:
        """Сгенерировать slug из заголовка."""
        return generate_slug(title)

    async def list_posts(
        self,
        language: Optional[str] = None,
        published: Optional[bool] = None,
    ) -> List[BlogPost]:
        """Получить список постов, новые первыми."""
        query = select(BlogPost)
        if language is not None:
            query = query.where(BlogPost.language == language)
        if published is not None:
            query = query.where(BlogPost.published == published)
        query = query.order_by(BlogPost.created_at.desc())
        try:
            async with self.database.session() as session:
                return list((await session.execute(query)).scalars().all())
        except SQLAlchemyError as exc:
            logger.error(exc)
            raise BlogServiceError from exc

    async def get_by_slug(
        self, slug: str, language: Optional[str] = None
    ) -> Optional[BlogPost]:
        """Получить опубликованный пост по slug."""
        query = select(BlogPost).where(
            BlogPost.slug == slug,
            BlogPost.published == True,  # noqa E712
        )
        if language is not None:
            query = query.where(BlogPost.language == language)
        query = query.order_by(BlogPost.created_at.desc()).limit(1)
        try:
            async with self.database.session() as session:
                return (await session.execute(query)).scalars().first()
        except SQLAlchemyError as exc:
            logger.error(exc)
            raise BlogServiceError from exc

    async def get_by_id(self, post_id: UUID) -> Optional[BlogPost]:
        """Получить пост по идентификатору независимо от публикации."""
        try:
            async with self.database.session() as session:
                return await session.get(BlogPost, post_id)
        except SQLAlchemyError as exc:
            logger.error(exc)
            raise BlogServiceError from exc

    async def is_slug_available(
        self, slug: str, language: str, exclude_id: Optional[UUID] = None
    ) -> bool:
        """Проверить, что пара (slug, language) не занята другим постом."""
        query = select(BlogPost.id).where(
            BlogPost.slug == slug, BlogPost.language == language
        )
        if exclude_id is not None:
            query = query.where(BlogPost.id != exclude_id)
        try:
            async with self.database.session() as session:
                taken = (await session.execute(query.limit(1))).first()
        except SQLAlchemyError as exc:
            logger.error(exc)
            raise BlogServiceError from exc
        return taken is None

    async def create_post(self, data: Dict[str, Any]) -> BlogPost:
        """Создать пост в БД.

        Без slug он генерируется из заголовка.
        """
        values = dict(data)
        if not values.get("slug"):
            values["slug"] = self.generate_slug(values["title"])
        if not values["slug"]:
            raise PostValidationError(SLUG_NOT_GENERATED)

        post = BlogPost(**values)
        try:
            async with self.database.session() as session:
                session.add(post)
                await session.commit()
        except IntegrityError as exc:
            logger.info(
                "Slug conflict on create: {}/{}",
                values["language"],
                values["slug"],
            )
            raise SlugConflictError(values["slug"]) from exc
        except SQLAlchemyError as exc:
            logger.error(exc)
            raise BlogServiceError from exc

        logger.debug("Blog post created: {!r}", post)
        return post

    async def update_post(
        self, post_id: UUID, changes: Dict[str, Any]
    ) -> BlogPost:
        """Изменить переданные поля поста."""
        if not changes:
            raise PostValidationError(EMPTY_REQUEST)

        try:
            async with self.database.session() as session:
                post = await session.get(BlogPost, post_id)
                if post is None:
                    raise PostNotFoundError(str(post_id))
                for field, value in changes.items():
                    setattr(post, field, value)
                post.updated_at = utcnow()
                await session.commit()
        except IntegrityError as exc:
            logger.info("Slug conflict on update of {}", post_id)
            raise SlugConflictError(changes.get("slug")) from exc
        except SQLAlchemyError as exc:
            logger.error(exc)
            raise BlogServiceError from exc

        logger.debug("Blog post updated: {!r}", post)
        return post

    async def delete_post(self, post_id: UUID) -> None:
        """Удалить пост из БД."""
        try:
            async with self.database.session() as session:
                post = await session.get(BlogPost, post_id)
                if post is None:
                    raise PostNotFoundError(str(post_id))
                await session.delete(post)
                await session.commit()
        except SQLAlchemyError as exc:
            logger.error(exc)
            raise BlogServiceError from exc

        logger.debug("Blog post deleted: {}", post_id)
