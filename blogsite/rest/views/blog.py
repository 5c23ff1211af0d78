"""Модуль с API постов блога."""
from typing import Optional
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException
from fastapi_utils.cbv import cbv
from starlette import status

from blogsite.core.constants import Language
from blogsite.core.container import Container
from blogsite.core.err_msgs import (
    POST_CREATED,
    POST_DELETED,
    POST_NOT_EXIST,
    POST_UPDATED,
    SLUG_NOT_GENERATED,
    SLUG_QUERY_REQUIRED,
)
from blogsite.exceptions import BlogServiceError
from blogsite.rest.models.blog import (
    MessageResponse,
    PostCreate,
    PostListResponse,
    PostModel,
    PostResponse,
    PostUpdate,
    SlugAvailabilityResponse,
    SlugStr,
)
from blogsite.rest.permissions import ApiKeyRoute
from blogsite.rest.views.base import BaseView
from blogsite.services.blog import BlogService

router = APIRouter(route_class=ApiKeyRoute)


@cbv(router)
class BlogView(BaseView):
    """Представление для работы с постами блога."""

    @router.get("/api/blog", response_model=PostListResponse)
    @inject
    async def list_posts(
        self,
        language: Optional[Language] = None,
        published: Optional[bool] = None,
        blog_service: BlogService = Depends(  # noqa: B008
            Provide[Container.blog_service]
        ),
    ) -> dict:
        """Получение списка постов с фильтрами."""
        try:
            posts = await blog_service.list_posts(
                language=language.value if language else None,
                published=published,
            )
        except BlogServiceError as exc:
            raise self.http_error(exc)
        return {"data": [PostModel.model_validate(post) for post in posts]}

    @router.get("/api/blog/slug", response_model=SlugAvailabilityResponse)
    @inject
    async def check_slug(
        self,
        language: Language,
        title: Optional[str] = None,
        slug: Optional[SlugStr] = None,
        exclude_id: Optional[UUID] = None,
        blog_service: BlogService = Depends(  # noqa: B008
            Provide[Container.blog_service]
        ),
    ) -> dict:
        """Сгенерировать slug из заголовка и проверить, свободен ли он."""
        if not (slug or title):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=SLUG_QUERY_REQUIRED,
            )
        slug = slug or blog_service.generate_slug(title)
        if not slug:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=SLUG_NOT_GENERATED,
            )
        try:
            available = await blog_service.is_slug_available(
                slug, language.value, exclude_id
            )
        except BlogServiceError as exc:
            raise self.http_error(exc)
        return {
            "data": {
                "slug": slug,
                "language": language,
                "available": available,
            }
        }

    @router.get("/api/blog/{post_id}", response_model=PostResponse)
    @inject
    async def get_post(
        self,
        post_id: UUID,
        blog_service: BlogService = Depends(  # noqa: B008
            Provide[Container.blog_service]
        ),
    ) -> dict:
        """Получить пост по идентификатору."""
        try:
            post = await blog_service.get_by_id(post_id)
        except BlogServiceError as exc:
            raise self.http_error(exc)
        if post is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=POST_NOT_EXIST
            )
        return {"data": PostModel.model_validate(post)}

    @router.post(
        "/api/blog",
        response_model=PostResponse,
        status_code=status.HTTP_201_CREATED,
    )
    @inject
    async def create_post(
        self,
        post: PostCreate,
        blog_service: BlogService = Depends(  # noqa: B008
            Provide[Container.blog_service]
        ),
    ) -> dict:
        """Создать пост."""
        try:
            created = await blog_service.create_post(
                post.model_dump(mode="json")
            )
        except BlogServiceError as exc:
            raise self.http_error(exc)
        return {
            "message": POST_CREATED,
            "data": PostModel.model_validate(created),
        }

    @router.put("/api/blog/{post_id}", response_model=PostResponse)
    @inject
    async def update_post(
        self,
        post_id: UUID,
        post: PostUpdate,
        blog_service: BlogService = Depends(  # noqa: B008
            Provide[Container.blog_service]
        ),
    ) -> dict:
        """Изменить переданные поля поста."""
        try:
            updated = await blog_service.update_post(
                post_id, post.changes()
            )
        except BlogServiceError as exc:
            raise self.http_error(exc)
        return {
            "message": POST_UPDATED,
            "data": PostModel.model_validate(updated),
        }

    @router.delete("/api/blog/{post_id}", response_model=MessageResponse)
    @inject
    async def delete_post(
        self,
        post_id: UUID,
        blog_service: BlogService = Depends(  # noqa: B008
            Provide[Container.blog_service]
        ),
    ) -> dict:
        """Удалить пост."""
        try:
            await blog_service.delete_post(post_id)
        except BlogServiceError as exc:
            raise self.http_error(exc)
        return {"message": POST_DELETED}
