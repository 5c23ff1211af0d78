"""Модуль с публичной частью блога."""
from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException
from fastapi_utils.cbv import cbv
from starlette import status

from blogsite.core.constants import Language
from blogsite.core.container import Container
from blogsite.core.err_msgs import POST_NOT_EXIST
from blogsite.core.utils import render_markdown
from blogsite.exceptions import BlogServiceError
from blogsite.rest.models.blog import (
    PostListResponse,
    PostModel,
    PublicPostModel,
    PublicPostResponse,
)
from blogsite.rest.views.base import BaseView
from blogsite.services.blog import BlogService

router = APIRouter()


@cbv(router)
class PublicBlogView(BaseView):
    """Представление опубликованных постов для страниц блога."""

    @router.get("/blog", response_model=PostListResponse)
    @inject
    async def blog_index(
        self,
        language: Optional[Language] = None,
        blog_service: BlogService = Depends(  # noqa: B008
            Provide[Container.blog_service]
        ),
    ) -> dict:
        """Получение опубликованных постов."""
        try:
            posts = await blog_service.list_posts(
                language=language.value if language else None,
                published=True,
            )
        except BlogServiceError as exc:
            raise self.http_error(exc)
        return {"data": [PostModel.model_validate(post) for post in posts]}

    @router.get("/blog/{slug}", response_model=PublicPostResponse)
    @inject
    async def blog_post(
        self,
        slug: str,
        language: Optional[Language] = None,
        blog_service: BlogService = Depends(  # noqa: B008
            Provide[Container.blog_service]
        ),
    ) -> dict:
        """Получить опубликованный пост с текстом в HTML."""
        try:
            post = await blog_service.get_by_slug(
                slug, language.value if language else None
            )
        except BlogServiceError as exc:
            raise self.http_error(exc)
        if post is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=POST_NOT_EXIST
            )
        item = PostModel.model_validate(post).model_dump()
        return {
            "data": PublicPostModel(
                **item, content_html=render_markdown(post.content)
            )
        }
