"""Модуль с базовыми представлениями."""
from fastapi import HTTPException, Request, Response
from loguru import logger
from starlette import status

from blogsite.core.err_msgs import (
    INTERNAL_ERROR,
    POST_NOT_EXIST,
    SLUG_CONFLICT,
)
from blogsite.exceptions import (
    BlogServiceError,
    PostNotFoundError,
    PostValidationError,
    SlugConflictError,
)


class BaseView:
    """Базовый класс представления."""

    request: Request
    response: Response

    @staticmethod
    def http_error(exc: BlogServiceError) -> HTTPException:
        """Преобразовать ошибку сервиса в http-ответ."""
        if isinstance(exc, PostNotFoundError):
            return HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=POST_NOT_EXIST
            )
        if isinstance(exc, SlugConflictError):
            return HTTPException(
                status_code=status.HTTP_409_CONFLICT, detail=SLUG_CONFLICT
            )
        if isinstance(exc, PostValidationError):
            return HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
            )
        logger.error("Blog service failure: {!r}", exc.__cause__ or exc)
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=INTERNAL_ERROR,
        )
