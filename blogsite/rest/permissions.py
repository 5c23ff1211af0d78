"""Модуль с разрешениями для рест запросов."""
import secrets
from typing import Callable, Optional

from fastapi import HTTPException
from fastapi.routing import APIRoute
from starlette import status
from starlette.requests import Request
from starlette.responses import Response

from blogsite.core.err_msgs import UNAUTHORIZED

API_KEY_HEADER = "x-api-key"
BEARER_PREFIX = "Bearer "
PROTECTED_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})


def get_request_api_key(request: Request) -> Optional[str]:
    """Достать ключ из x-api-key или из заголовка Authorization."""
    api_key = request.headers.get(API_KEY_HEADER)
    if api_key:
        return api_key

    authorization = request.headers.get("authorization", "")
    if authorization.startswith(BEARER_PREFIX):
        return authorization[len(BEARER_PREFIX):].strip() or None
    return None


class ApiKeyChecker:
    """Проверяет общий секрет для изменяющих запросов."""

    def __call__(self, request: Request) -> None:
        """Реализует вызов экземпляра."""
        expected = request.app.state.settings.BLOG_API_KEY
        api_key = get_request_api_key(request)
        if not api_key or not secrets.compare_digest(
            api_key.encode(), expected.encode()
        ):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=UNAUTHORIZED,
                headers={"WWW-Authenticate": "Bearer"},
            )


class ApiKeyRoute(APIRoute):
    """Роут, проверяющий ключ изменяющих запросов до разбора тела.

    Неавторизованный запрос получает 401 даже с некорректным телом.
    """

    check_api_key = ApiKeyChecker()

    def get_route_handler(self) -> Callable:
        """Обернуть обработчик роута проверкой ключа."""
        route_handler = super().get_route_handler()

        async def protected_route_handler(request: Request) -> Response:
            if request.method in PROTECTED_METHODS:
                self.check_api_key(request)
            return await route_handler(request)

        return protected_route_handler
