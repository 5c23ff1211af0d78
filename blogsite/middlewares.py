"""Module with middlewares."""
from typing import Callable, Optional, Sequence

from fastapi import Request, Response
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import RedirectResponse
from starlette.types import ASGIApp

from blogsite.core.constants import (
    LOCALE_BYPASS_PREFIXES,
    LOCALE_COOKIE_NAME,
    LOCALES,
    R_FILE_SEGMENT_PATTERN,
    Language,
)


def is_locale_bypassed(path: str) -> bool:
    """Check whether path is served without locale prefix."""
    if path.startswith(LOCALE_BYPASS_PREFIXES):
        return True
    return R_FILE_SEGMENT_PATTERN.match(path.rsplit("/", 1)[-1]) is not None


def has_locale(path: str, locales: Sequence[str] = LOCALES) -> bool:
    """Check whether path already starts with a known locale segment."""
    return any(
        path == f"/{locale}" or path.startswith(f"/{locale}/")
        for locale in locales
    )


def resolve_locale_redirect(
    path: str,
    cookie: Optional[str] = None,
    locales: Sequence[str] = LOCALES,
    default_locale: str = Language.EN.value,
) -> Optional[str]:
    """Get localized path to redirect to, or None to pass request through."""
    if is_locale_bypassed(path) or has_locale(path, locales):
        return None

    locale = cookie if cookie in locales else default_locale
    if path == "/":
        return f"/{locale}"
    return f"/{locale}{path}"


class LocaleRedirectMiddleware(BaseHTTPMiddleware):
    """Middleware redirecting unlocalized page paths to a locale prefix."""

    def __init__(
        self,
        app: ASGIApp,
        default_locale: str = Language.EN.value,
        cookie_name: str = LOCALE_COOKIE_NAME,
        locales: Sequence[str] = LOCALES,
    ) -> None:
        """Store localization settings."""
        super().__init__(app)
        self.default_locale = default_locale
        self.cookie_name = cookie_name
        self.locales = tuple(locales)

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        """Redirect to localized path or pass request through."""
        path = request.url.path
        target = resolve_locale_redirect(
            path,
            request.cookies.get(self.cookie_name),
            self.locales,
            self.default_locale,
        )
        if target is None:
            logger.debug("Locale redirect skipped for path: {}", path)
            response: Response = await call_next(request)
            return response

        url = request.url.replace(path=target)
        logger.debug("Locale redirect: {} -> {}", path, url.path)
        return RedirectResponse(str(url), status_code=307)
