"""Модуль с исключениями."""


class ConfigurationError(Exception):
    """Ошибка конфигурации окружения."""


class BlogServiceError(Exception):
    """Внутренняя ошибка сервиса блога."""


class PostNotFoundError(BlogServiceError):
    """Пост не найден."""


class SlugConflictError(BlogServiceError):
    """Пост с таким slug уже есть на этом языке."""


class PostValidationError(BlogServiceError):
    """Некорректные данные поста."""
