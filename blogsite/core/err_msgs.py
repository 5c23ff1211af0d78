"""Модуль с сообщениями ошибок."""

UNAUTHORIZED = "Unauthorized. Valid API key required."
VALIDATION_FAILED = "Validation failed"
EMPTY_REQUEST = "request data cannot be empty"
POST_NOT_EXIST = "Blog post not found"
SLUG_CONFLICT = "A post with this slug already exists in this language"
SLUG_NOT_GENERATED = "slug cannot be generated from title, provide it"
SLUG_QUERY_REQUIRED = "either title or slug is required"
INTERNAL_ERROR = "Internal server error"

POST_CREATED = "Blog post created successfully"
POST_UPDATED = "Blog post updated successfully"
POST_DELETED = "Blog post deleted successfully"
