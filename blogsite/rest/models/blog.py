"""Модуль с pydantic-моделями постов блога."""
from datetime import datetime
from typing import Annotated, Any, List, Optional
from uuid import UUID

from pydantic import (
    BaseModel,
    ConfigDict,
    StrictBool,
    StringConstraints,
    model_validator,
)

from blogsite.core.constants import SLUG_PATTERN, Language

NonEmptyStr = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1)
]
SlugStr = Annotated[str, StringConstraints(pattern=SLUG_PATTERN)]

UPDATABLE_FIELDS = (
    "title",
    "slug",
    "content",
    "short_description",
    "source",
    "language",
    "published",
)


class PostCreate(BaseModel):
    """Модель создания поста."""

    model_config = ConfigDict(extra="forbid")

    title: NonEmptyStr
    slug: Optional[SlugStr] = None
    content: NonEmptyStr
    short_description: NonEmptyStr
    source: NonEmptyStr
    language: Language
    published: StrictBool = True


class PostUpdate(BaseModel):
    """Модель частичного изменения поста.

    Изменяются только переданные поля, ``null`` для них недопустим.
    """

    model_config = ConfigDict(extra="forbid")

    title: Optional[NonEmptyStr] = None
    slug: Optional[SlugStr] = None
    content: Optional[NonEmptyStr] = None
    short_description: Optional[NonEmptyStr] = None
    source: Optional[NonEmptyStr] = None
    language: Optional[Language] = None
    published: Optional[StrictBool] = None

    @model_validator(mode="before")
    @classmethod
    def reject_nulls(cls, data: Any) -> Any:
        """Запретить явный null для изменяемых полей."""
        if isinstance(data, dict):
            nulls = [key for key, value in data.items() if value is None]
            if nulls:
                raise ValueError(f"fields cannot be null: {', '.join(nulls)}")
        return data

    def changes(self) -> dict:
        """Получить только переданные поля."""
        data = self.model_dump(mode="json", exclude_unset=True)
        return {
            field: data[field] for field in UPDATABLE_FIELDS if field in data
        }


class PostModel(BaseModel):
    """Модель поста в ответе."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID  # noqa A003
    created_at: datetime
    updated_at: datetime
    title: str
    slug: str
    content: str
    short_description: str
    source: str
    language: Language
    published: bool


class PublicPostModel(PostModel):
    """Модель опубликованного поста с отрендеренным текстом."""

    content_html: str


class PostListResponse(BaseModel):
    """Модель списка постов."""

    data: List[PostModel]


class PostResponse(BaseModel):
    """Модель ответа с постом."""

    message: Optional[str] = None
    data: PostModel


class PublicPostResponse(BaseModel):
    """Модель ответа с опубликованным постом."""

    data: PublicPostModel


class MessageResponse(BaseModel):
    """Модель ответа с сообщением."""

    message: str


class SlugAvailabilityModel(BaseModel):
    """Модель доступности slug."""

    slug: str
    language: Language
    available: bool


class SlugAvailabilityResponse(BaseModel):
    """Модель ответа о доступности slug."""

    data: SlugAvailabilityModel
