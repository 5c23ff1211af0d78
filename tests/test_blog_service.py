"""Модуль с тестами сервиса блога."""
import uuid

import pytest

from blogsite.core.constants import Language
from blogsite.db import Database
from blogsite.exceptions import (
    BlogServiceError,
    PostNotFoundError,
    PostValidationError,
    SlugConflictError,
)
from blogsite.services.blog import BlogService
from tests.factories import post_payload

POST_FIELDS = (
    "title",
    "slug",
    "content",
    "short_description",
    "source",
    "language",
    "published",
)


@pytest.mark.asyncio()
async def test_create_and_get(blog_service: BlogService) -> None:
    """Тест создания поста и получения его по идентификатору."""
    data = post_payload()
    created = await blog_service.create_post(data)

    assert isinstance(created.id, uuid.UUID)
    assert created.created_at is not None
    assert created.updated_at is not None

    stored = await blog_service.get_by_id(created.id)
    expected = data
    for field in POST_FIELDS:
        assert getattr(stored, field) == expected[field]
    assert stored.created_at == created.created_at


@pytest.mark.asyncio()
async def test_create_generates_slug(blog_service: BlogService) -> None:
    """Тест генерации slug при его отсутствии."""
    post = await blog_service.create_post(
        post_payload(title="Hello World", slug=None)
    )

    assert post.slug == "hello-world"
    assert post.published is True


@pytest.mark.asyncio()
async def test_create_without_latin_title(blog_service: BlogService) -> None:
    """Тест заголовка, из которого slug не получается."""
    with pytest.raises(PostValidationError):
        await blog_service.create_post(
            post_payload(title="Привет мир", slug=None)
        )
    assert await blog_service.list_posts() == []


@pytest.mark.asyncio()
async def test_slug_unique_per_language(blog_service: BlogService) -> None:
    """Тест уникальности slug в рамках языка."""
    await blog_service.create_post(post_payload(slug="news"))

    with pytest.raises(SlugConflictError):
        await blog_service.create_post(post_payload(slug="news"))

    ru_post = await blog_service.create_post(
        post_payload(slug="news", language=Language.RU)
    )
    assert ru_post.slug == "news"
    assert len(await blog_service.list_posts()) == 2


@pytest.mark.asyncio()
async def test_is_slug_available(blog_service: BlogService) -> None:
    """Тест проверки занятости slug."""
    post = await blog_service.create_post(post_payload(slug="taken"))

    assert not await blog_service.is_slug_available("taken", "en")
    assert await blog_service.is_slug_available("taken", "ru")
    assert await blog_service.is_slug_available("free", "en")
    assert await blog_service.is_slug_available("taken", "en", post.id)


@pytest.mark.asyncio()
async def test_list_posts(blog_service: BlogService) -> None:
    """Тест списка постов с фильтрами, новые первыми."""
    first = await blog_service.create_post(post_payload())
    second = await blog_service.create_post(post_payload(language=Language.RU))
    third = await blog_service.create_post(post_payload(published=False))

    posts = await blog_service.list_posts()
    assert [post.id for post in posts] == [third.id, second.id, first.id]

    posts = await blog_service.list_posts(language="en")
    assert [post.id for post in posts] == [third.id, first.id]

    posts = await blog_service.list_posts(published=True)
    assert [post.id for post in posts] == [second.id, first.id]

    posts = await blog_service.list_posts(language="en", published=False)
    assert [post.id for post in posts] == [third.id]

    assert await blog_service.list_posts(language="ru", published=False) == []


@pytest.mark.asyncio()
async def test_get_by_slug_published_only(blog_service: BlogService) -> None:
    """Тест недоступности неопубликованного поста по slug."""
    await blog_service.create_post(post_payload(slug="draft", published=False))
    published = await blog_service.create_post(post_payload(slug="public"))

    assert await blog_service.get_by_slug("draft") is None
    found = await blog_service.get_by_slug("public")
    assert found.id == published.id


@pytest.mark.asyncio()
async def test_get_by_slug_language(blog_service: BlogService) -> None:
    """Тест выбора поста по slug и языку."""
    en_post = await blog_service.create_post(post_payload(slug="same"))
    ru_post = await blog_service.create_post(
        post_payload(slug="same", language=Language.RU)
    )

    assert (await blog_service.get_by_slug("same", "en")).id == en_post.id
    assert (await blog_service.get_by_slug("same", "ru")).id == ru_post.id
    assert (await blog_service.get_by_slug("same")).id == ru_post.id


@pytest.mark.asyncio()
async def test_update_partial(blog_service: BlogService) -> None:
    """Тест изменения только переданных полей."""
    post = await blog_service.create_post(post_payload())
    before = await blog_service.get_by_id(post.id)

    await blog_service.update_post(
        post.id, {"title": "New title", "published": False}
    )

    after = await blog_service.get_by_id(post.id)
    assert after.title == "New title"
    assert after.published is False
    for field in ("slug", "content", "short_description", "source"):
        assert getattr(after, field) == getattr(before, field)
    assert after.language == before.language
    assert after.created_at == before.created_at
    assert after.updated_at > before.updated_at


@pytest.mark.asyncio()
async def test_update_not_found(blog_service: BlogService) -> None:
    """Тест изменения несуществующего поста."""
    with pytest.raises(PostNotFoundError):
        await blog_service.update_post(uuid.uuid4(), {"title": "x"})


@pytest.mark.asyncio()
async def test_update_empty(blog_service: BlogService) -> None:
    """Тест изменения без данных."""
    post = await blog_service.create_post(post_payload())

    with pytest.raises(PostValidationError):
        await blog_service.update_post(post.id, {})


@pytest.mark.asyncio()
async def test_update_slug_conflict(blog_service: BlogService) -> None:
    """Тест конфликта slug при изменении."""
    await blog_service.create_post(post_payload(slug="first"))
    post = await blog_service.create_post(post_payload(slug="second"))

    with pytest.raises(SlugConflictError):
        await blog_service.update_post(post.id, {"slug": "first"})

    same = await blog_service.update_post(post.id, {"slug": "second"})
    assert same.slug == "second"
    assert (await blog_service.get_by_id(post.id)).slug == "second"


@pytest.mark.asyncio()
async def test_update_language_conflict(blog_service: BlogService) -> None:
    """Тест конфликта при смене языка поста."""
    await blog_service.create_post(post_payload(slug="story"))
    ru_post = await blog_service.create_post(
        post_payload(slug="story", language=Language.RU)
    )

    with pytest.raises(SlugConflictError):
        await blog_service.update_post(
            ru_post.id, {"language": "en"}
        )
    assert (await blog_service.get_by_id(ru_post.id)).language == "ru"


@pytest.mark.asyncio()
async def test_delete(blog_service: BlogService) -> None:
    """Тест удаления поста."""
    post = await blog_service.create_post(post_payload())

    await blog_service.delete_post(post.id)

    assert await blog_service.get_by_id(post.id) is None
    with pytest.raises(PostNotFoundError):
        await blog_service.delete_post(post.id)


@pytest.mark.asyncio()
async def test_store_failure(tmp_path) -> None:
    """Тест ошибки хранилища, превращенной в ошибку сервиса."""
    database = Database(
        f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'blog.db'}"
    )
    blog_service = BlogService(database)

    with pytest.raises(BlogServiceError) as exc_info:
        await blog_service.list_posts()
    assert type(exc_info.value) is BlogServiceError

    with pytest.raises(BlogServiceError):
        await blog_service.create_post(post_payload())
    await database.disconnect()
