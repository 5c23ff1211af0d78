"""Модуль с фабриками."""
import factory

from blogsite.core.constants import Language
from blogsite.core.utils import generate_slug
from blogsite.rest.models.blog import PostCreate


class PostCreateFactory(factory.Factory):
    """Фабрика данных поста."""

    class Meta:
        """Метакласс с настройками."""

        model = PostCreate

    title = factory.Sequence(lambda n: f"Title {n + 1}")
    slug = factory.LazyAttribute(lambda obj: generate_slug(obj.title))
    content = factory.Sequence(
        lambda n: f"# Heading {n + 1}\n\nMarkup **text** {n + 1}"
    )
    short_description = factory.Sequence(lambda n: f"Summary {n + 1}")
    source = "Example News"
    language = Language.EN
    published = True


def post_payload(**kwargs: object) -> dict:
    """Собрать json для запроса создания поста."""
    post = PostCreateFactory.build(**kwargs)
    return post.model_dump(mode="json", exclude_none=True)
