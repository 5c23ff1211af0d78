"""Модель таблицы постов блога."""
import sqlalchemy as sa
from sqlalchemy.orm import declarative_base

from blogsite.core.constants import LOCALES
from blogsite.core.db import CREATED_AT_COLUMN, ID_COLUMN, UPDATED_AT_COLUMN

Base = declarative_base()
metadata = Base.metadata

LANGUAGE_CHECK = "language IN ({})".format(
    ", ".join(f"'{locale}'" for locale in LOCALES)
)


class BlogPost(Base):
    """Модель поста блога."""

    __tablename__ = "blog_posts"
    __table_args__ = (
        sa.UniqueConstraint(
            "slug", "language", name="uq_blog_posts_slug_language"
        ),
        sa.CheckConstraint(LANGUAGE_CHECK, name="ck_blog_posts_language"),
        sa.Index("ix_blog_posts_created_at", "created_at"),
    )

    id = ID_COLUMN()  # noqa A003
    created_at = CREATED_AT_COLUMN()
    updated_at = UPDATED_AT_COLUMN()
    title = sa.Column("title", sa.Text, nullable=False)
    slug = sa.Column("slug", sa.Text, nullable=False)
    content = sa.Column("content", sa.Text, nullable=False)
    short_description = sa.Column(
        "short_description", sa.Text, nullable=False
    )
    source = sa.Column("source", sa.Text, nullable=False)
    language = sa.Column("language", sa.String(2), nullable=False)
    published = sa.Column(
        "published",
        sa.Boolean,
        default=True,
        server_default=sa.true(),
        nullable=False,
    )

    def __repr__(self) -> str:
        """Представление поста в логах."""
        return f"<BlogPost {self.id} {self.language}/{self.slug}>"
