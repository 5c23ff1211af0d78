"""Module with utils for the project."""
from datetime import datetime, timezone

import bleach
import markdown2

from blogsite.core.constants import (
    ALLOWED_ATTRS,
    ALLOWED_PROTOCOLS,
    ALLOWED_TAGS,
    MARKDOWN_EXTRAS,
    R_SLUG_GAP_PATTERN,
    SLUG_SEPARATOR,
)


def utcnow() -> datetime:
    """Get current UTC time without tzinfo, as stored in TIMESTAMP columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def generate_slug(title: str) -> str:
    """Make url-safe slug from a free-text title.

    Runs of characters other than lowercase latin letters and digits are
    collapsed into a single separator. Collisions are not resolved here.
    """
    slug = R_SLUG_GAP_PATTERN.sub(SLUG_SEPARATOR, (title or "").lower())
    return slug.strip(SLUG_SEPARATOR)


def render_markdown(text_md: str) -> str:
    """Render raw markdown to sanitized HTML for display."""
    html = markdown2.markdown(text_md or "", extras=list(MARKDOWN_EXTRAS))
    html = bleach.clean(
        html,
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRS,
        protocols=ALLOWED_PROTOCOLS,
        strip=True,
    )

    def set_target(attrs: dict, new: bool = False) -> dict:
        href = attrs.get((None, "href"), "")
        if href.startswith(("http://", "https://")):
            attrs[(None, "target")] = "_blank"
            attrs[(None, "rel")] = "noopener nofollow"
        return attrs

    return bleach.linkify(html, callbacks=[set_target])
