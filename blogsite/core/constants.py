"""Constants used in core of app."""
import re
from enum import Enum


class AppEnvironment(Enum):
    """Class represents app environments."""

    LOCAL = "local"
    TEST = "test"
    PRODUCTION = "prod"
    DEVELOPMENT = "dev"
    STAGING = "staging"


class Language(str, Enum):
    """Языки сайта и постов блога."""

    EN = "en"
    RU = "ru"


LOCALES = tuple(language.value for language in Language)
LOCALE_COOKIE_NAME = "NEXT_LOCALE"

# Paths served without locale prefix
LOCALE_BYPASS_PREFIXES = (
    "/api/",
    "/_next/static/",
    "/_next/image/",
    "/images/",
    "/locales/",
    "/blog",
    "/.well-known/",
    "/favicon.ico",
    "/apple-touch-icon.png",
    "/icon.png",
    "/icon-192.png",
    "/icon-512.png",
    "/docs",
    "/redoc",
    "/openapi.json",
)
R_FILE_SEGMENT_PATTERN = re.compile(r"^[^/]+\.[^/]+$")

SLUG_SEPARATOR = "-"
R_SLUG_GAP_PATTERN = re.compile(r"[^a-z0-9]+")
SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"

# Markdown rendering
MARKDOWN_EXTRAS = (
    "fenced-code-blocks",
    "tables",
    "strike",
    "cuddled-lists",
)
ALLOWED_TAGS = frozenset(
    {
        "a",
        "abbr",
        "b",
        "blockquote",
        "br",
        "code",
        "del",
        "em",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "hr",
        "i",
        "img",
        "li",
        "ol",
        "p",
        "pre",
        "s",
        "strong",
        "table",
        "tbody",
        "td",
        "th",
        "thead",
        "tr",
        "ul",
    }
)
ALLOWED_ATTRS = {
    "a": ["href", "title", "rel", "target"],
    "abbr": ["title"],
    "img": ["src", "alt", "title"],
}
ALLOWED_PROTOCOLS = frozenset({"http", "https", "mailto"})
