"""Module for db handlers, helpers and other classes and functions."""
import uuid

import sqlalchemy as sa
from sqlalchemy import func

from blogsite.core.utils import utcnow

ID_COLUMN = lambda: sa.Column(  # noqa E731
    "id", sa.Uuid, primary_key=True, default=uuid.uuid4
)

CREATED_AT_COLUMN = lambda: sa.Column(  # noqa E731
    "created_at",
    sa.TIMESTAMP,
    nullable=False,
    default=utcnow,
    server_default=func.now(),
)

UPDATED_AT_COLUMN = lambda: sa.Column(  # noqa E731
    "updated_at",
    sa.TIMESTAMP,
    nullable=False,
    server_default=func.now(),
    default=utcnow,
    onupdate=utcnow,
)
