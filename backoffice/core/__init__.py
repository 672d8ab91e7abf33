"""Core application components."""

from backoffice.core.config import settings
from backoffice.core.exceptions import BackofficeError, NotFoundError
from backoffice.core.storage import Base, SchoolStorage, async_session

__all__ = [
    "BackofficeError",
    "Base",
    "NotFoundError",
    "SchoolStorage",
    "async_session",
    "settings",
]
