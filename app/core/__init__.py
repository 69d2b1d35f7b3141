"""Core application components."""

from app.core.config import Settings, settings
from app.core.exceptions import (
    ApplicationError,
    AuthenticationError,
    DuplicateApplicationError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from app.core.storage import Base, Database

__all__ = [
    "ApplicationError",
    "AuthenticationError",
    "Base",
    "Database",
    "DuplicateApplicationError",
    "ForbiddenError",
    "NotFoundError",
    "Settings",
    "ValidationError",
    "settings",
]
