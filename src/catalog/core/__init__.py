from catalog.core.config import settings
from catalog.core.database import Base, async_session_maker, create_tables, engine, get_db
from catalog.core.exceptions import AppError, NotFoundError, UnexpectedError, ValidationError

__all__ = [
    "settings",
    "Base",
    "engine",
    "async_session_maker",
    "get_db",
    "create_tables",
    "AppError",
    "NotFoundError",
    "ValidationError",
    "UnexpectedError",
]
