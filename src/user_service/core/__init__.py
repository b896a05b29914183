"""
Core module - Configuration, database, logging, and errors.
"""

from user_service.core.config import Settings, get_settings, settings
from user_service.core.database import (
    Base,
    build_engine,
    build_session_maker,
    close_db,
    get_session_maker,
    init_db,
)
from user_service.core.errors import (
    ErrorKind,
    PersistenceError,
    RepositoryError,
    UserNotFoundError,
)
from user_service.core.logging import configure_logging

__all__ = [
    # Config
    "Settings",
    "settings",
    "get_settings",
    # Database
    "Base",
    "build_engine",
    "build_session_maker",
    "init_db",
    "close_db",
    "get_session_maker",
    # Errors
    "ErrorKind",
    "RepositoryError",
    "PersistenceError",
    "UserNotFoundError",
    # Logging
    "configure_logging",
]
