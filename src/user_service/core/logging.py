"""
Logging Configuration

One-time setup of the standard library logging tree. Modules obtain their
loggers with ``logging.getLogger(__name__)``.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger and quiet the SQLAlchemy engine logger."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, force=True)
    # Statement echo is controlled by DATABASE_ECHO, not the root level
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
