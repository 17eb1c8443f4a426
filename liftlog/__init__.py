"""Workout templates, sessions and logged sets on SQLAlchemy."""
import logging
from typing import Optional

from liftlog.errors import InvalidInput, InvalidState, NotFound, PersistenceFailure, WorkoutStoreError
from liftlog.settings import get_settings
from liftlog.store import WorkoutStore

__all__ = [
    "WorkoutStore",
    "WorkoutStoreError",
    "InvalidInput",
    "NotFound",
    "InvalidState",
    "PersistenceFailure",
    "configure_logging",
]


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Set the ``liftlog`` logger level (default: ``Settings.LOG_LEVEL``)."""
    logger = logging.getLogger("liftlog")
    logger.setLevel(level or get_settings().LOG_LEVEL)
    return logger
