"""Translate persistence-layer exceptions into StorageFailure."""

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import SQLAlchemyError

from studywell.errors import StorageFailure

logger = logging.getLogger(__name__)


@contextmanager
def storage_guard(action: str) -> Iterator[None]:
    """Wrap a repository call; SQLAlchemy errors become StorageFailure."""
    try:
        yield
    except SQLAlchemyError as e:
        logger.error(f"Storage failure while trying to {action}: {type(e).__name__}: {str(e)}")
        raise StorageFailure(f"Failed to {action}") from e
