"""Translation of database failures into store errors."""

from collections.abc import Iterator
from contextlib import contextmanager

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from wordjotter.exceptions import StoreUnavailableError

logger = structlog.get_logger(__name__)


@contextmanager
def store_errors(db: Session, store: str, operation: str) -> Iterator[None]:
    """Roll back and surface database failures as StoreUnavailableError."""
    try:
        yield
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("store_failed", store=store, operation=operation, error=str(e))
        raise StoreUnavailableError(f"{store} store failed during {operation}") from e
