"""Translation of SQLAlchemy failures into domain errors."""

from collections.abc import Iterator
from contextlib import contextmanager

import logfire
from sqlalchemy.exc import SQLAlchemyError

from scribe.domain.error import DatabaseError


@contextmanager
def database_errors(operation: str) -> Iterator[None]:
    """Re-raise any SQLAlchemy error from the block as DatabaseError.

    Args:
        operation: Name of the repository operation, for the log and message
    """
    try:
        yield
    except SQLAlchemyError as e:
        logfire.error(
            "Database operation failed", operation=operation, error=str(e)
        )
        raise DatabaseError(
            f"Database operation failed: {operation}", cause=type(e).__name__
        ) from e
