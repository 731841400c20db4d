"""Persistence layer error translation."""

from collections.abc import Iterator
from contextlib import contextmanager

import logfire
from sqlalchemy.exc import SQLAlchemyError

from inkwell.domain.error import StorageError


@contextmanager
def storage_errors(operation: str) -> Iterator[None]:
    """Re-raise SQLAlchemy failures as StorageError.

    Args:
        operation: Repository operation name, recorded in the log
    """
    try:
        yield
    except SQLAlchemyError as e:
        logfire.error(
            "Storage operation failed",
            operation=operation,
            error_type=type(e).__name__,
            error=str(e),
        )
        raise StorageError(f"{operation} failed") from e
