import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.orm import Session

from .exceptions import AppError, UnexpectedError

logger = logging.getLogger(__name__)


@contextmanager
def transaction(
    db: Session,
    error_message: str = "Unexpected database error",
    expose_details: bool = False
) -> Iterator[Session]:
    """
    Run the enclosed block as one unit of work.

    Commits when the block finishes. Any exception rolls the whole unit
    back; business errors propagate unchanged and everything else is
    converted to `UnexpectedError(error_message)`. With `expose_details`
    the driver message is returned to the client in `details`.

        with transaction(self.db, "Error recording sale"):
            ...
    """
    try:
        yield db
        db.commit()
    except AppError:
        db.rollback()
        raise
    except Exception as e:
        db.rollback()
        logger.exception(f"{error_message}: {e}")
        if expose_details:
            raise UnexpectedError(error_message, details=str(e)) from e
        raise UnexpectedError(error_message) from e
