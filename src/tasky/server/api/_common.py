"""Shared helpers for route handlers."""

import logging
from contextlib import contextmanager

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from tasky.server.ordering import OrderingError

logger = logging.getLogger(__name__)


@contextmanager
def transaction(db: Session, failure: str):
    """Commit on success; roll back and answer with an HTTP error otherwise.

    ``failure`` is the message sent for unexpected database errors.
    """
    try:
        yield
        db.commit()
    except OrderingError as exc:
        db.rollback()
        raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc
    except HTTPException:
        db.rollback()
        raise
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception(failure)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=failure) from exc
