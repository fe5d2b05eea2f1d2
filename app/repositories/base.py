# app/repositories/base.py
import logging
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import StorageFailure

logger = logging.getLogger(__name__)


class BaseRepository:
    """
    Shared plumbing for the repositories: one Session per repository,
    one transaction per public method.
    """

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def transaction(self, on_integrity_error=None):
        """
        Run a unit of work and commit it. On any error the session is rolled
        back, so a failed operation never leaves a partial write behind.

        on_integrity_error: exception to raise instead of StorageFailure when
        the database rejects the write on a constraint.
        """
        try:
            yield
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if on_integrity_error is not None:
                raise on_integrity_error from e
            logger.error("Integrity error during write: %s", e)
            raise StorageFailure("Database constraint violated", e) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Database error: %s", e)
            raise StorageFailure("Database operation failed", e) from e
        except Exception:
            self.db.rollback()
            raise

    @contextmanager
    def reading(self):
        try:
            yield
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Database error during read: %s", e)
            raise StorageFailure("Database read failed", e) from e
