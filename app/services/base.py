# services/base.py
import logging
from contextlib import contextmanager
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.database import begin_write
from app.core.exceptions import ValidationError
from app.services.ownership import OwnershipResolver

logger = logging.getLogger(__name__)


def require_text(value: Any, message: str) -> str:
    """Return ``value`` trimmed, or raise ValidationError if nothing is left."""
    text = value.strip() if isinstance(value, str) else ""
    if not text:
        raise ValidationError(message)
    return text


class BaseService:
    """Holds the store handle and the ownership resolver bound to it."""

    def __init__(self, db: Session):
        self.db = db
        self.ownership = OwnershipResolver(db)

    def _begin_write(self) -> None:
        begin_write(self.db)

    @contextmanager
    def _transaction(self, action: str):
        """Commit what the block did, or roll all of it back."""
        try:
            yield
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception(f"Database error while {action}")
            raise
        except Exception:
            self.db.rollback()
            raise
