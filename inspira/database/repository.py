"""Thin repository helpers for quotes.

The module-level functions operate on a caller-owned SQLAlchemy session.
QuoteStore wraps them in one short-lived session per call and hands out
QuoteRecord snapshots, so callers never hold a live ORM object.
"""
from contextlib import contextmanager
from datetime import datetime, timedelta
from typing import Any, Callable, Dict, Iterator, List, Optional, Union

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from inspira.errors import StorageError
from inspira.models.schemas import QuoteFields, QuoteRecord
from inspira.utils.logger import get_logger

from .models import Quote

logger = get_logger(__name__)

FieldsArg = Union[QuoteFields, Dict[str, Any], None]


def _as_fields(fields: FieldsArg) -> QuoteFields:
    if fields is None:
        return QuoteFields()
    if isinstance(fields, QuoteFields):
        return fields
    return QuoteFields.model_validate(fields)


def _next_creation_time(session: Session) -> datetime:
    """Return now, nudged past the newest existing quote if the clock ties."""
    now = datetime.utcnow()
    latest = session.query(func.max(Quote.date_created)).scalar()
    if latest is not None and latest >= now:
        now = latest + timedelta(microseconds=1)
    return now


def load_all_quotes(session: Session) -> List[Quote]:
    """Return every quote, newest first."""
    return session.query(Quote).order_by(Quote.date_created.desc()).all()


def get_quote(session: Session, quote_id: str) -> Optional[Quote]:
    return session.get(Quote, quote_id)


def add_quote(session: Session, fields: FieldsArg = None) -> Quote:
    """Insert a new quote stamped with the current time.

    With no fields this creates an empty draft.
    """
    quote = Quote(date_created=_next_creation_time(session), **_as_fields(fields).changes())
    session.add(quote)
    session.commit()
    session.refresh(quote)
    return quote


def update_quote(session: Session, quote_id: str, fields: FieldsArg) -> Optional[Quote]:
    """Apply a partial update. Returns None if the quote does not exist."""
    quote = session.get(Quote, quote_id)
    if quote is None:
        return None
    for name, value in _as_fields(fields).changes().items():
        setattr(quote, name, value)
    session.commit()
    session.refresh(quote)
    return quote


def delete_quote(session: Session, quote_id: str) -> bool:
    """Permanently delete a quote. Returns True if a row was removed."""
    quote = session.get(Quote, quote_id)
    if quote is None:
        return False
    session.delete(quote)
    session.commit()
    return True


class QuoteStore:
    """Record store for quotes.

    Every call runs in its own session. SQLAlchemy failures surface as
    StorageError with the original exception chained; the store never
    retries.
    """

    def __init__(self, session_factory: Optional[Callable[[], Session]] = None):
        if session_factory is None:
            from .engine import SessionLocal

            session_factory = SessionLocal
        self._session_factory = session_factory

    @contextmanager
    def _session(self, action: str) -> Iterator[Session]:
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as exc:
            session.rollback()
            logger.error("Could not %s: %s", action, exc)
            raise StorageError(f"Could not {action}") from exc
        finally:
            session.close()

    def list_all(self) -> List[QuoteRecord]:
        with self._session("load all quotes") as session:
            return [QuoteRecord.model_validate(q) for q in load_all_quotes(session)]

    def get(self, quote_id: str) -> Optional[QuoteRecord]:
        with self._session(f"load quote {quote_id}") as session:
            quote = get_quote(session, quote_id)
            return QuoteRecord.model_validate(quote) if quote is not None else None

    def create(self, fields: FieldsArg = None) -> QuoteRecord:
        with self._session("create quote") as session:
            record = QuoteRecord.model_validate(add_quote(session, fields))
        logger.debug("Created quote %s", record.id)
        return record

    def update(self, quote_id: str, fields: FieldsArg) -> QuoteRecord:
        with self._session(f"update quote {quote_id}") as session:
            quote = update_quote(session, quote_id, fields)
            if quote is None:
                raise StorageError(f"No quote with id {quote_id}")
            return QuoteRecord.model_validate(quote)

    def delete(self, quote_id: str) -> bool:
        with self._session(f"delete quote {quote_id}") as session:
            deleted = delete_quote(session, quote_id)
        if deleted:
            logger.debug("Deleted quote %s", quote_id)
        return deleted
