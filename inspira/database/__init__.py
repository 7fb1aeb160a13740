"""Database models and session management."""
from .engine import SessionLocal, init_db, get_engine, DB_URL
from .models import Quote, Base
from .repository import (
    QuoteStore,
    add_quote,
    delete_quote,
    get_quote,
    load_all_quotes,
    update_quote,
)

__all__ = [
    "SessionLocal",
    "init_db",
    "get_engine",
    "DB_URL",
    "Quote",
    "Base",
    "QuoteStore",
    "add_quote",
    "delete_quote",
    "get_quote",
    "load_all_quotes",
    "update_quote",
]
