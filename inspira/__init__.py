"""
Inspira - Quote Collection

Capture quotes (text, creator, how you found them, what they mean to you)
in a local database and browse them newest first.
"""

__version__ = "1.0.0"

from .database.repository import QuoteStore
from .sync.controller import QuoteSyncController

__all__ = [
    "QuoteStore",
    "QuoteSyncController",
]
