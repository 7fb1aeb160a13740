"""Draft bookkeeping, selection and list/detail synchronization."""
from .controller import QuoteSyncController
from .drafts import find_empty_drafts, is_blank, is_empty, reconcile
from .selection import next_after_removal
from .validation import MISSING_QUOTE_MESSAGE, is_saveable, missing_quote_message

__all__ = [
    "QuoteSyncController",
    "find_empty_drafts",
    "is_blank",
    "is_empty",
    "reconcile",
    "next_after_removal",
    "MISSING_QUOTE_MESSAGE",
    "is_saveable",
    "missing_quote_message",
]
