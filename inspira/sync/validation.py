"""Field validation for the detail view, independent of any widget."""

from __future__ import annotations

from typing import Mapping, Optional

from inspira.models.schemas import QuoteField

from .drafts import is_blank

MISSING_QUOTE_MESSAGE = "Please enter a quote"


def is_saveable(values: Mapping[str, Optional[str]]) -> bool:
    """A quote is worth keeping once its text has been entered."""
    return not is_blank(values.get(QuoteField.TEXT.value))


def missing_quote_message(values: Mapping[str, Optional[str]]) -> Optional[str]:
    """Hint shown under the quote input while the text is still blank."""
    if is_saveable(values):
        return None
    return MISSING_QUOTE_MESSAGE
