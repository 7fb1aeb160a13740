"""Single-draft bookkeeping.

A draft is a quote with nothing typed into it yet. Starting a new entry or
switching to another quote leaves the previous draft behind, so before
either happens the stray draft is found and deleted. At most one draft can
exist when reconcile() runs; finding two means an earlier call went wrong.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from inspira.errors import InvariantViolation, StorageError
from inspira.models.schemas import TEXT_FIELDS, QuoteRecord
from inspira.utils.logger import get_logger

logger = get_logger(__name__)


def is_blank(value: Optional[str]) -> bool:
    """True for None, "" and whitespace-only strings."""
    return value is None or not value.strip()


def is_empty(quote: QuoteRecord, image_counts_as_content: bool = False) -> bool:
    """True if none of the text fields hold anything.

    An attached image only keeps the quote alive when image_counts_as_content
    is set.
    """
    if image_counts_as_content and quote.image_data:
        return False
    return all(is_blank(getattr(quote, name)) for name in TEXT_FIELDS)


def find_empty_drafts(
    quotes: Sequence[QuoteRecord],
    keep_index: Optional[int] = None,
    image_counts_as_content: bool = False,
) -> List[int]:
    """Positions of empty quotes, skipping keep_index."""
    return [
        i
        for i, quote in enumerate(quotes)
        if i != keep_index and is_empty(quote, image_counts_as_content)
    ]


def reconcile(
    store,
    quotes: Sequence[QuoteRecord],
    keep_index: Optional[int] = None,
    *,
    image_counts_as_content: bool = False,
) -> Tuple[List[QuoteRecord], Optional[int]]:
    """Delete the stray empty draft, if any.

    Args:
        store: Record store exposing delete(quote_id).
        quotes: Current list, newest first. Not mutated.
        keep_index: Position that must survive even if empty (the quote
            about to be displayed).
        image_counts_as_content: Passed through to is_empty().

    Returns:
        (updated list, keep_index shifted to keep pointing at the same quote)

    Raises:
        InvariantViolation: more than one draft was found. Nothing is deleted.
    """
    positions = find_empty_drafts(quotes, keep_index, image_counts_as_content)
    updated = list(quotes)
    if not positions:
        return updated, keep_index
    if len(positions) > 1:
        raise InvariantViolation(positions)

    position = positions[0]
    draft = updated.pop(position)
    try:
        store.delete(draft.id)
        logger.info("Removed empty draft %s at position %d", draft.id, position)
    except StorageError as exc:
        # Dropped from the list regardless; the row resurfaces on the next refresh.
        logger.error("Could not delete empty draft %s: %s", draft.id, exc)

    if keep_index is not None and position < keep_index:
        keep_index -= 1
    return updated, keep_index
