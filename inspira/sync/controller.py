"""List/detail synchronization for the quote collection.

QuoteSyncController owns the in-memory quote list shown in the master view
and the quote shown in the detail view. It talks to an injected record store,
keeps the single-draft rule via reconcile(), picks the next quote after a
deletion and reports every change through plain callbacks so any front end
(or a test) can bind to it.

Storage failures stop here: they are logged, forwarded to on_error and never
raised to the caller.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Union

from inspira.config import EMPTY_LIST_NEW_DRAFT, Settings, get_settings
from inspira.errors import InvariantViolation, StorageError
from inspira.models.schemas import QuoteField, QuoteFields, QuoteRecord
from inspira.utils.logger import get_logger

from .drafts import reconcile
from .selection import next_after_removal
from .validation import missing_quote_message

logger = get_logger(__name__)

DisplayedCallback = Callable[[Optional[QuoteRecord]], None]
ListCallback = Callable[[List[QuoteRecord]], None]
ErrorCallback = Callable[[str], None]


class QuoteSyncController:
    def __init__(
        self,
        store,
        *,
        settings: Optional[Settings] = None,
        on_displayed_record_changed: Optional[DisplayedCallback] = None,
        on_list_changed: Optional[ListCallback] = None,
        on_error: Optional[ErrorCallback] = None,
    ):
        self.store = store
        self.settings = settings or get_settings()
        self.on_displayed_record_changed = on_displayed_record_changed
        self.on_list_changed = on_list_changed
        self.on_error = on_error

        self._quotes: List[QuoteRecord] = []
        self._displayed_id: Optional[str] = None

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------

    @property
    def quotes(self) -> List[QuoteRecord]:
        return list(self._quotes)

    @property
    def displayed_index(self) -> Optional[int]:
        return self._index_of(self._displayed_id)

    @property
    def displayed(self) -> Optional[QuoteRecord]:
        index = self.displayed_index
        return self._quotes[index] if index is not None else None

    def validation_message(self) -> Optional[str]:
        """Hint for the detail view, or None when nothing is missing."""
        record = self.displayed
        if record is None:
            return None
        return missing_quote_message(record.field_values())

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def refresh(self) -> List[QuoteRecord]:
        """Reload the list from the store.

        On failure the previous list is kept as is.
        """
        try:
            quotes = self.store.list_all()
        except StorageError as exc:
            self._report("Could not load quotes", exc)
            return self.quotes

        previous = self.displayed
        self._quotes = list(quotes)
        if self.displayed_index is None:
            self._displayed_id = None
        self._emit_list()
        self._notify_if_changed(previous)
        return self.quotes

    def start_new_entry(self) -> Optional[QuoteRecord]:
        """Create an empty quote at the top of the list and display it."""
        previous = self.displayed
        self._reconcile(None)
        try:
            record = self.store.create()
        except StorageError as exc:
            self._report("Could not create a new quote", exc)
            self._emit_list()
            self._notify_if_changed(previous)
            return None

        self._quotes.insert(0, record)
        self._displayed_id = record.id
        self._emit_list()
        self._notify_if_changed(previous)
        return record

    def select_existing(self, position: int) -> QuoteRecord:
        """Display the quote at position, dropping any stray draft first."""
        self._check_position(position)
        previous = self.displayed
        position = self._reconcile(position)
        record = self._quotes[position]
        self._displayed_id = record.id
        self._emit_list()
        self._notify_if_changed(previous)
        return record

    def delete_current(self) -> Optional[QuoteRecord]:
        """Delete the displayed quote and display its neighbour.

        When the list runs empty the configured policy decides between a
        fresh draft and an empty detail view. Returns the newly displayed
        quote.
        """
        index = self.displayed_index
        if index is None:
            return None

        previous = self._quotes.pop(index)
        self._displayed_id = None
        self._delete_from_store(previous)

        next_index = next_after_removal(index, len(self._quotes))
        if next_index is not None and 0 <= next_index < len(self._quotes):
            return self.select_existing(next_index)

        if self.settings.empty_list_policy == EMPTY_LIST_NEW_DRAFT:
            return self.start_new_entry()

        self._emit_list()
        self._notify_if_changed(previous)
        return None

    def delete_at(self, position: int) -> Optional[QuoteRecord]:
        """Delete a row from the master list.

        Deleting the displayed row behaves like delete_current(); any other
        row leaves the detail view alone.
        """
        self._check_position(position)
        if position == self.displayed_index:
            return self.delete_current()

        record = self._quotes.pop(position)
        self._delete_from_store(record)
        self._emit_list()
        return self.displayed

    def on_field_changed(
        self, field: Union[QuoteField, str], value: Optional[str]
    ) -> Optional[QuoteRecord]:
        """Write one edited input field back to the displayed quote."""
        field = QuoteField(field)
        return self._update_displayed({field.value: value})

    def attach_image(self, image_data: bytes) -> Optional[QuoteRecord]:
        return self._update_displayed({"image_data": image_data})

    def remove_image(self) -> Optional[QuoteRecord]:
        return self._update_displayed({"image_data": None})

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _index_of(self, quote_id: Optional[str]) -> Optional[int]:
        if quote_id is None:
            return None
        for i, quote in enumerate(self._quotes):
            if quote.id == quote_id:
                return i
        return None

    def _check_position(self, position: int) -> None:
        if not 0 <= position < len(self._quotes):
            raise IndexError(
                f"Quote position {position} out of range (0..{len(self._quotes) - 1})"
            )

    def _reconcile(self, keep_index: Optional[int]) -> Optional[int]:
        try:
            quotes, keep_index = reconcile(
                self.store,
                self._quotes,
                keep_index,
                image_counts_as_content=self.settings.image_counts_as_content,
            )
        except InvariantViolation as exc:
            if self.settings.strict_invariants:
                raise
            logger.error("Draft reconciliation skipped: %s", exc)
            return keep_index
        self._quotes = quotes
        if self.displayed_index is None:
            self._displayed_id = None
        return keep_index

    def _delete_from_store(self, record: QuoteRecord) -> None:
        try:
            self.store.delete(record.id)
        except StorageError as exc:
            self._report("Could not delete quote", exc)

    def _update_displayed(self, changes: Dict[str, Any]) -> Optional[QuoteRecord]:
        index = self.displayed_index
        if index is None:
            logger.warning("Ignoring edit with no quote displayed: %s", sorted(changes))
            return None

        record = self._quotes[index]
        fields = QuoteFields(**changes)
        try:
            updated = self.store.update(record.id, fields)
        except StorageError as exc:
            self._report("Could not save quote", exc)
            return record

        self._quotes[index] = updated
        self._emit_list()
        self._notify_if_changed(record)
        return updated

    def _report(self, message: str, exc: Exception) -> None:
        logger.error("%s: %s", message, exc)
        if self.on_error is not None:
            self.on_error(message)

    def _emit_list(self) -> None:
        if self.on_list_changed is not None:
            self.on_list_changed(self.quotes)

    def _notify_if_changed(self, previous: Optional[QuoteRecord]) -> None:
        current = self.displayed
        if current != previous and self.on_displayed_record_changed is not None:
            self.on_displayed_record_changed(current)
