"""Main GUI application object.

Wires a QuoteSyncController to an AppState. A front end renders the state
and forwards user actions (new, select, delete, edit) to this object.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from gui.state import AppState, QuoteRow
from gui.utils.logging import log
from inspira.config import Settings, get_settings
from inspira.database.engine import init_db
from inspira.database.repository import QuoteStore
from inspira.models.schemas import TEXT_FIELDS, QuoteField, QuoteRecord
from inspira.sync.controller import QuoteSyncController
from inspira.sync.drafts import is_blank
from inspira.utils.logger import setup_logging

NEW_QUOTE_TITLE = "New Quote"


def row_title(quote: QuoteRecord) -> str:
    """Caption of a list row: the quote text, or a placeholder for drafts."""
    if is_blank(quote.text):
        return NEW_QUOTE_TITLE
    return quote.text.strip()


@dataclass
class InspiraApp:
    """Master list plus detail view, minus the widgets."""

    controller: QuoteSyncController
    state: AppState = field(default_factory=AppState)

    def __post_init__(self) -> None:
        self.controller.on_list_changed = self._on_list_changed
        self.controller.on_displayed_record_changed = self._on_displayed_changed
        self.controller.on_error = self._on_error

    @classmethod
    def create(
        cls, store: Optional[QuoteStore] = None, settings: Optional[Settings] = None
    ) -> "InspiraApp":
        if store is None:
            init_db()
            store = QuoteStore()
        return cls(controller=QuoteSyncController(store, settings=settings or get_settings()))

    def run(self) -> None:
        """Load the list and show the newest quote, or a fresh draft when there is none."""
        quotes = self.controller.refresh()
        if quotes:
            self.controller.select_existing(0)
        else:
            self.controller.start_new_entry()

    def new_quote(self) -> Optional[QuoteRecord]:
        return self.controller.start_new_entry()

    def select(self, index: int) -> QuoteRecord:
        return self.controller.select_existing(index)

    def delete_displayed(self) -> Optional[QuoteRecord]:
        return self.controller.delete_current()

    def delete_row(self, index: int) -> Optional[QuoteRecord]:
        return self.controller.delete_at(index)

    def edit(self, field_name: str, value: Optional[str]) -> Optional[QuoteRecord]:
        return self.controller.on_field_changed(QuoteField(field_name), value)

    # Controller callbacks

    def _on_list_changed(self, quotes: List[QuoteRecord]) -> None:
        self.state.rows = [
            QuoteRow(
                quote_id=q.id,
                title=row_title(q),
                creator=q.creator or "",
                has_image=bool(q.image_data),
            )
            for q in quotes
        ]

    def _on_displayed_changed(self, quote: Optional[QuoteRecord]) -> None:
        if quote is None:
            self.state.displayed_quote_id = None
            self.state.detail_fields = {}
        else:
            self.state.displayed_quote_id = quote.id
            self.state.detail_fields = {
                name: getattr(quote, name) or "" for name in TEXT_FIELDS
            }
        self.state.validation_message = self.controller.validation_message()

    def _on_error(self, message: str) -> None:
        self.state.last_error = message
        log(message, logging.WARNING)


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    app = InspiraApp.create(settings=settings)
    app.run()
    log(f"Loaded {len(app.state.rows)} quote(s)")
