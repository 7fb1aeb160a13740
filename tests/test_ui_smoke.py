"""
UI Smoke Tests.
Drives the headless app shell the way a front end would and checks the state
it renders from. No display server is needed.
"""

import pytest
import sys
import os

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Ensure project root is on path
ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from inspira.config import Settings
from inspira.database.models import Base
from inspira.database.repository import QuoteStore


@pytest.fixture()
def store():
    engine = create_engine("sqlite:///:memory:", future=True)
    Base.metadata.create_all(engine)
    return QuoteStore(sessionmaker(bind=engine, autoflush=False, autocommit=False))


@pytest.fixture()
def app(store):
    from gui.app import InspiraApp

    return InspiraApp.create(store=store, settings=Settings(strict_invariants=True))


# ===========================================================================
# State Tests
# ===========================================================================


class TestState:
    """Tests for gui/state.py."""

    def test_state_defaults(self):
        from gui.state import AppState

        state = AppState()
        assert state.rows == []
        assert state.displayed_quote_id is None
        assert state.detail_fields == {}
        assert state.last_error is None

    def test_states_do_not_share_rows(self):
        from gui.state import AppState, QuoteRow

        a, b = AppState(), AppState()
        a.rows.append(QuoteRow(quote_id="q", title="t"))
        assert b.rows == []


# ===========================================================================
# App Tests
# ===========================================================================


class TestInspiraApp:
    """Tests for gui/app.py."""

    def test_run_on_empty_store_opens_new_draft(self, app, store):
        from gui.app import NEW_QUOTE_TITLE
        from inspira.sync.validation import MISSING_QUOTE_MESSAGE

        app.run()

        assert len(app.state.rows) == 1
        assert app.state.rows[0].title == NEW_QUOTE_TITLE
        assert app.state.displayed_quote_id == app.state.rows[0].quote_id
        assert app.state.validation_message == MISSING_QUOTE_MESSAGE
        assert len(store.list_all()) == 1

    def test_run_selects_newest_quote(self, app, store):
        store.create({"text": "older"})
        newest = store.create({"text": "newest", "creator": "Me"})

        app.run()

        assert app.state.displayed_quote_id == newest.id
        assert app.state.detail_fields["text"] == "newest"
        assert app.state.detail_fields["interpretation"] == ""
        assert [r.title for r in app.state.rows] == ["newest", "older"]
        assert app.state.rows[0].creator == "Me"

    def test_edit_updates_rows_and_detail(self, app):
        app.run()
        app.edit("text", "  Simplicity is the ultimate sophistication  ")
        app.edit("creator", "Leonardo")

        assert app.state.rows[0].title == "Simplicity is the ultimate sophistication"
        assert app.state.detail_fields["creator"] == "Leonardo"
        assert app.state.validation_message is None

    def test_edit_rejects_unknown_field(self, app):
        app.run()
        with pytest.raises(ValueError):
            app.edit("title", "nope")

    def test_new_quote_then_select_discards_blank_draft(self, app, store):
        store.create({"text": "keeper"})
        app.run()

        app.new_quote()
        assert len(app.state.rows) == 2

        app.select(1)
        assert [r.title for r in app.state.rows] == ["keeper"]
        assert len(store.list_all()) == 1

    def test_delete_displayed_moves_to_next(self, app, store):
        store.create({"text": "second"})
        store.create({"text": "first"})
        app.run()

        app.delete_displayed()

        assert [r.title for r in app.state.rows] == ["second"]
        assert app.state.detail_fields["text"] == "second"

    def test_delete_row_keeps_detail(self, app, store):
        store.create({"text": "second"})
        first = store.create({"text": "first"})
        app.run()

        app.delete_row(1)

        assert app.state.displayed_quote_id == first.id
        assert [r.title for r in app.state.rows] == ["first"]

    def test_storage_errors_reach_state(self, app, store):
        from unittest.mock import patch
        from inspira.errors import StorageError

        app.run()
        with patch.object(store, "update", side_effect=StorageError("io")):
            app.edit("text", "unsaved")

        assert app.state.last_error == "Could not save quote"

    def test_row_title_for_draft(self):
        from datetime import datetime
        from gui.app import NEW_QUOTE_TITLE, row_title
        from inspira.models.schemas import QuoteRecord

        draft = QuoteRecord(id="d", text="   ", date_created=datetime(2019, 3, 15))
        assert row_title(draft) == NEW_QUOTE_TITLE
