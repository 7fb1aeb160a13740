from datetime import datetime, timedelta

import pytest

from inspira.errors import InvariantViolation, StorageError
from inspira.models.schemas import QuoteRecord
from inspira.sync.drafts import find_empty_drafts, is_blank, is_empty, reconcile

BASE_TIME = datetime(2019, 3, 19, 12, 0, 0)


def make_quote(qid, text=None, image_data=None, age=0, **kwargs):
    return QuoteRecord(
        id=qid,
        text=text,
        image_data=image_data,
        date_created=BASE_TIME - timedelta(minutes=age),
        **kwargs,
    )


class RecordingStore:
    def __init__(self, fail=False):
        self.deleted = []
        self.fail = fail

    def delete(self, quote_id):
        if self.fail:
            raise StorageError("disk full")
        self.deleted.append(quote_id)
        return True


@pytest.mark.parametrize("value", [None, "", "   ", "\n\t "])
def test_is_blank_true(value):
    assert is_blank(value)


@pytest.mark.parametrize("value", ["a", "  quote  "])
def test_is_blank_false(value):
    assert not is_blank(value)


def test_is_empty_ignores_whitespace_fields():
    quote = make_quote("q", text="  ", creator="", interpretation="\n")
    assert is_empty(quote)


def test_is_empty_any_text_field_counts():
    assert not is_empty(make_quote("q", description_of_how_found="On a wall"))
    assert not is_empty(make_quote("q", interpretation="Keep going"))


def test_image_only_quote_is_empty_by_default():
    quote = make_quote("q", image_data=b"png")
    assert is_empty(quote)


def test_image_only_quote_kept_when_image_counts():
    quote = make_quote("q", image_data=b"png")
    assert not is_empty(quote, image_counts_as_content=True)
    assert is_empty(make_quote("q"), image_counts_as_content=True)


def test_find_empty_drafts_skips_keep_index():
    quotes = [make_quote("a"), make_quote("b", text="x", age=1)]
    assert find_empty_drafts(quotes) == [0]
    assert find_empty_drafts(quotes, keep_index=0) == []


def test_reconcile_without_drafts_is_noop():
    store = RecordingStore()
    quotes = [make_quote("a", text="x"), make_quote("b", text="y", age=1)]

    updated, keep = reconcile(store, quotes, 1)

    assert updated == quotes
    assert keep == 1
    assert store.deleted == []


def test_reconcile_removes_draft_before_keep_index():
    store = RecordingStore()
    quotes = [
        make_quote("draft"),
        make_quote("a", text="x", age=1),
        make_quote("b", text="y", age=2),
    ]

    updated, keep = reconcile(store, quotes, 2)

    assert store.deleted == ["draft"]
    assert [q.id for q in updated] == ["a", "b"]
    assert keep == 1
    assert updated[keep].id == "b"
    # input list is left alone
    assert len(quotes) == 3


def test_reconcile_does_not_shift_for_draft_after_keep_index():
    store = RecordingStore()
    quotes = [make_quote("a", text="x"), make_quote("draft", age=1)]

    updated, keep = reconcile(store, quotes, 0)

    assert store.deleted == ["draft"]
    assert keep == 0
    assert updated[keep].id == "a"


def test_reconcile_keeps_empty_quote_at_keep_index():
    store = RecordingStore()
    quotes = [make_quote("draft"), make_quote("a", text="x", age=1)]

    updated, keep = reconcile(store, quotes, 0)

    assert store.deleted == []
    assert keep == 0
    assert updated == quotes


def test_reconcile_keep_index_never_negative():
    store = RecordingStore()
    quotes = [make_quote("draft"), make_quote("a", text="x", age=1)]

    _, keep = reconcile(store, quotes, 1)
    assert keep == 0


def test_reconcile_with_no_keep_index():
    store = RecordingStore()
    quotes = [make_quote("a", text="x"), make_quote("draft", age=1)]

    updated, keep = reconcile(store, quotes)

    assert keep is None
    assert [q.id for q in updated] == ["a"]


def test_reconcile_raises_for_two_drafts_without_deleting():
    store = RecordingStore()
    quotes = [make_quote("d1"), make_quote("a", text="x", age=1), make_quote("d2", age=2)]

    with pytest.raises(InvariantViolation) as info:
        reconcile(store, quotes, 1)

    assert info.value.positions == [0, 2]
    assert store.deleted == []


def test_reconcile_updates_list_even_if_delete_fails():
    store = RecordingStore(fail=True)
    quotes = [make_quote("draft"), make_quote("a", text="x", age=1)]

    updated, keep = reconcile(store, quotes, 1)

    assert [q.id for q in updated] == ["a"]
    assert keep == 0


def test_reconcile_respects_image_setting():
    store = RecordingStore()
    quotes = [make_quote("pic", image_data=b"png"), make_quote("a", text="x", age=1)]

    updated, _ = reconcile(store, quotes, 1, image_counts_as_content=True)
    assert store.deleted == []
    assert len(updated) == 2

    updated, _ = reconcile(store, quotes, 1)
    assert store.deleted == ["pic"]
    assert len(updated) == 1
