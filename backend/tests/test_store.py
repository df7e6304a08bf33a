"""Tests for the in-memory document store."""

import pytest

from services.store import DocumentStore


class TestDocumentStore:
    """Tests for DocumentStore."""

    def setup_method(self):
        """Set up test fixtures."""
        self.changes = 0
        self.store = DocumentStore(on_change=self._count)

    def _count(self):
        self.changes += 1

    def test_add_keeps_insertion_order(self, make_document):
        """Test documents are listed in the order added."""
        first = make_document("a.txt")
        second = make_document("b.txt")
        self.store.add(first)
        self.store.add(second)

        assert [d.name for d in self.store] == ["a.txt", "b.txt"]
        assert len(self.store) == 2
        assert self.changes == 2

    def test_duplicate_id_rejected(self, make_document):
        """Test the same document cannot be stored twice."""
        document = make_document()
        self.store.add(document)
        with pytest.raises(ValueError):
            self.store.add(document)
        assert len(self.store) == 1

    def test_remove(self, make_document):
        """Test removing a document by id."""
        keep = make_document("keep.txt")
        drop = make_document("drop.txt")
        self.store.add(keep)
        self.store.add(drop)

        assert self.store.remove(drop.id) is True
        assert self.store.snapshot() == (keep,)
        assert self.store.get(drop.id) is None

    def test_remove_unknown_id_is_noop(self, make_document):
        """Test removing a missing id leaves the store unchanged."""
        document = make_document()
        self.store.add(document)
        before = self.store.snapshot()
        changes = self.changes

        assert self.store.remove("does-not-exist") is False
        assert self.store.snapshot() == before
        assert self.changes == changes

    def test_clear(self, make_document):
        """Test clear empties the store."""
        self.store.add(make_document("a.txt"))
        self.store.add(make_document("b.txt"))
        self.store.clear()

        assert len(self.store) == 0
        assert self.store.snapshot() == ()
        assert self.changes == 3

    def test_clear_empty_store_is_silent(self):
        """Test clearing an empty store does not signal a change."""
        self.store.clear()
        assert self.changes == 0

    def test_snapshot_is_a_copy(self, make_document):
        """Test later mutations do not alter an earlier snapshot."""
        self.store.add(make_document("a.txt"))
        snapshot = self.store.snapshot()
        self.store.clear()
        assert len(snapshot) == 1

    def test_contains_and_get(self, make_document):
        """Test membership and lookup by id."""
        document = make_document()
        self.store.add(document)
        assert document.id in self.store
        assert self.store.get(document.id) is document


def test_size_label(make_document):
    """Test document sizes are shown in kilobytes."""
    document = make_document(content="x" * 1536)
    assert document.size_label == "1.50 KB"
