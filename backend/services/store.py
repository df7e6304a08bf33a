"""In-memory document store for a single chat session."""

import logging
from collections.abc import Callable, Iterator

from services.types import Document

logger = logging.getLogger(__name__)


class DocumentStore:
    """Ordered collection of extracted documents.

    Insertion order is display order. on_change, when set, is called after
    every mutation that changes the contents.
    """

    def __init__(self, on_change: Callable[[], None] | None = None) -> None:
        self._documents: list[Document] = []
        self.on_change = on_change

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(tuple(self._documents))

    def __contains__(self, doc_id: object) -> bool:
        return any(d.id == doc_id for d in self._documents)

    def snapshot(self) -> tuple[Document, ...]:
        """Return an immutable copy of the current documents."""
        return tuple(self._documents)

    def get(self, doc_id: str) -> Document | None:
        for document in self._documents:
            if document.id == doc_id:
                return document
        return None

    def add(self, document: Document) -> None:
        if document.id in self:
            raise ValueError(f"Document id already in store: {document.id}")
        self._documents.append(document)
        logger.debug("Stored document %s (%s)", document.id, document.name)
        self._notify()

    def remove(self, doc_id: str) -> bool:
        """Remove a document by id. Unknown ids are ignored.

        Returns:
            True if a document was removed.
        """
        remaining = [d for d in self._documents if d.id != doc_id]
        if len(remaining) == len(self._documents):
            return False
        self._documents = remaining
        self._notify()
        return True

    def clear(self) -> None:
        if not self._documents:
            return
        self._documents = []
        self._notify()

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change()
