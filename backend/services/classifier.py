"""Keyword heuristic deciding whether a query is about the uploaded documents."""

from collections.abc import Iterable

# English terms plus Urdu equivalents ("what", "how", "tell me").
DOCUMENT_KEYWORDS: tuple[str, ...] = (
    "document",
    "file",
    "pdf",
    "doc",
    "paper",
    "report",
    "assignment",
    "what does",
    "what is",
    "explain",
    "summary",
    "summarize",
    "tell me about",
    "information",
    "details",
    "content",
    "written",
    "mentioned",
    "states",
    "according to",
    "in the",
    "from the",
    "based on",
    "کیا",
    "کیسے",
    "بتاؤ",
)


class RelevanceClassifier:
    """Case-insensitive substring match against a fixed keyword set."""

    def __init__(self, keywords: Iterable[str] = DOCUMENT_KEYWORDS) -> None:
        self.keywords = tuple(k.lower() for k in keywords)

    def classify(self, query: str, document_count: int) -> bool:
        """Return True if the query should be answered from the documents."""
        if document_count <= 0:
            return False
        lowered = query.lower()
        return any(keyword in lowered for keyword in self.keywords)
