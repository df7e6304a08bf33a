"""Document text extraction for PDF, Word, and text files.

Handles:
- Format detection (extension first, declared MIME type second)
- Text extraction from PDF (PyMuPDF), DOCX (python-docx), and TXT files
- Rejection of files with no usable text (e.g. scanned PDFs)

Extractors only read bytes; adding the resulting Document to a store is the
caller's job. Blocking parsing runs in asyncio.to_thread.
"""

import asyncio
import importlib
import io
import logging
from pathlib import Path
from types import ModuleType

from docx import Document as DocxDocument

from services.types import Document, DocumentType, FileHandle

logger = logging.getLogger(__name__)

MIN_CONTENT_CHARS = 10

EXTENSION_TYPES: dict[str, DocumentType] = {
    ".pdf": DocumentType.PDF,
    ".docx": DocumentType.WORD,
    ".doc": DocumentType.WORD,
    ".txt": DocumentType.TEXT,
}


class ExtractionError(Exception):
    """Base class for failures while turning a file into text."""


class UnsupportedFormatError(ExtractionError):
    """Raised when file type is not supported."""


class EmptyContentError(ExtractionError):
    """Raised when document contains no extractable text."""


class DocumentParseError(ExtractionError):
    """Raised when document parsing fails."""


class DependencyUnavailableError(ExtractionError):
    """Raised when the parsing engine for a format cannot be loaded."""


def detect_document_type(filename: str, content_type: str | None = None) -> DocumentType:
    """Resolve the document type from the file extension, then the MIME type."""
    ext = Path(filename or "").suffix.lower()
    if ext in EXTENSION_TYPES:
        return EXTENSION_TYPES[ext]

    mime = (content_type or "").lower()
    if mime == "application/pdf":
        return DocumentType.PDF
    if "word" in mime:
        return DocumentType.WORD
    if mime.startswith("text/"):
        return DocumentType.TEXT

    raise UnsupportedFormatError("Unsupported format. Use PDF, Word, or Text.")


def _ensure_content(text: str, message: str, min_chars: int) -> None:
    if len(text.strip()) < min_chars:
        raise EmptyContentError(message)


def _load_pdf_engine() -> ModuleType:
    try:
        return importlib.import_module("fitz")
    except ImportError as e:
        raise DependencyUnavailableError(
            "PDF engine (PyMuPDF) is not available."
        ) from e


def extract_pdf(data: bytes, min_chars: int = MIN_CONTENT_CHARS) -> str:
    """Extract text from PDF bytes, one line per page."""
    fitz = _load_pdf_engine()

    doc = None
    try:
        doc = fitz.open(stream=data, filetype="pdf")
        full_text = ""
        for page in doc:
            words = page.get_text("words")
            page_text = " ".join(word[4] for word in words).strip()
            if page_text:
                full_text += f"{page_text}\n"
    except Exception as e:
        raise DocumentParseError(f"PDF read error: {e}") from e
    finally:
        if doc is not None:
            doc.close()

    _ensure_content(full_text, "No text found. Might be a scanned PDF.", min_chars)
    return full_text.strip()


def extract_word(data: bytes, min_chars: int = MIN_CONTENT_CHARS) -> str:
    """Extract raw text from a Word document."""
    try:
        doc = DocxDocument(io.BytesIO(data))
        text_parts = [p.text for p in doc.paragraphs if p.text.strip()]

        for table in doc.tables:
            for row in table.rows:
                row_text = " | ".join(cell.text.strip() for cell in row.cells)
                if row_text.strip(" |"):
                    text_parts.append(row_text)
    except Exception as e:
        raise DocumentParseError(f"Word error: {e}") from e

    text = "\n\n".join(text_parts)
    _ensure_content(text, "No text found in Word file", min_chars)
    return text


def extract_text(data: bytes, min_chars: int = MIN_CONTENT_CHARS) -> str:
    """Decode a plain text file; the text is returned as-is."""
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError:
        text = data.decode("latin-1")

    _ensure_content(text, "Text file is empty", min_chars)
    return text


EXTRACTORS = {
    DocumentType.PDF: extract_pdf,
    DocumentType.WORD: extract_word,
    DocumentType.TEXT: extract_text,
}


class DocumentParser:
    """Turns uploaded files into Documents."""

    def __init__(self, min_content_chars: int = MIN_CONTENT_CHARS) -> None:
        self.min_content_chars = min_content_chars

    async def parse(self, file: FileHandle) -> Document:
        """Extract text from an uploaded file.

        Raises:
            ExtractionError: One of its subclasses, describing why the file
                produced no document.
        """
        doc_type = detect_document_type(file.name, file.content_type)
        extractor = EXTRACTORS[doc_type]

        content = await asyncio.to_thread(
            extractor, file.content, self.min_content_chars
        )

        document = Document(
            name=file.name,
            content=content,
            size=file.size,
            type=doc_type,
        )
        logger.info(
            "Extracted %s (%s, %d chars)",
            document.name,
            doc_type.value,
            document.char_count,
        )
        return document
