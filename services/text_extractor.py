import io
import logging
import re
from enum import Enum
from pathlib import PurePath

import PyPDF2
from docx import Document

from services.exceptions import ExtractionError, UnsupportedFormatError

logger = logging.getLogger(__name__)


class DocumentKind(str, Enum):
    PLAIN_TEXT = "txt"
    DOCX = "docx"
    PDF = "pdf"
    UNSUPPORTED = "unsupported"

    @classmethod
    def from_filename(cls, filename: str) -> "DocumentKind":
        suffix = PurePath(filename or "").suffix.lower().lstrip(".")
        for kind in (cls.PLAIN_TEXT, cls.DOCX, cls.PDF):
            if kind.value == suffix:
                return kind
        return cls.UNSUPPORTED


def extract_plain_text(data: bytes) -> str:
    return data.decode("utf-8-sig", errors="replace")


def extract_docx_text(data: bytes) -> str:
    """
    Extract raw text from a DOCX container, formatting discarded
    """
    document = Document(io.BytesIO(data))
    lines = [paragraph.text for paragraph in document.paragraphs]
    for table in document.tables:
        for row in table.rows:
            for cell in row.cells:
                lines.extend(paragraph.text for paragraph in cell.paragraphs)
    return "\n".join(lines)


def extract_pdf_text(data: bytes) -> str:
    """
    Extract text page by page; each page is whitespace-normalized and
    pages are joined with a single newline
    """
    pdf_reader = PyPDF2.PdfReader(io.BytesIO(data))
    pages = []
    for page in pdf_reader.pages:
        page_text = page.extract_text() or ""
        pages.append(re.sub(r"\s+", " ", page_text).strip())
    return "\n".join(pages)


_EXTRACTORS = {
    DocumentKind.PLAIN_TEXT: extract_plain_text,
    DocumentKind.DOCX: extract_docx_text,
    DocumentKind.PDF: extract_pdf_text,
}


def extract_text(filename: str, data: bytes) -> str:
    """
    Pick the extractor from the file extension and return plain text.

    Raises UnsupportedFormatError before touching the bytes when the
    extension is unknown, and ExtractionError when decoding fails.
    """
    kind = DocumentKind.from_filename(filename)
    if kind is DocumentKind.UNSUPPORTED:
        raise UnsupportedFormatError(filename)

    try:
        text = _EXTRACTORS[kind](data)
    except Exception as e:
        logger.error(f"Error extracting text from {filename}: {str(e)}")
        raise ExtractionError(filename, str(e) or type(e).__name__) from e

    logger.info(f"Extracted {len(text)} characters from {kind.value} file {filename}")
    return text
