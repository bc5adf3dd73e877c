"""Plain-text extraction from uploaded documents and bullet-line cleanup."""

import io
import logging
import re

import pdfplumber
from docx import Document

from services.errors import DocumentDecodeError, UnsupportedDocumentFormatError

logger = logging.getLogger(__name__)

PDF_MIME = "application/pdf"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
DOC_MIME = "application/msword"
TEXT_MIME = "text/plain"

SUPPORTED_MIMES = frozenset({PDF_MIME, DOCX_MIME, DOC_MIME, TEXT_MIME})

_EXTENSION_MIMES = {
    ".pdf": PDF_MIME,
    ".docx": DOCX_MIME,
    ".doc": DOC_MIME,
    ".txt": TEXT_MIME,
}

# Bullet markers: standard + expanded unicode set
BULLET_MARKERS = frozenset("•-–—►▪✓*○◆⚫→▸▹◇■□●")

# "1." "12)" "3]" numbering prefixes
_NUMBERED_RE = re.compile(r"^\d{1,2}[.)\]]\s+")


def extract_text(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file."""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages).strip()


def extract_text_docx(docx_bytes: bytes) -> str:
    """Extract all text from a DOCX file."""
    doc = Document(io.BytesIO(docx_bytes))
    return "\n".join(p.text for p in doc.paragraphs).strip()


def resolve_mime(content_type: str | None, filename: str | None) -> str:
    """Pick the document type from the declared MIME type or the file extension."""
    if content_type in SUPPORTED_MIMES:
        return content_type
    if filename:
        suffix = filename[filename.rfind("."):].lower() if "." in filename else ""
        if suffix in _EXTENSION_MIMES:
            return _EXTENSION_MIMES[suffix]
    raise UnsupportedDocumentFormatError(content_type)


def decode_document(
    content: bytes, content_type: str | None, filename: str | None = None
) -> str:
    """Turn an uploaded PDF, Word or text document into plain text."""
    mime = resolve_mime(content_type, filename)
    try:
        if mime == PDF_MIME:
            return extract_text(content)
        if mime in (DOCX_MIME, DOC_MIME):
            return extract_text_docx(content)
        return content.decode("utf-8").strip()
    except UnicodeDecodeError as e:
        logger.warning("Text upload is not valid UTF-8: %s", e)
        raise DocumentDecodeError("Text file is not valid UTF-8") from e
    except Exception as e:
        logger.warning("Failed to decode %s document: %s", mime, e)
        if mime == PDF_MIME:
            raise DocumentDecodeError(
                "Failed to parse PDF file. Make sure it's not password-protected or corrupted."
            ) from e
        if mime == DOC_MIME:
            # python-docx only reads the OOXML container; binary Word 97-2003
            # files fail here even when intact
            raise DocumentDecodeError(
                "Failed to parse Word file. Legacy .doc (Word 97-2003) documents "
                "are not supported; save it as DOCX and try again."
            ) from e
        raise DocumentDecodeError(
            "Failed to parse Word file. Make sure it's a valid DOCX document."
        ) from e


def strip_bullet(line: str) -> str:
    """Remove a leading bullet marker or list number from a line."""
    stripped = line.strip()
    if stripped and stripped[0] in BULLET_MARKERS:
        return stripped.lstrip("".join(BULLET_MARKERS) + " ").strip()
    return _NUMBERED_RE.sub("", stripped).strip()
