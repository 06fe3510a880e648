import io
from pathlib import PurePath

import pdfplumber
from docx import Document

PDF_MEDIA_TYPE = "application/pdf"
DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
DOC_MEDIA_TYPE = "application/msword"

EXTENSION_MEDIA_TYPES = {
    ".pdf": PDF_MEDIA_TYPE,
    ".docx": DOCX_MEDIA_TYPE,
    ".doc": DOC_MEDIA_TYPE,
}


class UnsupportedFormat(ValueError):
    """Raised for a media type other than PDF, DOC or DOCX."""

    def __init__(self, media_type: str) -> None:
        super().__init__(f"Unsupported file type: {media_type or 'unknown'}")
        self.media_type = media_type


def resolve_media_type(filename: str | None, declared: str | None = None) -> str:
    """Media type from the file extension, else the declared content type."""
    if filename:
        media_type = EXTENSION_MEDIA_TYPES.get(PurePath(filename).suffix.lower())
        if media_type:
            return media_type
    return (declared or "").split(";")[0].strip().lower()


def extract_text(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file."""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages).strip()


def extract_text_docx(docx_bytes: bytes) -> str:
    """Extract all text from a DOCX file."""
    doc = Document(io.BytesIO(docx_bytes))
    return "\n".join(p.text for p in doc.paragraphs).strip()


def decode_document(data: bytes, media_type: str) -> str:
    """Plain text of a PDF or Word document.

    Legacy .doc uploads go through the DOCX reader, which fails on true
    binary .doc files; the caller treats that like any other decode error.
    """
    if media_type == PDF_MEDIA_TYPE:
        return extract_text(data)
    if media_type in (DOCX_MEDIA_TYPE, DOC_MEDIA_TYPE):
        return extract_text_docx(data)
    raise UnsupportedFormat(media_type)
