"""
Resume and document text extraction.

Plain-text uploads (.txt, .md) are decoded locally as UTF-8. Binary documents
such as PDF and Word files are sent to the AI assistant for text extraction.
"""

import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..ai_processing.career_assistant import CareerAssistant
from ..ai_processing.results import AIResult
from ..utils import get_logger

logger = get_logger(__name__)

PLAIN_TEXT_SUFFIXES = {".txt", ".md", ".text", ".markdown"}

SUPPORTED_UPLOAD_TYPES = ["txt", "md", "pdf", "doc", "docx"]

_DOCUMENT_MIME_TYPES = {
    ".pdf": "application/pdf",
    ".doc": "application/msword",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}


@dataclass
class UploadedFile:
    name: str
    data: bytes
    mime_type: Optional[str] = None

    @property
    def suffix(self) -> str:
        return Path(self.name).suffix.lower()

    def resolved_mime_type(self) -> str:
        if self.mime_type:
            return self.mime_type
        if self.suffix in _DOCUMENT_MIME_TYPES:
            return _DOCUMENT_MIME_TYPES[self.suffix]
        guessed, _ = mimetypes.guess_type(self.name)
        return guessed or "application/octet-stream"


def is_plain_text(upload: UploadedFile) -> bool:
    if upload.suffix in PLAIN_TEXT_SUFFIXES:
        return True
    return bool(upload.mime_type and upload.mime_type.startswith("text/"))


async def read_document_text(upload: UploadedFile, assistant: CareerAssistant) -> AIResult[str]:
    """Return the text of an uploaded document.

    Plain text never touches the network; everything else costs one
    ``extract_text_from_file`` call.
    """
    if is_plain_text(upload):
        logger.debug(f"Decoding {upload.name} locally")
        return AIResult.ok("read_document_text", upload.data.decode("utf-8", errors="replace"))

    mime_type = upload.resolved_mime_type()
    logger.info(f"Extracting text from {upload.name} ({mime_type})", size=len(upload.data))
    return await assistant.extract_text_from_file(upload.data, mime_type)
