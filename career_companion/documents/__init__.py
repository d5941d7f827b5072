"""
Document handling for the Career Companion job tracker.

This module reads uploaded resumes and other documents into plain text.
"""

from .file_reader import (
    PLAIN_TEXT_SUFFIXES,
    SUPPORTED_UPLOAD_TYPES,
    UploadedFile,
    is_plain_text,
    read_document_text
)

__all__ = [
    'PLAIN_TEXT_SUFFIXES',
    'SUPPORTED_UPLOAD_TYPES',
    'UploadedFile',
    'is_plain_text',
    'read_document_text'
]
