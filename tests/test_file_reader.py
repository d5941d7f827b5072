"""Tests for resume upload text extraction."""

from career_companion.ai_processing.career_assistant import CareerAssistant
from career_companion.documents.file_reader import UploadedFile, is_plain_text, read_document_text

from conftest import FakeProvider, failed_response, text_response


class TestReadDocumentText:
    async def test_plain_text_is_decoded_locally(self, assistant: CareerAssistant, provider: FakeProvider) -> None:
        upload = UploadedFile("resume.md", "# Jane Roe\nEngineer".encode("utf-8"))

        result = await read_document_text(upload, assistant)

        assert result.data == "# Jane Roe\nEngineer"
        assert provider.requests == []

    async def test_pdf_goes_to_the_assistant(self, assistant: CareerAssistant, provider: FakeProvider) -> None:
        provider.queue(text_response("Jane Roe\nEngineer"))
        upload = UploadedFile("Resume.PDF", b"%PDF-1.7")

        result = await read_document_text(upload, assistant)

        assert result.data == "Jane Roe\nEngineer"
        file_part = provider.last_request.contents[0]
        assert file_part.mime_type == "application/pdf"
        assert file_part.data == b"%PDF-1.7"

    async def test_extraction_failure(self, assistant: CareerAssistant, provider: FakeProvider) -> None:
        provider.queue(failed_response())
        upload = UploadedFile("resume.docx", b"PK\x03\x04")

        result = await read_document_text(upload, assistant)

        assert not result.success
        assert result.error == "Failed to extract text from file."


def test_plain_text_detection() -> None:
    assert is_plain_text(UploadedFile("notes.txt", b""))
    assert is_plain_text(UploadedFile("upload", b"", mime_type="text/plain"))
    assert not is_plain_text(UploadedFile("resume.pdf", b"", mime_type="application/pdf"))


def test_declared_mime_type_wins() -> None:
    upload = UploadedFile("resume.bin", b"", mime_type="application/pdf")
    assert upload.resolved_mime_type() == "application/pdf"
    assert UploadedFile("cv.docx", b"").resolved_mime_type().endswith("wordprocessingml.document")
