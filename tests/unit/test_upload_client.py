import json
from collections.abc import Callable

import httpx
import pytest

from medfiling.pipeline.exceptions import ExtractError, UploadError, ValidationError
from medfiling.pipeline.models import SelectedFile, Stage
from medfiling.pipeline.upload_client import UploadClient

Handler = Callable[[httpx.Request], httpx.Response]

FIELDS = {
    "patient_name": "Jane Citizen",
    "date_of_report": "2025-01-10",
    "subject": "SCROTAL ULTRASOUND",
    "contact_of_source": "iMED Radiology",
    "store_in": "Investigations",
    "doctor": "Dr. John Smith",
    "category": "Medical imaging report",
}


def _pdf(name: str = "a.pdf", size: int = 16) -> SelectedFile:
    return SelectedFile(name=name, content_type="application/pdf", size=size, data=b"%" * size)


class _FakeServer:
    """Answers /api/upload and /api/extract and records every request."""

    def __init__(
        self,
        upload: Handler | None = None,
        extract: Handler | None = None,
    ) -> None:
        self.requests: list[httpx.Request] = []
        self._upload = upload or (
            lambda request: httpx.Response(200, json={"success": True, "text": "Report text", "pages": 1})
        )
        self._extract = extract or (
            lambda request: httpx.Response(
                200, json={"fields": FIELDS, "confidence": "high", "missingFields": []}
            )
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path == "/api/upload":
            return self._upload(request)
        return self._extract(request)

    def client(self, **kwargs: float) -> UploadClient:
        http = httpx.Client(base_url="http://test", transport=httpx.MockTransport(self))
        return UploadClient(http, **kwargs)  # type: ignore[arg-type]


class TestValidation:
    def test_oversized_file_fails_without_network(self) -> None:
        server = _FakeServer()
        with pytest.raises(ValidationError, match="10MB") as exc_info:
            server.client().process(_pdf(size=10 * 1024 * 1024 + 1))
        assert server.requests == []
        assert exc_info.value.file_name == "a.pdf"

    def test_declared_size_is_checked_not_payload(self) -> None:
        server = _FakeServer()
        big = SelectedFile(name="a.pdf", content_type="application/pdf", size=20 * 1024 * 1024, data=b"%")
        with pytest.raises(ValidationError):
            server.client().process(big)
        assert server.requests == []

    def test_non_pdf_fails_without_network(self) -> None:
        server = _FakeServer()
        notes = SelectedFile(name="notes.txt", content_type="text/plain", size=5, data=b"hello")
        with pytest.raises(ValidationError, match="only PDF files"):
            server.client().process(notes)
        assert server.requests == []

    def test_pdf_suffix_is_enough(self) -> None:
        server = _FakeServer()
        scan = SelectedFile(name="scan.PDF", content_type="", size=4, data=b"%PDF")
        document = server.client().process(scan)
        assert document.name == "scan.PDF"


class TestProcess:
    def test_returns_document_with_fields(self) -> None:
        server = _FakeServer()
        file = _pdf()
        document = server.client().process(file)
        assert document.file is file
        assert document.fields.to_dict() == FIELDS
        assert document.confidence == "high"
        assert document.missing_fields == []

    def test_sends_file_then_text(self) -> None:
        server = _FakeServer()
        server.client().process(_pdf())
        upload, extract = server.requests
        assert upload.url.path == "/api/upload"
        assert b'filename="a.pdf"' in upload.content
        assert extract.url.path == "/api/extract"
        assert json.loads(extract.content) == {"text": "Report text"}

    def test_reports_extracting_stage(self) -> None:
        stages: list[Stage] = []
        _FakeServer().client().process(_pdf(), on_stage=stages.append)
        assert stages == [Stage.EXTRACTING]

    def test_normalizes_fields(self) -> None:
        fields = {**FIELDS, "category": "Discharge summary (ward 4)", "store_in": "Archive"}
        server = _FakeServer(
            extract=lambda request: httpx.Response(200, json={"fields": fields, "confidence": "high"})
        )
        document = server.client().process(_pdf())
        assert document.fields.category == "Discharge summary"
        assert document.fields.store_in == "Correspondence"

    def test_keeps_fallback_marker(self) -> None:
        server = _FakeServer(
            extract=lambda request: httpx.Response(
                200,
                json={
                    "fields": FIELDS,
                    "confidence": "low",
                    "missingFields": ["API key not configured"],
                },
            )
        )
        document = server.client().process(_pdf())
        assert document.confidence == "low"
        assert document.missing_fields == ["API key not configured"]


class TestUploadFailures:
    def test_server_error_names_file_and_cause(self) -> None:
        server = _FakeServer(
            upload=lambda request: httpx.Response(400, json={"error": "No text content found in PDF"})
        )
        with pytest.raises(UploadError) as exc_info:
            server.client().process(_pdf("blank.pdf"))
        assert str(exc_info.value) == "Upload failed for blank.pdf: No text content found in PDF"
        assert exc_info.value.stage == "upload"
        assert len(server.requests) == 1

    def test_non_json_error_body(self) -> None:
        server = _FakeServer(upload=lambda request: httpx.Response(502, text="Bad gateway"))
        with pytest.raises(UploadError, match="HTTP 502"):
            server.client().process(_pdf())

    def test_missing_text_never_reaches_extract(self) -> None:
        server = _FakeServer(upload=lambda request: httpx.Response(200, json={"text": "   "}))
        with pytest.raises(UploadError, match="No text extracted from a.pdf"):
            server.client().process(_pdf())
        assert len(server.requests) == 1

    def test_timeout_is_upload_error(self) -> None:
        def upload(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("slow", request=request)

        server = _FakeServer(upload=upload)
        with pytest.raises(UploadError, match="timed out after 5.0s"):
            server.client(upload_timeout_seconds=5.0).process(_pdf())

    def test_connection_error_is_upload_error(self) -> None:
        def upload(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(UploadError, match="refused"):
            _FakeServer(upload=upload).client().process(_pdf())


class TestExtractFailures:
    def test_server_error_is_extract_error(self) -> None:
        server = _FakeServer(
            extract=lambda request: httpx.Response(500, json={"error": "Failed to extract fields"})
        )
        with pytest.raises(ExtractError) as exc_info:
            server.client().process(_pdf("b.pdf"))
        assert str(exc_info.value) == "Extraction failed for b.pdf: Failed to extract fields"
        assert exc_info.value.file_name == "b.pdf"
        assert exc_info.value.stage == "extract"

    def test_response_without_fields(self) -> None:
        server = _FakeServer(extract=lambda request: httpx.Response(200, json={"confidence": "high"}))
        with pytest.raises(ExtractError, match="no fields"):
            server.client().process(_pdf())

    def test_timeout_is_extract_error(self) -> None:
        def extract(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("slow", request=request)

        with pytest.raises(ExtractError, match="timed out"):
            _FakeServer(extract=extract).client().process(_pdf())
