import json
from collections.abc import Generator
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from medfiling.api import deps
from medfiling.api.app import create_app
from medfiling.extraction.client_base import BaseExtractionClient
from medfiling.extraction.extractor import FieldExtractor
from medfiling.pdf.pdfplumber_adapter import PdfPlumberAdapter
from medfiling.pdf.text_extractor import DocumentTextExtractor
from medfiling.submission.base import BaseSubmissionSink
from medfiling.submission.sinks import LoggingSubmissionSink

AI_FIELDS = {
    "patient_name": "Jane Citizen",
    "date_of_report": "2025-01-10",
    "subject": "SCROTAL ULTRASOUND",
    "contact_of_source": "iMED Radiology",
    "store_in": "Investigations",
    "doctor": "Dr. John Smith",
    "category": "Medical imaging report",
}


@pytest.fixture()
def ai_client() -> MagicMock:
    """AI provider stub answering with a fenced JSON record."""
    client = MagicMock(spec=BaseExtractionClient)
    client.create_chat_completion.return_value = f"```json\n{json.dumps(AI_FIELDS)}\n```"
    return client


@pytest.fixture()
def submission_sink() -> MagicMock:
    sink = MagicMock(spec=BaseSubmissionSink, wraps=LoggingSubmissionSink())
    return sink


@pytest.fixture()
def field_extractor(ai_client: MagicMock) -> FieldExtractor:
    return FieldExtractor(client=ai_client, model="test-model")


@pytest.fixture()
def app(field_extractor: FieldExtractor, submission_sink: MagicMock) -> Generator[FastAPI, None, None]:
    app = create_app()
    app.dependency_overrides[deps.get_text_extractor] = lambda: DocumentTextExtractor(
        PdfPlumberAdapter()
    )
    app.dependency_overrides[deps.get_field_extractor] = lambda: field_extractor
    app.dependency_overrides[deps.get_submission_sink] = lambda: submission_sink
    yield app
    app.dependency_overrides.clear()


@pytest.fixture()
def api_client(app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(app) as client:
        yield client


@pytest.fixture()
def ai_fields() -> dict[str, str]:
    return dict(AI_FIELDS)
