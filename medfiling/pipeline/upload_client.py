from collections.abc import Callable

import httpx

from medfiling.extraction.models import ExtractedFields
from medfiling.extraction.vocabulary import normalize_fields
from medfiling.logging.logger import Log
from medfiling.pdf.text_extractor import DEFAULT_MAX_UPLOAD_BYTES, is_pdf_upload, size_limit_label
from medfiling.pipeline.exceptions import ExtractError, UploadError, ValidationError
from medfiling.pipeline.models import ProcessedDocument, SelectedFile, Stage


def _error_detail(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return f"HTTP {response.status_code}"
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return "Unknown error"


class UploadClient:
    """Runs the two remote stages (upload, extract) for one file."""

    def __init__(
        self,
        http: httpx.Client,
        *,
        max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES,
        upload_timeout_seconds: float = 60.0,
        extract_timeout_seconds: float = 60.0,
    ) -> None:
        self._http = http
        self._max_upload_bytes = max_upload_bytes
        self._upload_timeout = upload_timeout_seconds
        self._extract_timeout = extract_timeout_seconds

    def process(
        self,
        file: SelectedFile,
        on_stage: Callable[[Stage], None] | None = None,
    ) -> ProcessedDocument:
        """Upload one file, extract its fields and pair them with the file.

        Raises:
            ValidationError: file is not a PDF or is too large; nothing is sent.
            UploadError: the text extraction stage failed.
            ExtractError: the field extraction stage failed.
        """
        self._validate(file)
        text = self._upload(file)
        if on_stage is not None:
            on_stage(Stage.EXTRACTING)
        payload = self._extract(file, text)

        fields = normalize_fields(ExtractedFields.from_mapping(payload["fields"]))
        missing = payload.get("missingFields") or []
        return ProcessedDocument(
            file=file,
            fields=fields,
            confidence=str(payload.get("confidence") or "high"),
            missing_fields=[str(name) for name in missing],
        )

    def _validate(self, file: SelectedFile) -> None:
        if not is_pdf_upload(file.name, file.content_type):
            raise ValidationError(
                f"{file.name}: only PDF files are supported. "
                f"Received: {file.content_type or 'unknown type'}",
                file_name=file.name,
                stage="upload",
            )
        if file.size > self._max_upload_bytes:
            raise ValidationError(
                f"{file.name}: file size exceeds {size_limit_label(self._max_upload_bytes)} limit",
                file_name=file.name,
                stage="upload",
            )

    def _upload(self, file: SelectedFile) -> str:
        Log.info(f"Uploading {file.name} ({file.size} bytes)")
        try:
            response = self._http.post(
                "/api/upload",
                files={"file": (file.name, file.data, file.content_type or "application/pdf")},
                timeout=self._upload_timeout,
            )
        except httpx.TimeoutException as exc:
            raise UploadError(
                f"Upload failed for {file.name}: timed out after {self._upload_timeout}s",
                file_name=file.name,
            ) from exc
        except httpx.HTTPError as exc:
            raise UploadError(f"Upload failed for {file.name}: {exc}", file_name=file.name) from exc

        if response.is_error:
            raise UploadError(
                f"Upload failed for {file.name}: {_error_detail(response)}",
                file_name=file.name,
            )
        try:
            text = response.json().get("text")
        except (ValueError, AttributeError) as exc:
            raise UploadError(
                f"Upload failed for {file.name}: invalid response", file_name=file.name
            ) from exc
        if not isinstance(text, str) or not text.strip():
            raise UploadError(f"No text extracted from {file.name}", file_name=file.name)
        return text

    def _extract(self, file: SelectedFile, text: str) -> dict[str, object]:
        Log.info(f"Extracting fields for {file.name}")
        try:
            response = self._http.post(
                "/api/extract",
                json={"text": text},
                timeout=self._extract_timeout,
            )
        except httpx.TimeoutException as exc:
            raise ExtractError(
                f"Extraction failed for {file.name}: timed out after {self._extract_timeout}s",
                file_name=file.name,
            ) from exc
        except httpx.HTTPError as exc:
            raise ExtractError(
                f"Extraction failed for {file.name}: {exc}", file_name=file.name
            ) from exc

        if response.is_error:
            raise ExtractError(
                f"Extraction failed for {file.name}: {_error_detail(response)}",
                file_name=file.name,
            )
        try:
            payload = response.json()
        except ValueError as exc:
            raise ExtractError(
                f"Extraction failed for {file.name}: invalid response", file_name=file.name
            ) from exc
        if not isinstance(payload, dict) or not isinstance(payload.get("fields"), dict):
            raise ExtractError(
                f"Extraction failed for {file.name}: response has no fields",
                file_name=file.name,
            )
        return payload
