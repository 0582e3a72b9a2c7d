import httpx

from medfiling.extraction.models import ExtractedFields
from medfiling.logging.logger import Log
from medfiling.submission.base import BaseSubmissionSink, SubmissionReceipt
from medfiling.submission.exceptions import SubmissionError


class LoggingSubmissionSink(BaseSubmissionSink):
    """Server-side sink: records the confirmed form in the log and accepts it."""

    def submit(self, file_name: str, fields: ExtractedFields) -> SubmissionReceipt:
        Log.info(f"Received final form data for {file_name or 'unnamed document'}: {fields.to_dict()}")
        return SubmissionReceipt(success=True, file_name=file_name)


class HttpSubmissionSink(BaseSubmissionSink):
    """Client-side sink posting the confirmed record to the submit endpoint."""

    def __init__(self, http: httpx.Client, timeout_seconds: float = 15.0) -> None:
        self._http = http
        self._timeout = timeout_seconds

    def submit(self, file_name: str, fields: ExtractedFields) -> SubmissionReceipt:
        payload = {"file_name": file_name, **fields.to_dict()}
        try:
            response = self._http.post("/api/submit", json=payload, timeout=self._timeout)
        except httpx.HTTPError as exc:
            raise SubmissionError(f"Submit failed for {file_name}: {exc}") from exc
        if response.is_error:
            raise SubmissionError(
                f"Submit failed for {file_name}: HTTP {response.status_code}"
            )
        try:
            success = bool(response.json().get("success", False))
        except ValueError as exc:
            raise SubmissionError(f"Submit failed for {file_name}: invalid response") from exc
        Log.info(f"Submitted {file_name}: success={success}")
        return SubmissionReceipt(success=success, file_name=file_name)
