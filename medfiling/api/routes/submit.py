from typing import Any

from fastapi import APIRouter, Body, Depends

from medfiling.api.deps import get_submission_sink
from medfiling.api.schemas import SubmitResponse
from medfiling.extraction.models import ExtractedFields
from medfiling.submission.base import BaseSubmissionSink

router = APIRouter()

PAYLOAD_BODY = Body(...)


@router.post("/submit", response_model=SubmitResponse)
def submit_record(
    payload: dict[str, Any] = PAYLOAD_BODY,
    sink: BaseSubmissionSink = Depends(get_submission_sink),  # noqa: B008
) -> SubmitResponse:
    """Accept a confirmed filing record."""
    file_name = str(payload.get("file_name") or "")
    receipt = sink.submit(file_name, ExtractedFields.from_mapping(payload))
    return SubmitResponse(success=receipt.success)
