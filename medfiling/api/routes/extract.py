from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from medfiling.api.deps import get_field_extractor
from medfiling.api.schemas import ExtractRequest, ExtractResponse
from medfiling.extraction.base import BaseFieldExtractor

router = APIRouter()


@router.post("/extract", response_model=ExtractResponse, response_model_exclude_none=True)
def extract_fields(
    payload: ExtractRequest,
    extractor: BaseFieldExtractor = Depends(get_field_extractor),  # noqa: B008
) -> ExtractResponse | JSONResponse:
    """Fill the filing record from document text."""
    if not payload.text:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"error": "No text provided"}
        )
    result = extractor.extract(payload.text)
    return ExtractResponse(
        fields=result.fields.to_dict(),
        confidence=result.confidence,
        missing_fields=result.missing_fields,
        message=result.message,
    )
