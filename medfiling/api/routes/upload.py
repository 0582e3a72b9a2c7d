from fastapi import APIRouter, Depends, File, UploadFile, status
from fastapi.responses import JSONResponse

from medfiling.api.deps import get_text_extractor
from medfiling.api.schemas import UploadResponse
from medfiling.pdf.text_extractor import DocumentTextExtractor

router = APIRouter()

FILE_FIELD = File(None)


@router.post("/upload", response_model=UploadResponse)
def upload_document(
    file: UploadFile | None = FILE_FIELD,
    extractor: DocumentTextExtractor = Depends(get_text_extractor),  # noqa: B008
) -> UploadResponse | JSONResponse:
    """Extract the text of one uploaded PDF."""
    if file is None:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"error": "No file provided"}
        )
    data = file.file.read()
    content = extractor.extract(file.filename or "", file.content_type, data)
    return UploadResponse(text=content.text, pages=content.pages, info=content.info)
