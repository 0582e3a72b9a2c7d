from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from medfiling.extraction.exceptions import ExtractionError
from medfiling.logging.logger import Log
from medfiling.pdf.exceptions import EmptyDocumentError, PdfExtractionError, PdfValidationError


async def rejected_upload_handler(request: Request, exc: Exception) -> JSONResponse:
    Log.warning(f"Upload rejected on {request.url.path}: {exc}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(exc)})


async def pdf_extraction_handler(request: Request, exc: Exception) -> JSONResponse:
    Log.error(f"PDF parsing error on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Failed to parse PDF file. Please ensure the file is a valid PDF."},
    )


async def extraction_handler(request: Request, exc: Exception) -> JSONResponse:
    Log.error(f"Field extraction error on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Failed to extract fields", "message": str(exc)},
    )


async def unhandled_handler(request: Request, exc: Exception) -> JSONResponse:
    Log.exception(f"Unhandled error on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PdfValidationError, rejected_upload_handler)
    app.add_exception_handler(EmptyDocumentError, rejected_upload_handler)
    app.add_exception_handler(PdfExtractionError, pdf_extraction_handler)
    app.add_exception_handler(ExtractionError, extraction_handler)
    app.add_exception_handler(Exception, unhandled_handler)
