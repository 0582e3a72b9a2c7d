"""Upload-facing PDF text extraction: checks, temp-file staging, adapter call."""

import os
import tempfile
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path

from medfiling.logging.logger import Log
from medfiling.pdf.base import BasePdfExtractor, PdfContent
from medfiling.pdf.exceptions import EmptyDocumentError, PdfValidationError

PDF_CONTENT_TYPES = frozenset({"application/pdf", "application/octet-stream"})
PDF_EXTENSIONS = (".pdf",)
DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024


def is_pdf_upload(file_name: str, content_type: str | None) -> bool:
    """A PDF upload declares a PDF content type or carries a .pdf name."""
    if content_type in PDF_CONTENT_TYPES:
        return True
    return file_name.lower().endswith(PDF_EXTENSIONS)


def size_limit_label(max_bytes: int) -> str:
    return f"{max_bytes // (1024 * 1024)}MB"


@contextmanager
def staged_pdf(data: bytes, temp_dir: str | None = None) -> Generator[Path, None, None]:
    """Write bytes to a temporary .pdf file and remove it on exit."""
    fd, name = tempfile.mkstemp(prefix="upload-", suffix=".pdf", dir=temp_dir)
    path = Path(name)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
        yield path
    finally:
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            Log.error(f"Error cleaning up temp file {path}: {exc}")


class DocumentTextExtractor:
    """Validates an uploaded file and extracts its text through a PDF adapter."""

    def __init__(
        self,
        pdf_extractor: BasePdfExtractor,
        max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES,
        temp_dir: str | None = None,
    ) -> None:
        self._pdf_extractor = pdf_extractor
        self._max_upload_bytes = max_upload_bytes
        self._temp_dir = temp_dir

    def extract(self, file_name: str, content_type: str | None, data: bytes) -> PdfContent:
        """Extract text from an uploaded PDF.

        Raises:
            PdfValidationError: wrong type or over the size limit.
            EmptyDocumentError: the PDF holds no text.
            PdfExtractionError: the adapter could not parse the file.
        """
        Log.info(
            f"Upload received: name={file_name} type={content_type} size={len(data)}"
        )
        self._validate(file_name, content_type, len(data))

        with staged_pdf(data, self._temp_dir) as path:
            content = self._pdf_extractor.extract(path)

        if not content.text.strip():
            raise EmptyDocumentError("No text content found in PDF")

        Log.info(f"Extracted {len(content.text)} chars from {content.pages} page(s) of {file_name}")
        return PdfContent(text=content.text.strip(), pages=content.pages, info=content.info)

    def _validate(self, file_name: str, content_type: str | None, size: int) -> None:
        if not is_pdf_upload(file_name, content_type):
            raise PdfValidationError(
                f"Only PDF files are supported. Received: {content_type or 'unknown type'}"
            )
        if size > self._max_upload_bytes:
            raise PdfValidationError(
                f"File size exceeds {size_limit_label(self._max_upload_bytes)} limit"
            )

