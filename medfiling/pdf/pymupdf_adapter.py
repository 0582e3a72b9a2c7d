from pathlib import Path

import pymupdf

from medfiling.pdf.base import BasePdfExtractor, PdfContent
from medfiling.pdf.exceptions import PdfExtractionError


class PyMuPdfAdapter(BasePdfExtractor):
    """Extracts text from PDF using PyMuPDF."""

    def extract(self, path: Path) -> PdfContent:
        try:
            with pymupdf.open(path, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text() for page in doc]
                info = {key: value for key, value in (doc.metadata or {}).items() if value}
            return PdfContent(text="\n".join(pages).strip(), pages=len(pages), info=info)
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf extraction failed: {exc}") from exc
