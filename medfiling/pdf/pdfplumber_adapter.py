from pathlib import Path

import pdfplumber

from medfiling.pdf.base import BasePdfExtractor, PdfContent
from medfiling.pdf.exceptions import PdfExtractionError


class PdfPlumberAdapter(BasePdfExtractor):
    """Extracts text from PDF using pdfplumber."""

    def extract(self, path: Path) -> PdfContent:
        try:
            with pdfplumber.open(path) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
                info = {
                    str(key): str(value)
                    for key, value in (pdf.metadata or {}).items()
                    if value is not None
                }
            return PdfContent(text="\n".join(pages).strip(), pages=len(pages), info=info)
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber extraction failed: {exc}") from exc
