from medfiling.config.settings import Settings
from medfiling.pdf.base import BasePdfExtractor
from medfiling.pdf.pdfplumber_adapter import PdfPlumberAdapter
from medfiling.pdf.pymupdf_adapter import PyMuPdfAdapter
from medfiling.pdf.text_extractor import DocumentTextExtractor


class PdfExtractorFactory:
    """Creates the correct PDF extractor based on settings."""

    ADAPTERS: dict[str, type[BasePdfExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()

    @classmethod
    def create_text_extractor(cls, settings: Settings) -> DocumentTextExtractor:
        """Wrap the configured adapter with upload checks and temp-file staging."""
        return DocumentTextExtractor(
            pdf_extractor=cls.create(settings),
            max_upload_bytes=settings.max_upload_bytes,
            temp_dir=settings.temp_dir,
        )
