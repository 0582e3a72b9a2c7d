from medfiling.extraction.base import BaseFieldExtractor
from medfiling.extraction.extractor import FieldExtractor
from medfiling.extraction.factory import FieldExtractorFactory
from medfiling.extraction.models import ExtractedFields, ExtractionResult

__all__ = [
    "BaseFieldExtractor",
    "ExtractedFields",
    "ExtractionResult",
    "FieldExtractor",
    "FieldExtractorFactory",
]
