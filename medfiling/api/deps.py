from functools import lru_cache

from medfiling.config.settings import Settings
from medfiling.extraction.base import BaseFieldExtractor
from medfiling.extraction.factory import FieldExtractorFactory
from medfiling.pdf.factory import PdfExtractorFactory
from medfiling.pdf.text_extractor import DocumentTextExtractor
from medfiling.submission.base import BaseSubmissionSink
from medfiling.submission.sinks import LoggingSubmissionSink


@lru_cache
def get_settings() -> Settings:
    return Settings()


@lru_cache
def get_text_extractor() -> DocumentTextExtractor:
    return PdfExtractorFactory.create_text_extractor(get_settings())


@lru_cache
def get_field_extractor() -> BaseFieldExtractor:
    return FieldExtractorFactory.create(get_settings())


@lru_cache
def get_submission_sink() -> BaseSubmissionSink:
    return LoggingSubmissionSink()
