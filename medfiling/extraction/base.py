from abc import ABC, abstractmethod

from medfiling.extraction.models import ExtractionResult


class BaseFieldExtractor(ABC):
    """Contract for all field extraction adapters."""

    @abstractmethod
    def extract(self, text: str) -> ExtractionResult:
        """Fill the filing record from a document's plain text.

        Args:
            text: Text returned by the PDF extraction step.

        Returns:
            ExtractionResult with fields, confidence and missing field names.

        Raises:
            ExtractionError: on any hard failure.
        """
